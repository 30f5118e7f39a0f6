"""Toolkit-independent interaction, configuration and formatting logic for an image viewer."""

__version__ = "0.1.0"