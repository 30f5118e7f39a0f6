"""Loading of command, key binding and settings configuration files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from os import PathLike
from typing import Any, Dict, Iterable, List, Tuple, Union

SEPARATOR = "/"

PathType = Union[str, "PathLike[str]"]

_log = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """A configuration file does not have the expected structure."""


@dataclass(frozen=True)
class CommandGroupEntry:
    group_id: str
    display_name: str
    name: str
    arguments: str


@dataclass(frozen=True)
class KeyBinding:
    key_combination: str
    group_id: str


def _read_json(path: PathType) -> Any:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _string_field(entry: Any, key: str) -> str:
    value = entry.get(key) if isinstance(entry, dict) else None
    if not isinstance(value, str):
        raise ConfigurationError(f"field {key!r} must be a string")
    return value


def load_command_groups(path: PathType) -> List[CommandGroupEntry]:
    """Read the ``commands`` array of a commands file."""
    commands = _read_json(path)
    commands = commands.get("commands") if isinstance(commands, dict) else None
    if not isinstance(commands, list):
        raise ConfigurationError("File contents mismatch")
    return [
        CommandGroupEntry(
            _string_field(entry, "GroupID"),
            _string_field(entry, "DisplayName"),
            _string_field(entry, "Name"),
            _string_field(entry, "arguments"),
        )
        for entry in commands
    ]


def load_key_bindings(path: PathType) -> List[KeyBinding]:
    """Read the ``KeyBindings`` array; keys of each entry in sorted order."""
    document = _read_json(path)
    bindings = document.get("KeyBindings") if isinstance(document, dict) else None
    if not isinstance(bindings, list):
        raise ConfigurationError("File contents mismatch")
    result = []
    for entry in bindings:
        if not isinstance(entry, dict):
            raise ConfigurationError("key binding entry must be an object")
        for key, group in sorted(entry.items()):
            if not isinstance(group, str):
                raise ConfigurationError(f"binding for {key!r} must be a string")
            result.append(KeyBinding(key, group))
    return result


def _children(tree: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(tree, dict):
        return sorted(tree.items())
    if isinstance(tree, list):
        return ((str(index), value) for index, value in enumerate(tree))
    return ()


def _dump(value: Any) -> str:
    return json.dumps(value, indent=0, ensure_ascii=False)


def load_settings(path: PathType) -> Dict[str, str]:
    """Flatten a settings file into ``{"section/name": "value"}``.

    Strings keep their text, other values are stored as JSON. A missing or
    unreadable file yields an empty mapping.
    """
    try:
        root = _read_json(path)
    except json.JSONDecodeError as exc:
        _log.warning("%s", exc)
        return {}
    except (OSError, UnicodeDecodeError):
        return {}

    settings: Dict[str, str] = {}
    stack: List[Tuple[Any, str]] = [(root, "")]
    while stack:
        tree, namespace = stack.pop()
        for key, value in _children(tree):
            qualified = f"{namespace}{SEPARATOR}{key}" if namespace else key
            if isinstance(value, dict):
                stack.append((value, qualified))
            else:
                settings.setdefault(qualified, value if isinstance(value, str) else _dump(value))
    return dict(sorted(settings.items()))