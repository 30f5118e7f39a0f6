"""Formatting of values, file paths and texel descriptions as coloured text."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable, List, Sequence, Tuple, Union

from imgview.texel import ChannelDataType, ChannelSemantic, TexelInfo

DEFAULT_KEY_COLOR = "<textcolor=#ff8930>"
DEFAULT_VALUE_COLOR = "<textcolor=#98f733>"
DEFAULT_HEADER_COLOR = "<textcolor=#ff00ff>"

_SEPARATOR_COLOR = "<textcolor=#444444>"

Scalar = Union[int, float, str]


@dataclass(frozen=True)
class ValueObject:
    """A value to display, with the number of decimals used for floats."""

    value: Scalar
    precision: int = 2


ValueLike = Union[ValueObject, Scalar]


@dataclass
class FormatArgs:
    """Layout of a key/value table split into columns of ``max_lines`` rows."""

    message_values: List[Tuple[str, Sequence[ValueLike]]] = field(default_factory=list)
    key_color: str = DEFAULT_KEY_COLOR
    value_color: str = DEFAULT_VALUE_COLOR
    max_lines: int = 24
    min_space_from_value: int = 3
    double_width: int = 2
    space_between_columns: int = 3
    columns_separator: str = "|"
    spacer: str = "."


@dataclass(frozen=True)
class DecomposedPath:
    parent_path: str
    file_name: str
    extension: str


def format_number(value: Union[int, float], precision: int = 2) -> str:
    """Format a number with comma thousands separators.

    Integers are written whole; floats with ``precision`` decimals.
    """
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:,.{precision}f}"


def format_value(value: ValueLike) -> str:
    """Text of a single value."""
    if isinstance(value, ValueObject):
        inner, precision = value.value, value.precision
    else:
        inner, precision = value, 2
    if isinstance(inner, str):
        return inner
    if isinstance(inner, (int, float)):
        return format_number(inner, precision)
    raise TypeError(f"unsupported value type {type(inner).__name__}")


def format_values(values: Iterable[ValueLike]) -> str:
    """Concatenated text of several values."""
    return "".join(format_value(value) for value in values)


def format_meta_text(args: FormatArgs) -> str:
    """Lay out key/value pairs as aligned, dotted columns."""
    if args.max_lines <= 0:
        raise ValueError("max_lines must be positive")
    entries = [(key, format_values(values)) for key, values in args.message_values]
    if not entries:
        return ""

    total_columns = math.ceil(len(entries) / args.max_lines)
    key_widths = [0] * total_columns
    value_widths = [0] * total_columns
    for index, (key, value) in enumerate(entries):
        column = index // args.max_lines
        key_widths[column] = max(key_widths[column], len(key))
        value_widths[column] = max(value_widths[column], len(value))

    lines = [""] * min(len(entries), args.max_lines)
    half_space = args.space_between_columns // 2
    for index, (key, value) in enumerate(entries):
        column, line = divmod(index, args.max_lines)
        parts = [
            args.key_color,
            key,
            args.spacer * (key_widths[column] - len(key)),
            args.spacer * max(0, args.min_space_from_value - 1),
            " ",
            args.value_color,
            value,
        ]
        if column < total_columns - 1:
            parts.append(" " * (value_widths[column] - len(value)))
            parts.append(" " * max(0, half_space))
            parts.append(_SEPARATOR_COLOR + args.columns_separator)
            parts.append(" " * max(0, args.space_between_columns - 1 - half_space))
        lines[line] += "".join(parts)

    return "\n".join(lines)


_SEMANTIC_NAMES = {
    ChannelSemantic.RED: "R",
    ChannelSemantic.GREEN: "G",
    ChannelSemantic.BLUE: "B",
    ChannelSemantic.OPACITY: "A",
    ChannelSemantic.MONOCHROME: "Monochrome",
    ChannelSemantic.FLOAT: "Float",
}

_SEMANTIC_COLORS = {
    ChannelSemantic.RED: "<textcolor=#ff1c21>",
    ChannelSemantic.GREEN: "<textcolor=#00ff00>",
    ChannelSemantic.BLUE: "<textcolor=#006dff>",
    ChannelSemantic.OPACITY: "<textcolor=#ffffff>",
    ChannelSemantic.MONOCHROME: "<textcolor=#ff8930>",
    ChannelSemantic.FLOAT: "<textcolor=#ff8930>",
}

_DATA_TYPE_NAMES = {
    ChannelDataType.FLOAT: "float",
    ChannelDataType.SIGNED_INT: "signed",
    ChannelDataType.UNSIGNED_INT: "unsigned",
}


def format_semantic(semantic: ChannelSemantic) -> str:
    """Short name of a channel semantic."""
    return _SEMANTIC_NAMES.get(semantic, "Undefined")


def pick_color(semantic: ChannelSemantic) -> str:
    """Colour tag used for a channel semantic."""
    try:
        return _SEMANTIC_COLORS[semantic]
    except KeyError:
        raise ValueError(f"unexpected channel semantic {semantic!r}") from None


def format_data_type(data_type: ChannelDataType) -> str:
    """Name of a channel data type."""
    return _DATA_TYPE_NAMES.get(data_type, "undefined")


def decompose_path(path: Union[str, "os.PathLike[str]"]) -> DecomposedPath:
    """Split a file path into parent folder (with trailing separator), stem and extension."""
    text = os.fspath(path)
    parent = os.path.dirname(text)
    drive, rest = os.path.splitdrive(parent)
    separators = os.sep + (os.altsep or "")
    relative = rest.lstrip(separators)

    parent_path = drive + os.sep
    if relative:
        # A file at the root gets no empty relative part and no extra separator.
        parent_path += relative + os.sep

    pure = PurePath(text)
    return DecomposedPath(parent_path, pure.stem, pure.suffix)


def format_file_path(path: Union[str, "os.PathLike[str]"]) -> str:
    """Coloured file path: folder, name and extension each in their own colour."""
    parts = decompose_path(path)
    return (
        "<textcolor=#808080>"
        + parts.parent_path
        + "<textcolor=#7672ff>"
        + parts.file_name
        + "<textcolor=#ff00ff>"
        + parts.extension
    )


def format_texel_info(info: TexelInfo) -> str:
    """Coloured description of each channel, e.g. semantic and width in bits.

    Every channel entry, the last included, is followed by a space.
    """
    pieces = []
    for channel in info.channels:
        piece = pick_color(channel.semantic) + format_semantic(channel.semantic) + ":"
        if channel.semantic is ChannelSemantic.MONOCHROME:
            piece += f"({format_data_type(channel.data_type)})"
        pieces.append(f"{piece}{channel.width} ")
    return "".join(pieces)