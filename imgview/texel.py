"""Description of the channels that make up one texel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple


class ChannelSemantic(Enum):
    NONE = "none"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    OPACITY = "opacity"
    MONOCHROME = "monochrome"
    FLOAT = "float"


class ChannelDataType(Enum):
    NONE = "none"
    UNSIGNED_INT = "unsigned_int"
    SIGNED_INT = "signed_int"
    FLOAT = "float"


@dataclass(frozen=True)
class Channel:
    """One channel of a texel: its meaning, numeric type and width in bits."""

    semantic: ChannelSemantic
    data_type: ChannelDataType
    width: int


@dataclass(frozen=True)
class TexelInfo:
    """The ordered channels of a texel format."""

    channels: Tuple[Channel, ...] = field(default_factory=tuple)

    def __init__(self, channels: Iterable[Channel] = ()) -> None:
        object.__setattr__(self, "channels", tuple(channels))

    def bits_per_texel(self) -> int:
        """Total width of all channels in bits."""
        return sum(channel.width for channel in self.channels)