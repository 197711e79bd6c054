"""
RGB color value: hex parsing, directional mixing, output formatting, luminance.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidFormat, UnsupportedFormat

_HEX_RE = re.compile(r"#?[0-9a-fA-F]{6}")


class ColorFormat(str, Enum):
    """Output formats accepted by the `color-format` directive."""
    HEX_WITH_HASH = "#6h"     # #RRGGBB
    HEX_WITHOUT_HASH = "6h"   # RRGGBB

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list[str]:
        return [f.value for f in cls]


@dataclass(frozen=True)
class RGB:
    """Three 8-bit channels. Never mutated; mix() returns a new value."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channels must be between 0 and 255, got {(self.r, self.g, self.b)}")

    @classmethod
    def parse_hex(cls, text: str) -> RGB:
        """Parse `#RRGGBB` or `RRGGBB` (any case, surrounding whitespace ignored)."""
        hex_str = text.strip()
        if not _HEX_RE.fullmatch(hex_str):
            raise InvalidFormat(f"Invalid hex color `{hex_str}`")
        hex_str = hex_str.lstrip("#")
        return cls(int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16))

    def mix(self, amount: int, other: RGB) -> RGB:
        """
        Weighted average: self counts for amount/100, other for the rest.
        Channels are truncated, e.g. 50% of 0xFF and 0x00 gives 0x7F.
        """
        if not 0 <= amount <= 100:
            raise ValueError(f"Mix amount must be between 0 and 100, got {amount}")

        def _mix(x: int, y: int) -> int:
            return (x * amount + y * (100 - amount)) // 100

        return RGB(_mix(self.r, other.r), _mix(self.g, other.g), _mix(self.b, other.b))

    def format(self, kind: ColorFormat | str) -> str:
        try:
            kind = ColorFormat(kind)
        except ValueError:
            raise UnsupportedFormat(f"Invalid color format `{kind}`") from None
        hex_str = f"{self.r:02X}{self.g:02X}{self.b:02X}"
        if kind is ColorFormat.HEX_WITH_HASH:
            return f"#{hex_str}"
        return hex_str

    def luminance(self) -> float:
        # ITU-R BT.709
        return (0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b) / 255

    def __str__(self) -> str:
        return self.format(ColorFormat.HEX_WITH_HASH)
