"""
Color table: colorscheme colors by name, plus mixed colors derived on demand.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping

from .rgb import RGB

# Reserved between the fields of a mixed color. Never valid inside a color name.
MIXED_COLOR_FIELD_SEPARATOR = ":"


def composite_key(color1: str, amount: int, color2: str) -> str:
    """Cache key for `color1` mixed `amount`% with `color2`."""
    sep = MIXED_COLOR_FIELD_SEPARATOR
    return f"{color1}{sep}{amount}{sep}{color2}"


class ColorTable:
    """
    Holds the colors of one loaded colorscheme. Base colors are never removed;
    each mixed color is computed once and kept under its composite key, so the
    table lives as long as a single load/reload run.
    """

    def __init__(self, colors: Mapping[str, RGB] | None = None):
        self._colors: dict[str, RGB] = dict(colors or {})

    def get(self, name: str) -> RGB | None:
        return self._colors.get(name)

    def get_composite(self, color1: str, amount: int, color2: str) -> RGB | None:
        """
        Return `color1` mixed with `color2` (color1 weighted by amount/100).
        Mixing is directional: (A, 70, B) and (B, 70, A) are different entries.
        Missing operands return None and nothing is cached.
        """
        key = composite_key(color1, amount, color2)
        cached = self._colors.get(key)
        if cached is not None:
            return cached

        rgb1 = self._colors.get(color1)
        rgb2 = self._colors.get(color2)
        if rgb1 is None or rgb2 is None:
            return None

        mixed = rgb1.mix(amount, rgb2)
        self._colors[key] = mixed
        return mixed

    def base_colors(self) -> dict[str, RGB]:
        """Colorscheme colors only, without cached mixes."""
        return {
            name: rgb
            for name, rgb in self._colors.items()
            if MIXED_COLOR_FIELD_SEPARATOR not in name
        }

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"ColorTable({len(self._colors)} colors)"
