"""
Color placeholders in blueprint bodies: `{name}` or `{name1:amount:name2}`.
Each occurrence is replaced by the formatted color; a placeholder that can't be
resolved becomes an empty string and a warning, never a failed blueprint.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..colortable.rgb import RGB, ColorFormat
from ..colortable.table import MIXED_COLOR_FIELD_SEPARATOR, ColorTable
from ..errors import UnsupportedFormat

logger = logging.getLogger(__name__)

# With ":" as separator this is r"\{(\w+)(?::(\d+):(\w+))?\}"
_SEP = re.escape(MIXED_COLOR_FIELD_SEPARATOR)
PLACEHOLDER_RE = re.compile(
    r"\{(?P<name>\w+)(?:" + _SEP + r"(?P<amount>\d+)" + _SEP + r"(?P<other>\w+))?\}"
)

MAX_MIX_AMOUNT = 100


@dataclass(frozen=True)
class PlainColor:
    name: str


@dataclass(frozen=True)
class Composite:
    name: str
    amount: int
    other: str


Placeholder = PlainColor | Composite


def scan_placeholder(match: re.Match[str]) -> Placeholder:
    """
    Typed form of one regex match. Raises ValueError when the mix amount
    does not fit a byte.
    """
    if match.group("other") is None:
        return PlainColor(match.group("name"))
    amount = int(match.group("amount"))
    if amount > 255:
        raise ValueError(f"mix amount `{match.group('amount')}` is out of range")
    return Composite(match.group("name"), amount, match.group("other"))


def lookup(placeholder: Placeholder, colors: ColorTable) -> RGB | None:
    if isinstance(placeholder, PlainColor):
        return colors.get(placeholder.name)
    if placeholder.amount > MAX_MIX_AMOUNT:
        return None
    return colors.get_composite(placeholder.name, placeholder.amount, placeholder.other)


def resolve_line(
    line: str,
    colors: ColorTable,
    color_format: ColorFormat,
    blueprint: Path | str,
) -> str:
    """Replace every placeholder on `line`. May add mixed colors to `colors`."""

    def _replace(match: re.Match[str]) -> str:
        # Placeholder text without the surrounding braces, for warnings
        expression = match.group(0)[1:-1]
        try:
            placeholder = scan_placeholder(match)
        except ValueError:
            color = None
        else:
            color = lookup(placeholder, colors)

        if color is None:
            logger.warning(
                "While parsing blueprint `%s`. An error occurred while retrieving color `%s`. "
                "Can't replace it in the blueprint.",
                blueprint, expression,
            )
            return ""
        try:
            return color.format(color_format)
        except UnsupportedFormat:
            logger.warning(
                "While parsing blueprint `%s`. An error occurred while formatting color `%s` as `%s`. "
                "Can't replace it in the blueprint.",
                blueprint, expression, color_format,
            )
            return ""

    return PLACEHOLDER_RE.sub(_replace, line)
