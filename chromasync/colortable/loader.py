"""
Colorscheme files: JSON objects mapping every required color name to a hex color.
Loading validates the whole file; the rendering engine never re-checks it.
"""
import json
from pathlib import Path
from typing import Any

from ..errors import ColorschemeError, InvalidFormat
from .rgb import RGB, ColorFormat
from .table import ColorTable

FILE_EXTENSION = "json"

BACKGROUND = "background"
FOREGROUND = "foreground"
CURSOR = "cursor"

# Normal colors color_01..color_08, highlight (bright) colors color_09..color_16
NUMBERED_COLORS = [f"color_{i:02d}" for i in range(1, 17)]

COLOR_NAMES: list[str] = [BACKGROUND, FOREGROUND, CURSOR, *NUMBERED_COLORS]


def colorscheme_path(colorschemes_dir: Path, name: str) -> Path:
    """Path of the colorscheme called `name` (file stem)."""
    return colorschemes_dir / f"{name}.{FILE_EXTENSION}"


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    seen: dict[str, Any] = {}
    for key, value in pairs:
        if key in seen:
            raise ColorschemeError(f"Color `{key}` was already defined")
        seen[key] = value
    return seen


def parse_colorscheme(text: str) -> ColorTable:
    """Build a ColorTable from colorscheme JSON text. Raises ColorschemeError."""
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates)
    except json.JSONDecodeError as e:
        raise ColorschemeError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ColorschemeError("Expected a JSON object mapping color names to hex colors")

    colors: dict[str, RGB] = {}
    for name, value in data.items():
        if name not in COLOR_NAMES:
            raise ColorschemeError(
                f"Invalid color name `{name}`. Valid color names are `{'`, `'.join(COLOR_NAMES)}`"
            )
        if not isinstance(value, str):
            raise ColorschemeError(f"Color `{name}` must be a hex string, got {value!r}")
        try:
            colors[name] = RGB.parse_hex(value)
        except InvalidFormat as e:
            raise ColorschemeError(f"Color `{name}`: {e}") from e

    for name in COLOR_NAMES:
        if name not in colors:
            raise ColorschemeError(f"Missing required color `{name}`")
    return ColorTable(colors)


def load_colorscheme(path: Path) -> ColorTable:
    """Read and validate a colorscheme file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ColorschemeError(f"Can't read file: {e}", path) from e
    try:
        return parse_colorscheme(text)
    except ColorschemeError as e:
        raise ColorschemeError(str(e), path) from e


def save_colorscheme(table: ColorTable, path: Path) -> Path:
    """Store the base colors of `table` as a colorscheme file (used by reload)."""
    data = {name: rgb.format(ColorFormat.HEX_WITH_HASH) for name, rgb in table.base_colors().items()}
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return path
