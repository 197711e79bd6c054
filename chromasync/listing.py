"""
List available colorschemes with background luminance and fg/bg contrast.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .colortable import BACKGROUND, FOREGROUND, RGB, load_colorscheme
from .errors import ColorschemeError, SystemSetupError

logger = logging.getLogger(__name__)

# Background luminance below this counts as a dark colorscheme
DARK_THRESHOLD = 0.5

SORT_KEYS: dict[str, list[str]] = {
    "name": ["n"],
    "background-luminance": [
        "background_luminance", "bg-lum", "bg_lum", "bglum", "background", "bg",
        "luminance", "lum", "background-brightness", "background_brightness", "brightness",
    ],
    "contrast": ["contr", "cont", "con", "cntr", "cnt"],
}

SORT_CHOICES: dict[str, str] = {
    alias: key for key, aliases in SORT_KEYS.items() for alias in [key, *aliases]
}


@dataclass
class ColorschemeInfo:
    name: str
    background: RGB
    foreground: RGB
    background_luminance: float
    contrast: float

    @classmethod
    def from_file(cls, path: Path) -> ColorschemeInfo:
        colors = load_colorscheme(path)
        background = colors.get(BACKGROUND)
        foreground = colors.get(FOREGROUND)
        bg_lum = background.luminance()
        return cls(
            name=path.stem,
            background=background,
            foreground=foreground,
            background_luminance=bg_lum,
            contrast=abs(foreground.luminance() - bg_lum),
        )

    @property
    def is_dark(self) -> bool:
        return self.background_luminance < DARK_THRESHOLD


def collect_colorschemes(colorschemes_dir: Path) -> list[ColorschemeInfo]:
    """Load every colorscheme in the directory; invalid ones are skipped with a warning."""
    try:
        paths = sorted(p for p in Path(colorschemes_dir).iterdir() if p.is_file())
    except OSError as e:
        raise SystemSetupError(f"Can't read `{colorschemes_dir}`: {e}") from e
    infos: list[ColorschemeInfo] = []
    for path in paths:
        try:
            infos.append(ColorschemeInfo.from_file(path))
        except ColorschemeError as e:
            logger.warning("%s", e)
    return infos


def filter_colorschemes(
    infos: list[ColorschemeInfo], *, dark: bool = False, light: bool = False
) -> list[ColorschemeInfo]:
    if dark:
        return [c for c in infos if c.is_dark]
    if light:
        return [c for c in infos if not c.is_dark]
    return list(infos)


def sort_colorschemes(infos: list[ColorschemeInfo], sort_by: str = "name") -> list[ColorschemeInfo]:
    """Sort by name, background luminance or contrast (aliases accepted)."""
    key = SORT_CHOICES.get(sort_by)
    if key is None:
        raise ValueError(f"Unknown sort order `{sort_by}`")
    if key == "background-luminance":
        return sorted(infos, key=lambda c: c.background_luminance)
    if key == "contrast":
        return sorted(infos, key=lambda c: c.contrast)
    return sorted(infos, key=lambda c: c.name)


def format_table(infos: list[ColorschemeInfo]) -> list[str]:
    width = max([len("NAME"), *(len(c.name) for c in infos)])
    lines = [f"│ {'NAME':<{width}} │ {'LUM (BG)':<8} │ {'CONT':<4} │"]
    for c in infos:
        lines.append(f"│ {c.name:<{width}} │ {c.background_luminance:<8.2f} │ {c.contrast:<4.2f} │")
    return lines
