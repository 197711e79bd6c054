# Color table: RGB values, mixed-color cache, colorscheme loading

from .rgb import RGB, ColorFormat
from .table import ColorTable, MIXED_COLOR_FIELD_SEPARATOR, composite_key
from .loader import (
    COLOR_NAMES,
    BACKGROUND,
    FOREGROUND,
    colorscheme_path,
    load_colorscheme,
    parse_colorscheme,
    save_colorscheme,
)

__all__ = [
    "RGB",
    "ColorFormat",
    "ColorTable",
    "MIXED_COLOR_FIELD_SEPARATOR",
    "composite_key",
    "COLOR_NAMES",
    "BACKGROUND",
    "FOREGROUND",
    "colorscheme_path",
    "load_colorscheme",
    "parse_colorscheme",
    "save_colorscheme",
]
