"""
Directive block at the top of a blueprint: `%name value` lines that set the
color format and output directory for that one file.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..colortable.rgb import ColorFormat
from ..errors import InvalidDirective, MalformedDirective

# Each directive consists of "{PREFIX}{NAME}{SEPARATOR}{VALUE}"
PREFIX = "%"
SEPARATOR = " "

DIRECTIVE_COLOR_FORMAT = "color-format"
DIRECTIVE_OUTPUT_DIRECTORY = "output-directory"
DIRECTIVE_NAMES = [DIRECTIVE_COLOR_FORMAT, DIRECTIVE_OUTPUT_DIRECTORY]

# Whitespace right after the separator is not part of the value
_DIRECTIVE_RE = re.compile(
    re.escape(PREFIX) + r"(?P<name>[\w-]+)" + re.escape(SEPARATOR) + r"\s*(?P<value>.+)"
)


@dataclass(frozen=True)
class Directive:
    name: str
    value: str


def is_directive_line(line: str) -> bool:
    return line.startswith(PREFIX)


def scan_directive(line: str) -> Directive:
    """Split a directive line into name and value. Raises MalformedDirective."""
    m = _DIRECTIVE_RE.fullmatch(line)
    if m is None:
        raise MalformedDirective(f"Ill formed directive `{line}`.", line)
    return Directive(m.group("name"), m.group("value"))


class DirectiveState:
    """
    Per-blueprint settings. Starts from defaults, updated by each directive
    line, then sealed once the body starts.
    """

    def __init__(
        self,
        output_directory: Path,
        color_format: ColorFormat = ColorFormat.HEX_WITH_HASH,
        *,
        expand_home: Callable[[str], Path],
    ):
        self.color_format = ColorFormat(color_format)
        self.output_directory = Path(output_directory)
        self._expand_home = expand_home
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def apply(self, line: str) -> Directive:
        """Parse one directive line and update the state accordingly."""
        if self._sealed:
            raise RuntimeError("Directives can't change once the blueprint body has started")
        directive = scan_directive(line)

        if directive.name == DIRECTIVE_COLOR_FORMAT:
            self._update_color_format(directive.value, line)
        elif directive.name == DIRECTIVE_OUTPUT_DIRECTORY:
            self._update_output_directory(directive.value, line)
        else:
            raise InvalidDirective(
                f"Invalid directive `{directive.name}`. "
                f"Valid directives are `{'`, `'.join(DIRECTIVE_NAMES)}`.",
                line,
            )
        return directive

    def _update_color_format(self, value: str, line: str) -> None:
        if value not in ColorFormat.values():
            raise InvalidDirective(
                f"Invalid color format `{value}`. "
                f"Valid color formats are `{'`, `'.join(ColorFormat.values())}`.",
                line,
            )
        self.color_format = ColorFormat(value)

    def _update_output_directory(self, value: str, line: str) -> None:
        output_directory = self._expand_home(value)
        if not output_directory.exists():
            raise InvalidDirective(f"Output directory `{output_directory}` doesn't exist.", line)
        if not output_directory.is_dir():
            raise InvalidDirective(f"Output directory `{output_directory}` is not a directory.", line)
        self.output_directory = output_directory

    def __repr__(self) -> str:
        return (
            f"DirectiveState(color_format={self.color_format.value!r}, "
            f"output_directory={str(self.output_directory)!r}, sealed={self._sealed})"
        )
