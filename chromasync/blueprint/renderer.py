"""
Render one blueprint: directive block first, then the body with every color
placeholder substituted. The whole output is buffered before anything is written.
"""
from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..colortable.rgb import ColorFormat
from ..colortable.table import ColorTable
from ..errors import BlueprintError, DirectiveError
from .directive import DirectiveState, is_directive_line
from .placeholder import resolve_line

logger = logging.getLogger(__name__)


class ScanState(Enum):
    IN_DIRECTIVES = "directives"
    IN_BODY = "body"   # terminal: no way back to directives


@dataclass(frozen=True)
class RenderedBlueprint:
    """Result of rendering one blueprint, ready for the output sink."""
    source: Path
    output_directory: Path
    color_format: ColorFormat
    text: str

    @property
    def output_path(self) -> Path:
        return self.output_directory / self.source.name


class TemplateRenderer:
    """
    Renders blueprints against one ColorTable. The table is shared by every
    render so mixed colors are computed once per run; render one file at a time.
    """

    def __init__(
        self,
        colors: ColorTable,
        default_output_directory: Path,
        default_color_format: ColorFormat = ColorFormat.HEX_WITH_HASH,
        *,
        expand_home: Callable[[str], Path],
    ):
        self.colors = colors
        self.default_output_directory = Path(default_output_directory)
        self.default_color_format = ColorFormat(default_color_format)
        self._expand_home = expand_home

    def new_state(self) -> DirectiveState:
        return DirectiveState(
            self.default_output_directory,
            self.default_color_format,
            expand_home=self._expand_home,
        )

    def render_lines(self, lines: Iterable[str], source: Path | str) -> RenderedBlueprint:
        """Render already-read lines (newlines optional) of the blueprint at `source`."""
        source = Path(source)
        directives = self.new_state()
        state = ScanState.IN_DIRECTIVES
        out: list[str] = []

        for raw in lines:
            line = raw.rstrip("\n")

            # Directives only at the very beginning of the file
            if state is ScanState.IN_DIRECTIVES and not is_directive_line(line):
                state = ScanState.IN_BODY
                directives.seal()

            if state is ScanState.IN_DIRECTIVES:
                try:
                    directives.apply(line)
                except DirectiveError as e:
                    raise BlueprintError(source, str(e), line=line) from e
            else:
                out.append(resolve_line(line, self.colors, directives.color_format, source))
                out.append("\n")

        return RenderedBlueprint(
            source=source,
            output_directory=directives.output_directory,
            color_format=directives.color_format,
            text="".join(out),
        )

    def render_text(self, text: str, source: Path | str) -> RenderedBlueprint:
        return self.render_lines(io.StringIO(text, newline=None), source)

    def render(self, path: Path | str) -> RenderedBlueprint:
        """Read and render the blueprint file at `path`. Raises BlueprintError."""
        path = Path(path)
        logger.debug("Rendering blueprint %s", path)
        try:
            with open(path, encoding="utf-8") as f:
                return self.render_lines(f, path)
        except (OSError, UnicodeDecodeError) as e:
            raise BlueprintError(path, str(e)) from e
