# Blueprint engine: directives, color placeholders, rendering, batch builds

from .directive import Directive, DirectiveState, scan_directive
from .placeholder import Composite, PlainColor, resolve_line, scan_placeholder
from .renderer import RenderedBlueprint, ScanState, TemplateRenderer
from .builder import (
    build_blueprint,
    build_blueprints,
    discover_blueprints,
    find_blueprint,
    run_post_script,
    write_rendered,
)

__all__ = [
    "Directive",
    "DirectiveState",
    "scan_directive",
    "Composite",
    "PlainColor",
    "resolve_line",
    "scan_placeholder",
    "RenderedBlueprint",
    "ScanState",
    "TemplateRenderer",
    "build_blueprint",
    "build_blueprints",
    "discover_blueprints",
    "find_blueprint",
    "run_post_script",
    "write_rendered",
]
