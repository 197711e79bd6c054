"""
Build blueprints in batch: find them, render each against the shared color
table, write the results, then run the post-render script once.
"""
from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from ..environ import Environment
from ..errors import BlueprintError, ExecutionError, SystemSetupError
from .renderer import RenderedBlueprint, TemplateRenderer

logger = logging.getLogger(__name__)


def discover_blueprints(dirs: Iterable[Path]) -> list[Path]:
    """
    Regular files of each directory, in directory order then by name.
    Unreadable directories are logged and skipped.
    """
    found: list[Path] = []
    for d in dirs:
        try:
            entries = sorted(Path(d).iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.error("Can't read blueprint directory `%s`: %s", d, e)
            continue
        found.extend(p for p in entries if p.is_file())
    return found


def find_blueprint(name: str, env: Environment) -> Path:
    """Resolve a blueprint given by name (or path) on the command line."""
    candidates = [
        env.config_blueprints_dir / name,
        env.cache_blueprints_dir / name,
        Path(name),
    ]
    for path in candidates:
        if path.exists():
            return path
    raise SystemSetupError(
        f"Can't find blueprint `{name}`. Neither of the following files exists "
        f"`{'`, `'.join(str(p) for p in candidates)}`"
    )


def write_rendered(rendered: RenderedBlueprint) -> Path:
    """Write a rendered blueprint, replacing any previous output of the same name."""
    out_path = rendered.output_path
    try:
        out_path.write_text(rendered.text, encoding="utf-8")
    except OSError as e:
        raise BlueprintError(rendered.source, f"Can't write `{out_path}`: {e}") from e
    return out_path


def build_blueprint(path: Path, renderer: TemplateRenderer) -> Path:
    """Render and write one blueprint. Raises BlueprintError."""
    rendered = renderer.render(path)
    out_path = write_rendered(rendered)
    logger.debug("Blueprint %s -> %s", path, out_path)
    return out_path


def build_blueprints(paths: Iterable[Path], renderer: TemplateRenderer) -> list[Path]:
    """
    Build blueprints one at a time, in order. A failing blueprint is logged
    and skipped; returns the output paths that were written.
    """
    written: list[Path] = []
    failed = 0
    for path in paths:
        try:
            written.append(build_blueprint(path, renderer))
        except BlueprintError as e:
            failed += 1
            logger.error("%s", e)
    logger.info("Built %d blueprint(s), %d failed", len(written), failed)
    return written


def run_post_script(script: Path | None) -> None:
    """
    Run the post-render script once per batch.

    A script that does not exist is skipped with an info log. A script that
    exists but can't be launched or exits with a non-zero status raises
    ExecutionError.
    """
    if script is None:
        return
    if not script.exists():
        logger.info("No post-render script at %s, skipping", script)
        return
    logger.debug("Running %s", script)
    try:
        result = subprocess.run([str(script)], capture_output=True, text=True)
    except OSError as e:
        raise ExecutionError(f"Can't run `{script}`: {e}") from e
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ExecutionError(
            f"`{script}` exited with status {result.returncode}" + (f": {stderr}" if stderr else ""),
            returncode=result.returncode,
        )
