"""
Filesystem layout: where colorschemes, blueprints, rendered files and the
post-render script live. Resolved once from the environment and passed around.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import SystemSetupError

APP_NAME = "chromasync"
POST_SCRIPT_NAME = f"{APP_NAME}-post.sh"


@dataclass(frozen=True)
class Environment:
    home: Path
    config_dir: Path
    cache_dir: Path

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Environment:
        """Resolve directories from $HOME, $XDG_CONFIG_HOME and $XDG_CACHE_HOME."""
        if environ is None:
            environ = os.environ
        home = environ.get("HOME")
        if not home:
            raise SystemSetupError("Can't find the $HOME directory")
        home_dir = Path(home)
        config_home = environ.get("XDG_CONFIG_HOME")
        cache_home = environ.get("XDG_CACHE_HOME")
        return cls(
            home=home_dir,
            config_dir=(Path(config_home) if config_home else home_dir / ".config") / APP_NAME,
            cache_dir=(Path(cache_home) if cache_home else home_dir / ".cache") / APP_NAME,
        )

    @property
    def colorschemes_dir(self) -> Path:
        return self.config_dir / "colorschemes"

    @property
    def config_blueprints_dir(self) -> Path:
        """Blueprints managed by the user."""
        return self.config_dir / "blueprints"

    @property
    def cache_blueprints_dir(self) -> Path:
        """Blueprints installed by other tools."""
        return self.cache_dir / "blueprints"

    @property
    def blueprint_dirs(self) -> list[Path]:
        """Blueprint directories in processing order."""
        return [self.config_blueprints_dir, self.cache_blueprints_dir]

    @property
    def out_dir(self) -> Path:
        """Default destination of rendered blueprints."""
        return self.cache_dir / "out"

    @property
    def post_script(self) -> Path:
        return self.config_dir / POST_SCRIPT_NAME

    @property
    def current_colorscheme_file(self) -> Path:
        return self.cache_dir / "current.json"

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.yaml"

    def expand_home(self, path: str) -> Path:
        """Expand a leading `~/` against the home directory."""
        if not path.startswith("~/"):
            return Path(path)
        return self.home / path[2:]

    def build_dirs(self) -> None:
        """Create every directory chromasync reads from or writes to."""
        for d in (
            self.config_dir,
            self.colorschemes_dir,
            self.config_blueprints_dir,
            self.cache_dir,
            self.out_dir,
            self.cache_blueprints_dir,
        ):
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SystemSetupError(f"Can't create the `{d}` directory: {e}") from e
