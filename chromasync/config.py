"""
Load and expose user config (YAML). Used for the default color format and
the post-render script settings.
"""
from pathlib import Path
from typing import Any

import yaml

from .colortable.rgb import ColorFormat
from .environ import Environment
from .errors import SystemSetupError


def _defaults() -> dict[str, Any]:
    return {
        "color_format": ColorFormat.HEX_WITH_HASH.value,
        "post_script": {
            "enabled": True,
            "path": None,
        },
    }


def load_config(config_path: Path | None = None, env: Environment | None = None) -> dict[str, Any]:
    """
    Load config from YAML merged over the defaults. Path is optional; defaults to
    config.yaml inside the config directory, where a missing file means all
    defaults. A path given explicitly must exist.
    """
    if config_path is None:
        if env is None:
            return _defaults()
        path = env.config_file
        if not path.exists():
            return _defaults()
    else:
        path = Path(config_path)
        if not path.is_file():
            raise SystemSetupError(f"Config file `{path}` doesn't exist")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SystemSetupError(f"Can't load config `{path}`: {e}") from e
    if not isinstance(data, dict):
        raise SystemSetupError(f"Config `{path}` must be a mapping")

    config = _defaults()
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value

    _validate(config, path)
    return config


def _validate(config: dict[str, Any], path: Path) -> None:
    if config["color_format"] not in ColorFormat.values():
        raise SystemSetupError(
            f"Config `{path}`: invalid color_format `{config['color_format']}`. "
            f"Valid color formats are `{'`, `'.join(ColorFormat.values())}`"
        )
    script = config["post_script"]
    if not isinstance(script, dict):
        raise SystemSetupError(
            f"Config `{path}`: post_script must be a mapping with `enabled` and `path`, got {script!r}"
        )
    if not isinstance(script.get("enabled"), bool):
        raise SystemSetupError(f"Config `{path}`: post_script.enabled must be true or false")
    if script.get("path") is not None and not isinstance(script["path"], str):
        raise SystemSetupError(f"Config `{path}`: post_script.path must be a string")


def get_color_format(config: dict[str, Any]) -> ColorFormat:
    return ColorFormat(config.get("color_format", ColorFormat.HEX_WITH_HASH.value))


def get_post_script(config: dict[str, Any], env: Environment) -> Path | None:
    """Post-render script path, or None when disabled in config."""
    script = config.get("post_script") or {}
    if not script.get("enabled", True):
        return None
    path = script.get("path")
    if path:
        return env.expand_home(str(path))
    return env.post_script
