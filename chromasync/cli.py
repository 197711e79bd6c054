"""
CLI entry point for chromasync.

Usage:
  chromasync load gruvbox-dark
  chromasync reload                       # re-render every blueprint
  chromasync reload -b kitty.conf --no-script
  chromasync list --dark --sort-by contrast
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .blueprint import (
    TemplateRenderer,
    build_blueprints,
    discover_blueprints,
    find_blueprint,
    run_post_script,
)
from .colortable import ColorTable, colorscheme_path, load_colorscheme, save_colorscheme
from .config import get_color_format, get_post_script, load_config
from .environ import APP_NAME, POST_SCRIPT_NAME, Environment
from .errors import ChromasyncError
from .listing import (
    SORT_CHOICES,
    collect_colorschemes,
    filter_colorschemes,
    format_table,
    sort_colorschemes,
)

logger = logging.getLogger(__name__)

DESCRIPTION = (
    f"`{APP_NAME}` is a tool designed to automate the process of changing "
    "colorschemes for various terminal applications."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=DESCRIPTION)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Disable logs on the terminal",
    )
    verbosity.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show more logs on the terminal",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config.yaml in the config directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load a new colorscheme")
    load.add_argument(
        "colorscheme",
        help=f"Name of the colorscheme to load. Run `{APP_NAME} list` to list the available themes",
    )

    reload = subparsers.add_parser("reload", help="Reload the latest colorscheme")
    reload.add_argument(
        "--blueprint",
        "-b",
        action="append",
        default=None,
        help="The specific blueprint to reload. If not specified, all blueprints are reloaded",
    )
    reload.add_argument(
        "--no-script",
        action="store_true",
        help=f"Prevent the execution of `{POST_SCRIPT_NAME}`",
    )

    list_cmd = subparsers.add_parser("list", help="List the available colorschemes")
    brightness = list_cmd.add_mutually_exclusive_group()
    brightness.add_argument(
        "--dark",
        "-d",
        action="store_true",
        help="List colorschemes with a dark background color",
    )
    brightness.add_argument(
        "--light",
        "-l",
        action="store_true",
        help="List colorschemes with a light background color",
    )
    list_cmd.add_argument(
        "--sort-by",
        choices=list(SORT_CHOICES),
        default="name",
        metavar="{name,background-luminance,contrast}",
        help="Specify the sorting order (default: name)",
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.CRITICAL
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _make_renderer(colors: ColorTable, env: Environment, config: dict) -> TemplateRenderer:
    return TemplateRenderer(
        colors,
        env.out_dir,
        get_color_format(config),
        expand_home=env.expand_home,
    )


def cmd_load(args: argparse.Namespace, env: Environment, config: dict) -> None:
    path = colorscheme_path(env.colorschemes_dir, args.colorscheme)
    colors = load_colorscheme(path)
    logger.info("Loaded colorscheme %s", args.colorscheme)

    # Remembered for `reload`; not fatal if it fails
    try:
        save_colorscheme(colors, env.current_colorscheme_file)
    except OSError as e:
        logger.warning(
            "While storing a copy of the current colorscheme in `%s`. %s",
            env.current_colorscheme_file, e,
        )

    renderer = _make_renderer(colors, env, config)
    build_blueprints(discover_blueprints(env.blueprint_dirs), renderer)
    run_post_script(get_post_script(config, env))


def cmd_reload(args: argparse.Namespace, env: Environment, config: dict) -> None:
    colors = load_colorscheme(env.current_colorscheme_file)
    renderer = _make_renderer(colors, env, config)

    if args.blueprint:
        paths = [find_blueprint(name, env) for name in args.blueprint]
    else:
        paths = discover_blueprints(env.blueprint_dirs)
    build_blueprints(paths, renderer)

    if not args.no_script:
        run_post_script(get_post_script(config, env))


def cmd_list(args: argparse.Namespace, env: Environment, config: dict) -> None:
    infos = collect_colorschemes(env.colorschemes_dir)
    infos = filter_colorschemes(infos, dark=args.dark, light=args.light)
    infos = sort_colorschemes(infos, args.sort_by)
    for line in format_table(infos):
        print(line)


COMMANDS = {
    "load": cmd_load,
    "reload": cmd_reload,
    "list": cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args)
    try:
        env = Environment.from_env()
        env.build_dirs()
        config = load_config(args.config, env)
        COMMANDS[args.command](args, env, config)
    except ChromasyncError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
