"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docgroup import __version__
from docgroup.config import load_config, resolve_path


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the docgroup logger: level from --verbose/--quiet or config,
    console handler, optional file handler from config.
    """
    config = load_config(None)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("docgroup")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docgroup",
        description="Sort and group documented entities into named sections.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "docgroup group graph.json -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # group
    p_group = subparsers.add_parser(
        "group",
        help="Group the entities of a JSON entity graph and print the groups.",
        parents=[global_flags],
    )
    p_group.add_argument("path", type=Path, help="Entity graph JSON file.")
    p_group.add_argument(
        "--sort",
        type=str,
        help="Comma-separated sort strategies (e.g. kind,alphabetical). Overrides config.",
    )
    p_group.add_argument("--format", "-f", choices=("text", "json"), default="text", help="Output format.")
    p_group.add_argument("--no-categories", action="store_true", help="Do not categorize group members.")
    p_group.set_defaults(run="group")

    # kinds
    p_kinds = subparsers.add_parser("kinds", help="List entity kinds and their labels.", parents=[global_flags])
    p_kinds.add_argument("--format", "-f", choices=("text", "json"), default="text", help="Output format.")
    p_kinds.set_defaults(run="kinds")

    # config
    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Project path for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.add_argument("--global", dest="global_", action="store_true", help="With --set: write to global config even when inside a project.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)
    if not run:
        parser.print_help()
        sys.exit(0)

    if hasattr(args, "path"):
        args.path = resolve_path(args.path)

    if run == "group":
        from docgroup.commands.group_cmd import run as cmd_run
    elif run == "kinds":
        from docgroup.commands.kinds_cmd import run as cmd_run
    elif run == "config":
        from docgroup.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
