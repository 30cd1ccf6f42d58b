"""CLI entry point for todoplus."""

import argparse
from pathlib import Path

from .cli.edit import TOGGLE_COMMANDS
from .config import Settings, init_runtime
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="todoplus",
        description="Toggle, archive and export plain-text todo files",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing todoplus.yml (default: current directory)",
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Generate default todoplus.yml config in the project root and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command")

    for name in TOGGLE_COMMANDS:
        toggle = subparsers.add_parser(name, help=f"{name.replace('-', ' ').capitalize()} on lines")
        toggle.add_argument("file", type=Path, help="Todo file to edit")
        toggle.add_argument(
            "-l",
            "--lines",
            action="append",
            required=True,
            metavar="START[:END]",
            help="1-based line or line range; may be repeated",
        )

    archive = subparsers.add_parser("archive", help="Move finished todos to the archive project")
    archive.add_argument("file", type=Path, help="Todo file to archive")

    export = subparsers.add_parser("export-html", help="Render a todo file as HTML")
    export.add_argument("file", type=Path, help="Todo file to export")
    export.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")

    open_ = subparsers.add_parser("open", help="Locate or create the project's todo file")
    open_.add_argument("file", type=Path, nargs="?", default=None, help="Explicit file to open")
    open_.add_argument("--line", type=int, default=None, help="1-based line number")

    subparsers.add_parser(
        "timer",
        help=(
            "Flip the started-todo timer flag for this run and report it; "
            "the starting state comes from TODOPLUS_TIMER (default: enabled)"
        ),
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)
    init_runtime(settings)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    from .cli.output import error, notification
    from .services import ConfigService

    config_service = ConfigService(settings.project_root)
    config = config_service.get_config()
    if config_service.has_config_error:
        error(config_service.config_error)

    if args.command in TOGGLE_COMMANDS:
        from .cli.edit import run_toggle

        raise SystemExit(run_toggle(args.command, args.file, args.lines, config))

    if args.command == "archive":
        from .cli.edit import run_archive

        raise SystemExit(run_archive(args.file, config))

    if args.command == "export-html":
        from .cli.export import run_export

        raise SystemExit(run_export(args.file, args.output, config))

    if args.command == "open":
        from .cli.open import run_open

        raise SystemExit(run_open(settings.project_root, config, args.file, args.line))

    if args.command == "timer":
        from .host import FileHost
        from .services import CommandService

        host = FileHost(root_path=settings.project_root)
        CommandService(host, config).toggle_timer()
        for note in host.notifications:
            notification(note)
        raise SystemExit(0)

    error("No command given (see --help)")
    raise SystemExit(1)


if __name__ == "__main__":
    main()
