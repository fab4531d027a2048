"""CLI entrypoints for theme-builder commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, BuilderConfig, ConfigError, load_config
from .logging import configure_logging
from .orchestrator import BuildOrchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_build_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--folders",
        nargs="+",
        default=None,
        help="Folders to watch for components (defaults to _components).",
    )
    parser.add_argument(
        "--tailwind-input-file",
        default=None,
        help="Tailwind CSS input file (defaults to ./assets/tailwind.css).",
    )
    parser.add_argument(
        "--tailwind-output-file",
        default=None,
        help="Tailwind CSS output file (defaults to ./assets/tailwind-output.css).",
    )
    parser.add_argument(
        "--skip-tailwind",
        action="store_true",
        default=None,
        help="Skip Tailwind CSS processing.",
    )
    parser.add_argument(
        "--stimulus-output-file",
        default=None,
        help="Stimulus controllers output file (defaults to ./assets/controllers.js).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file (defaults to the current directory).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write detailed logs to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theme-builder",
        description="Compile Shopify theme components and keep generated assets in sync.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    watch_parser = subparsers.add_parser(
        "watch",
        help="Build the theme, then rebuild components as they change.",
    )
    _add_verbose_option(watch_parser, suppress_default=True)
    _add_build_options(watch_parser)

    build_parser = subparsers.add_parser(
        "build",
        help="Build every component and asset once, then exit.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_build_options(build_parser)

    return parser


def _resolve_config(args: argparse.Namespace) -> BuilderConfig:
    config_path = Path(args.config) if args.config else Path.cwd()
    config = load_config(config_path)
    return config.merged(
        watched_roots=args.folders,
        tailwind_input_file=args.tailwind_input_file,
        tailwind_output_file=args.tailwind_output_file,
        skip_tailwind=args.skip_tailwind,
        stimulus_output_file=args.stimulus_output_file,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for theme-builder commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = BuildOrchestrator(config)

    if args.command == "watch":
        try:
            orchestrator.run()
        except KeyboardInterrupt:
            parser.exit(0, "Stopped watching.\n")
    elif args.command == "build":
        report = orchestrator.build()
        if report.failed:
            parser.exit(1, f"{len(report.failed)} file(s) failed to compile.\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main(sys.argv[1:])
