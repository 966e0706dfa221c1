"""disqus-import entry point.

Usage: disqus-import EXPORT JEKYLL_DIR TARGET_HOST [--config PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

from disqus_import.config import load_config
from disqus_import.logging import ImportLogging

USAGE_HINT = (
    "The first argument should be the path to the Disqus export file. "
    "The second argument should be the path to your Jekyll directory. "
    "The third argument should be the host name of your site (e.g. example.com)."
)

LOG = logging.getLogger("disqus_import")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disqus-import",
        description="Import comments from a Disqus XML export into Jekyll data files",
        exit_on_error=False,
    )
    parser.add_argument("export", nargs="?", type=Path, help="Path to the Disqus XML export")
    parser.add_argument("jekyll_dir", nargs="?", type=Path, help="Path to the Jekyll site directory")
    parser.add_argument("target_host", nargs="?", help="Host of the site whose threads are imported")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--no-includes",
        action="store_true",
        help="Do not fetch the Jekyll include templates",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not print a line per written file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI; positionals are optional here and checked in main().

    Arguments the parser does not know are kept in args.unknown. Raises
    argparse.ArgumentError for malformed options (e.g. --config without a path).
    """
    args, unknown = build_parser().parse_known_args(argv if argv is not None else sys.argv[1:])
    args.unknown = unknown
    return args


def _usage_error(message: str) -> int:
    build_parser().print_usage()
    print(message)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: validate arguments, load config and run the import."""
    try:
        args = parse_args(argv)
    except argparse.ArgumentError as e:
        return _usage_error(f"{e}. {USAGE_HINT}")
    if args.unknown:
        return _usage_error(f"Unrecognized arguments: {' '.join(args.unknown)}. {USAGE_HINT}")

    if not args.check:
        if args.export is None or args.jekyll_dir is None or not args.target_host:
            return _usage_error(USAGE_HINT)
        if not args.export.is_file():
            return _usage_error(f"The file '{args.export}' does not exist.")
        if not args.jekyll_dir.is_dir():
            return _usage_error(f"The directory '{args.jekyll_dir}' does not exist.")

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Invalid config '{args.config}': {e}")
        return 1

    if args.check:
        print("Config OK:", config.model_dump_json())
        return 0

    if args.no_includes:
        config.includes.enabled = False
    if args.no_progress:
        config.output.progress = False
    ImportLogging(config.logging).setup()

    from disqus_import.importer import run_import

    try:
        run_import(args.export, args.jekyll_dir, args.target_host, config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        LOG.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
