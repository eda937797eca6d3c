"""
console-linenumbers command line entry point.

Usage:
    python run.py build.log            # number lines of a file
    some-build | python run.py         # number lines from stdin
    python run.py --enable             # turn line numbers on globally
    python run.py --disable
    python run.py --status
"""

import sys
import argparse
from typing import List, Optional, TextIO

from .core import configure_logging, load_config, log_progress, structured_logger
from .services import AnnotatorFactory, ConsoleStream, GlobalSettings, SettingsError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-linenumbers",
        description="Prefix console output lines with sequential line numbers.",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Settings file (default: $LINENUMBER_SETTINGS_FILE or ~/.console-linenumbers/settings.json)",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--enable", action="store_true", help="Enable line numbers and save")
    action.add_argument("--disable", action="store_true", help="Disable line numbers and save")
    action.add_argument("--status", action="store_true", help="Show the current setting")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files (default: stdin)")
    return parser


def _describe(settings: GlobalSettings) -> str:
    state = "enabled" if settings.enable_linenumber else "disabled"
    return f"{settings.display_name}: {state}"


def _report_error(config, error) -> None:
    if config.log_format == "json":
        structured_logger.error(str(error))
    else:
        print(f"Error: {error}", file=sys.stderr)


def _number_stream(source: TextIO, out: TextIO, factory: AnnotatorFactory, context: str) -> ConsoleStream:
    stream = ConsoleStream(factory, context)
    for line in source:
        out.write(stream.process(line))
    return stream


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    args = _build_parser().parse_args(argv)

    config = load_config()
    error = config.validate()
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    configure_logging(config)

    settings = GlobalSettings(
        args.settings or config.settings_path,
        default_enabled=config.default_enabled,
        lock_timeout=config.lock_timeout,
    )

    if args.enable or args.disable:
        try:
            settings.configure({"enableLinenumber": bool(args.enable)})
        except SettingsError as e:
            _report_error(config, e)
            return 1
        print(_describe(settings))
        return 0

    if args.status:
        print(_describe(settings))
        return 0

    factory = AnnotatorFactory(settings)

    if not args.files:
        # Same policy as files: a stray byte must not end the log
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        _number_stream(sys.stdin, sys.stdout, factory, "<stdin>")
        return 0

    for path in args.files:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                stream = _number_stream(f, sys.stdout, factory, path)
        except OSError as e:
            _report_error(config, e)
            return 1
        if stream.failures:
            log_progress(f"{path}: {stream.failures} of {stream.lines_processed} lines not numbered")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
