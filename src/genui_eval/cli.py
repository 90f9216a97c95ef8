"""Command-line entry point."""

import argparse
import sys
from pathlib import Path

from .core import JSONParseError, configure_logging, get_logger, get_settings, load_message, safe_json_dumps
from .eval import filter_prompts
from .schema import ContentMatcher, MessageKind, validate_message

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_PARSE_ERROR = 2


def _matcher(spec: str) -> ContentMatcher:
    try:
        return ContentMatcher.parse(spec)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genui-eval", description="Validate generated UI protocol messages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a message file")
    validate.add_argument("file", help="JSON file to validate ('-' for stdin)")
    validate.add_argument(
        "--kind",
        required=True,
        help=f"Message kind: {', '.join(kind.value for kind in MessageKind)}",
    )
    validate.add_argument(
        "--expect",
        type=_matcher,
        action="append",
        default=[],
        metavar="COMPONENT[:PROPERTY[:TEXT]]",
        help="Content expectation (repeatable, component updates only)",
    )
    validate.add_argument("--no-repair", action="store_true", help="Do not repair malformed JSON")
    validate.add_argument("--json", action="store_true", help="Print errors as a JSON array")

    prompts = subparsers.add_parser("prompts", help="List evaluation prompts")
    prompts.add_argument("--prefix", help="Only prompts whose name starts with this")

    return parser


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run_validate(args: argparse.Namespace) -> int:
    try:
        message = load_message(_read(args.file), repair=not args.no_repair)
    except (OSError, JSONParseError) as e:
        logger.error("payload_parse_failed", file=args.file, error=str(e))
        print(f"Could not load {args.file}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    errors = validate_message(message, args.kind, args.expect)
    if args.json:
        print(safe_json_dumps(errors))
    else:
        for error in errors:
            print(f"- {error}")
    return EXIT_INVALID if errors else EXIT_VALID


def run_prompts(args: argparse.Namespace) -> int:
    try:
        prompts = filter_prompts(args.prefix)
    except LookupError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID

    for prompt in prompts:
        print(f"{prompt.name:<30}{prompt.kind.value:<20}{len(prompt.matchers):>3} matchers")
    return EXIT_VALID


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    if args.command == "validate":
        return run_validate(args)
    return run_prompts(args)


if __name__ == "__main__":
    sys.exit(main())
