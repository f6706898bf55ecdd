"""Main CLI entry point for mailmessage."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mailmessage.config.config_loader import ConfigError, ConfigLoader
from mailmessage.config.settings import AppConfig
from mailmessage.headers.base import HeaderError
from mailmessage.models.message import Message
from mailmessage.utils.text import CRLF, truncate_value

logger = logging.getLogger(__name__)

# Bytes that are not UTF-8 are carried as lone surrogates so files round-trip exactly.
FILE_ENCODING = "utf-8"


def displayable(text: str) -> str:
    """Replace undecodable bytes for printing."""
    return text.encode(FILE_ENCODING, errors="surrogateescape").decode(FILE_ENCODING, errors="replace")


def read_message(email_path: Path, config: AppConfig, convert_lf: bool = False) -> Message:
    """
    Read and parse one message file.

    Raises:
        FileNotFoundError: If the file does not exist
        HeaderError: If a header line is malformed
    """
    if not email_path.exists():
        raise FileNotFoundError(f"Email file not found: {email_path}")

    text = email_path.read_bytes().decode(FILE_ENCODING, errors="surrogateescape")
    if convert_lf or config.parsing.convert_lf:
        text = text.replace(CRLF, "\n").replace("\n", CRLF)

    return Message.from_string(text)


def cmd_headers(args, config: AppConfig) -> int:
    """List the headers of each message file."""
    failures = 0

    for email_path in args.emails:
        try:
            message = read_message(email_path, config, args.lf)
        except (FileNotFoundError, HeaderError) as e:
            print(f"{email_path}: {e}", file=sys.stderr)
            failures += 1
            continue

        print(f"## {email_path}")
        for headers in message.get_headers().values():
            for header in headers:
                value = truncate_value(displayable(header.get_value()), config.display.max_value_length)
                print(f"{header.get_name()}: {value}")
        print(f"({len(message.get_body().to_string())} body characters)\n")

    return 1 if failures else 0


def cmd_normalize(args, config: AppConfig) -> int:
    """Re-serialize a message file in canonical form."""
    try:
        message = read_message(args.email, config, args.lf)
    except (FileNotFoundError, HeaderError) as e:
        print(f"{args.email}: {e}", file=sys.stderr)
        return 1

    output = message.to_string(config.folding.line_length)

    if args.output:
        args.output.write_bytes(output.encode(FILE_ENCODING, errors="surrogateescape"))
        logger.info("Wrote normalized message to %s", args.output)
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(output.encode(FILE_ENCODING, errors="surrogateescape"))
        sys.stdout.buffer.flush()

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="mailmessage - parse and normalize RFC 5322 messages")
    parser.add_argument("--config", type=Path, help="Custom config file path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    headers_parser = subparsers.add_parser("headers", help="List message headers")
    headers_parser.add_argument("emails", nargs="+", type=Path, help="Email file(s) to read")
    headers_parser.add_argument("--lf", action="store_true", help="Accept bare LF line endings")

    normalize_parser = subparsers.add_parser("normalize", help="Re-serialize a message")
    normalize_parser.add_argument("email", type=Path, help="Email file to normalize")
    normalize_parser.add_argument("--output", type=Path, help="Output file path (default: stdout)")
    normalize_parser.add_argument("--lf", action="store_true", help="Accept bare LF line endings")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = ConfigLoader(args.config).load_app_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "headers":
        return cmd_headers(args, config)
    return cmd_normalize(args, config)


if __name__ == "__main__":
    sys.exit(main())
