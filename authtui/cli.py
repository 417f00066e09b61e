from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import default_secrets_path
from .core.errors import StoreWriteError
from .display.loop import run_display
from .logging import configure_logging, get_logger
from .store import SecretsStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="auth-tui", description="Simple TOTP authenticator")
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to the secrets file (default: $AUTHTUI_FILE or ~/.auth-tui)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    sub = parser.add_subparsers(dest="cmd")

    import_cmd = sub.add_parser("import", help="Import OTP URIs from a text file (one per line)")
    import_cmd.add_argument("path", help="Path to the file containing otpauth:// URIs")

    export_cmd = sub.add_parser("export", help="Export OTP URIs to a text file")
    export_cmd.add_argument("path", help="Path to write the URIs")
    return parser


def cmd_import(secrets_path: str, source: str) -> int:
    store = SecretsStore(secrets_path)
    try:
        result = store.import_from(source)
    except StoreWriteError as e:
        print(f"Failed to save: {e}", file=sys.stderr)
        return 1
    print(f"Imported {result.incoming_count} entries")
    return 0


def cmd_export(secrets_path: str, destination: str) -> int:
    store = SecretsStore(secrets_path)
    try:
        count = store.export_to(destination)
    except StoreWriteError as e:
        print(f"Failed to export: {e}", file=sys.stderr)
        return 1
    print(f"Exported {count} entries to {destination}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)
    secrets_path = args.file or default_secrets_path()
    logger.debug("Using secrets file %s", secrets_path)

    if args.cmd == "import":
        return cmd_import(secrets_path, args.path)
    if args.cmd == "export":
        return cmd_export(secrets_path, args.path)

    try:
        run_display(secrets_path)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
