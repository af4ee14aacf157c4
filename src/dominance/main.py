"""Entry point: decode an aggregator account dump from disk.

Reads raw account bytes (or their hex text with --hex), treats them as
owned by the configured program, runs the decode pipeline and prints the
resulting snapshot as JSON on stdout. Errors are printed the same way and
exit with status 1.
"""

import argparse
import json
import sys
from pathlib import Path

from dominance.config import AppSettings
from dominance.errors import AccountError
from dominance.ledger.types import RawAccount
from dominance.logging import get_logger, setup_logging
from dominance.pipeline import process_account


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dominance-decode",
        description="Decode a dominance aggregator account dump.",
    )
    parser.add_argument("path", type=Path, help="file holding the account data")
    parser.add_argument("--hex", action="store_true", help="file contains hex text, not raw bytes")
    parser.add_argument(
        "--schema",
        choices=["compact", "extended"],
        default=None,
        help="record layout (default: DECODE_SCHEMA_VERSION or 'extended')",
    )
    parser.add_argument("--address", default="<file>", help="label for the account address")
    return parser.parse_args(argv)


def _load(path: Path, as_hex: bool) -> bytes:
    if as_hex:
        text = path.read_text(encoding="utf-8")
        return bytes.fromhex("".join(text.split()))
    return path.read_bytes()


def main(argv: list[str] | None = None) -> int:
    """Decode one dump file. Returns the process exit code."""
    args = _parse_args(argv)
    settings = AppSettings()
    if args.schema is not None:
        settings.decode = settings.decode.model_copy(update={"schema_version": args.schema})

    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("dominance.main")

    try:
        data = _load(args.path, args.hex)
    except (OSError, ValueError) as e:
        logger.error("dump_unreadable", path=str(args.path), error=str(e))
        print(json.dumps({"error": {"kind": "unreadable_dump", "detail": str(e)}}, indent=2))
        return 1
    logger.info("dump_loaded", path=str(args.path), size=len(data))

    raw = RawAccount(
        address=args.address,
        exists=True,
        owner=settings.ledger.program_id,
        data=data,
    )
    result = process_account(raw, settings.ledger, settings.decode)

    if isinstance(result, AccountError):
        print(json.dumps({"error": result.to_dict()}, indent=2))
        return 1

    print(json.dumps(result.to_dict(settings.decode.display_places), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
