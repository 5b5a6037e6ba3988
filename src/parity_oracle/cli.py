"""Command-line entry: ask the completion model about one number."""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from dataclasses import replace

import httpx
from dotenv import load_dotenv

from parity_oracle.client import ParityOracle
from parity_oracle.common.errors import OracleError
from parity_oracle.common.logging_setup import setup_logging
from parity_oracle.config import OracleSettings

LOGGER = logging.getLogger("parity_oracle.cli")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Ask a chat-completion model whether a number is odd")
    ap.add_argument("--value", required=True, help="Number to classify")
    ap.add_argument("--model", default=None, help="Override the model id")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    ap.add_argument("--log-level", default="WARNING", help="Logging level name")
    return ap

def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level.upper(), logging.WARNING))

    settings = OracleSettings.from_env()
    if args.model:
        settings = replace(settings, model=args.model)
    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout)

    try:
        odd = asyncio.run(ParityOracle(settings).is_odd(args.value))
    except (OracleError, httpx.HTTPError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    LOGGER.info("%s classified as %s", args.value, "odd" if odd else "even")
    print("odd" if odd else "even")
    return 0

if __name__ == "__main__":
    sys.exit(main())
