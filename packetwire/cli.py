import argparse
import json
import sys
from typing import List, Optional

from packetwire.analysis import packet_count
from packetwire.config import DecoderSettings
from packetwire.core.errors import InputFileError, TransmissionError
from packetwire.core.text import read_all_text
from packetwire.logging import create_logger, format_event, ring_buffer
from packetwire.parsing.packets import parse_transmission

TRACE_LOGGER_NAME = "packetwire.trace"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="packetwire", description="Decode hexadecimal packet transmissions.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode = subparsers.add_parser("decode", help="Decode a transmission file and evaluate it.")
    decode.add_argument("input", type=str, help="Path to a file holding the hexadecimal transmission.")
    decode.add_argument("--tree", action="store_true", help="Also print the decoded packet tree as JSON.")
    decode.add_argument("--trace", action="store_true", help="Print decoder events to stderr.")
    decode.add_argument("--max-depth", type=int, default=None, help="Reject operator nesting deeper than this.")
    return parser


def run_decode(args: argparse.Namespace) -> int:
    settings = DecoderSettings(max_depth=args.max_depth)
    logger = create_logger(TRACE_LOGGER_NAME, settings.trace_ring_size) if args.trace else None
    if logger is not None:
        ring_buffer(logger).clear()

    try:
        text = read_all_text(args.input)
        transmission = parse_transmission(text, settings=settings, logger=logger)
    except (InputFileError, TransmissionError) as exc:
        print(f"Failed to parse transmission: {exc}", file=sys.stderr)
        return 1
    finally:
        if logger is not None:
            for event in ring_buffer(logger).get_events():
                print(format_event(event), file=sys.stderr)

    print(f"transmission package version sum: {transmission.version_sum()}")
    print(f"transmission package decoded: {transmission.evaluate()}")
    if args.tree:
        print(json.dumps(transmission.as_dict(), indent=2))
    if logger is not None:
        print(f"packets: {packet_count(transmission.packet)}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        parser.error("--max-depth must be at least 1")
    return run_decode(args)


if __name__ == "__main__":
    sys.exit(main())
