"""Command line replay of a recorded hand."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from . import snapshot, transcript
from .config import TableConfig
from .errors import HandRecorderError
from .logging_utils import NDJSONLogger

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay and validate a poker hand")
    parser.add_argument("--hand", required=True, help="Path to a hand file (YAML or JSON)")
    parser.add_argument(
        "--units",
        choices=("dollars", "bb"),
        default="dollars",
        help="Show amounts in dollars or in big blinds",
    )
    parser.add_argument("--events", default=None, help="Write NDJSON hand events to this path")
    parser.add_argument("--save", default=None, help="Write a JSON snapshot of the hand to this path")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("HAND_RECORDER_LOG_LEVEL", "WARNING"),
        help="Python logging level (e.g. INFO, DEBUG). Use DEBUG to trace every action.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    event_log = NDJSONLogger(args.events) if args.events else None
    try:
        config = TableConfig.from_file(args.hand)
        recorder = config.replay(config.build_recorder(event_log))
    except (HandRecorderError, ValueError, OSError, yaml.YAMLError) as exc:
        logger.debug("replay of %s refused", args.hand, exc_info=True)
        print(f"[hand-recorder] invalid hand: {exc}", file=sys.stderr)
        return 1
    finally:
        if event_log is not None:
            event_log.close()

    print(transcript.render(recorder.state, use_dollars=args.units == "dollars"), end="")
    if args.save:
        path = snapshot.save(recorder.state, args.save)
        print(f"[hand-recorder] snapshot written to {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
