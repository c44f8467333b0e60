#!/usr/bin/env python3
"""
CLI: Show pastel colors. One on start, then --count more, or one per Enter with --interactive.
Usage:
  python scripts/generate.py
  python scripts/generate.py --count 5 --seed 7
  python scripts/generate.py --sink swatch --output output/pastel.png
  python scripts/generate.py --interactive
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from pastel.config import get_output_dir, load_config
from pastel.generator import ColorGenerator
from pastel.presentation import PlainSink, SwatchSink, TerminalSink
from pastel.random_utils import seeded_random
from pastel.trigger import count_events, run_session, stdin_events
from pastel.workflow_utils import configure_logging, setup_graceful_shutdown

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate random pastel colors and show them (terminal block, plain code, or PNG swatch)."
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=0,
        help="Extra colors after the initial one (default: 0).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--sink",
        choices=("terminal", "plain", "swatch"),
        default="terminal",
        help="Where to show the color (default: terminal).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Swatch PNG path (default: output/<prefix>.png). Only with --sink swatch.",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="New color on every Enter; q to quit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging (shows retries).",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging("DEBUG" if args.verbose else (config.get("logging") or {}).get("level", "INFO"))

    generator = ColorGenerator.from_config(config, random_source=seeded_random(args.seed))

    if args.sink == "swatch":
        out_cfg = config.get("output") or {}
        output_path = args.output
        if output_path is None:
            output_path = get_output_dir(config) / f"{out_cfg.get('filename_prefix', 'pastel')}.png"
        sink = SwatchSink(
            width=out_cfg.get("swatch_width", 512),
            height=out_cfg.get("swatch_height", 512),
            output_path=output_path,
        )
    elif args.sink == "plain":
        sink = PlainSink()
    else:
        sink = TerminalSink()

    if args.interactive:
        setup_graceful_shutdown(interrupt=True)
        events = stdin_events(prompt_out=sys.stderr)
    else:
        events = count_events(args.count)

    try:
        colors = run_session(generator, sink, events)
    except KeyboardInterrupt:
        logger.info("Interrupted; session ended")
        return 130
    if args.sink == "swatch":
        print(f"Done. Swatch: {sink.output_path} (last color {colors[-1]})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
