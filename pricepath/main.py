from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
import time
from pathlib import Path
from typing import IO, Sequence

from pricepath.config import load_settings
from pricepath.errors import PricePathError
from pricepath.formatting import format_percent, format_volume, probability_label
from pricepath.logging_setup import configure_logging
from pricepath.models import PricePath, Timeframe
from pricepath.path_generator import PathGenerator
from pricepath.sampler import config_for_timeframe, summarize_path

LOGGER = logging.getLogger(__name__)

_FIELDNAMES = ["timestamp", "date", "yesPrice", "noPrice", "volume"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a deterministic synthetic YES/NO price path",
    )
    parser.add_argument(
        "--timeframe",
        choices=[item.value for item in Timeframe],
        default=None,
        help="Chart window preset (default: PRICEPATH_TIMEFRAME or 7d)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: PRICEPATH_SEED or 42)",
    )
    parser.add_argument(
        "--base-price",
        type=float,
        default=None,
        help="Opening YES price in (0, 1) (default: PRICEPATH_BASE_PRICE or 0.5)",
    )
    parser.add_argument(
        "--end-millis",
        type=int,
        default=None,
        help="Timestamp of the newest point in epoch millis (default: now)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write to this path instead of stdout",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log a one-line summary of the generated path",
    )
    return parser.parse_args(argv)


def write_path(path: PricePath, handle: IO[str], fmt: str) -> None:
    records = path.to_records()
    if fmt == "csv":
        writer = csv.DictWriter(handle, fieldnames=_FIELDNAMES, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
        return
    json.dump(records, handle, indent=2)
    handle.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    timeframe = args.timeframe or settings.default_timeframe
    seed = settings.default_seed if args.seed is None else args.seed
    base_price = settings.default_base_price if args.base_price is None else args.base_price
    end_millis = args.end_millis if args.end_millis is not None else int(time.time() * 1000)

    try:
        config = config_for_timeframe(
            timeframe,
            seed=seed,
            base_price=base_price,
            end_millis=end_millis,
        )
        path = PathGenerator(settings.generator).generate(config)
    except PricePathError as exc:
        LOGGER.error("path generation failed: %s", exc)
        return 2

    LOGGER.info(
        "generated timeframe=%s seed=%d points=%d format=%s output=%s",
        timeframe,
        seed,
        len(path),
        args.format,
        args.output or "(stdout)",
    )

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", newline="", encoding="utf-8") as handle:
            write_path(path, handle, args.format)
    else:
        write_path(path, sys.stdout, args.format)

    if args.summary:
        summary = summarize_path(path)
        LOGGER.info(
            "summary yes=%.4f (%s) change=%s range=[%.4f, %.4f] volume=%s trend=%s strength=%.2f",
            summary.latest.yes_price,
            probability_label(summary.latest.yes_price),
            format_percent(summary.yes_change_percent, signed=True),
            summary.min_yes,
            summary.max_yes,
            format_volume(summary.total_volume),
            summary.trend,
            summary.trend_strength,
        )
    return 0
