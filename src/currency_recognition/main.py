"""Command line interface for recognizing notes and coins in images."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

from .config import ClassifierSettings, configure_logging
from .pipeline import RecognitionPipeline, visualize_results
from .tally import RunningTotal, describe
from .templates import BUILTIN_TEMPLATES

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Heuristic currency recognition")
    parser.add_argument("images", type=Path, nargs="+", help="Paths to input images")
    parser.add_argument(
        "--currency",
        type=str.upper,
        default="USD",
        choices=sorted(BUILTIN_TEMPLATES),
        help="Built-in template table to match against",
    )
    parser.add_argument(
        "--templates",
        type=Path,
        default=None,
        help="Optional JSON template table (overrides --currency)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for confidence jitter; omit for deterministic confidences",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Optional directory to save annotated images",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    configure_logging()
    args = parse_args(argv)

    noise = np.random.default_rng(args.seed) if args.seed is not None else None
    pipeline = RecognitionPipeline(
        currency=args.currency,
        template_file=args.templates,
        settings=ClassifierSettings.from_env(),
        noise=noise,
    )
    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)

    tally = RunningTotal()
    report = []
    for path in args.images:
        image = cv2.imread(str(path))
        if image is None:
            raise FileNotFoundError(f"Unable to load input image: {path}")

        results = pipeline(image)
        logger.debug("%s: %d result(s)", path, len(results))
        report.append({"image": str(path), "predictions": [result.as_dict() for result in results]})

        if not args.json:
            if not results:
                print(f"{path}: no currency recognized.")
            for result in results:
                total = tally.add(result)
                print(f"{path}: {describe(result, total)}")

        if args.output_dir is not None:
            cv2.imwrite(str(args.output_dir / path.name), visualize_results(image, results))

    if args.json:
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        print(tally.summary())


if __name__ == "__main__":
    main()
