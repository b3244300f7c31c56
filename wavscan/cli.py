"""Command-line entry point: ``wavscan`` / ``python -m wavscan``."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ScanConfig
from .errors import MetadataLoadError
from .metadata import MetadataIndex
from .report import print_reports
from .scan import scan_dataset

logger = logging.getLogger("wavscan")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wavscan",
        description="Print amplitude statistics for the first WAV files of a dataset.",
    )
    parser.add_argument("--dataset", default=None, help="Dataset root holding examples.json and audio/")
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many reports")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ScanConfig.from_env().with_overrides(
        dataset_path=Path(args.dataset) if args.dataset else None,
        max_reports=args.limit,
    )

    try:
        index = MetadataIndex.load(config.metadata_path)
    except MetadataLoadError as exc:
        logger.error("[METADATA] %s", exc)
        return 1

    logger.info("[METADATA] Loaded %d entries from %s", len(index), config.metadata_path)
    count = print_reports(scan_dataset(config, index), sys.stdout)
    logger.info("[SCAN] Reported %d file(s)", count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
