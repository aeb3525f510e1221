#!/usr/bin/env python3
"""
Manual extraction from saved bill pages
Recomputes the monthly averages from HTML dumps (e.g. error.html) without
a browser or Firebase.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from a2abilling import setup_logging
from main import display_report
from utils import (
    A2ABillingError, CommodityAverage, HTMLExtractionStrategy, MonthlyReport, monthly_average,
    parse_amounts,
)

logger = logging.getLogger(__name__)


def extract_average(html_path: Path, commodity: str) -> CommodityAverage:
    """Average the bill amounts found in a saved bill page"""
    html_content = html_path.read_text(encoding="utf-8")
    logger.info(f"Reading {html_path}...")

    values = HTMLExtractionStrategy().extract(page_source=html_content)
    logger.info(f"Found {len(values)} bill amounts for {commodity}: {values}")
    return CommodityAverage(
        commodity=commodity,
        amounts=parse_amounts(values),
        monthly=monthly_average(values, commodity),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Recompute monthly averages from saved bill pages.")
    parser.add_argument("gas_html", type=Path, help="saved gas bills page")
    parser.add_argument("electricity_html", type=Path, help="saved electricity bills page")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        report = MonthlyReport(
            gas=extract_average(args.gas_html, "gas"),
            electricity=extract_average(args.electricity_html, "electricity"),
        )
    except FileNotFoundError as e:
        logger.error(f"{e.filename} not found")
        return 1
    except A2ABillingError as e:
        logger.error(f"Extraction failed: {e}")
        return 1

    display_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
