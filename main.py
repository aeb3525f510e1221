#!/usr/bin/env python3
"""
A2A Billing - Command line interface
Runs the scraper once and exits 0 on success
"""

import argparse
import sys
from typing import List, Optional

from tabulate import tabulate

from a2abilling import A2ABilling, setup_logging
from config import Settings
from utils import MonthlyReport, format_euro


def display_report(report: MonthlyReport):
    """Display the monthly averages in a clean table format"""
    data = []
    for average in (report.gas, report.electricity):
        bills = ", ".join(f"{amount:.2f}" for amount in average.amounts)
        data.append([average.commodity, len(average.amounts), bills, format_euro(average.monthly)])
    data.append(["total", "", "", format_euro(report.total)])

    print(tabulate(data, headers=["Commodity", "Bills", "Amounts", "Monthly"], tablefmt="grid"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape A2A gas and electricity bills and publish monthly averages to Firebase."
    )
    parser.add_argument("--show-browser", action="store_true",
                        help="run Chrome with a visible window and devtools open")
    parser.add_argument("--debug", action="store_true",
                        help="print progress messages (same as A2A_DEBUG=true)")
    parser.add_argument("--table", action="store_true",
                        help="print a summary table after a successful run")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env(
        headless=False if args.show_browser else None,
        debug=True if args.debug else None,
    )
    setup_logging(settings.debug, settings.log_file)

    report = A2ABilling(settings).run()
    if args.table:
        display_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
