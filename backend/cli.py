"""
Command-line compound growth projection.

Runs the same validation and monthly projection the /api/calculate endpoint
uses, prints a year-by-year summary, and can export every month to CSV.
"""

from __future__ import annotations

import argparse
import csv
import sys
from typing import List, Optional, Sequence, Tuple

from backend.core.investment import InvestmentResult, MonthlyDataPoint, calculate_investment
from backend.core.validation import validate_and_parse_params

CSV_HEADER = ["month", "value", "monthlyInterest", "contribution"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Project compound growth of an initial amount plus monthly contributions.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    # kept as strings so the API's validation messages apply unchanged
    parser.add_argument("--months", default="120", help="Number of monthly periods to project.")
    parser.add_argument("--initial-amount", default="10000", help="Amount invested at month 0.")
    parser.add_argument("--monthly-contribution", default="500", help="Amount added every month.")
    parser.add_argument("--annual-interest-rate", default="7", help="Annual interest rate (percent).")
    parser.add_argument("--output-csv", type=str, help="Optional path to write every monthly data point as CSV.")
    return parser.parse_args(argv)


def format_currency(value: float) -> str:
    return f"${value:,.2f}"


def summarize_yearly(monthly_data: Sequence[MonthlyDataPoint]) -> List[Tuple[int, float]]:
    """(month, value) at each year end, plus the final month if it isn't one."""
    rows = [(point.month, point.value) for point in monthly_data if point.month % 12 == 0]
    last = monthly_data[-1]
    if last.month % 12:
        rows.append((last.month, last.value))
    return rows


def write_csv(path: str, monthly_data: Sequence[MonthlyDataPoint]) -> None:
    with open(path, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)
        for point in monthly_data:
            writer.writerow([point.month, point.value, point.monthlyInterest, point.contribution])


def report_results(result: InvestmentResult) -> None:
    months = len(result.monthlyData)
    print("Compound Growth Projection")
    print("==========================")
    print(f"Final value after {months} months: {format_currency(result.totalValue)}")
    print(f"Total contributions: {format_currency(result.totalContributions)}")
    print(f"Total interest: {format_currency(result.totalInterest)}")
    print(f"Gain over normal return: {format_currency(result.totalGain)}")
    print("Year-by-year:")
    for month, value in summarize_yearly(result.monthlyData):
        print(f"  Month {month:>4}: {format_currency(value)}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    validation = validate_and_parse_params(
        args.months,
        args.initial_amount,
        args.monthly_contribution,
        args.annual_interest_rate,
    )
    if not validation.is_valid:
        print(f"error: {validation.error}", file=sys.stderr)
        return 2

    result = calculate_investment(validation.params)
    report_results(result)

    if args.output_csv:
        write_csv(args.output_csv, result.monthlyData)
        print(f"\nMonthly data written to {args.output_csv}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
