from __future__ import annotations

import csv
from math import isclose

from backend.cli import main, summarize_yearly
from backend.core.investment import InvestmentParams, calculate_investment


def test_cli_prints_summary(capsys):
    exit_code = main(
        [
            "--months", "24",
            "--initial-amount", "10000",
            "--monthly-contribution", "500",
            "--annual-interest-rate", "7",
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Final value after 24 months" in out
    assert "Total contributions: $22,000.00" in out
    assert "Month   12" in out and "Month   24" in out


def test_cli_rejects_invalid_input(capsys):
    exit_code = main(["--months=-1", "--initial-amount=-1"])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert captured.err.strip() == "error: Months must be greater than 0"
    assert captured.out == ""


def test_cli_writes_every_month_to_csv(tmp_path, capsys):
    target = tmp_path / "projection.csv"

    exit_code = main(["--months", "15", "--output-csv", str(target)])

    assert exit_code == 0
    with open(target, newline="") as csvfile:
        rows = list(csv.reader(csvfile))
    assert rows[0] == ["month", "value", "monthlyInterest", "contribution"]
    assert len(rows) == 16
    assert rows[1][0] == "1" and isclose(float(rows[1][1]), 10500.0)
    assert str(target) in capsys.readouterr().out


def test_summarize_yearly_includes_partial_final_year():
    result = calculate_investment(
        InvestmentParams(months=30, initialAmount=0, monthlyContribution=100, annualInterestRate=0)
    )

    rows = summarize_yearly(result.monthlyData)

    assert [month for month, _ in rows] == [12, 24, 30]
    assert isclose(rows[-1][1], 3000.0)
