"""命令行测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_number_of_payments(self, runner):
        result = runner.invoke(cli, [
            "number-of-payments", "--principal", "10000",
            "--interest-rate", "0.005", "--payment", "300",
        ])
        assert result.exit_code == 0
        assert "Number of payments: 36.55" in result.output

    def test_invalid_payment_is_usage_error(self, runner):
        result = runner.invoke(cli, [
            "number-of-payments", "--principal", "1000",
            "--interest-rate", "0.01", "--payment", "10",
        ])
        assert result.exit_code == 2

    def test_solve_principal(self, runner):
        result = runner.invoke(cli, [
            "--verbose", "solve-principal", "--interest-rate", "0.01",
            "--payment", "100", "--num-periods", "1",
        ])
        assert result.exit_code == 0
        assert "Principal: 99.01" in result.output

    def test_solve_principal_no_solution(self, runner):
        result = runner.invoke(cli, [
            "solve-principal", "--interest-rate", "0.005",
            "--payment", "1500", "--num-periods", "360",
        ])
        assert result.exit_code == 1
        assert "无解" in result.output

    def test_solve_rate(self, runner):
        result = runner.invoke(cli, [
            "solve-rate", "--principal", "1200",
            "--payment", "100", "--num-periods", "12",
        ])
        assert result.exit_code == 0
        assert "Interest rate: 0.00000000" in result.output

    def test_schedule_csv(self, runner):
        result = runner.invoke(cli, [
            "schedule", "--principal", "1000", "--interest-rate", "0.01",
            "--payment", "100", "--start-date", "2024-01-15",
        ])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith("period,due_date,payment")
        assert "2024-02-01" in lines[1]

    def test_schedule_summary(self, runner):
        result = runner.invoke(cli, [
            "schedule", "--principal", "10000", "--interest-rate", "0.005",
            "--payment", "300", "--summary",
        ])
        assert result.exit_code == 0
        assert "Total interest" in result.output

    def test_sensitivity(self, runner):
        result = runner.invoke(cli, [
            "sensitivity", "--interest-rate", "0.01", "--payment", "100", "--points", "5",
        ])
        assert result.exit_code == 0
        assert "number_of_payments" in result.output

    def test_compare_annuity(self, runner):
        result = runner.invoke(cli, [
            "compare-annuity", "--interest-rate", "0.005",
            "--payment", "300", "--num-periods", "36",
        ])
        assert result.exit_code == 0
        assert "Annuity principal" in result.output
