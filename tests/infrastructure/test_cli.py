"""Tests for the click command line interface."""

import click
import pytest
from click.testing import CliRunner

from stockroom.application.dto import MovementSpec
from stockroom.infrastructure.cli.main import cli
from stockroom.infrastructure.cli.stock_commands import _parse_movements

_RECORD = [
    "--product", "1",
    "--location", "Nablus",
    "--on-hand", "50",
    "--threshold", "5",
    "--capacity", "100",
]


def _invoke(*args: str):
    return CliRunner().invoke(cli, ["stock", "apply", *_RECORD, *args])


def _level_row(output: str) -> list[str]:
    lines = output.splitlines()
    header = next(i for i, line in enumerate(lines) if "On hand" in line)
    return lines[header + 2].split()


class TestParseMovements:

    def test_parses_kind_and_amount(self):
        assert _parse_movements(("reserve:20", " ship:5 ")) == [
            MovementSpec("reserve", 20),
            MovementSpec("ship", 5),
        ]

    def test_negative_amount_is_passed_through(self):
        assert _parse_movements(("add:-3",)) == [MovementSpec("add", -3)]

    def test_missing_separator_rejected(self):
        with pytest.raises(click.BadParameter, match="Expected 'kind:amount'"):
            _parse_movements(("reserve20",))

    def test_non_integer_amount_rejected(self):
        with pytest.raises(click.BadParameter, match="Invalid amount 'lots'"):
            _parse_movements(("reserve:lots",))


class TestStockApplyCommand:

    def test_prints_final_level(self):
        result = _invoke("reserve:20", "ship:5")

        assert result.exit_code == 0, result.output
        assert "Product 1 @ Nablus" in result.output
        assert _level_row(result.output) == ["45", "15", "30", "5", "100"]
        assert "Reorder needed: no" in result.output

    def test_reports_reorder_needed(self):
        result = _invoke("damage:47")

        assert result.exit_code == 0, result.output
        assert "Reorder needed: yes" in result.output

    def test_domain_error_becomes_click_error(self):
        result = _invoke("reserve:5", "ship:10")

        assert result.exit_code == 1
        assert "Cannot ship more than reserved" in result.output

    def test_invalid_initial_level_reported(self):
        result = CliRunner().invoke(cli, [
            "stock", "apply",
            "--product", "1", "--location", "Nablus",
            "--on-hand", "200", "--threshold", "5", "--capacity", "100",
        ])

        assert result.exit_code == 1
        assert "initialOnHand exceeds maxCapacity" in result.output

    def test_unknown_kind_reported(self):
        result = _invoke("restock:5")

        assert result.exit_code == 1
        assert "Unknown movement kind: 'restock'" in result.output

    def test_malformed_movement_is_usage_error(self):
        result = _invoke("reserve")

        assert result.exit_code == 2
        assert "Invalid movement format" in result.output


class TestStockKindsCommand:

    def test_lists_every_kind(self):
        result = CliRunner().invoke(cli, ["stock", "kinds"])

        assert result.exit_code == 0
        for kind in ("add", "reserve", "release", "ship", "damage", "threshold", "capacity"):
            assert kind in result.output
        assert "ship_reserved" in result.output
