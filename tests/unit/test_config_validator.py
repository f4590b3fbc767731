"""Unit tests for whole-configuration validation checks."""

from __future__ import annotations

from typing import Any

from toterack.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)


def _config(**sections: Any):
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "container": {"length": 30.25, "width": 20.25, "height": 14.125},
        "layout": {"columns": 3, "rows": 3},
    }
    data.update(sections)
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for ValidationResult exit codes."""

    def test_clean(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_only(self) -> None:
        result = ValidationResult()
        result.add_warning("layout", "outside the table")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_wins(self) -> None:
        result = ValidationResult()
        result.add_warning("layout", "outside the table")
        result.add_error("lumber.overrides.X", "unknown cut", value="X")
        assert not result.is_valid
        assert result.exit_code == 1


class TestValidateConfig:
    """Tests for validate_config."""

    def test_reference_config_is_clean(self) -> None:
        result = validate_config(_config())
        assert result.errors == []
        assert result.warnings == []

    def test_unknown_override_label(self) -> None:
        result = validate_config(_config(lumber={"overrides": {"Shelves": 10}}))

        assert not result.is_valid
        assert result.errors[0].path == "lumber.overrides.Shelves"
        assert "Runners" in result.errors[0].message

    def test_override_length_not_stocked(self) -> None:
        result = validate_config(_config(lumber={"overrides": {"Runners": 14}}))

        assert not result.is_valid
        assert result.errors[0].value == 14

    def test_override_too_short(self) -> None:
        """8 foot boards cannot yield the 112 inch rails of a 5 column rack."""
        result = validate_config(
            _config(
                layout={"columns": 5, "rows": 3},
                lumber={"overrides": {"Front Horizontal Rails": 8}},
            )
        )

        assert result.is_valid
        assert result.warnings[0].path == "lumber.overrides.Front Horizontal Rails"

    def test_cut_longer_than_every_board(self) -> None:
        result = validate_config(
            _config(layout={"columns": 9, "rows": 2}, pricing={"price_override": 500})
        )

        paths = [w.path for w in result.warnings]
        assert paths == ["lumber.stock_lengths", "lumber.stock_lengths"]
        assert result.warnings[0].suggestion is not None

    def test_missing_board_price(self) -> None:
        result = validate_config(
            _config(lumber={"stock_lengths": [8, 20], "board_prices": {"8": 3.75}})
        )
        assert [w.path for w in result.warnings] == ["lumber.board_prices"]
        assert "20 ft" in result.warnings[0].message

    def test_extrapolated_price(self) -> None:
        result = validate_config(_config(layout={"columns": 6, "rows": 3}))
        assert [w.path for w in result.warnings] == ["layout"]

    def test_price_override_silences_extrapolation(self) -> None:
        result = validate_config(
            _config(layout={"columns": 6, "rows": 3}, pricing={"price_override": 320})
        )
        assert result.warnings == []
