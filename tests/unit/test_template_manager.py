"""Unit tests for the bundled template manager."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from toterack.application.config import load_config_from_dict, validate_config
from toterack.application.templates import (
    TemplateManager,
    TemplateNotFoundError,
)
from toterack.application.templates.manager import TEMPLATE_METADATA


@pytest.fixture
def manager() -> TemplateManager:
    return TemplateManager()


class TestTemplateManager:
    """Tests for TemplateManager."""

    def test_list_templates(self, manager: TemplateManager) -> None:
        names = [name for name, _ in manager.list_templates()]
        assert names == list(TEMPLATE_METADATA)

    @pytest.mark.parametrize("name", list(TEMPLATE_METADATA))
    def test_templates_are_valid_configs(
        self, manager: TemplateManager, name: str
    ) -> None:
        """Every bundled template loads and passes validation."""
        config = load_config_from_dict(json.loads(manager.get_template(name)))
        assert validate_config(config).is_valid

    def test_wheels_template(self, manager: TemplateManager) -> None:
        config = load_config_from_dict(
            json.loads(manager.get_template("tote-rack-5x4-wheels"))
        )
        assert config.layout.columns == 5
        assert config.addons.wheels.enabled
        assert config.addons.plywood_top.enabled
        assert config.pricing.delivery == 25

    def test_unknown_template(self, manager: TemplateManager) -> None:
        with pytest.raises(TemplateNotFoundError) as exc_info:
            manager.get_template("bookshelf")
        assert exc_info.value.name == "bookshelf"

    def test_describe(self, manager: TemplateManager) -> None:
        assert manager.describe("tote-rack-5x4-wheels") == TEMPLATE_METADATA[
            "tote-rack-5x4-wheels"
        ]
        with pytest.raises(TemplateNotFoundError):
            manager.describe("bookshelf")

    def test_unlisted_data_file_is_not_served(self, manager: TemplateManager) -> None:
        """Only catalogued names are read from the data package."""
        assert not manager.template_exists("__init__")
        with pytest.raises(TemplateNotFoundError):
            manager.get_template("__init__")

    def test_template_exists(self, manager: TemplateManager) -> None:
        assert manager.template_exists("tote-rack-3x3")
        assert not manager.template_exists("bookshelf")

    def test_init_template(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "garage.json"
        manager.init_template("tote-rack-3x3", output)

        assert json.loads(output.read_text(encoding="utf-8"))["layout"] == {
            "columns": 3,
            "rows": 3,
        }
