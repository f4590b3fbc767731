"""Starter quote files shipped inside the package.

Each template is a complete quote configuration stored as
``templates/data/<name>.json``. Only names listed in TEMPLATE_METADATA are
served, so stray files in the data package never show up.
"""

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_PACKAGE = "toterack.application.templates.data"

# name -> one line shown by `toterack templates list`
TEMPLATE_METADATA: dict[str, str] = {
    "tote-rack-3x3": "3x3 rack for 27 gal totes, table pricing",
    "tote-rack-5x4-wheels": "5x4 rack on wheels with plywood top and delivery",
}


class TemplateNotFoundError(Exception):
    """No bundled quote template has this name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class TemplateManager:
    """Lists bundled quote templates and writes them out as starter files.

    Example:
        manager = TemplateManager()
        manager.init_template("tote-rack-3x3", Path("garage.json"))
    """

    def __init__(self, data_package: str = DATA_PACKAGE) -> None:
        self._data_package = data_package

    def _resource(self, name: str) -> Traversable:
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        return resources.files(self._data_package) / f"{name}.json"

    def list_templates(self) -> list[tuple[str, str]]:
        """(name, description) for every template, in catalog order."""
        return list(TEMPLATE_METADATA.items())

    def describe(self, name: str) -> str:
        """One-line description of a template."""
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        return TEMPLATE_METADATA[name]

    def get_template(self, name: str) -> str:
        """Raw JSON text of a template.

        Raises:
            TemplateNotFoundError: Unknown name, or the file is missing
                from the installed package.
        """
        try:
            return self._resource(name).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path) -> None:
        """Write a template to ``output_path``, replacing any existing file."""
        output_path.write_text(self.get_template(name), encoding="utf-8")
        logger.info(f"Wrote template {name} to {output_path}")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
