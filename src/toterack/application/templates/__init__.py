"""Bundled quote configuration templates.

This package provides starter configurations and a TemplateManager class
for accessing them.
"""

from toterack.application.templates.manager import (
    TemplateManager,
    TemplateNotFoundError,
    TEMPLATE_METADATA,
)

__all__ = [
    "TemplateManager",
    "TemplateNotFoundError",
    "TEMPLATE_METADATA",
]
