"""FastAPI dependency injection for quote services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from toterack.application.commands import GenerateQuoteCommand
from toterack.application.templates.manager import TemplateManager


@lru_cache(maxsize=1)
def get_quote_command() -> GenerateQuoteCommand:
    """Get cached GenerateQuoteCommand instance."""
    return GenerateQuoteCommand()


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
QuoteCommandDep = Annotated[GenerateQuoteCommand, Depends(get_quote_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
