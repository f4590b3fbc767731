"""Application layer - use cases and orchestration."""

from .commands import GenerateQuoteCommand
from .dtos import QuoteInput, QuoteOutput

__all__ = [
    "GenerateQuoteCommand",
    "QuoteInput",
    "QuoteOutput",
]
