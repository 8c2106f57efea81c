"""
Summary module for LLM-based transcript summarization.
"""

__version__ = "1.0.0"

from .summary_client import (
    RateLimitExceeded,
    SummaryClient,
    SummaryError,
    SummaryResponseError,
    build_prompt,
)

__all__ = [
    "RateLimitExceeded",
    "SummaryClient",
    "SummaryError",
    "SummaryResponseError",
    "build_prompt",
]
