"""API clients package."""

from lavender_stays.clients.suggestion_client import (
    DateSuggestionClient,
    SuggestionAuthenticationError,
    SuggestionClientError,
    SuggestionResponseError,
    SuggestionServerError,
)

__all__ = [
    "DateSuggestionClient",
    "SuggestionClientError",
    "SuggestionAuthenticationError",
    "SuggestionServerError",
    "SuggestionResponseError",
]
