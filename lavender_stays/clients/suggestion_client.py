"""Client for the alternative-dates suggestion service."""

import asyncio
from typing import Any, Optional

import httpx
from pydantic import ValidationError
from structlog import get_logger

from lavender_stays.config import settings
from lavender_stays.models import DateSuggestion, DateSuggestionRequest

logger = get_logger(__name__)


class SuggestionClientError(Exception):
    """Base exception for suggestion service errors."""

    pass


class SuggestionAuthenticationError(SuggestionClientError):
    """Raised when the suggestion service rejects our credentials."""

    pass


class SuggestionServerError(SuggestionClientError):
    """Raised when the suggestion service keeps returning server errors."""

    pass


class SuggestionResponseError(SuggestionClientError):
    """Raised when the service answers with a body we cannot parse."""

    pass


class DateSuggestionClient:
    """Asks the suggestion flow whether a guest should consider other dates.

    The flow is served Genkit-style: the request body is ``{"data": input}``
    and the answer is ``{"result": output}``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client with settings.

        Args:
            base_url: Override for SUGGESTION_BASE_URL
            api_key: Override for SUGGESTION_API_KEY
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = (base_url or settings.suggestion.base_url).rstrip("/")
        self.endpoint = settings.suggestion.endpoint
        self.api_key = api_key if api_key is not None else settings.suggestion.api_key
        self.timeout = settings.suggestion.request_timeout
        self.max_retries = max(1, settings.suggestion.max_retries)
        self.retry_backoff_base = 2  # Exponential backoff base
        self.transport = transport

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": "LavenderStays/1.0",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST to the flow endpoint with retry on timeouts, network and 5xx errors.

        Raises:
            SuggestionAuthenticationError: On 401/403
            SuggestionServerError: If 5xx persists after all retries
            SuggestionClientError: For other failures
        """
        url = f"{self.base_url}{self.endpoint}"

        for attempt in range(self.max_retries):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout, transport=self.transport
                ) as client:
                    response = await client.post(url, json=payload, headers=self._get_headers())

                if response.status_code in (401, 403):
                    logger.error(
                        "Suggestion service authentication failed",
                        status_code=response.status_code,
                    )
                    raise SuggestionAuthenticationError(
                        f"Authentication failed for {self.endpoint}"
                    )

                if response.status_code >= 500:
                    if attempt < self.max_retries - 1:
                        wait_time = self.retry_backoff_base ** attempt
                        logger.warning(
                            "Suggestion service error, retrying",
                            status_code=response.status_code,
                            attempt=attempt + 1,
                            max_retries=self.max_retries,
                            wait_seconds=wait_time,
                        )
                        await asyncio.sleep(wait_time)
                        continue
                    logger.error(
                        "Suggestion service error, max retries exceeded",
                        status_code=response.status_code,
                    )
                    raise SuggestionServerError(
                        f"Server error at {self.endpoint}: {response.status_code}"
                    )

                if response.status_code >= 400:
                    logger.error(
                        "Suggestion service rejected request",
                        status_code=response.status_code,
                        response_text=response.text,
                    )
                    raise SuggestionClientError(
                        f"Client error at {self.endpoint}: {response.text}"
                    )

                return response.json()

            except (httpx.TimeoutException, httpx.RequestError) as e:
                if attempt < self.max_retries - 1:
                    wait_time = self.retry_backoff_base ** attempt
                    logger.warning(
                        "Suggestion request failed, retrying",
                        error=str(e),
                        attempt=attempt + 1,
                        max_retries=self.max_retries,
                        wait_seconds=wait_time,
                    )
                    await asyncio.sleep(wait_time)
                    continue
                logger.error("Suggestion request failed, max retries exceeded", error=str(e))
                raise SuggestionClientError(
                    f"Request failed for {self.endpoint}: {str(e)}"
                ) from e

            except ValueError as e:
                logger.error("Suggestion service returned invalid JSON", error=str(e))
                raise SuggestionResponseError("Suggestion service returned invalid JSON") from e

        raise SuggestionClientError(f"Failed to complete request to {self.endpoint}")

    async def suggest_alternative_dates(
        self, request: DateSuggestionRequest
    ) -> DateSuggestion:
        """Ask whether alternative dates should be offered for a stay.

        Args:
            request: Selected dates, guests, current price and availability score

        Returns:
            Parsed recommendation

        Raises:
            SuggestionClientError: If the service fails or answers with an unexpected shape
        """
        logger.info(
            "Requesting alternative date suggestion",
            start_date=request.selected_start_date,
            end_date=request.selected_end_date,
            availability_score=request.availability_score,
        )
        body = await self._post({"data": request.model_dump(by_alias=True)})
        result = body.get("result", body) if isinstance(body, dict) else body

        try:
            suggestion = DateSuggestion.model_validate(result)
        except ValidationError as e:
            logger.error("Unexpected suggestion payload", error=str(e))
            raise SuggestionResponseError(
                f"Unexpected suggestion payload: {str(e)}"
            ) from e

        logger.info(
            "Received date suggestion",
            should_suggest=suggestion.should_suggest_alternatives,
        )
        return suggestion
