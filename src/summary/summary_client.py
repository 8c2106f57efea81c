"""
Summary client for Gemini-based transcript summarization.
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)


PROMPT_TEMPLATE = (
    "Summarize the following transcript based on this instruction: {instruction}. "
    "Transcript: {transcript}"
)


class SummaryError(Exception):
    """Base error for summary generation failures."""


class RateLimitExceeded(SummaryError):
    """The generative API reported that the request quota was exceeded (HTTP 429)."""


class SummaryResponseError(SummaryError):
    """The generative API answered with a payload we could not read text from."""


def build_prompt(instruction: str, transcript: str) -> str:
    """Combine the caller's instruction and the transcript into one prompt."""
    return PROMPT_TEMPLATE.format(instruction=instruction, transcript=transcript)


class SummaryClient:
    """Client for the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
    ):
        """
        Initialize the summary client.

        Args:
            api_key: API key for the generative language service
            model: Model name used for generation
            base_url: Base URL of the generative language REST API
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """
        Request a single text completion for the prompt.

        Args:
            prompt: Fully built prompt text

        Returns:
            Completion text

        Raises:
            RateLimitExceeded: upstream answered 429
            SummaryResponseError: upstream payload carried no text
            aiohttp.ClientError: any other transport or HTTP failure
        """
        logger.info(f"generate called with prompt length={len(prompt)}, model={self.model}")

        payload = {
            "contents": [
                {"role": "user", "parts": [{"text": prompt}]}
            ]
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-goog-api-key"] = self.api_key

        # Fresh session per request, created inside the running event loop
        connector = aiohttp.TCPConnector(limit=100, limit_per_host=30, enable_cleanup_closed=True)
        timeout = aiohttp.ClientTimeout(total=None)

        try:
            async with aiohttp.ClientSession(connector=connector, timeout=timeout) as client:
                async with client.post(self.endpoint, json=payload, headers=headers) as response:
                    response.raise_for_status()
                    result = await response.json()
        except aiohttp.ClientResponseError as e:
            logger.error(f"HTTP error from generative API: {e.status} - {e.message}")
            if e.status == 429:
                raise RateLimitExceeded(e.message) from e
            raise

        text = self._extract_text(result)
        logger.info(f"generate received response, length={len(text)}")
        return text

    @staticmethod
    def _extract_text(result: Dict[str, Any]) -> str:
        """Pull the completion text out of a generateContent response."""
        candidates = result.get("candidates") if isinstance(result, dict) else None
        if not candidates:
            feedback: Optional[Dict[str, Any]] = result.get("promptFeedback") if isinstance(result, dict) else None
            raise SummaryResponseError(f"No candidates in response (promptFeedback={feedback})")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text:
            reason = candidates[0].get("finishReason")
            raise SummaryResponseError(f"Empty completion (finishReason={reason})")
        return text
