"""Anthropic Messages API client."""

import logging
from typing import Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from claude_commit.config import ANTHROPIC_API_URL, ANTHROPIC_VERSION, MAX_TOKENS
from claude_commit.exceptions import (
    EmptyResponseError,
    RemoteError,
    ResponseParseError,
    TransportError,
)
from claude_commit.models import Config, Message, MessagesRequest, MessagesResponse
from claude_commit.output import Printer

logger = logging.getLogger(__name__)


class AnthropicProvider:
    """Sends a single prompt to the Anthropic Messages API.

    Args:
        session: HTTP session used for the request (a requests.Session or
            anything with the same post() signature).
        printer: Where non-fatal problems are reported.
        endpoint: Messages API URL.
    """

    def __init__(
        self,
        session: requests.Session,
        printer: Printer,
        endpoint: str = ANTHROPIC_API_URL,
    ):
        self.session = session
        self.printer = printer
        self.endpoint = endpoint

    def build_request(self, config: Config, prompt: str) -> MessagesRequest:
        """Build the request body for a single user prompt."""
        return MessagesRequest(
            model=config.model,
            messages=[Message(role="user", content=prompt)],
            max_tokens=MAX_TOKENS,
        )

    def build_headers(self, config: Config) -> dict[str, str]:
        """Build the request headers carrying the API key and version."""
        return {
            "Content-Type": "application/json",
            "x-api-key": config.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def generate(self, config: Config, prompt: str) -> str:
        """Generate text for a prompt with the configured model.

        Args:
            config: Configuration holding the API key and model.
            prompt: The user prompt.

        Returns:
            The text of the first content block, unmodified.

        Raises:
            TransportError: If the request cannot be completed.
            RemoteError: If the API returns a non-200 status.
            ResponseParseError: If the response body is not a valid response.
            EmptyResponseError: If the response has no content.
        """
        body = self.build_request(config, prompt).model_dump_json()
        logger.debug("POST %s (model=%s, %d prompt chars)", self.endpoint, config.model, len(prompt))

        try:
            response = self.session.post(
                self.endpoint,
                data=body,
                headers=self.build_headers(config),
            )
        except requests.RequestException as e:
            raise TransportError(f"error making API call: {e}") from e

        try:
            return self._read_response(response)
        finally:
            self._release(response)

    def _read_response(self, response: requests.Response) -> str:
        logger.debug("Response status %s", response.status_code)
        if response.status_code != 200:
            raise RemoteError(response.status_code, response.text)

        try:
            parsed = MessagesResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise ResponseParseError(f"error parsing API response: {e}") from e

        if not parsed.content:
            raise EmptyResponseError("empty response from API")

        return parsed.content[0].text

    def _release(self, response: requests.Response) -> None:
        """Close the response; a failure is reported but never raised."""
        try:
            response.close()
        except Exception as e:
            logger.warning("Failed to close API response: %s", e)
            self.printer.error(f"Error closing response body: {e}")

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
