"""Async client asking a chat-completion model whether a number is odd.

One call validates the input, sends a single question to the completion
endpoint and reads "odd" or "even" back out of the reply. There is no retry;
callers re-invoke on failure.
"""
from __future__ import annotations
import logging
from typing import Any

import httpx

from parity_oracle.common.errors import (
    AMBIGUOUS_ANSWER_MESSAGE,
    INVALID_INPUT_MESSAGE,
    ErrorKind,
    OracleError,
)
from parity_oracle.common.numeric import format_number, is_numeric
from parity_oracle.common.schema import ChatMessage, ChatRequest, ChatResponse, Parity, classify_answer
from parity_oracle.common.templates import parity_question
from parity_oracle.config import OracleSettings
from parity_oracle.user_agent import CLIENT_NAME, construct_user_agent
from parity_oracle.version import __version__

LOGGER = logging.getLogger("parity_oracle.client")

USER_AGENT = construct_user_agent(__version__)

def build_request(number_text: str, settings: OracleSettings) -> ChatRequest:
    """Chat request asking for the parity of ``number_text``."""
    return ChatRequest(
        model=settings.model,
        messages=[ChatMessage(role="user", content=parity_question(number_text))],
        temperature=0.7,
        max_tokens=10,
        top_p=1.0,
        frequency_penalty=0.0,
        presence_penalty=0.0,
    )

def build_headers(settings: OracleSettings) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.api_key}",
        "X-Custom-Header": CLIENT_NAME,
        "User-Agent": USER_AGENT,
    }

class ParityOracle:
    """
    Parity lookups against one completion endpoint.

    Args:
        settings: Endpoint, credential and timeout; read from the environment if omitted.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        settings: OracleSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings if settings is not None else OracleSettings.from_env()
        self._transport = transport

    async def _complete(self, request: ChatRequest) -> ChatResponse:
        async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
            r = await client.post(
                self.settings.api_url,
                headers=build_headers(self.settings),
                json=request.model_dump(exclude_none=True),
            )
            r.raise_for_status()
            data: Any = r.json()
        return ChatResponse.model_validate(data)

    async def is_odd(self, value: Any) -> bool:
        """
        Ask the model whether ``value`` is odd.

        Args:
            value: int, finite float, or string holding a finite number.

        Returns:
            True for odd, False for even.

        Raises:
            OracleError: invalid input, or a reply naming neither or both parities.
            httpx.HTTPError: network failure, timeout or non-2xx status, unchanged.
        """
        try:
            if not is_numeric(value):
                raise OracleError(ErrorKind.VALIDATION, INVALID_INPUT_MESSAGE)

            request = build_request(format_number(value), self.settings)
            response = await self._complete(request)
            answer = response.first_content().strip().lower()

            parity = classify_answer(answer)
            if parity is Parity.ODD:
                return True
            if parity is Parity.EVEN:
                return False
            LOGGER.debug("Unclassifiable answer for %r: %r", value, answer)
            raise OracleError(ErrorKind.DOMAIN, AMBIGUOUS_ANSWER_MESSAGE)
        except httpx.HTTPError as e:
            LOGGER.error("Transport error: %s", e, extra={"error_kind": ErrorKind.TRANSPORT.value})
            raise
        except OracleError as e:
            LOGGER.error("Oracle error: %s", e, extra={"error_kind": e.kind.value})
            raise
        except Exception as e:
            LOGGER.error("Unexpected error: %s", e, extra={"error_kind": ErrorKind.UNEXPECTED.value})
            raise

async def is_odd(value: Any, settings: OracleSettings | None = None) -> bool:
    """Ask whether ``value`` is odd, reading settings from the environment at call time."""
    return await ParityOracle(settings or OracleSettings.from_env()).is_odd(value)
