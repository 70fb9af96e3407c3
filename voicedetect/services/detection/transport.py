"""
HTTP transport to the remote classification service.

``HttpTransport`` posts one ``ClassificationRequest`` per call using
``httpx.AsyncClient``. A fresh client is opened per call so the transport
can be driven from successive event loops (Streamlit reruns call
``asyncio.run()`` each time). There are no retries: one attempt, success
or failure.
"""

import json
import logging
from abc import ABC, abstractmethod

import httpx

from voicedetect.core.exceptions import ParseError, TransportError
from voicedetect.core.models import ClassificationRequest, ClassificationResult

logger = logging.getLogger(__name__)


class BaseTransport(ABC):
    """Interface for sending a classification request."""

    @abstractmethod
    async def send(self, request: ClassificationRequest) -> ClassificationResult:
        """Send *request* and return the service's response.

        Raises:
            TransportError: On a non-2xx status or a network failure.
            ParseError: If a 2xx body is not a JSON object.
        """


class HttpTransport(BaseTransport):
    """Posts requests as JSON with an ``X-API-Key`` header.

    Args:
        endpoint: Full URL of the classification endpoint.
        api_key: Credential for the ``X-API-Key`` header.
        timeout: Seconds before the call is aborted; ``None`` waits forever.
        transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-Key": self._api_key,
        }

    async def send(self, request: ClassificationRequest) -> ClassificationResult:
        body = request.to_payload()
        logger.info(
            "Sending classification request: language=%s payload=%d chars",
            body["language"],
            len(body["audioBase64"]),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    self._endpoint,
                    content=json.dumps(body),
                    headers=self._headers(),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Classification request failed: %s", exc)
            raise TransportError(f"Network error: {exc}") from exc

        if not resp.is_success:
            logger.warning("Classification service returned HTTP %s", resp.status_code)
            raise TransportError(
                f"Server error: {resp.status_code}", status_code=resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("Classification response is not valid JSON: %s", exc)
            raise ParseError(f"Invalid JSON in server response: {exc}") from exc

        if not isinstance(data, dict):
            raise ParseError(
                f"Unexpected response payload: expected a JSON object, got {type(data).__name__}"
            )

        result = ClassificationResult.model_validate(data)

        logger.info(
            "Classification response: status=%s classification=%s",
            result.status,
            result.classification,
        )
        return result
