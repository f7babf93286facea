"""HTTP client for the panel backend.

Endpoints::

    GET  {api_url}/api/template?kind=<kind>   -> {code, message, data: "<template text>"}
    POST {api_url}/api/create                 -> {code, message, data: {message}}

Both answers use the same JSON envelope.  The creation payload is opaque
manifest text, passed through unmodified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from loguru import logger
from pydantic import ValidationError

from kubepanel.models.api import ApiEnvelope
from kubepanel.models.creation import CreationData, CreationResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from kubepanel.models.enums import ResourceKind


class TemplateFetchError(RuntimeError):
    """Raised when a template cannot be retrieved from the backend."""


class PanelApiClient:
    """Async client implementing ``TemplateSource`` and ``ResourceCreator``.

    ``token_provider`` is consulted on every request; a non-empty token is
    sent as ``Authorization: Bearer <token>``.  Pass ``client`` to reuse an
    existing ``httpx.AsyncClient`` (tests inject one with a mock transport);
    the caller then owns its lifetime.
    """

    def __init__(
        self,
        api_url: str,
        *,
        token_provider: Callable[[], str] | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token_provider = token_provider
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=api_url, timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        if self._token_provider is None:
            return {}
        token = self._token_provider()
        return {"Authorization": f"Bearer {token}"} if token else {}

    # -- Template --------------------------------------------------------------

    async def fetch_template(self, kind: ResourceKind) -> str:
        try:
            response = await self._client.get("/api/template", params={"kind": str(kind)}, headers=self._headers())
            response.raise_for_status()
            envelope = ApiEnvelope.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            msg = f"Failed to fetch template for {kind}: {exc}"
            raise TemplateFetchError(msg) from exc

        if envelope.code is not None and not 200 <= envelope.code < 300:
            msg = f"Failed to fetch template for {kind}: {envelope.message or envelope.code}"
            raise TemplateFetchError(msg)
        if not isinstance(envelope.data, str):
            msg = f"Template response for {kind} carries no template text"
            raise TemplateFetchError(msg)
        logger.debug("Fetched template for {} ({} bytes)", kind, len(envelope.data))
        return envelope.data

    # -- Create ----------------------------------------------------------------

    async def create_resource(self, content: str, kind: ResourceKind) -> CreationResponse:
        response = await self._client.post(
            "/api/create",
            json={"content": content, "kind": str(kind)},
            headers=self._headers(),
        )
        envelope = _parse_envelope(response)
        status_code = envelope.code if envelope.code is not None else response.status_code

        message = envelope.message
        if isinstance(envelope.data, dict) and envelope.data.get("message") is not None:
            message = str(envelope.data["message"])
        elif message is None and response.is_error:
            message = response.reason_phrase or f"HTTP {response.status_code}"

        logger.debug("Create {} answered with status {}", kind, status_code)
        return CreationResponse(status_code=status_code, data=CreationData(message=message))


def _parse_envelope(response: httpx.Response) -> ApiEnvelope:
    """Parse the JSON envelope; a non-JSON body becomes a bare ``message``."""
    try:
        return ApiEnvelope.model_validate(response.json())
    except (ValueError, ValidationError):
        return ApiEnvelope(message=response.text or None)
