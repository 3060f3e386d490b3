"""Async client for the relayer supported-token list."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.relayer.models import RegistryRecord, RegistrySnapshot, RegistryState
from .base import Provider

logger = logging.getLogger(__name__)


class RegistryPayloadError(ValueError):
    """Raised when the token list does not have the expected shape."""


def parse_registry(payload: Any) -> RegistrySnapshot:
    """Build a snapshot from a ``{"supportedTokens": [...]}`` document.

    Entries that are not objects are skipped; records with missing fields are
    kept so that lookups can still tell "listed but unusable" apart from
    "not listed".
    """
    if not isinstance(payload, dict):
        raise RegistryPayloadError("relayer registry payload must be an object")

    tokens = payload.get("supportedTokens") or []
    if not isinstance(tokens, list):
        raise RegistryPayloadError("supportedTokens must be a list")

    records: List[RegistryRecord] = []
    for entry in tokens:
        if not isinstance(entry, dict):
            logger.debug("Skipping malformed relayer registry entry: %r", entry)
            continue
        records.append(RegistryRecord.from_payload(entry))
    return RegistrySnapshot.of(records)


class RelayerRegistryProvider(Provider):
    """Loads the list of tokens relayers are willing to deliver."""

    name = "relayer_registry"

    def __init__(
        self,
        *,
        url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url if url is not None else settings.relayer_registry_url
        self.timeout_s = settings.request_timeout_seconds
        self._client = client

    async def ready(self) -> bool:
        return bool(self.url)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "disabled", "reason": "Relayer registry URL not configured"}

        state = await self.fetch_registry()
        if state.error:
            return {"status": "error", "reason": state.error}
        return {"status": "healthy", "tokens": len(state.data or ())}

    async def _fetch_payload(self) -> Any:
        if self._client is not None:
            response = await self._client.get(self.url, timeout=self.timeout_s)
            response.raise_for_status()
            return response.json()

        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            return response.json()

    async def fetch_registry(self) -> RegistryState:
        """Fetch and parse the registry; failures come back as an error state."""
        if not await self.ready():
            return RegistryState.failed("Relayer registry URL not configured")

        try:
            payload = await self._fetch_payload()
            snapshot = parse_registry(payload)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to load relayer registry from %s: %s", self.url, exc)
            return RegistryState.failed(f"Failed to load relayer registry: {exc}")

        logger.info("Loaded relayer registry with %d tokens", len(snapshot))
        return RegistryState.loaded(snapshot)


__all__ = ["RegistryPayloadError", "RelayerRegistryProvider", "parse_registry"]
