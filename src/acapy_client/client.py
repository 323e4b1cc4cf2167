# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""AgentClient: async HTTP client for an Aries Cloud Agent admin API.

Every public coroutine maps onto exactly one admin API route. The client
keeps no state besides its configuration and the underlying
:class:`httpx.AsyncClient`; connection, credential and presentation records
(and their ``state`` strings) are owned by the agent and returned as-is.

Failure handling happens in two steps:

1. :meth:`AgentClient._request` turns every transport error, non-2xx
   response, or undecodable body into a plain :class:`~errors.AgentError`
   carrying the status code and response payload.
2. Each operation re-raises that as the error type of its resource family
   (:class:`~errors.AgentConnectionError`, :class:`~errors.CredentialError`,
   :class:`~errors.ProofError`, or :class:`~errors.AgentError` for wallet,
   messaging and status calls).

:meth:`AgentClient.is_ready` and :meth:`AgentClient.is_alive` are the only
operations that never raise.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .config import DEFAULT_TIMEOUT_MS, ClientConfig
from .errors import AgentConnectionError, AgentError, CredentialError, ProofError
from .types import (
    BasicMessage,
    Connection,
    ConnectionInvitation,
    CredentialDefinition,
    CredentialExchange,
    CredentialOffer,
    InvitationResult,
    PresentationExchange,
    ProofRequest,
    Schema,
    WalletDID,
)

_LOG = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class AgentClient:
    """Async client for the agent admin REST API.

    All methods that call the agent are coroutines and must be awaited.
    Building the client performs no network I/O.

    Parameters
    ----------
    config:
        Base URL, API key, header overrides and timeout.
    http_client:
        Optional pre-configured :class:`httpx.AsyncClient`. Headers and
        timeout from *config* are still sent with every request. A client
        passed in here is not closed by :meth:`aclose`. Useful for injecting
        test transports or custom SSL contexts.

    Examples
    --------
    >>> async with AgentClient.from_url("http://localhost:8031", api_key="secret") as agent:
    ...     invitation = await agent.create_invitation(alias="Bob", auto_accept=True)
    ...     connections = await agent.get_connections()
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._base_url = config.base_url
        self._timeout = httpx.Timeout(config.timeout_seconds)

        # httpx.Headers matches names case-insensitively, so overrides replace defaults.
        headers = httpx.Headers(_DEFAULT_HEADERS)
        headers.update(config.headers)
        if config.api_key:
            headers[API_KEY_HEADER] = config.api_key
        self._headers = headers

        self._owned_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers,
        )

    @classmethod
    def from_url(
        cls,
        base_url: str,
        *,
        api_key: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: int = DEFAULT_TIMEOUT_MS,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AgentClient":
        """Shorthand for ``AgentClient(ClientConfig(...))``."""
        config = ClientConfig(
            base_url=base_url,
            api_key=api_key,
            headers=headers or {},
            timeout=timeout,
        )
        return cls(config, http_client=http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager support
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "AgentClient":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it was created internally."""
        if self._owned_client:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    async def get_connections(self) -> list[Connection]:
        """List all connection records known to the agent."""
        body = await self._call(
            AgentConnectionError, "Failed to get connections", "GET", "/connections"
        )
        return _results(body)

    async def get_connection(self, connection_id: str) -> Connection:
        return await self._call(
            AgentConnectionError,
            f"Failed to get connection: {connection_id}",
            "GET",
            f"/connections/{_segment(connection_id)}",
        )

    async def create_invitation(
        self,
        *,
        alias: str | None = None,
        auto_accept: bool | None = None,
        multi_use: bool | None = None,
        public: bool | None = None,
    ) -> InvitationResult:
        """Create a new connection invitation.

        Options are sent as query parameters; unset options are omitted and
        the agent's defaults apply.

        Returns
        -------
        InvitationResult
            The full response body: ``connection_id``, ``invitation`` and
            ``invitation_url``.
        """
        params = _query(
            alias=alias,
            auto_accept=auto_accept,
            multi_use=multi_use,
            public=public,
        )
        return await self._call(
            AgentConnectionError,
            "Failed to create invitation",
            "POST",
            "/connections/create-invitation",
            params=params,
        )

    async def receive_invitation(
        self,
        invitation: ConnectionInvitation,
        *,
        alias: str | None = None,
        auto_accept: bool | None = None,
    ) -> Connection:
        """Hand an invitation produced by another agent to this agent.

        The invitation is forwarded unmodified as the request body.
        """
        return await self._call(
            AgentConnectionError,
            "Failed to receive invitation",
            "POST",
            "/connections/receive-invitation",
            json_body=invitation,
            params=_query(alias=alias, auto_accept=auto_accept),
        )

    async def accept_connection_request(self, connection_id: str) -> Connection:
        return await self._call(
            AgentConnectionError,
            f"Failed to accept connection request: {connection_id}",
            "POST",
            f"/connections/{_segment(connection_id)}/accept-request",
        )

    async def delete_connection(self, connection_id: str) -> None:
        await self._call(
            AgentConnectionError,
            f"Failed to delete connection: {connection_id}",
            "DELETE",
            f"/connections/{_segment(connection_id)}",
        )

    # ------------------------------------------------------------------
    # Schemas and credential definitions
    # ------------------------------------------------------------------

    async def create_schema(
        self,
        *,
        schema_name: str,
        schema_version: str,
        attributes: list[str],
    ) -> Schema:
        """Publish a schema and return the ``schema`` object from the response."""
        payload = {
            "schema_name": schema_name,
            "schema_version": schema_version,
            "attributes": attributes,
        }
        body = await self._call(
            CredentialError, "Failed to create schema", "POST", "/schemas", json_body=payload
        )
        return _field(body, "schema")

    async def get_schema(self, schema_id: str) -> Schema:
        body = await self._call(
            CredentialError,
            f"Failed to get schema: {schema_id}",
            "GET",
            f"/schemas/{_segment(schema_id)}",
        )
        return _field(body, "schema")

    async def create_credential_definition(
        self,
        *,
        schema_id: str,
        tag: str,
        support_revocation: bool | None = None,
        revocation_registry_size: int | None = None,
    ) -> CredentialDefinition:
        """Create a credential definition for *schema_id*.

        Revocation options are only included in the request body when set.
        """
        payload: dict[str, Any] = {"schema_id": schema_id, "tag": tag}
        if support_revocation is not None:
            payload["support_revocation"] = support_revocation
        if revocation_registry_size is not None:
            payload["revocation_registry_size"] = revocation_registry_size

        body = await self._call(
            CredentialError,
            "Failed to create credential definition",
            "POST",
            "/credential-definitions",
            json_body=payload,
        )
        return _field(body, "credential_definition")

    async def get_credential_definition(self, cred_def_id: str) -> CredentialDefinition:
        body = await self._call(
            CredentialError,
            f"Failed to get credential definition: {cred_def_id}",
            "GET",
            f"/credential-definitions/{_segment(cred_def_id)}",
        )
        return _field(body, "credential_definition")

    # ------------------------------------------------------------------
    # Credential exchange (issue-credential)
    # ------------------------------------------------------------------

    async def send_credential_offer(self, offer: CredentialOffer) -> CredentialExchange:
        """Send a credential offer over an existing connection.

        Returns
        -------
        CredentialExchange
            The new exchange record, typically in state ``offer_sent``.
        """
        return await self._call(
            CredentialError,
            "Failed to send credential offer",
            "POST",
            "/issue-credential/send-offer",
            json_body=offer,
        )

    async def get_credential_exchanges(self) -> list[CredentialExchange]:
        body = await self._call(
            CredentialError,
            "Failed to get credential exchanges",
            "GET",
            "/issue-credential/records",
        )
        return _results(body)

    async def get_credential_exchange(self, cred_ex_id: str) -> CredentialExchange:
        return await self._call(
            CredentialError,
            f"Failed to get credential exchange: {cred_ex_id}",
            "GET",
            f"/issue-credential/records/{_segment(cred_ex_id)}",
        )

    async def issue_credential(self, cred_ex_id: str) -> CredentialExchange:
        return await self._call(
            CredentialError,
            f"Failed to issue credential: {cred_ex_id}",
            "POST",
            f"/issue-credential/records/{_segment(cred_ex_id)}/issue",
        )

    async def store_credential(self, cred_ex_id: str) -> CredentialExchange:
        """Store a received credential in the holder's wallet."""
        return await self._call(
            CredentialError,
            f"Failed to store credential: {cred_ex_id}",
            "POST",
            f"/issue-credential/records/{_segment(cred_ex_id)}/store",
        )

    # ------------------------------------------------------------------
    # Presentation exchange (present-proof)
    # ------------------------------------------------------------------

    async def send_proof_request(self, proof_request: ProofRequest) -> PresentationExchange:
        return await self._call(
            ProofError,
            "Failed to send proof request",
            "POST",
            "/present-proof/send-request",
            json_body=proof_request,
        )

    async def get_presentation_exchanges(self) -> list[PresentationExchange]:
        body = await self._call(
            ProofError,
            "Failed to get presentation exchanges",
            "GET",
            "/present-proof/records",
        )
        return _results(body)

    async def get_presentation_exchange(self, pres_ex_id: str) -> PresentationExchange:
        return await self._call(
            ProofError,
            f"Failed to get presentation exchange: {pres_ex_id}",
            "GET",
            f"/present-proof/records/{_segment(pres_ex_id)}",
        )

    async def verify_presentation(self, pres_ex_id: str) -> PresentationExchange:
        """Ask the agent to verify a received presentation.

        The verdict is reported by the agent in the record's ``verified``
        field; this client does not interpret it.
        """
        return await self._call(
            ProofError,
            f"Failed to verify presentation: {pres_ex_id}",
            "POST",
            f"/present-proof/records/{_segment(pres_ex_id)}/verify-presentation",
        )

    # ------------------------------------------------------------------
    # Wallet
    # ------------------------------------------------------------------

    async def get_wallet_dids(self) -> list[WalletDID]:
        body = await self._call(AgentError, "Failed to get wallet DIDs", "GET", "/wallet/did")
        return _results(body)

    async def create_did(self, method: str | None = None) -> WalletDID:
        """Create a new local DID, optionally for a specific DID method."""
        payload = {} if method is None else {"method": method}
        body = await self._call(
            AgentError, "Failed to create DID", "POST", "/wallet/did/create", json_body=payload
        )
        return _field(body, "result")

    async def get_public_did(self) -> WalletDID | None:
        """Return the wallet's public DID, or ``None`` if none is assigned."""
        body = await self._call(
            AgentError, "Failed to get public DID", "GET", "/wallet/did/public"
        )
        return _field(body, "result")

    # ------------------------------------------------------------------
    # Basic messaging
    # ------------------------------------------------------------------

    async def send_basic_message(self, message: BasicMessage) -> None:
        """Send ``message["content"]`` over ``message["connection_id"]``."""
        await self._call(
            AgentError,
            "Failed to send basic message",
            "POST",
            f"/connections/{_segment(message['connection_id'])}/send-message",
            json_body={"content": message["content"]},
        )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    async def get_status(self) -> dict[str, Any]:
        return await self._call(AgentError, "Failed to get agent status", "GET", "/status")

    async def is_ready(self) -> bool:
        """Readiness probe. Returns ``False`` instead of raising on any failure."""
        return await self._probe("/status/ready", "ready")

    async def is_alive(self) -> bool:
        """Liveness probe. Returns ``False`` instead of raising on any failure."""
        return await self._probe("/status/live", "alive")

    # ------------------------------------------------------------------
    # Private HTTP helpers
    # ------------------------------------------------------------------

    async def _probe(self, path: str, field: str) -> bool:
        try:
            body = await self._request("GET", path)
        except Exception as exc:
            _LOG.debug("probe %s failed: %s", path, exc)
            return False
        return isinstance(body, dict) and body.get(field) is True

    async def _call(
        self,
        error_cls: type[AgentError],
        failure: str,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        try:
            return await self._request(method, path, json_body=json_body, params=params)
        except AgentError as exc:
            _LOG.warning("%s %s failed (status %s): %s", method, path, exc.status_code, exc)
            raise error_cls(failure, exc.status_code, exc.response) from exc

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        kwargs: dict[str, Any] = {"headers": self._headers, "timeout": self._timeout}
        if json_body is not None:
            kwargs["json"] = json_body
        if params:
            kwargs["params"] = params

        _LOG.debug("%s %s", method, path)
        try:
            response = await self._http.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            _LOG.debug("%s %s transport error: %s", method, path, exc)
            raise AgentError(str(exc) or type(exc).__name__) from exc

        _LOG.debug("%s %s -> %d", method, path, response.status_code)
        _raise_for_status(response, method, path)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise AgentError(
                f"invalid JSON in response: {exc}",
                status_code=response.status_code,
                response=response.text,
            ) from exc


# ------------------------------------------------------------------
# Module-level helpers
# ------------------------------------------------------------------


def _segment(value: str) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    # Ledger identifiers (schema / cred def ids, DIDs) are colon-separated.
    return quote(value, safe=":")


def _query(**options: Any) -> dict[str, str]:
    params: dict[str, str] = {}
    for key, value in options.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
    if response.is_success:
        return

    payload: Any = None
    if response.content:
        try:
            payload = response.json()
        except ValueError:
            payload = response.text

    if payload:
        message = payload if isinstance(payload, str) else json.dumps(payload)
    else:
        message = response.reason_phrase or "unknown error"

    _LOG.debug("%s %s rejected with status %d", method, path, response.status_code)
    raise AgentError(message, status_code=response.status_code, response=payload)


def _results(body: Any) -> list[Any]:
    """Return the ``results`` array of a list response, or ``[]`` if absent."""
    if isinstance(body, dict):
        results = body.get("results")
        if results is not None:
            return results
    return []


def _field(body: Any, name: str) -> Any:
    """Unwrap a nested resource; ``None`` when the agent omitted it."""
    if isinstance(body, dict):
        return body.get(name)
    return None
