# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""acapy-client: async client for the Aries Cloud Agent admin API.

Quickstart
----------
>>> import asyncio
>>> from acapy_client import AgentClient
>>> async def main():
...     async with AgentClient.from_url("http://localhost:8031", api_key="secret") as agent:
...         if await agent.is_ready():
...             return await agent.get_connections()
>>> connections = asyncio.run(main())

Failures surface as :class:`AgentError` subclasses, one per resource family::

    try:
        await agent.get_connection("unknown")
    except AgentConnectionError as exc:
        print(exc.status_code)  # 404
"""

from .client import AgentClient
from .config import ClientConfig
from .errors import AgentConnectionError, AgentError, CredentialError, ProofError
from .types import (
    BasicMessage,
    Connection,
    ConnectionInvitation,
    CredentialDefinition,
    CredentialExchange,
    CredentialOffer,
    CredentialPreview,
    CredentialPreviewAttribute,
    ErrorKind,
    InvitationResult,
    PresentationExchange,
    ProofRequest,
    Schema,
    WalletDID,
)

__all__ = [
    # Primary client
    "AgentClient",
    "ClientConfig",
    # Resource records
    "BasicMessage",
    "Connection",
    "ConnectionInvitation",
    "CredentialDefinition",
    "CredentialExchange",
    "CredentialOffer",
    "CredentialPreview",
    "CredentialPreviewAttribute",
    "InvitationResult",
    "PresentationExchange",
    "ProofRequest",
    "Schema",
    "WalletDID",
    # Exceptions
    "AgentError",
    "AgentConnectionError",
    "CredentialError",
    "ProofError",
    "ErrorKind",
]
