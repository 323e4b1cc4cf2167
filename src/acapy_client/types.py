# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""Resource shapes exchanged with the agent admin API.

Records are ``TypedDict`` so that decoded JSON bodies flow through the client
untouched: what the agent returns is exactly what the caller receives.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypedDict


class ErrorKind(str, Enum):
    """Failure domain carried by every :class:`~errors.AgentError`."""

    AGENT = "agent"
    CONNECTION = "connection"
    CREDENTIAL = "credential"
    PROOF = "proof"


class _ConnectionBase(TypedDict):
    connection_id: str
    state: str


class Connection(_ConnectionBase, total=False):
    """Connection record. ``state`` is reported by the agent verbatim."""

    their_label: str
    their_role: str
    invitation_key: str
    invitation_mode: str
    created_at: str
    updated_at: str


# "@type" and "@id" are not valid identifiers, hence the functional form.
ConnectionInvitation = TypedDict(
    "ConnectionInvitation",
    {
        "@type": str,
        "@id": str,
        "label": str,
        "recipientKeys": list[str],
        "serviceEndpoint": str,
    },
)


class InvitationResult(TypedDict):
    connection_id: str
    invitation: ConnectionInvitation
    invitation_url: str


class _SchemaBase(TypedDict):
    id: str
    name: str
    version: str
    attrNames: list[str]


class Schema(_SchemaBase, total=False):
    seqNo: int


class _CredentialDefinitionValueBase(TypedDict):
    primary: dict[str, Any]


class CredentialDefinitionValue(_CredentialDefinitionValueBase, total=False):
    revocation: dict[str, Any]


class CredentialDefinition(TypedDict):
    id: str
    tag: str
    schema_id: str
    type: str
    value: CredentialDefinitionValue


# Only "name" and "value" are sent by most callers; "mime-type" is optional.
CredentialPreviewAttribute = TypedDict(
    "CredentialPreviewAttribute",
    {"name": str, "value": str, "mime-type": str},
    total=False,
)

CredentialPreview = TypedDict(
    "CredentialPreview",
    {"@type": str, "attributes": list[CredentialPreviewAttribute]},
)


class _CredentialOfferBase(TypedDict):
    credential_definition_id: str
    connection_id: str
    credential_preview: CredentialPreview


class CredentialOffer(_CredentialOfferBase, total=False):
    comment: str
    auto_remove: bool
    auto_issue: bool
    trace: bool


class _CredentialExchangeBase(TypedDict):
    credential_exchange_id: str
    connection_id: str
    thread_id: str
    state: str


class CredentialExchange(_CredentialExchangeBase, total=False):
    """Issue-credential exchange record; transitions are owned by the agent."""

    credential_definition_id: str
    schema_id: str
    credential: dict[str, Any]
    created_at: str
    updated_at: str


class ProofRequestBody(TypedDict):
    name: str
    version: str
    requested_attributes: dict[str, Any]
    requested_predicates: dict[str, Any]


class _ProofRequestBase(TypedDict):
    connection_id: str
    proof_request: ProofRequestBody


class ProofRequest(_ProofRequestBase, total=False):
    comment: str
    trace: bool


class _PresentationExchangeBase(TypedDict):
    presentation_exchange_id: str
    connection_id: str
    thread_id: str
    state: str


class PresentationExchange(_PresentationExchangeBase, total=False):
    """Present-proof exchange record; ``verified`` is the string "true"/"false"."""

    verified: str
    presentation: dict[str, Any]
    created_at: str
    updated_at: str


class _WalletDIDBase(TypedDict):
    did: str
    verkey: str
    # "wallet_only" or "public".
    posture: str


class WalletDID(_WalletDIDBase, total=False):
    method: str


class BasicMessage(TypedDict):
    connection_id: str
    content: str
