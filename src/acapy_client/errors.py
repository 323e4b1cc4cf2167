# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""Exceptions raised by :class:`~client.AgentClient`.

Every error is an :class:`AgentError`. The three subclasses mark the failure
domain so callers can either catch by type or switch on :attr:`AgentError.kind`::

    try:
        await client.get_connection(conn_id)
    except AgentError as exc:
        if exc.kind is ErrorKind.CONNECTION and exc.status_code == 404:
            ...
"""

from __future__ import annotations

from typing import Any

from .types import ErrorKind


class AgentError(Exception):
    """Raised when a request to the agent admin API fails.

    Parameters
    ----------
    message:
        Human-readable description of the failed operation.
    status_code:
        HTTP status of the rejected response, or ``None`` when the request
        never produced one (connect error, timeout).
    response:
        Decoded response body (or raw text) of the rejected response.
    """

    kind: ErrorKind = ErrorKind.AGENT

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class AgentConnectionError(AgentError):
    """Connection lifecycle operation failed."""

    kind = ErrorKind.CONNECTION


class CredentialError(AgentError):
    """Schema, credential definition, or credential exchange operation failed."""

    kind = ErrorKind.CREDENTIAL


class ProofError(AgentError):
    """Presentation exchange operation failed."""

    kind = ErrorKind.PROOF
