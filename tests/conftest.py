"""Shared fixtures: an AgentClient wired to an in-process httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from acapy_client import AgentClient

BASE_URL = "http://agent.test:8031"


class FakeAgent:
    """Records every request and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = {}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def reply(self, body=None, status_code=200):
        self.body = body
        self.status_code = status_code
        self.raw = None
        return self

    def reply_raw(self, content: bytes, status_code=200):
        self.raw = content
        self.status_code = status_code
        return self

    def fail_with(self, error: Exception):
        self.error = error
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def call(self, op, **config):
        """Run ``op(agent)`` against this fake and return its result."""

        async def main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(self.handler)) as http:
                agent = AgentClient.from_url(BASE_URL, http_client=http, **config)
                return await op(agent)

        return asyncio.run(main())


@pytest.fixture
def fake():
    return FakeAgent()
