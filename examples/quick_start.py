"""
Quick start against a single running agent.

Reads ACAPY_ADMIN_URL (and optionally ACAPY_API_KEY / ACAPY_TIMEOUT_MS) from
the environment, checks the agent's health, then lists what it knows about:
wallet DIDs, connections, credential and presentation exchanges.

    ACAPY_ADMIN_URL=http://localhost:8031 python examples/quick_start.py
"""

import asyncio
import logging

from acapy_client import AgentClient, AgentError, ClientConfig


async def main() -> None:
    config = ClientConfig.from_env()
    async with AgentClient(config) as agent:
        alive = await agent.is_alive()
        ready = await agent.is_ready()
        print(f"alive={alive} ready={ready}")
        if not ready:
            print("Agent is not ready; is it running?")
            return

        status = await agent.get_status()
        print(f"agent version: {status.get('version', 'unknown')}")

        for did in await agent.get_wallet_dids():
            print(f"DID {did['did']} posture={did['posture']}")

        public = await agent.get_public_did()
        print(f"public DID: {public['did'] if public else 'none'}")

        for conn in await agent.get_connections():
            print(f"connection {conn['connection_id']} {conn['state']} {conn.get('their_label', '')}")

        exchanges = await agent.get_credential_exchanges()
        print(f"{len(exchanges)} credential exchange(s)")

        presentations = await agent.get_presentation_exchanges()
        print(f"{len(presentations)} presentation exchange(s)")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except AgentError as exc:
        raise SystemExit(f"agent call failed: {exc}")
