"""
Connect two agents, exchange a basic message, then tear the connection down.

Inviter admin API on :8031, invitee admin API on :8032. Auto-accept is left
off on the inviter side so the request is accepted explicitly.
"""

import asyncio
import logging

from acapy_client import AgentClient, AgentConnectionError

INVITER_URL = "http://localhost:8031"
INVITEE_URL = "http://localhost:8032"


async def wait_for_state(agent: AgentClient, connection_id: str, state: str) -> None:
    for _ in range(10):
        conn = await agent.get_connection(connection_id)
        if conn["state"] == state:
            return
        await asyncio.sleep(1)
    raise TimeoutError(f"connection {connection_id} never reached {state!r}")


async def main() -> None:
    async with AgentClient.from_url(INVITER_URL) as alice, AgentClient.from_url(INVITEE_URL) as bob:
        invitation = await alice.create_invitation(alias="Bob")
        print(f"invitation url: {invitation['invitation_url']}")

        bob_conn = await bob.receive_invitation(invitation["invitation"], alias="Alice", auto_accept=True)

        alice_conn_id = invitation["connection_id"]
        await wait_for_state(alice, alice_conn_id, "request")
        await alice.accept_connection_request(alice_conn_id)
        await wait_for_state(alice, alice_conn_id, "active")

        await bob.send_basic_message(
            {"connection_id": bob_conn["connection_id"], "content": "Hello Alice!"}
        )
        print("message sent")

        await alice.delete_connection(alice_conn_id)
        try:
            await alice.get_connection(alice_conn_id)
        except AgentConnectionError as exc:
            print(f"connection gone (status {exc.status_code})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
