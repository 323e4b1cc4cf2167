"""
Request a proof over an existing connection and verify the presentation.

Assumes the verifier agent (admin API on :8031) already has an active
connection to a prover that holds an "Employee Credential".
"""

import asyncio
import logging

from acapy_client import AgentClient, ProofError

VERIFIER_URL = "http://localhost:8031"


async def main() -> None:
    async with AgentClient.from_url(VERIFIER_URL, api_key="verifier-api-key") as verifier:
        active = [c for c in await verifier.get_connections() if c["state"] == "active"]
        if not active:
            print("No active connections; run credential_issuance.py first.")
            return
        connection_id = active[0]["connection_id"]

        exchange = await verifier.send_proof_request(
            {
                "connection_id": connection_id,
                "comment": "Employment check",
                "proof_request": {
                    "name": "Proof of Employment",
                    "version": "1.0",
                    "requested_attributes": {
                        "0_name_uuid": {"name": "name"},
                        "0_position_uuid": {"name": "position"},
                    },
                    "requested_predicates": {},
                },
            }
        )
        pres_ex_id = exchange["presentation_exchange_id"]
        print(f"proof request {pres_ex_id} is {exchange['state']}")

        # Prover answers asynchronously; poll a few times.
        for _ in range(10):
            record = await verifier.get_presentation_exchange(pres_ex_id)
            if record["state"] == "presentation_received":
                break
            await asyncio.sleep(1)
        else:
            print(f"no presentation yet (state={record['state']})")
            return

        try:
            record = await verifier.verify_presentation(pres_ex_id)
        except ProofError as exc:
            print(f"verification call failed [{exc.status_code}]: {exc.response}")
            return
        print(f"verified={record.get('verified')}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
