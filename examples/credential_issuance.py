"""
Issue a credential from one agent to another.

Assumes an issuer admin API on :8031 and a holder admin API on :8032, both
with auto-accept/auto-store enabled on the agent side:

1. Issuer creates an invitation, holder receives it.
2. Issuer publishes a schema and a credential definition.
3. Issuer offers a credential over the new connection.
4. Both sides list their credential exchange records.
"""

import asyncio
import logging

from acapy_client import AgentClient, AgentError

ISSUER_URL = "http://localhost:8031"
HOLDER_URL = "http://localhost:8032"


async def main() -> None:
    async with AgentClient.from_url(ISSUER_URL, api_key="issuer-api-key") as issuer, \
            AgentClient.from_url(HOLDER_URL, api_key="holder-api-key") as holder:
        print(f"issuer ready={await issuer.is_ready()} holder ready={await holder.is_ready()}")

        invitation = await issuer.create_invitation(alias="Credential Holder", auto_accept=True)
        connection = await holder.receive_invitation(
            invitation["invitation"], alias="Credential Issuer", auto_accept=True
        )
        print(f"holder connection {connection['connection_id']} is {connection['state']}")

        # Connection handshake completes asynchronously on the agents.
        await asyncio.sleep(2)

        schema = await issuer.create_schema(
            schema_name="Employee Credential",
            schema_version="1.0",
            attributes=["employee_id", "name", "position", "department", "hire_date"],
        )
        cred_def = await issuer.create_credential_definition(
            schema_id=schema["id"], tag="default", support_revocation=False
        )
        print(f"credential definition {cred_def['id']}")

        exchange = await issuer.send_credential_offer(
            {
                "credential_definition_id": cred_def["id"],
                "connection_id": invitation["connection_id"],
                "auto_issue": True,
                "credential_preview": {
                    "@type": "issue-credential/1.0/credential-preview",
                    "attributes": [
                        {"name": "employee_id", "value": "EMP001"},
                        {"name": "name", "value": "Alice Smith"},
                        {"name": "position", "value": "Senior Software Engineer"},
                        {"name": "department", "value": "Engineering"},
                        {"name": "hire_date", "value": "2024-01-15"},
                    ],
                },
            }
        )
        print(f"offer {exchange['credential_exchange_id']} is {exchange['state']}")

        await asyncio.sleep(3)

        print(f"issuer has {len(await issuer.get_credential_exchanges())} exchange(s)")
        print(f"holder has {len(await holder.get_credential_exchanges())} exchange(s)")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except AgentError as exc:
        raise SystemExit(f"{exc.kind.value} error: {exc}")
