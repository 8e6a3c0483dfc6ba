"""
Initiator. Builds a transfer from an external account to the operator, which
the external account must sign. The frozen transaction is sent to the external
signing service, and the signed transaction it returns is executed with the
operator's client.

This program only knows the operator id and key and the external account id.
It never sees the external account's private key.
"""

import sys

import requests

from config import InitiatorConfig, load_initiator_config
from logger import get_logger, setup_logger
from models.errors import EnvelopeMismatchError, ExternalSigningError, SigningServiceError, UnsupportedTransactionError
from models.ledger import create_client, submit_transaction
from models.transaction import TransactionKind, build_transfer, decode_envelope, encode_envelope

log = get_logger(__name__)


def _failure_reason(response):
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("reason")


def request_signature(url: str, data: bytes, timeout=None) -> bytes:
    print("Sending transaction for signing")
    try:
        response = requests.post(url, data=data, timeout=timeout)
    except requests.RequestException as e:
        raise SigningServiceError(f"Signing service unreachable at {url}: {e}") from e

    if not response.ok:
        reason = _failure_reason(response) or response.reason
        raise SigningServiceError(
            f"Signing service returned {response.status_code}: {reason}",
            status_code=response.status_code,
        )
    return response.content


def run(config: InitiatorConfig, client) -> str:
    tx = build_transfer(
        payer=config.external_account_id,
        recipient=config.operator_id,
        amount=config.amount,
        memo=config.memo,
        node_account_id=config.node_account_id,
    )
    sent_id = str(tx.transaction_id)
    print("Transaction generated and frozen")
    log.info("Transfer %s: %d tinybar %s -> %s", sent_id, config.amount, config.external_account_id, config.operator_id)

    unsigned = encode_envelope(tx)
    print("Transaction converted to bytes")

    signed = request_signature(config.external_api_url, unsigned, timeout=config.request_timeout)
    print("Received signed transaction")

    kind, signed_tx = decode_envelope(signed)
    if kind is not TransactionKind.TRANSFER:
        raise UnsupportedTransactionError(type(signed_tx).__name__)
    if str(signed_tx.transaction_id) != sent_id:
        raise EnvelopeMismatchError(sent_id, signed_tx.transaction_id)

    print("Executing transaction")
    status = submit_transaction(signed_tx, client)
    log.info("Transaction %s finished with %s", sent_id, status)
    return status


def main():
    setup_logger()
    try:
        config = load_initiator_config()
        client = create_client(config.network, config.operator_id, config.operator_key)
        status = run(config, client)
    except (ExternalSigningError, ValueError) as e:
        log.error("%s", e)
        sys.exit(1)

    print("Transaction result:", status)


if __name__ == "__main__":
    main()
