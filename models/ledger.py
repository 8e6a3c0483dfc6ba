from hiero_sdk_python import Client, Network, ResponseCode
from hiero_sdk_python.exceptions import PrecheckError

from logger import get_logger
from models.errors import LedgerError

log = get_logger(__name__)


def create_client(network: str, operator_id, operator_key) -> Client:
    try:
        client = Client(Network(network))
        client.set_operator(operator_id, operator_key)
    except Exception as e:
        raise LedgerError(f"Failed to initialize {network} client: {e}") from e

    log.info("Client for %s initialized with operator %s", network, operator_id)
    return client


def status_name(status) -> str:
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


def submit_transaction(tx, client) -> str:
    """
    Execute ``tx`` and wait for its receipt.

    Ledger outcomes are returned as the response code name ("SUCCESS",
    "INSUFFICIENT_PAYER_BALANCE", ...) rather than raised. A node rejecting the
    transaction at precheck is reported the same way. Anything else going wrong
    on the way (unreachable nodes, exhausted attempts) raises LedgerError.
    """
    try:
        receipt = tx.execute(client)
    except PrecheckError as e:
        status = status_name(e.status)
        log.warning("Transaction %s rejected at precheck: %s", tx.transaction_id, status)
        return status
    except Exception as e:
        raise LedgerError(f"Transaction {tx.transaction_id} execution failed: {e}") from e

    return status_name(receipt.status)
