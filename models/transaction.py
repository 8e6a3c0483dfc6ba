from enum import Enum

from hiero_sdk_python import Transaction, TransactionId, TransferTransaction

from logger import get_logger
from models.errors import MalformedEnvelopeError, PayerMismatchError, UnsupportedTransactionError

log = get_logger(__name__)


class TransactionKind(Enum):
    """Transaction kinds the signer is willing to sign."""

    TRANSFER = "transfer"


# closed set: kind -> SDK class
SUPPORTED_KINDS = {
    TransactionKind.TRANSFER: TransferTransaction,
}


def classify(tx) -> TransactionKind:
    for kind, tx_class in SUPPORTED_KINDS.items():
        if isinstance(tx, tx_class):
            return kind
    raise UnsupportedTransactionError(type(tx).__name__)


def decode_envelope(data: bytes):
    """
    Turn the bytes received over HTTP back into an SDK transaction.

    Returns a ``(kind, tx)`` pair. An empty body is rejected up front so a
    default transaction is never produced and signed.
    """
    if not data:
        raise MalformedEnvelopeError("Empty transaction body")

    try:
        tx = Transaction.from_bytes(data)
    except Exception as e:
        raise MalformedEnvelopeError(f"Could not decode transaction bytes: {e}") from e

    return classify(tx), tx


def encode_envelope(tx) -> bytes:
    return tx.to_bytes()


def payer_of(tx):
    if tx.transaction_id is None:
        return None
    return tx.transaction_id.account_id


def build_transfer(payer, recipient, amount: int, memo: str, node_account_id):
    """
    Build and freeze an hbar transfer of ``amount`` tinybar from ``payer`` to
    ``recipient``. The transaction id is generated from the payer, so the payer
    covers the fees and must sign before submission.
    """
    if amount <= 0:
        raise ValueError(f"amount must be positive, got: {amount}")
    if str(payer) == str(recipient):
        raise ValueError("payer and recipient must be different accounts")

    tx = TransferTransaction()
    tx.set_transaction_id(TransactionId.generate(payer))
    tx.add_hbar_transfer(payer, -amount)
    tx.add_hbar_transfer(recipient, amount)
    tx.set_transaction_memo(memo)

    # bind to a single node so the frozen body is deterministic
    tx.node_account_ids = [node_account_id]
    tx.freeze()
    return tx


def sign_envelope(data: bytes, private_key, expected_payer=None) -> bytes:
    kind, tx = decode_envelope(data)
    log.info("Transaction received (%s, id %s)", kind.value, tx.transaction_id)

    if expected_payer is not None:
        payer = payer_of(tx)
        if str(payer) != str(expected_payer):
            raise PayerMismatchError(expected_payer, payer)

    tx.sign(private_key)
    log.info("Transaction signed")
    return encode_envelope(tx)
