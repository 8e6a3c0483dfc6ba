import pytest
from hiero_sdk_python import AccountId, PrivateKey, TopicCreateTransaction, TransactionId, TransferTransaction

from app import create_app
from config import InitiatorConfig, SignerConfig
from models.transaction import build_transfer

# DER-encoded ed25519 test keys (PKCS#8 prefix + 32 byte seed)
ACCOUNT_KEY = "302e020100300506032b657004220420" + "db484b828e64b2d8f12ce3c0a0e93a0b8cce7af1bb8f39c97732394482538e10"
OPERATOR_KEY = "302e020100300506032b657004220420" + "5f66a51931e8c99089472e0d70516b6272b94dd772b967f8221e1077f966dbda"

EXTERNAL_ACCOUNT = "0.0.46809373"
OPERATOR_ACCOUNT = "0.0.1001"
NODE_ACCOUNT = "0.0.3"


@pytest.fixture
def account_key():
    return PrivateKey.from_string(ACCOUNT_KEY)


@pytest.fixture
def external_account():
    return AccountId.from_string(EXTERNAL_ACCOUNT)


@pytest.fixture
def operator_account():
    return AccountId.from_string(OPERATOR_ACCOUNT)


@pytest.fixture
def node_account():
    return AccountId.from_string(NODE_ACCOUNT)


@pytest.fixture
def unsigned_transfer(external_account, operator_account, node_account):
    return build_transfer(
        payer=external_account,
        recipient=operator_account,
        amount=100000000,
        memo="signed externally",
        node_account_id=node_account,
    )


@pytest.fixture
def unsigned_bytes(unsigned_transfer):
    return unsigned_transfer.to_bytes()


@pytest.fixture
def topic_create_bytes(external_account, node_account):
    tx = (
        TopicCreateTransaction()
        .set_memo("not a transfer")
        .set_transaction_id(TransactionId.generate(external_account))
    )
    tx.node_account_ids = [node_account]
    tx.freeze()
    return tx.to_bytes()


@pytest.fixture
def sign_calls(monkeypatch):
    """Record every key a TransferTransaction gets signed with."""
    calls = []
    original = TransferTransaction.sign

    def spy(self, private_key):
        calls.append(private_key)
        return original(self, private_key)

    monkeypatch.setattr(TransferTransaction, "sign", spy)
    return calls


@pytest.fixture
def signer_config(account_key):
    return SignerConfig(account_key=account_key)


@pytest.fixture
def signer_client(signer_config):
    app = create_app(signer_config)
    app.testing = True
    return app.test_client()


@pytest.fixture
def initiator_config(external_account, operator_account, node_account):
    return InitiatorConfig(
        operator_id=operator_account,
        operator_key=PrivateKey.from_string(OPERATOR_KEY),
        external_api_url="http://localhost:8080/sign",
        external_account_id=external_account,
        node_account_id=node_account,
    )


def transfers_of(tx):
    return [(str(t.account_id), t.amount) for t in tx.hbar_transfers]


def sig_pairs(tx):
    """All signature pairs across the transaction's node bodies."""
    return [pair for sig_map in tx._signature_map.values() for pair in sig_map.sigPair]
