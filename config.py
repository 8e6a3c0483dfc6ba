"""
Configuration for the signer and the initiator.

Both programs read a ``.env`` file once at startup and build a frozen config
object that is handed to whatever needs it. Values already present in the
process environment take precedence over the file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from hiero_sdk_python import AccountId, PrivateKey

from models.errors import ConfigError

DEFAULT_EXTERNAL_ACCOUNT_ID = "0.0.46809373"
DEFAULT_NODE_ACCOUNT_ID = "0.0.3"
DEFAULT_AMOUNT = 100000000  # tinybar, 1 hbar
DEFAULT_MEMO = "signed externally"


@dataclass(frozen=True)
class SignerConfig:
    account_key: PrivateKey
    account_id: Optional[AccountId] = None
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class InitiatorConfig:
    operator_id: AccountId
    operator_key: PrivateKey
    external_api_url: str
    external_account_id: AccountId
    network: str = "testnet"
    node_account_id: Optional[AccountId] = None
    amount: int = DEFAULT_AMOUNT
    memo: str = DEFAULT_MEMO
    request_timeout: Optional[float] = None


def read_env_file(env_file=".env", environ=None) -> dict:
    path = Path(env_file)
    if not path.is_file():
        raise ConfigError(f"Error loading {env_file} file")

    values = {k: v for k, v in dotenv_values(path).items() if v is not None}
    values.update(os.environ if environ is None else environ)
    return values


def _required(values, key):
    val = (values.get(key) or "").strip()
    if not val:
        raise ConfigError(f"Missing required environment variable: {key}", key=key)
    return val


def _optional(values, key, default=None):
    val = (values.get(key) or "").strip()
    return val if val else default


def _account_id(key, raw):
    try:
        return AccountId.from_string(raw)
    except Exception as e:
        raise ConfigError(f"Invalid account id in {key}: {raw!r}", key=key) from e


def _private_key(key, raw):
    try:
        return PrivateKey.from_string(raw)
    except Exception as e:
        # never echo the key material itself
        raise ConfigError(f"Invalid private key in {key}", key=key) from e


def _number(key, raw, cast):
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}", key=key) from e


def load_signer_config(env_file=".env", environ=None) -> SignerConfig:
    values = read_env_file(env_file, environ)

    account_id = _optional(values, "ACCOUNT_ID")
    return SignerConfig(
        account_key=_private_key("ACCOUNT_KEY", _required(values, "ACCOUNT_KEY")),
        account_id=_account_id("ACCOUNT_ID", account_id) if account_id else None,
        host=_optional(values, "SIGNER_HOST", "0.0.0.0"),
        port=_number("SIGNER_PORT", _optional(values, "SIGNER_PORT", "8080"), int),
    )


def load_initiator_config(env_file=".env", environ=None) -> InitiatorConfig:
    values = read_env_file(env_file, environ)

    amount = _number("TRANSFER_AMOUNT", _optional(values, "TRANSFER_AMOUNT", str(DEFAULT_AMOUNT)), int)
    if amount <= 0:
        raise ConfigError(f"TRANSFER_AMOUNT must be positive, got: {amount}", key="TRANSFER_AMOUNT")

    timeout = _optional(values, "REQUEST_TIMEOUT")
    return InitiatorConfig(
        operator_id=_account_id("OPERATOR_ID", _required(values, "OPERATOR_ID")),
        operator_key=_private_key("OPERATOR_KEY", _required(values, "OPERATOR_KEY")),
        external_api_url=_required(values, "EXTERNAL_API_URL"),
        external_account_id=_account_id(
            "EXTERNAL_ACCOUNT_ID", _optional(values, "EXTERNAL_ACCOUNT_ID", DEFAULT_EXTERNAL_ACCOUNT_ID)
        ),
        network=_optional(values, "NETWORK", "testnet").lower(),
        node_account_id=_account_id(
            "NODE_ACCOUNT_ID", _optional(values, "NODE_ACCOUNT_ID", DEFAULT_NODE_ACCOUNT_ID)
        ),
        amount=amount,
        memo=_optional(values, "TRANSFER_MEMO", DEFAULT_MEMO),
        request_timeout=_number("REQUEST_TIMEOUT", timeout, float) if timeout else None,
    )
