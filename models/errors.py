class ExternalSigningError(Exception):
    """Base class for every failure raised by the signer or the initiator."""


class ConfigError(ExternalSigningError):
    """Missing .env file, or a missing/invalid configuration value."""

    def __init__(self, message, key=None):
        super().__init__(message)
        self.key = key


class EnvelopeError(ExternalSigningError):
    """The transaction bytes exchanged between the processes are unusable."""


class MalformedEnvelopeError(EnvelopeError):
    pass


class UnsupportedTransactionError(EnvelopeError):
    def __init__(self, type_name):
        super().__init__(f"Wrong transaction type: {type_name}")
        self.type_name = type_name


class PayerMismatchError(EnvelopeError):
    def __init__(self, expected, actual):
        super().__init__(f"Transaction payer {actual} does not match signing account {expected}")
        self.expected = expected
        self.actual = actual


class EnvelopeMismatchError(EnvelopeError):
    def __init__(self, sent, received):
        super().__init__(f"Signed transaction id {received} differs from the one sent ({sent})")
        self.sent = sent
        self.received = received


class SigningServiceError(ExternalSigningError):
    """The external signing service could not be reached or refused the request."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class LedgerError(ExternalSigningError):
    """The ledger network or its SDK failed before a status could be reported."""
