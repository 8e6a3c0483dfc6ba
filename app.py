"""
External signer. Acts as the wallet of an account the initiator does not hold
the key for: it receives frozen transaction bytes, signs them with the
account's private key and returns the signed bytes. It never submits anything
to the network itself.
"""

import sys

from flask import Flask, Response, jsonify, request

from config import SignerConfig, load_signer_config
from logger import get_logger, setup_logger
from models.errors import ConfigError, EnvelopeError
from models.transaction import sign_envelope

log = get_logger(__name__)


def create_app(config: SignerConfig) -> Flask:
    app = Flask(__name__)

    @app.route("/sign", methods=["POST"])
    def sign_transaction():
        body = request.get_data()
        log.info("Sign request from %s (%d bytes)", request.remote_addr, len(body))

        try:
            signed = sign_envelope(body, config.account_key, expected_payer=config.account_id)
        except EnvelopeError as e:
            log.warning("Refusing to sign: %s", e)
            return jsonify({"status": "failed", "reason": str(e)}), 400
        except Exception as e:
            log.exception("Signing failed")
            return jsonify({"status": "failed", "reason": f"Internal error: {e}"}), 500

        return Response(signed, status=200, mimetype="application/octet-stream")

    @app.route("/healthz", methods=["GET"])
    def health():
        return "ok", 200

    return app


def main():
    setup_logger()
    try:
        config = load_signer_config()
    except ConfigError as e:
        log.error("%s", e)
        sys.exit(1)

    app = create_app(config)
    log.info("Signer listening on %s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
