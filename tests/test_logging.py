import json
import logging

from wallet_backend.core.logging import JSONFormatter


def test_json_formatter_emits_one_document_per_record():
    record = logging.LogRecord("wallet", logging.INFO, __file__, 1, "Wallet %s is created", ("GB33",), None)
    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "wallet"
    assert payload["message"] == "Wallet GB33 is created"
    assert "exception" not in payload
