from wallet_backend.core import message_keys as keys
from wallet_backend.core.messages import MessageSource


def test_formats_positional_arguments():
    messages = MessageSource("en")
    text = messages.get(keys.INFO_TRANSACTION_CREATED, "GB33", "DE89", "10.00")
    assert text == "Transaction from GB33 to DE89 for amount 10.00 is created"


def test_template_without_arguments_is_returned_verbatim():
    assert MessageSource().get(keys.ERROR_NO_RECORDS) == "No records found"


def test_unknown_locale_falls_back_to_english():
    messages = MessageSource("xx")
    assert messages.locale == "en"
    assert messages.get(keys.ERROR_WALLET_NOT_FOUND) == "Requested wallet is not found"


def test_missing_translation_falls_back_to_default_catalog():
    catalogs = {"en": {"greeting": "hello {0}"}, "de": {}}
    assert MessageSource("de", catalogs).get("greeting", "Bob") == "hello Bob"


def test_unknown_key_returns_key():
    assert MessageSource().get("no.such.key") == "no.such.key"


def test_every_key_is_translated_in_every_locale():
    declared = {value for name, value in vars(keys).items() if name.isupper()}
    for locale in ("en", "zh"):
        source = MessageSource(locale)
        for key in declared:
            assert source.get(key) != key, (locale, key)
