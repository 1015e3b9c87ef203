from __future__ import annotations

from jsonmend.core.common.exceptions import (
    ConfigurationError,
    DocumentLoadError,
    EmptyInputError,
    JsonMendError,
    JsonRepairError,
    UnrepairableInputError,
)


def test_repair_errors_share_a_base() -> None:
    assert issubclass(EmptyInputError, JsonRepairError)
    assert issubclass(UnrepairableInputError, JsonRepairError)
    assert issubclass(JsonRepairError, JsonMendError)
    assert issubclass(ConfigurationError, JsonMendError)
    assert issubclass(DocumentLoadError, JsonMendError)


def test_unrepairable_error_message_includes_detail() -> None:
    error = UnrepairableInputError("Expecting value: line 1 column 1 (char 0)")

    assert error.detail == "Expecting value: line 1 column 1 (char 0)"
    assert str(error) == "Unable to repair JSON: Expecting value: line 1 column 1 (char 0)"


def test_to_dict_includes_extra_attributes() -> None:
    error = UnrepairableInputError("bad", details={"applied_rules": ["balance"]})

    payload = error.to_dict()["error"]

    assert payload["type"] == "UnrepairableInputError"
    assert payload["message"] == "Unable to repair JSON: bad"
    assert payload["details"] == {"applied_rules": ["balance"]}
    assert payload["detail"] == "bad"


def test_default_messages() -> None:
    assert EmptyInputError().message == "Empty input"
    assert ConfigurationError().message == "Configuration error"
    assert EmptyInputError().details == {}
