# DEPENDENCIES
from utils.validators import ContractValidator


def test_short_text_is_rejected():
    is_valid, validation_type, message = ContractValidator.is_valid_contract("   short lease   ")

    assert is_valid is False
    assert validation_type == "too_short"
    assert message == "The document appears to be too short or empty. Please upload a complete rental contract."


def test_whitespace_does_not_count_towards_length():
    assert ContractValidator.is_valid_contract(" " * 500)[0] is False
    assert ContractValidator.is_valid_contract("x" * 100)[0] is True


def test_custom_minimum_length():
    assert ContractValidator.is_valid_contract("Rent: $900", min_length = 5)[0] is True


def test_too_long_text_is_rejected():
    is_valid, validation_type, _ = ContractValidator.is_valid_contract("a" * (ContractValidator.MAX_CONTRACT_LENGTH + 1))

    assert is_valid is False
    assert validation_type == "too_long"


def test_validation_report_for_lease(sample_lease):
    report = ContractValidator.get_validation_report(sample_lease)

    assert report["is_valid"] is True
    assert report["scores"]["total"] >= 30
    assert "landlord" in report["found_indicators"]
    assert "security deposit" in report["found_indicators"]


def test_validation_report_for_unrelated_text():
    report = ContractValidator.get_validation_report("The quick brown fox jumps over the lazy dog. " * 5)

    assert report["is_valid"] is True
    assert report["scores"]["total"] < 30
    assert 0 <= report["scores"]["total"] <= 100


def test_zero_minimum_length_is_honoured():
    assert ContractValidator.is_valid_contract("short", min_length = 0) == (True, "ok", "Contract text accepted for analysis")
