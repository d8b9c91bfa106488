"""Tests for error handling utilities."""

import pytest
from lordsboard.dashboard.utils.error_handling import (
    log_and_raise_api_error,
    log_and_raise_validation_error,
    log_and_raise_config_error,
    safe_operation,
    InvalidAddressError,
    DatasetError,
    ConfigError,
    ExternalApiError,
)


def test_log_and_raise_api_error():
    """API errors are chained and logged without the query string"""
    original = ConnectionError("Connection timeout")
    with pytest.raises(ExternalApiError) as exc_info:
        log_and_raise_api_error(
            original,
            endpoint="https://api.coingecko.com/api/v3/simple/price?ids=lords,starknet",
            context="Token price fetch"
        )

    error = exc_info.value
    assert error.endpoint == "https://api.coingecko.com/api/v3/simple/price"
    assert 'Connection timeout' in str(error)
    assert 'ids=lords' not in str(error)
    assert error.__cause__ is original


def test_api_error_is_runtime_error():
    assert issubclass(ExternalApiError, RuntimeError)


def test_log_and_raise_validation_error_with_large_data():
    """Large payloads are only truncated in the log, the message stays intact"""
    with pytest.raises(DatasetError, match="^Data too large$"):
        log_and_raise_validation_error("Data too large", data={'data': 'x' * 1000})


def test_validation_error_names_source():
    with pytest.raises(ValueError, match=r"must be an object \(data/known\.json\)"):
        log_and_raise_validation_error("must be an object", data=[], source="data/known.json")


def test_log_and_raise_config_error():
    """Config error includes the key"""
    with pytest.raises(ConfigError) as exc_info:
        log_and_raise_config_error("Bad pool", config_key="DAYDREAMS_STRK_POOL", config_value=-1)

    assert "DAYDREAMS_STRK_POOL" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_safe_operation_returns_fresh_default():
    """Each contained failure gets its own default instance"""
    @safe_operation("divide", default_factory=list)
    def broken():
        raise ZeroDivisionError("nope")

    first = broken()
    first.append("mutated")

    assert broken() == []


def test_safe_operation_passes_through_results():
    @safe_operation("add", default_factory=list)
    def works(a, b):
        return [a + b]

    assert works(1, 2) == [3]
    assert works.__name__ == "works"


def test_safe_operation_reraises_without_default():
    """safe_operation re-raises when no default is given"""
    @safe_operation("divide")
    def broken():
        raise ZeroDivisionError("nope")

    with pytest.raises(ZeroDivisionError):
        broken()


def test_invalid_address_error_is_value_error():
    assert issubclass(InvalidAddressError, ValueError)
