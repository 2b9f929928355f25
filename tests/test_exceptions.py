"""
Test the custom exceptions and assert functions
"""

# Third Party
import pytest

# Local
from tlsbuilder import exceptions


def test_assert_config_pass():
    """Make sure that no exception is throw by assert_config when it
    passes
    """
    exceptions.assert_config(True)


def test_assert_config_fail():
    """Make sure the right exception is thrown by assert_config when it
    fails
    """
    exception_msg = "error mesage"
    with pytest.raises(exceptions.ConfigurationError, match=exception_msg):
        exceptions.assert_config(False, exception_msg)


def test_assert_config_carries_key_and_value():
    """Make sure the key and value given to assert_config end up on the
    raised error
    """
    with pytest.raises(exceptions.ConfigurationError) as config_error:
        exceptions.assert_config(False, "bad", key="ssl.protocol", value=1)
    assert config_error.value.key == "ssl.protocol"
    assert config_error.value.value == 1


def test_configuration_error_default_message():
    """Make sure a ConfigurationError built from only a key and value names
    both in its message
    """
    err = exceptions.ConfigurationError(key="ssl.client.authentication", value="x")
    assert "ssl.client.authentication" in str(err)
    assert "x" in str(err)


def test_config_is_fatal():
    """Make sure the config error is considered fatal error"""
    with pytest.raises(exceptions.ConfigurationError) as config_error:
        exceptions.assert_config(False)
    assert isinstance(config_error.value, exceptions.TlsBuilderFatalError)
    assert isinstance(config_error.value, exceptions.TlsBuilderError)
    assert config_error.value.is_fatal_error
