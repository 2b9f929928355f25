"""
Tests for resolving the client authentication mode
"""

# Standard
from unittest import mock

# Third Party
import pytest

# Local
from tlsbuilder import client_auth, constants
from tlsbuilder.client_auth import ClientAuthMode, resolve_client_auth
from tlsbuilder.exceptions import ConfigurationError
from tlsbuilder.test_helpers.helpers import make_ssl_config

## Decision table ##############################################################


def test_neither_set_uses_default(sink):
    """With nothing configured the mode is NONE and nothing is emitted"""
    assert resolve_client_auth(make_ssl_config(), sink) is ClientAuthMode.NONE
    assert not sink.warnings


@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("required", ClientAuthMode.REQUIRED),
        ("requested", ClientAuthMode.REQUESTED),
        ("none", ClientAuthMode.NONE),
    ],
)
def test_enum_only(sink, value, expected):
    """The enumerated value is used directly without any warning"""
    cfg = make_ssl_config(client_authentication=value)
    assert resolve_client_auth(cfg, sink) is expected
    assert not sink.warnings


@pytest.mark.parametrize(
    ["flag", "expected"],
    [(True, ClientAuthMode.REQUIRED), (False, ClientAuthMode.NONE)],
)
def test_deprecated_only(sink, flag, expected):
    """The deprecated flag maps to REQUIRED/NONE and warns to replace it"""
    cfg = make_ssl_config(client_auth=flag)
    assert resolve_client_auth(cfg, sink) is expected
    assert len(sink.warnings) == 1
    assert "should be replaced with" in sink.messages[0]
    assert constants.SSL_CLIENT_AUTH_CONFIG in sink.messages[0]
    assert constants.SSL_CLIENT_AUTHENTICATION_CONFIG in sink.messages[0]


@pytest.mark.parametrize("flag", [True, False])
@pytest.mark.parametrize(
    ["value", "expected"],
    [
        ("required", ClientAuthMode.REQUIRED),
        ("requested", ClientAuthMode.REQUESTED),
        ("none", ClientAuthMode.NONE),
    ],
)
def test_both_set_enum_wins(sink, flag, value, expected):
    """When both are set the enumerated value wins regardless of the flag"""
    cfg = make_ssl_config(client_auth=flag, client_authentication=value)
    assert resolve_client_auth(cfg, sink) is expected
    assert len(sink.warnings) == 1
    assert "will be used instead" in sink.messages[0]


def test_deprecated_flag_set_to_default_still_counts(sink):
    """Supplying the flag with its default value is still an explicit use of
    the deprecated key
    """
    cfg = make_ssl_config(client_auth="false")
    assert resolve_client_auth(cfg, sink) is ClientAuthMode.NONE
    assert len(sink.warnings) == 1


## Parsing #####################################################################


@pytest.mark.parametrize("value", ["REQUIRED", " Required ", "required ", "Requested"])
def test_enum_exact_match_only(sink, value):
    """Tokens must match exactly, case and surrounding whitespace included"""
    cfg = make_ssl_config(client_authentication=value)
    with pytest.raises(ConfigurationError) as config_error:
        resolve_client_auth(cfg, sink)
    assert config_error.value.value == value


@pytest.mark.parametrize("value", ["optional", "", "true", "need"])
def test_unknown_enum_raises(sink, value):
    """An unrecognized value is never defaulted"""
    cfg = make_ssl_config(client_authentication=value)
    with pytest.raises(ConfigurationError) as config_error:
        resolve_client_auth(cfg, sink)
    assert config_error.value.key == constants.SSL_CLIENT_AUTHENTICATION_CONFIG
    assert config_error.value.value == value
    assert config_error.value.is_fatal_error


def test_unknown_enum_raises_even_with_deprecated_flag(sink):
    """The enumerated value wins over the flag, so a bad one still raises"""
    cfg = make_ssl_config(client_auth=True, client_authentication="always")
    with pytest.raises(ConfigurationError):
        resolve_client_auth(cfg, sink)
    assert len(sink.warnings) == 1


def test_from_config_value_non_string():
    """A non-string token is reported rather than crashing"""
    with pytest.raises(ConfigurationError):
        ClientAuthMode.from_config_value(None)


## Diagnostics #################################################################


def test_default_sink_is_log_channel():
    """Without an injected sink the module log channel gets the warning"""
    cfg = make_ssl_config(client_auth=True)
    with mock.patch.object(client_auth, "log") as log_mock:
        assert resolve_client_auth(cfg) is ClientAuthMode.REQUIRED
    log_mock.warning.assert_called_once()


def test_mock_sink():
    """Any object with a warning method can be used as the sink"""
    sink = mock.Mock()
    resolve_client_auth(make_ssl_config(client_auth=False), sink)
    sink.warning.assert_called_once_with(
        mock.ANY,
        constants.SSL_CLIENT_AUTH_CONFIG,
        constants.SSL_CLIENT_AUTHENTICATION_CONFIG,
    )


def test_falsy_sink_still_used():
    """A sink that evaluates falsy is still the one that gets the warning"""

    class CountingSink:
        def __init__(self):
            self.calls = []

        def __len__(self):
            return len(self.calls)

        def warning(self, msg, *args):
            self.calls.append(msg % args)

    sink = CountingSink()
    assert not sink
    with mock.patch.object(client_auth, "log") as log_mock:
        resolve_client_auth(make_ssl_config(client_auth=True), sink)
    assert len(sink.calls) == 1
    log_mock.warning.assert_not_called()
