"""Unit tests for cascade_ws.client.auth module."""

import pytest
from unittest.mock import patch

from cascade_ws.client.auth import DEFAULT_TIMEOUT, Authenticator, Credentials
from cascade_ws.client.errors import InvalidCredentialsError

WSDL_URL = "https://cms.example.edu/ws/services/AssetOperationService?wsdl"


def _env(**overrides):
    env_vars = {
        'CASCADE_WSDL_URL': WSDL_URL,
        'CASCADE_USERNAME': 'wsuser',
        'CASCADE_PASSWORD': 's3cret',
        'CASCADE_TIMEOUT': None,
    }
    env_vars.update(overrides)
    return lambda key: env_vars.get(key)


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_default_timeout(self):
        creds = Credentials(url=WSDL_URL, username="wsuser", password="s3cret")
        assert creds.timeout == DEFAULT_TIMEOUT

    def test_credentials_are_immutable(self):
        """Credentials fields cannot be modified after creation."""
        creds = Credentials(url=WSDL_URL, username="wsuser", password="s3cret")
        with pytest.raises(AttributeError):
            creds.url = "different-url"


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('cascade_ws.client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_success(self, mock_getenv, mock_load_dotenv):
        """get_credentials returns Credentials when all env vars are set."""
        mock_getenv.side_effect = _env()

        creds = Authenticator().get_credentials()

        assert creds == Credentials(WSDL_URL, "wsuser", "s3cret", DEFAULT_TIMEOUT)

    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_timeout_from_environment(self, mock_getenv, mock_load_dotenv):
        mock_getenv.side_effect = _env(CASCADE_TIMEOUT="90")

        assert Authenticator().get_credentials().timeout == 90

    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_missing_url(self, mock_getenv, mock_load_dotenv):
        """A missing WSDL URL raises with endpoint 'unknown'."""
        mock_getenv.side_effect = _env(CASCADE_WSDL_URL=None)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.user == 'wsuser'
        assert exc_info.value.endpoint == 'unknown'

    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_missing_username(self, mock_getenv, mock_load_dotenv):
        mock_getenv.side_effect = _env(CASCADE_USERNAME=None)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.user == 'unknown'
        assert exc_info.value.endpoint == WSDL_URL

    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_missing_password(self, mock_getenv, mock_load_dotenv):
        mock_getenv.side_effect = _env(CASCADE_PASSWORD="")

        with pytest.raises(InvalidCredentialsError):
            Authenticator().get_credentials()

    @pytest.mark.parametrize("raw_timeout", ["abc", "0", "-5"])
    @patch('cascade_ws.client.auth.load_dotenv')
    @patch('os.getenv')
    def test_bad_timeout(self, mock_getenv, mock_load_dotenv, raw_timeout):
        """A timeout that is not a positive integer is rejected."""
        mock_getenv.side_effect = _env(CASCADE_TIMEOUT=raw_timeout)

        with pytest.raises(InvalidCredentialsError):
            Authenticator().get_credentials()
