"""Test provider implementations."""

import datetime
import os
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock, patch

import pytest
import requests

from moonphase.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT
from moonphase.errors import ConfigurationError, FetchError, PayloadError
from moonphase.phases import NamedPhase
from moonphase.providers import ProviderConfig, USNOProvider, get_provider


def mock_response(payload: Any) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    return response


class TestProviderConfig:
    """Test provider configuration."""

    def test_defaults(self) -> None:
        """Test configuration without environment overrides."""
        with patch.dict(os.environ, {}, clear=True):
            config = ProviderConfig.from_env()
            assert config.base_url == DEFAULT_API_URL
            assert config.timeout == DEFAULT_TIMEOUT

    def test_from_env(self) -> None:
        """Test configuration from environment variables."""
        env = {
            "MOONPHASE_API_URL": "http://mirror.test/",
            "MOONPHASE_TIMEOUT": "2.5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ProviderConfig.from_env()
            assert config.base_url == "http://mirror.test"
            assert config.timeout == 2.5

    def test_explicit_url_wins(self) -> None:
        """Test an explicit base URL takes precedence over the environment."""
        with patch.dict(
            os.environ, {"MOONPHASE_API_URL": "http://mirror.test"}, clear=True
        ):
            config = ProviderConfig.from_env(base_url="http://other.test")
            assert config.base_url == "http://other.test"

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configuration from a .env file in the working directory."""
        (tmp_path / ".env").write_text("MOONPHASE_API_URL=http://dotenv.test\n")
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            config = ProviderConfig.from_env()
            assert config.base_url == "http://dotenv.test"

    def test_invalid_timeout(self) -> None:
        """Test a non-numeric timeout is rejected."""
        with patch.dict(os.environ, {"MOONPHASE_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="MOONPHASE_TIMEOUT"):
                ProviderConfig.from_env()

    def test_get_provider(self) -> None:
        """Test the default provider is the USNO provider."""
        with patch.dict(os.environ, {}, clear=True):
            assert isinstance(get_provider(), USNOProvider)


class TestUSNOProvider:
    """Test USNO provider."""

    @pytest.fixture
    def provider(self) -> USNOProvider:
        """Get a provider against a test URL."""
        return USNOProvider(ProviderConfig(base_url="http://usno.test", timeout=3))

    def test_fetch_events(
        self, provider: USNOProvider, phases_payload: Dict[str, Any]
    ) -> None:
        """Test fetching and decoding phase events."""
        with patch(
            "requests.get", return_value=mock_response(phases_payload)
        ) as mock_get:
            events = provider.fetch_events(datetime.date(2024, 1, 4), 4)

        mock_get.assert_called_once_with(
            "http://usno.test/api/moon/phases/date",
            params={"date": "2024-01-04", "nump": 4},
            timeout=3,
        )
        assert [event.phase for event in events] == [
            NamedPhase.NEW_MOON,
            NamedPhase.FIRST_QUARTER,
            NamedPhase.FULL_MOON,
            NamedPhase.LAST_QUARTER,
        ]
        assert events[0].date == datetime.date(2024, 1, 11)
        assert events[3].date == datetime.date(2024, 2, 2)
        assert events[3].time == "23:18"

    def test_connection_error(self, provider: USNOProvider) -> None:
        """Test network failures are fetch errors."""
        with patch("requests.get", side_effect=requests.exceptions.ConnectionError()):
            with pytest.raises(FetchError, match="Failed to fetch"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_http_error(self, provider: USNOProvider) -> None:
        """Test non-2xx responses are fetch errors."""
        response = MagicMock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "503 Server Error"
        )
        with patch("requests.get", return_value=response):
            with pytest.raises(FetchError, match="503 Server Error"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_invalid_json(self, provider: USNOProvider) -> None:
        """Test undecodable responses are fetch errors."""
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        with patch("requests.get", return_value=response):
            with pytest.raises(FetchError, match="invalid JSON"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_api_error(self, provider: USNOProvider) -> None:
        """Test errors reported in the response body."""
        payload = {"error": "Invalid date", "apiversion": "4.0.1"}
        with patch("requests.get", return_value=mock_response(payload)):
            with pytest.raises(FetchError, match="Invalid date"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_malformed_payload(
        self, provider: USNOProvider, phases_payload: Dict[str, Any]
    ) -> None:
        """Test responses failing validation are payload errors."""
        phases_payload["phasedata"][2]["year"] = "2024"
        with patch("requests.get", return_value=mock_response(phases_payload)):
            with pytest.raises(PayloadError, match="phasedata -> 2 -> year"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_impossible_date(
        self, provider: USNOProvider, phases_payload: Dict[str, Any]
    ) -> None:
        """Test calendar-invalid dates are payload errors."""
        phases_payload["phasedata"][0].update({"day": 30, "month": 2})
        with patch("requests.get", return_value=mock_response(phases_payload)):
            with pytest.raises(PayloadError, match="invalid date"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)

    def test_float_date_field(
        self, provider: USNOProvider, phases_payload: Dict[str, Any]
    ) -> None:
        """Test integral floats that pass the schema are payload errors."""
        phases_payload["phasedata"][0]["day"] = 11.0
        with patch("requests.get", return_value=mock_response(phases_payload)):
            with pytest.raises(PayloadError, match="invalid date"):
                provider.fetch_events(datetime.date(2024, 1, 4), 4)
