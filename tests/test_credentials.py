"""Tests for credential descriptors and loading."""

import pytest

from customerio_node.credentials import (
    CREDENTIAL_TYPES,
    CUSTOMER_IO_API,
    MANDRILL_API,
    CustomerIoCredentials,
)
from customerio_node.errors import MissingParameterError


class TestCredentialTypes:
    """Tests for the declared credential types."""

    def test_mandrill_single_api_key(self) -> None:
        """mandrillApi declares one string field apiKey."""
        assert MANDRILL_API.name == "mandrillApi"
        assert MANDRILL_API.display_name == "Mandrill API"
        assert MANDRILL_API.property_names() == ["apiKey"]
        assert MANDRILL_API.properties[0].type == "string"
        assert MANDRILL_API.properties[0].default == ""

    def test_mandrill_presence_check(self) -> None:
        """Empty apiKey is rejected; extra keys are dropped."""
        with pytest.raises(MissingParameterError, match="mandrillApi.apiKey"):
            MANDRILL_API.validate_values({"apiKey": ""})
        assert MANDRILL_API.validate_values({"apiKey": "k", "other": 1}) == {"apiKey": "k"}

    def test_registered(self) -> None:
        """Both credential types are registered by name."""
        assert set(CREDENTIAL_TYPES) == {"customerIoApi", "mandrillApi"}
        assert CUSTOMER_IO_API.property_names() == ["trackingApiKey", "trackingSiteId", "appApiKey"]


class TestCustomerIoCredentials:
    """Tests for CustomerIoCredentials loading."""

    def test_load_from_yaml(self, tmp_path, monkeypatch) -> None:
        """Values load from a nested YAML file."""
        for name in ("CUSTOMERIO_TRACKING_API_KEY", "CUSTOMERIO_TRACKING_SITE_ID", "CUSTOMERIO_APP_API_KEY"):
            monkeypatch.delenv(name, raising=False)
        path = tmp_path / "creds.yaml"
        path.write_text(
            "customerIoApi:\n  trackingApiKey: tk\n  trackingSiteId: site\n  appApiKey: ak\n"
        )
        creds = CustomerIoCredentials.load(path)
        assert creds.tracking_api_key == "tk"
        assert creds.tracking_site_id == "site"
        assert creds.app_api_key == "ak"

    def test_env_fallback(self, tmp_path, monkeypatch) -> None:
        """Missing file values fall back to environment variables."""
        monkeypatch.setenv("CUSTOMERIO_APP_API_KEY", "env-ak")
        monkeypatch.setenv("CUSTOMERIO_TRACKING_SITE_ID", "env-site")
        monkeypatch.delenv("CUSTOMERIO_TRACKING_API_KEY", raising=False)
        path = tmp_path / "creds.yaml"
        path.write_text("trackingApiKey: tk\n")
        creds = CustomerIoCredentials.load(path)
        assert creds.app_api_key == "env-ak"
        assert creds.tracking_site_id == "env-site"

    def test_missing_value(self, monkeypatch) -> None:
        """A missing value raises MissingParameterError."""
        for name in ("CUSTOMERIO_TRACKING_API_KEY", "CUSTOMERIO_TRACKING_SITE_ID", "CUSTOMERIO_APP_API_KEY"):
            monkeypatch.delenv(name, raising=False)
        with pytest.raises(MissingParameterError, match="customerIoApi.trackingApiKey"):
            CustomerIoCredentials.load()
