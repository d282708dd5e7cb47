"""Credential descriptors and credential value loading."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from customerio_node.errors import MissingParameterError


class CredentialProperty(BaseModel):
    """One field of a credential form."""

    name: str
    display_name: str
    type: str = "string"
    default: Any = ""


class CredentialType(BaseModel):
    """A named credential the host asks the user to fill in."""

    name: str
    display_name: str
    properties: list[CredentialProperty] = Field(default_factory=list)

    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]

    def validate_values(self, values: dict[str, Any]) -> dict[str, Any]:
        """Presence check only: every declared property must be non-empty."""
        for prop in self.properties:
            value = values.get(prop.name)
            if value is None or value == "":
                raise MissingParameterError(f"{self.name}.{prop.name}")
        return {name: values[name] for name in self.property_names()}


CUSTOMER_IO_API = CredentialType(
    name="customerIoApi",
    display_name="Customer.io API",
    properties=[
        CredentialProperty(name="trackingApiKey", display_name="Tracking API Key"),
        CredentialProperty(name="trackingSiteId", display_name="Tracking Site ID"),
        CredentialProperty(name="appApiKey", display_name="App API Key"),
    ],
)

MANDRILL_API = CredentialType(
    name="mandrillApi",
    display_name="Mandrill API",
    properties=[
        CredentialProperty(name="apiKey", display_name="API Key"),
    ],
)

CREDENTIAL_TYPES: dict[str, CredentialType] = {
    CUSTOMER_IO_API.name: CUSTOMER_IO_API,
    MANDRILL_API.name: MANDRILL_API,
}

_ENV_KEYS = {
    "trackingApiKey": "CUSTOMERIO_TRACKING_API_KEY",
    "trackingSiteId": "CUSTOMERIO_TRACKING_SITE_ID",
    "appApiKey": "CUSTOMERIO_APP_API_KEY",
}


class CustomerIoCredentials(BaseModel):
    """Resolved customerIoApi credential values."""

    tracking_api_key: str
    tracking_site_id: str
    app_api_key: str

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> "CustomerIoCredentials":
        checked = CUSTOMER_IO_API.validate_values(values)
        return cls(
            tracking_api_key=str(checked["trackingApiKey"]),
            tracking_site_id=str(checked["trackingSiteId"]),
            app_api_key=str(checked["appApiKey"]),
        )

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "CustomerIoCredentials":
        """
        Load from a YAML file (keys as in the credential form, optionally
        nested under `customerIoApi`), falling back to CUSTOMERIO_* env vars.
        """
        values: dict[str, Any] = {}
        if path is not None:
            data = yaml.safe_load(Path(path).read_text()) or {}
            values = dict(data.get(CUSTOMER_IO_API.name, data))
        for key, env_name in _ENV_KEYS.items():
            if not values.get(key) and os.environ.get(env_name):
                values[key] = os.environ[env_name]
        return cls.from_values(values)
