"""httpx-backed client for the Customer.io Track API and App API."""

import logging
from typing import Any, Optional

import httpx

from customerio_node.client.base import ApiRequester
from customerio_node.credentials import CustomerIoCredentials
from customerio_node.errors import CustomerIoApiError
from customerio_node.models.selectors import ApiVariant
from customerio_node.models.settings import Settings

logger = logging.getLogger(__name__)


class CustomerIoClient(ApiRequester):
    """
    Sends requests to Customer.io.
    Track API calls authenticate with HTTP Basic (site id + tracking key),
    App API calls with a bearer App API key.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "customerio-node/0.1",
        "Accept": "application/json",
    }

    def __init__(
        self,
        credentials: CustomerIoCredentials,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
    ):
        self._credentials = credentials
        self._settings = settings or Settings()
        self._client = client or httpx.Client(
            timeout=self._settings.timeout,
            headers=self.DEFAULT_HEADERS,
        )

    def _base_url(self, api_variant: ApiVariant) -> str:
        if api_variant == ApiVariant.TRACKING:
            return self._settings.tracking_base_url
        return self._settings.api_base_url

    def _auth_kwargs(self, api_variant: ApiVariant) -> dict[str, Any]:
        if api_variant == ApiVariant.TRACKING:
            return {
                "auth": (self._credentials.tracking_site_id, self._credentials.tracking_api_key),
            }
        return {"headers": {"Authorization": f"Bearer {self._credentials.app_api_key}"}}

    def request(
        self,
        method: str,
        endpoint: str,
        body: dict[str, Any],
        api_variant: ApiVariant,
    ) -> Any:
        """Send the request; empty bodies are omitted, empty responses decode to {}."""
        api_variant = ApiVariant(api_variant)
        url = self._base_url(api_variant) + endpoint
        kwargs = self._auth_kwargs(api_variant)
        if body:
            kwargs["json"] = body

        logger.debug("%s %s (%s)", method, url, api_variant.value)
        response = self._client.request(method, url, **kwargs)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            payload = _decode(response)
            message = _error_message(payload) or response.reason_phrase or str(e)
            logger.warning("Customer.io %s %s failed: %s %s", method, endpoint, response.status_code, message)
            raise CustomerIoApiError(response.status_code, message, payload) from e
        return _decode(response)

    def close(self) -> None:
        self._client.close()


def _decode(response: httpx.Response) -> Any:
    """Decode a JSON body; empty bodies become {} and non-JSON text is returned as-is."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(payload: Any) -> Optional[str]:
    """Pull a human-readable message out of a Customer.io error body."""
    if isinstance(payload, str):
        return payload.strip() or None
    if not isinstance(payload, dict):
        return None
    meta = payload.get("meta")
    if isinstance(meta, dict):
        if meta.get("error"):
            return str(meta["error"])
        errors = meta.get("errors")
        if errors:
            return "; ".join(str(e) for e in errors) if isinstance(errors, list) else str(errors)
    if payload.get("message"):
        return str(payload["message"])
    return None
