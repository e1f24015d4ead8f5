from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import AuthorizationError, GatewayError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    token: Optional[str] = None
    timeout: float = DEFAULT_API_TIMEOUT


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return f"Backend request failed. Status: {response.status_code}"


class ApiClient:
    """Singleton-like client for the payroll backend.

    Note: One ``requests.Session`` is shared so connections are pooled across
    requests of the Flask app. Pass ``session`` to substitute a fake in tests.
    """

    _instance: Optional["ApiClient"] = None

    def __init__(self, config: ApiConfig, *, session=None):
        self._config = config
        self._session = session if session is not None else requests.Session()

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiClient":
        if cls._instance is None:
            cls._instance = ApiClient(config)
        return cls._instance

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    def request(self, method: str, path: str, *, params: Optional[dict] = None, json: Any = None) -> Any:
        url = self._url(path)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._headers(),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise GatewayError(f"Backend unreachable: {e}") from e

        if response.status_code in (401, 403):
            logger.warning("%s %s refused with %s", method, url, response.status_code)
            raise AuthorizationError(_error_message(response))
        if not 200 <= response.status_code < 300:
            logger.warning("%s %s answered %s", method, url, response.status_code)
            raise GatewayError(_error_message(response), status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError("Backend returned a non-JSON body", status_code=response.status_code) from e

    def get(self, path: str, *, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Any = None) -> Any:
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: Any = None) -> Any:
        return self.request("PUT", path, json=payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
