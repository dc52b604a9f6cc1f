# ontaplib/rest_client.py
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import requests

from .config import build_config, config_from_env
from .exceptions import RestError

_LOGGER = logging.getLogger(__name__)


class RestQuery:
    """Ordered query parameters. `set` replaces a key, `add` appends another value."""
    def __init__(self):
        self._params: List[Tuple[str, Any]] = []

    def set(self, key: str, value: Any):
        self._params = [(k, v) for k, v in self._params if k != key]
        self._params.append((key, value))

    def add(self, key: str, value: Any):
        self._params.append((key, value))

    def fields(self, names: List[str]):
        self.set("fields", ",".join(names))

    def set_values(self, values: Mapping[str, Any]):
        for key, value in values.items():
            self.set(key, value)

    def get(self, key: str) -> Optional[Any]:
        for k, v in self._params:
            if k == key:
                return v
        return None

    def keys(self) -> List[str]:
        return [k for k, _ in self._params]

    def to_params(self) -> List[Tuple[str, str]]:
        params = []
        for key, value in self._params:
            if isinstance(value, bool):
                value = "true" if value else "false"
            params.append((key, str(value)))
        return params


class RestResponse:
    """Decoded body of a POST/DELETE call"""
    def __init__(self, body: Optional[Dict] = None):
        body = body or {}
        self.records: List[Dict] = body.get("records") or []
        self.num_records: int = body.get("num_records", len(self.records))
        self.job: Optional[Dict] = body.get("job")
        self.body = body


class RestClient:
    """
    Synchronous JSON client for the management REST API.
    Every call is a single round trip; failures raise RestError.
    """
    def __init__(self, hostname: str, config: Dict = None):
        self.config = build_config(config)
        self.base_url = f"{self.config['scheme']}://{hostname}/{self.config['api_root'].strip('/')}"

        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })
        self.session.verify = self.config["validate_certs"]
        if self.config["username"]:
            self.session.auth = (self.config["username"], self.config["password"] or "")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RestClient":
        config = config_from_env(environ)
        hostname = config.pop("hostname")
        return cls(hostname, config)

    def new_query(self) -> RestQuery:
        return RestQuery()

    def _request(self, method: str, api: str, query: Optional[RestQuery] = None,
                 body: Optional[Dict] = None) -> Tuple[int, Dict]:
        url = f"{self.base_url}/{api.lstrip('/')}"
        params = query.to_params() if query is not None else None
        _LOGGER.debug("%s %s params=%s", method, url, params)

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.config["timeout"]
            )
        except requests.RequestException as e:
            raise RestError(0, f"{method} {url} failed: {e}")

        status_code = response.status_code
        data = {}
        if response.content:
            try:
                data = response.json()
            except ValueError:
                if response.ok:
                    raise RestError(status_code, f"invalid JSON in response: {response.text[:200]}")

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            if not isinstance(error, dict):
                error = {}
            message = error.get("message") or response.text or response.reason
            raise RestError(status_code, message, error.get("code"))

        if not isinstance(data, dict):
            raise RestError(status_code, f"expected a JSON object, got {type(data).__name__}")
        return status_code, data

    def get_nil_or_one_record(self, api: str, query: Optional[RestQuery] = None,
                              body: Optional[Dict] = None) -> Tuple[int, Optional[Dict]]:
        """Return the single matching record, or None when nothing matched"""
        status_code, data = self._request("GET", api, query, body)
        records = data.get("records") or []
        if len(records) > 1:
            raise RestError(status_code, f"received more than one record for GET {api}: {len(records)}")
        return status_code, records[0] if records else None

    def get_zero_or_more_records(self, api: str, query: Optional[RestQuery] = None,
                                 body: Optional[Dict] = None) -> Tuple[int, List[Dict]]:
        status_code, data = self._request("GET", api, query, body)
        return status_code, list(data.get("records") or [])

    def call_create_method(self, api: str, query: Optional[RestQuery] = None,
                           body: Optional[Dict] = None) -> Tuple[int, RestResponse]:
        status_code, data = self._request("POST", api, query, body)
        return status_code, RestResponse(data)

    def call_delete_method(self, api: str, query: Optional[RestQuery] = None,
                           body: Optional[Dict] = None) -> Tuple[int, RestResponse]:
        status_code, data = self._request("DELETE", api, query, body)
        return status_code, RestResponse(data)

    def close(self):
        self.session.close()
