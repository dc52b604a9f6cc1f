# ontaplib/interfaces/ip_interface.py
"""
IP interface (LIF) operations against network/ip/interfaces.

Each function is one request/response round trip. Failures are built by the
ErrorHandler and raised as DiagnosticError subclasses; nothing is retried.
There is no update call: an interface is deleted and recreated to change it.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

from ..error_handler import ErrorHandler
from ..exceptions import (
    DecodeError, EmptyResponseError, EncodeError, NotFoundError, RestError, TransportError
)
from ..rest_client import RestClient

_LOGGER = logging.getLogger(__name__)

API = "network/ip/interfaces"
RECORD_FIELDS = ["name", "svm.name", "ip", "scope"]


class InterfaceScope(Enum):
    CLUSTER = "cluster"
    SVM = "svm"


def _require_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _netmask_from_wire(value: Any) -> int:
    # the API reports netmask as a string ("24"); accept ints too
    if isinstance(value, bool):
        raise TypeError("ip.netmask must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise ValueError(f"ip.netmask is not a bit length: {value!r}")


@dataclass
class IPInterfaceIP:
    address: str
    netmask: int

    def to_body(self) -> Dict:
        if not self.address:
            raise ValueError("ip.address is required")
        _require_str(self.address, "ip.address")
        if isinstance(self.netmask, bool) or not isinstance(self.netmask, int):
            raise TypeError(f"ip.netmask must be an integer, got {type(self.netmask).__name__}")
        return {"address": self.address, "netmask": self.netmask}

    @classmethod
    def from_record(cls, data: Any) -> "IPInterfaceIP":
        if not isinstance(data, Mapping):
            raise TypeError(f"ip must be an object, got {type(data).__name__}")
        return cls(
            address=_require_str(data.get("address", ""), "ip.address"),
            netmask=_netmask_from_wire(data.get("netmask")),
        )


@dataclass
class HomeNode:
    name: str

    def to_body(self) -> Dict:
        if not self.name:
            raise ValueError("home node name is required")
        return {"name": _require_str(self.name, "home node name")}


@dataclass
class HomePort:
    name: str
    node: HomeNode

    def to_body(self) -> Dict:
        if not self.name:
            raise ValueError("home port name is required")
        return {"name": _require_str(self.name, "home port name"), "node": self.node.to_body()}


@dataclass
class IPInterfaceLocation:
    """Placement hints; home_node and home_port are independent"""
    home_node: Optional[HomeNode] = None
    home_port: Optional[HomePort] = None

    def is_empty(self) -> bool:
        return self.home_node is None and self.home_port is None

    def to_body(self) -> Dict:
        body = {}
        if self.home_node is not None:
            body["home_node"] = self.home_node.to_body()
        if self.home_port is not None:
            body["home_port"] = self.home_port.to_body()
        return body


@dataclass
class IPInterfaceRecord:
    """An interface as returned by the API"""
    name: str
    scope: str
    svm_name: str
    uuid: str
    ip: Optional[IPInterfaceIP] = None

    @classmethod
    def from_record(cls, data: Any) -> "IPInterfaceRecord":
        if not isinstance(data, Mapping):
            raise TypeError(f"record must be an object, got {type(data).__name__}")

        svm = data.get("svm") or {}
        if not isinstance(svm, Mapping):
            raise TypeError(f"svm must be an object, got {type(svm).__name__}")

        uuid = _require_str(data.get("uuid", ""), "uuid")
        if not uuid:
            raise ValueError("record has no uuid")

        svm_name = _require_str(svm.get("name", ""), "svm.name")
        scope = _require_str(data.get("scope", ""), "scope")
        if not scope:
            scope = InterfaceScope.SVM.value if svm_name else InterfaceScope.CLUSTER.value
        elif scope not in [s.value for s in InterfaceScope]:
            raise ValueError(f"unknown scope {scope!r}")
        # cluster scope has no svm, svm scope always has one
        if (scope == InterfaceScope.SVM.value) != bool(svm_name):
            raise ValueError(f"scope {scope!r} does not match svm name {svm_name!r}")

        ip = data.get("ip")
        return cls(
            name=_require_str(data.get("name", ""), "name"),
            scope=scope,
            svm_name=svm_name,
            uuid=uuid,
            ip=IPInterfaceIP.from_record(ip) if ip is not None else None,
        )

    def to_dict(self) -> Dict:
        data = {"name": self.name, "scope": self.scope, "svm_name": self.svm_name, "uuid": self.uuid}
        if self.ip is not None:
            data["ip"] = {"address": self.ip.address, "netmask": self.ip.netmask}
        return data


@dataclass
class IPInterfaceFilter:
    """Partial record narrowing get_ip_interfaces; empty fields are unconstrained"""
    name: str = ""
    scope: str = ""
    svm_name: str = ""
    uuid: str = ""
    ip_address: str = ""

    def to_query_values(self) -> Dict[str, str]:
        wire_keys = [
            ("name", self.name),
            ("scope", self.scope),
            ("svm.name", self.svm_name),
            ("uuid", self.uuid),
            ("ip.address", self.ip_address),
        ]
        values = {}
        for key, value in wire_keys:
            if value is None:
                continue
            _require_str(value, key)
            if value:
                values[key] = value
        return values


@dataclass
class IPInterfaceSpec:
    """Fields needed to create an interface"""
    name: str
    svm_name: str
    ip: IPInterfaceIP
    location: Optional[IPInterfaceLocation] = None

    def to_body(self) -> Dict:
        if not self.name:
            raise ValueError("name is required")
        if not self.svm_name:
            raise ValueError("svm name is required")
        if self.ip is None:
            raise ValueError("ip is required")

        body = {
            "name": _require_str(self.name, "name"),
            "svm": {"name": _require_str(self.svm_name, "svm name")},
            "ip": self.ip.to_body(),
        }
        if self.location is not None and not self.location.is_empty():
            body["location"] = self.location.to_body()
        return body


def _build_get_query(client: RestClient, name: str, svm_name: str):
    query = client.new_query()
    query.set("name", name)
    if svm_name == "":
        query.set("scope", InterfaceScope.CLUSTER.value)
    else:
        query.set("svm.name", svm_name)
        query.set("scope", InterfaceScope.SVM.value)
    query.fields(RECORD_FIELDS)
    return query


def find_ip_interface(error_handler: ErrorHandler, client: RestClient, name: str,
                      svm_name: str = "") -> Optional[IPInterfaceRecord]:
    """
    Look up one interface by name. An empty svm_name selects the cluster scope.
    Returns None when nothing matches.
    """
    if not name:
        raise error_handler.make_and_report_error(
            "error reading ip_interface info", "ip_interface name is required", EncodeError)

    query = _build_get_query(client, name, svm_name)
    try:
        status_code, response = client.get_nil_or_one_record(API, query, None)
    except RestError as e:
        raise error_handler.make_and_report_error(
            "error reading ip_interface info",
            f"error on GET {API}: {e.message}, statusCode {e.status_code}",
            TransportError, status_code=e.status_code)

    if response is None:
        _LOGGER.debug("No ip_interface named %r (svm %r)", name, svm_name)
        return None

    try:
        record = IPInterfaceRecord.from_record(response)
    except (TypeError, ValueError) as e:
        raise error_handler.make_and_report_error(
            f"failed to decode response from GET {API}",
            f"error: {e}, statusCode {status_code}, response {response!r}",
            DecodeError)

    _LOGGER.debug("Read ip_interface data source: %r", record)
    return record


def get_ip_interface(error_handler: ErrorHandler, client: RestClient, name: str,
                     svm_name: str = "") -> IPInterfaceRecord:
    """Like find_ip_interface, but a missing interface raises NotFoundError"""
    record = find_ip_interface(error_handler, client, name, svm_name)
    if record is None:
        raise error_handler.make_and_report_error(
            "error reading ip_interface info",
            f"no response for GET {API}: name {name!r}, svm {svm_name!r}",
            NotFoundError)
    return record


def get_ip_interfaces(error_handler: ErrorHandler, client: RestClient,
                      filter: Optional[IPInterfaceFilter] = None) -> List[IPInterfaceRecord]:
    """Get all interfaces matching filter, in server order"""
    query = client.new_query()
    query.fields(RECORD_FIELDS)
    if filter is not None:
        try:
            values = filter.to_query_values()
        except (TypeError, ValueError) as e:
            raise error_handler.make_and_report_error(
                "error encoding ip_interface filter info",
                f"error on filter {filter!r}: {e}",
                EncodeError)
        query.set_values(values)

    try:
        status_code, response = client.get_zero_or_more_records(API, query, None)
    except RestError as e:
        raise error_handler.make_and_report_error(
            "error reading ip_interfaces info",
            f"error on GET {API}: {e.message}, statusCode {e.status_code}",
            TransportError, status_code=e.status_code)

    if response is None:
        raise error_handler.make_and_report_error(
            "error reading ip_interfaces info",
            f"no response for GET {API}, statusCode {status_code}",
            EmptyResponseError)

    records = []
    for info in response:
        try:
            records.append(IPInterfaceRecord.from_record(info))
        except (TypeError, ValueError) as e:
            raise error_handler.make_and_report_error(
                f"failed to decode response from GET {API}",
                f"error: {e}, statusCode {status_code}, info {info!r}",
                DecodeError)

    _LOGGER.debug("Read %d ip_interface records: %r", len(records), records)
    return records


def create_ip_interface(error_handler: ErrorHandler, client: RestClient,
                        spec: IPInterfaceSpec) -> IPInterfaceRecord:
    """Create an interface and return the record the server echoes back"""
    try:
        body = spec.to_body()
    except (AttributeError, TypeError, ValueError) as e:
        raise error_handler.make_and_report_error(
            "error encoding ip_interface body",
            f"error on encoding {API} body: {e}, body: {spec!r}",
            EncodeError)

    query = client.new_query()
    query.add("return_records", "true")
    try:
        status_code, response = client.call_create_method(API, query, body)
    except RestError as e:
        raise error_handler.make_and_report_error(
            "error creating ip_interface",
            f"error on POST {API}: {e.message}, statusCode {e.status_code}",
            TransportError, status_code=e.status_code)

    if response is None or not response.records:
        raise error_handler.make_and_report_error(
            "error creating ip_interface",
            f"no records returned for POST {API}, statusCode {status_code}",
            EmptyResponseError)

    try:
        record = IPInterfaceRecord.from_record(response.records[0])
    except (TypeError, ValueError) as e:
        raise error_handler.make_and_report_error(
            "error decoding ip_interface info",
            f"error on decode {API} info: {e}, statusCode {status_code}, response {response.records!r}",
            DecodeError)

    _LOGGER.debug("Created ip_interface: %r", record)
    return record


def delete_ip_interface(error_handler: ErrorHandler, client: RestClient, uuid: str):
    if not isinstance(uuid, str) or not uuid:
        raise error_handler.make_and_report_error(
            "error deleting ip_interface", f"ip_interface uuid is required, got {uuid!r}", EncodeError)

    try:
        client.call_delete_method(f"{API}/{quote(uuid, safe='')}", None, None)
    except RestError as e:
        raise error_handler.make_and_report_error(
            "error deleting ip_interface",
            f"error on DELETE {API}/{uuid}: {e.message}, statusCode {e.status_code}",
            TransportError, status_code=e.status_code)
    _LOGGER.debug("Deleted ip_interface %s", uuid)
