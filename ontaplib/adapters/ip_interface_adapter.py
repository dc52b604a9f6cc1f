# ontaplib/adapters/ip_interface_adapter.py
from typing import Dict, Optional

from ..error_handler import ErrorHandler
from ..exceptions import EncodeError, ResourceNotFoundError
from ..interfaces.ip_interface import (
    HomeNode,
    HomePort,
    IPInterfaceFilter,
    IPInterfaceIP,
    IPInterfaceLocation,
    IPInterfaceSpec,
    create_ip_interface,
    delete_ip_interface,
    get_ip_interfaces,
)
from ..rest_client import RestClient


def spec_from_data(data: Dict) -> IPInterfaceSpec:
    """
    Build an IPInterfaceSpec from plain config data:
    {name, svm, ip: {address, netmask}, home_node?, home_port?: {name, node}}
    """
    ip = data.get("ip") or {}
    if not isinstance(ip, dict):
        raise TypeError(f"ip must be a mapping, got {type(ip).__name__}")

    location = None
    if data.get("home_node") or data.get("home_port"):
        location = IPInterfaceLocation()
        if data.get("home_node"):
            location.home_node = HomeNode(data["home_node"])
        if data.get("home_port"):
            port = data["home_port"]
            if not isinstance(port, dict):
                raise TypeError(f"home_port must be a mapping, got {type(port).__name__}")
            location.home_port = HomePort(port.get("name", ""), HomeNode(port.get("node", "")))

    return IPInterfaceSpec(
        name=data.get("name", ""),
        svm_name=data.get("svm", ""),
        ip=IPInterfaceIP(ip.get("address", ""), ip.get("netmask")),
        location=location
    )


class IPInterfaceAdapter:
    """
    ResourceManager adapter for IP interfaces.
    Resource ids are interface uuids. Interfaces cannot be updated.
    """
    RESOURCE_TYPE = "ip_interface"

    def __init__(self, client: RestClient, error_handler: Optional[ErrorHandler] = None):
        self.client = client
        self.error_handler = error_handler or ErrorHandler()

    def _check_type(self, resource_type: str):
        if resource_type != self.RESOURCE_TYPE:
            raise ValueError(f"Unsupported resource type: {resource_type}")

    def create(self, resource_type: str, data: Dict) -> str:
        self._check_type(resource_type)
        self.error_handler.clear()
        try:
            spec = spec_from_data(data)
        except (AttributeError, TypeError) as e:
            raise self.error_handler.make_and_report_error(
                "error encoding ip_interface body", f"error on data {data!r}: {e}", EncodeError)
        record = create_ip_interface(self.error_handler, self.client, spec)
        return record.uuid

    def read(self, resource_type: str, resource_id: str) -> Dict:
        self._check_type(resource_type)
        self.error_handler.clear()
        records = get_ip_interfaces(self.error_handler, self.client, IPInterfaceFilter(uuid=resource_id))
        if not records:
            raise ResourceNotFoundError(f"ip_interface {resource_id} not found")
        return records[0].to_dict()

    def update(self, *args, **kwargs):
        raise NotImplementedError("IP interfaces cannot be modified; delete and recreate instead")

    def delete(self, resource_type: str, resource_id: str) -> bool:
        self._check_type(resource_type)
        self.error_handler.clear()
        delete_ip_interface(self.error_handler, self.client, resource_id)
        return True
