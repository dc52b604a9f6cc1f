# ontaplib/interfaces/__init__.py
from .ip_interface import (
    HomeNode,
    HomePort,
    InterfaceScope,
    IPInterfaceFilter,
    IPInterfaceIP,
    IPInterfaceLocation,
    IPInterfaceRecord,
    IPInterfaceSpec,
    create_ip_interface,
    delete_ip_interface,
    find_ip_interface,
    get_ip_interface,
    get_ip_interfaces,
)

__all__ = [
    "HomeNode",
    "HomePort",
    "InterfaceScope",
    "IPInterfaceFilter",
    "IPInterfaceIP",
    "IPInterfaceLocation",
    "IPInterfaceRecord",
    "IPInterfaceSpec",
    "create_ip_interface",
    "delete_ip_interface",
    "find_ip_interface",
    "get_ip_interface",
    "get_ip_interfaces",
]
