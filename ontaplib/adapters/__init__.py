# ontaplib/adapters/__init__.py
from .ip_interface_adapter import IPInterfaceAdapter, spec_from_data

__all__ = [
    "IPInterfaceAdapter",
    "spec_from_data"
]
