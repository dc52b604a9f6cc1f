# ontaplib/state_manager.py
import logging
from typing import Dict, List, Optional

from .exceptions import AdapterError, RollbackError

_LOGGER = logging.getLogger(__name__)


class ResourceManager:
    """
    Tracks created resources and enables safe rollback.
    Resources are stored as: {type: [{id, data, adapter}]}
    """
    def __init__(self):
        self._resources: Dict[str, List[Dict]] = {}
        self._creation_order: List[Dict] = []
        self._adapters = {}

    def register_adapter(self, name: str, adapter):
        """Register an adapter (e.g., 'ontap')"""
        self._adapters[name] = adapter

    def _get_adapter(self, adapter_name: str):
        if adapter_name not in self._adapters:
            raise AdapterError(f"No adapter registered as '{adapter_name}'")
        return self._adapters[adapter_name]

    def create(self, resource_type: str, data: Dict, adapter_name: str = "ontap") -> str:
        """Create resource via adapter, store for rollback"""
        adapter = self._get_adapter(adapter_name)
        resource_id = adapter.create(resource_type, data)
        item = {
            "id": resource_id,
            "type": resource_type,
            "data": data,
            "adapter": adapter_name
        }
        self._resources.setdefault(resource_type, []).append(item)
        self._creation_order.append(item)
        _LOGGER.info("Created %s %s via %s", resource_type, resource_id, adapter_name)
        return resource_id

    def read(self, resource_type: str, resource_id: str, adapter_name: str = "ontap") -> Dict:
        adapter = self._get_adapter(adapter_name)
        return adapter.read(resource_type, resource_id)

    def update(self, resource_type: str, resource_id: str, data: Dict, adapter_name: str = "ontap"):
        adapter = self._get_adapter(adapter_name)
        return adapter.update(resource_type, resource_id, data)

    def delete(self, resource_type: str, resource_id: str, adapter_name: str = "ontap"):
        adapter = self._get_adapter(adapter_name)
        result = adapter.delete(resource_type, resource_id)
        self._forget(resource_type, resource_id)
        return result

    def _forget(self, resource_type: str, resource_id: str):
        self._creation_order = [
            item for item in self._creation_order
            if not (item["type"] == resource_type and item["id"] == resource_id)
        ]
        if resource_type in self._resources:
            self._resources[resource_type] = [
                item for item in self._resources[resource_type] if item["id"] != resource_id
            ]
            if not self._resources[resource_type]:
                del self._resources[resource_type]

    def rollback(self):
        """Rollback in reverse creation order (LIFO)"""
        errors = []
        for item in reversed(list(self._creation_order)):
            try:
                self.delete(item["type"], item["id"], item["adapter"])
            except Exception as e:
                errors.append(f"Failed to delete {item['type']} {item['id']}: {e}")

        if errors:
            raise RollbackError("Rollback incomplete:\n" + "\n".join(errors))

        _LOGGER.info("Rollback completed")

    def get_resources(self, resource_type: Optional[str] = None):
        """Get tracked resources, optionally filtered by type"""
        if resource_type:
            return list(self._resources.get(resource_type, []))
        return {k: list(v) for k, v in self._resources.items()}

    def clear_resources(self):
        """Clear all tracked resources without deletion (use with caution)"""
        self._resources.clear()
        self._creation_order.clear()
