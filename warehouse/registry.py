"""
Warehouse Registry
==================
Process-wide name -> Warehouse mapping. At most one instance exists per
name; the first get_warehouse() call for a name creates it and every
later call returns that same object.

Get-or-create runs under a single module-level lock, so two threads
asking for the same unseen name cannot both create an instance.
Entries live until reset_registry(), which exists for test isolation.
"""

import logging
import threading
from typing import Dict, List, Optional

from warehouse import config
from warehouse.warehouse import Clock, Warehouse, _create

logger = logging.getLogger(__name__)

_registry: Dict[str, Warehouse] = {}
_registry_lock = threading.Lock()


def get_warehouse(name: Optional[str] = None, *, clock: Optional[Clock] = None) -> Warehouse:
    """
    Get or create the warehouse registered under `name`.

    With no name, config.DEFAULT_WAREHOUSE_NAME is used. `clock` only
    takes effect when this call creates the warehouse.
    """
    if name is None:
        name = config.DEFAULT_WAREHOUSE_NAME
    with _registry_lock:
        warehouse = _registry.get(name)
        if warehouse is None:
            warehouse = _create(name, clock=clock)
            _registry[name] = warehouse
        return warehouse


def warehouse_names() -> List[str]:
    """Registered names, in creation order."""
    with _registry_lock:
        return list(_registry)


def reset_registry() -> None:
    """Forget every registered warehouse (for testing)."""
    with _registry_lock:
        count = len(_registry)
        _registry.clear()
    logger.info("Warehouse registry reset (%d dropped)", count)
