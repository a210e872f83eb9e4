"""
Resource capability map.

When configured, only listed resources are reachable and each only for
the operations it lists. Without a map every resource name is passed
through and the backend's row-level security is the only access control.
"""

from collections.abc import Iterable, Mapping

from atlas.errors import MethodNotAllowed, ResourceNotAllowed
from atlas.gateway.commands import Command

ALL_OPERATIONS = frozenset({"read", "create", "update", "delete"})


class CapabilityMap:
    """Resource name -> permitted operations."""

    def __init__(self, resources: Mapping[str, Iterable[str]] | None = None):
        self._resources: dict[str, frozenset[str]] | None = None
        if resources is not None:
            self._resources = {name: frozenset(ops) for name, ops in resources.items()}

    @property
    def is_open(self) -> bool:
        return self._resources is None

    def operations_for(self, resource: str) -> frozenset[str]:
        if self._resources is None:
            return ALL_OPERATIONS
        return self._resources.get(resource, frozenset())

    def check(self, command: Command) -> None:
        """Raise if the command's resource or operation is not permitted."""
        if self._resources is None:
            return
        if command.resource not in self._resources:
            raise ResourceNotAllowed(command.resource)
        if command.operation not in self._resources[command.resource]:
            raise MethodNotAllowed()
