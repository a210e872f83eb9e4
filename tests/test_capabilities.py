"""
Tests for the resource capability map.
"""

import pytest

from atlas.errors import MethodNotAllowed, ResourceNotAllowed
from atlas.gateway.capabilities import ALL_OPERATIONS, CapabilityMap
from atlas.gateway.commands import build_command


def test_open_map_allows_everything():
    caps = CapabilityMap()
    assert caps.is_open
    assert caps.operations_for("anything") == ALL_OPERATIONS
    caps.check(build_command("DELETE", "secret_table", "1"))


class TestConfiguredMap:

    @pytest.fixture
    def caps(self):
        return CapabilityMap({
            "suppliers": ["read", "create", "update", "delete"],
            "audits": ["read"],
        })

    def test_listed_operation_passes(self, caps):
        caps.check(build_command("GET", "audits"))
        caps.check(build_command("GET", "audits", "a1"))
        caps.check(build_command("POST", "suppliers", body={"name": "Acme"}))

    def test_unknown_resource_rejected(self, caps):
        with pytest.raises(ResourceNotAllowed) as exc:
            caps.check(build_command("GET", "users"))
        assert exc.value.status_code == 400
        assert exc.value.message == "Resource 'users' is not allowed"

    def test_unlisted_operation_rejected(self, caps):
        with pytest.raises(MethodNotAllowed):
            caps.check(build_command("DELETE", "audits", "a1"))

    def test_operations_for_unknown_resource_is_empty(self, caps):
        assert caps.operations_for("users") == frozenset()
        assert not caps.is_open
