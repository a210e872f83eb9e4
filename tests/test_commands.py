"""
Tests for method -> command dispatch.
"""

import pytest

from atlas.errors import BadRequest, MethodNotAllowed
from atlas.gateway.commands import (
    CreateRecords,
    DeleteRecord,
    GetRecord,
    ListRecords,
    UpdateRecord,
    build_command,
)


class TestReadCommands:

    def test_get_without_id_lists(self):
        command = build_command("GET", "suppliers", query_params=[("risk", "42"), ("limit", "2")])
        assert isinstance(command, ListRecords)
        assert command.operation == "read"
        assert command.query.filters == {"risk": "42"}
        assert command.query.limit == 2

    def test_get_with_id_is_point_lookup(self):
        command = build_command("GET", "suppliers", "s1")
        assert isinstance(command, GetRecord)
        assert command.record_id == "s1"

    def test_method_is_case_insensitive(self):
        assert isinstance(build_command("get", "suppliers"), ListRecords)


class TestCreateCommand:

    def test_object_body(self):
        command = build_command("POST", "suppliers", body={"name": "Acme"})
        assert isinstance(command, CreateRecords)
        assert command.records == [{"name": "Acme"}]
        assert command.batch is False

    def test_array_body_is_batch(self):
        command = build_command("POST", "suppliers", body=[{"name": "A"}, {"name": "B"}])
        assert command.batch is True
        assert len(command.records) == 2

    @pytest.mark.parametrize("body", [None, {}, []])
    def test_missing_body_rejected(self, body):
        with pytest.raises(BadRequest, match="Request body is required"):
            build_command("POST", "suppliers", body=body)

    @pytest.mark.parametrize("body", ["Acme", 42, [1, 2], [{"name": "A"}, "B"]])
    def test_non_object_body_rejected(self, body):
        with pytest.raises(BadRequest):
            build_command("POST", "suppliers", body=body)


class TestUpdateCommand:

    @pytest.mark.parametrize("method", ["PUT", "PATCH"])
    def test_update(self, method):
        command = build_command(method, "suppliers", "s1", body={"risk": 10})
        assert isinstance(command, UpdateRecord)
        assert command.changes == {"risk": 10}

    def test_missing_id_rejected(self):
        with pytest.raises(BadRequest, match="Both ID and request body are required"):
            build_command("PATCH", "suppliers", body={"risk": 10})

    def test_missing_body_rejected(self):
        with pytest.raises(BadRequest, match="Both ID and request body are required"):
            build_command("PATCH", "suppliers", "s1")

    def test_id_in_body_is_ignored(self):
        command = build_command("PATCH", "suppliers", "s1", body={"id": "s9", "risk": 10})
        assert command.changes == {"risk": 10}
        assert command.record_id == "s1"

    def test_only_id_in_body_rejected(self):
        with pytest.raises(BadRequest, match="No fields to update"):
            build_command("PATCH", "suppliers", "s1", body={"id": "s9"})

    def test_array_body_rejected(self):
        with pytest.raises(BadRequest):
            build_command("PUT", "suppliers", "s1", body=[{"risk": 1}])


class TestDeleteCommand:

    def test_delete(self):
        command = build_command("DELETE", "suppliers", "s1")
        assert isinstance(command, DeleteRecord)
        assert command.operation == "delete"

    def test_missing_id_rejected(self):
        with pytest.raises(BadRequest, match="ID is required for deletion"):
            build_command("DELETE", "suppliers")


@pytest.mark.parametrize("method", ["HEAD", "TRACE", "CONNECT", "OPTIONS"])
def test_unsupported_methods(method):
    with pytest.raises(MethodNotAllowed) as exc:
        build_command(method, "suppliers")
    assert exc.value.status_code == 405
