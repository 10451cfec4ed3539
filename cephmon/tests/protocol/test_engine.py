from __future__ import annotations

import json
import logging

import pytest

from cephmon.core.errors import InvalidArgument
from cephmon.model import CrushTree
from cephmon.protocol.core import CommandCatalog
from cephmon.protocol.engine import CommandEngine
from cephmon.protocol.errors import CommandFailed, MalformedResponse, NoResponse
from cephmon.transport.base import Reply, Transport
from cephmon.transport.errors import TransportCommandError, TransportIOError

HANDLE = object()


class FakeTransport(Transport):
    """Records every command; answers with a staged Reply or raises."""
    def __init__(self, reply: Reply | None = None):
        self.reply = reply or Reply()
        self.raise_on_send: Exception | None = None
        self.sent: list = []

    def mon_command(self, handle, command) -> Reply:
        assert handle is HANDLE
        self.sent.append(command)
        if self.raise_on_send:
            raise self.raise_on_send
        return self.reply


class FakeSink:
    def __init__(self, fail: bool = False):
        self.events = []
        self.fail = fail

    def on_command(self, event) -> None:
        if self.fail:
            raise RuntimeError("sink down")
        self.events.append(event)

    def close(self) -> None:
        pass


@pytest.fixture(scope="module")
def catalog() -> CommandCatalog:
    return CommandCatalog.load()


def _engine(catalog, reply=None, sink=None):
    transport = FakeTransport(reply)
    return CommandEngine(catalog, transport, cmd_sink=sink), transport


def test_int_reply_parses(catalog):
    eng, _ = _engine(catalog, Reply(primary="42"))
    assert eng.execute(HANDLE, "osd_pool_quota_get", pool="rbd") == 42


def test_int_reply_garbage_is_malformed(catalog):
    eng, _ = _engine(catalog, Reply(primary="max_objects: N/A"))
    with pytest.raises(MalformedResponse) as ei:
        eng.execute(HANDLE, "osd_pool_quota_get", pool="rbd")
    assert ei.value.operation == "osd pool get-quota"
    assert ei.value.raw == "max_objects: N/A"


def test_empty_primary_is_malformed_not_missing(catalog):
    eng, _ = _engine(catalog, Reply(primary=""))
    with pytest.raises(MalformedResponse, match="empty response"):
        eng.execute(HANDLE, "version")


def test_no_data_is_no_response(catalog):
    eng, _ = _engine(catalog, Reply())
    with pytest.raises(NoResponse) as ei:
        eng.execute(HANDLE, "mon_status")
    assert str(ei.value) == "No response from cluster for mon_status"
    assert ei.value.code == "no_response"


def test_diagnostic_only_is_failed_verbatim(catalog):
    eng, _ = _engine(catalog, Reply(diagnostic="permission denied"))
    with pytest.raises(CommandFailed) as ei:
        eng.execute(HANDLE, "auth_get_key", client_type="client", ident="admin")
    assert str(ei.value) == "permission denied"
    assert ei.value.operation == "auth get-key"


def test_only_first_line_is_parsed(catalog):
    eng, _ = _engine(catalog, Reply(primary='{"nodes": [], "stray": []}\nnot json at all'))
    tree = eng.execute(HANDLE, "osd_tree")
    assert isinstance(tree, CrushTree)
    assert tree.nodes == []


def test_raw_reply_returns_first_line(catalog):
    eng, _ = _engine(catalog, Reply(primary="size: 3\n", diagnostic="ignored"))
    assert eng.execute(HANDLE, "osd_pool_get", pool="rbd", choice="size") == "size: 3"


def test_json_shape_mismatch_is_malformed(catalog):
    eng, _ = _engine(catalog, Reply(primary='{"overall_status": "HEALTH_OK"}'))
    with pytest.raises(MalformedResponse) as ei:
        eng.execute(HANDLE, "cluster_health")
    assert "missing required field" in ei.value.reason


def test_json_reply_decodes_list_and_map(catalog):
    eng, _ = _engine(catalog, Reply(primary='["status", "dashboard"]'))
    assert eng.execute(HANDLE, "mgr_list_modules") == ["status", "dashboard"]

    eng, _ = _engine(catalog, Reply(primary='{"ceph version 12.0.3": 2}'))
    assert eng.execute(HANDLE, "mgr_versions") == {"ceph version 12.0.3": 2}


def test_mutating_without_response_ignores_reply(catalog):
    for reply in (Reply(), Reply(diagnostic="marked out osd.3. "), Reply(primary="")):
        eng, transport = _engine(catalog, reply)
        assert eng.execute(HANDLE, "osd_out", osd_id=3) is None
        assert transport.sent[0].to_wire() == {"prefix": "osd out", "ids": ["3"]}


def test_osd_create_returns_allocated_id(catalog):
    eng, _ = _engine(catalog, Reply(primary="5"))
    assert eng.execute(HANDLE, "osd_create") == 5


def test_simulate_skips_transport(catalog):
    eng, transport = _engine(catalog, Reply(primary="5"))
    assert eng.execute(HANDLE, "osd_create", simulate=True) == 0
    assert eng.execute(HANDLE, "osd_set", simulate=True, key="noout") is None
    assert transport.sent == []


def test_simulate_still_validates(catalog):
    eng, transport = _engine(catalog)
    with pytest.raises(InvalidArgument):
        eng.execute(HANDLE, "osd_out", simulate=True, osd_id=-3)
    assert transport.sent == []


def test_simulate_on_query_is_rejected(catalog):
    eng, transport = _engine(catalog)
    with pytest.raises(InvalidArgument):
        eng.execute(HANDLE, "cluster_health", simulate=True)
    assert transport.sent == []


@pytest.mark.parametrize(
    "exc",
    [TransportIOError("handle not connected"), TransportCommandError("osd out", -1, "EPERM")],
)
def test_transport_errors_propagate(catalog, exc):
    sink = FakeSink()
    eng, transport = _engine(catalog, sink=sink)
    transport.raise_on_send = exc

    with pytest.raises(type(exc)) as ei:
        eng.execute(HANDLE, "osd_out", osd_id=1)
    assert ei.value is exc
    assert [e.kind for e in sink.events] == ["exception"]


def test_sink_sees_each_outcome(catalog):
    sink = FakeSink()
    eng, transport = _engine(catalog, Reply(primary="7"), sink=sink)

    eng.execute(HANDLE, "osd_pool_quota_get", pool="rbd")
    eng.execute(HANDLE, "osd_create", simulate=True)
    transport.reply = Reply()
    with pytest.raises(NoResponse):
        eng.execute(HANDLE, "version")

    assert [e.kind for e in sink.events] == ["ok", "simulated", "no_response"]
    first = sink.events[0]
    assert first.name == "osd_pool_quota_get"
    assert first.payload["command"] == {"prefix": "osd pool get-quota", "pool": "rbd"}
    assert len({e.request_id for e in sink.events}) == 3
    assert "error" in sink.events[2].payload


def test_sink_failure_does_not_break_command(catalog, caplog):
    eng, _ = _engine(catalog, Reply(primary="3"), sink=FakeSink(fail=True))

    with caplog.at_level(logging.ERROR):
        assert eng.execute(HANDLE, "osd_pool_quota_get", pool="rbd") == 3
    assert "CMD_SINK_ERROR" in caplog.text


def test_build_does_not_send(catalog):
    eng, transport = _engine(catalog)
    cmd = eng.build("osd_set", key="noout")
    assert json.loads(cmd.to_json()) == {"prefix": "osd set", "key": "noout"}
    assert transport.sent == []


def test_unicode_separators_inside_first_line_are_kept(catalog):
    eng, _ = _engine(catalog, Reply(primary='["a\u2028b", "c"]\n'))
    assert eng.execute(HANDLE, "mgr_list_modules") == ["a\u2028b", "c"]

    eng, _ = _engine(catalog, Reply(primary="key\x1cpart\n"))
    assert eng.execute(HANDLE, "auth_get_key", client_type="client", ident="admin") == "key\x1cpart"


def test_int_reply_above_u64_is_malformed(catalog):
    eng, _ = _engine(catalog, Reply(primary="18446744073709551616"))
    with pytest.raises(MalformedResponse, match="out of range"):
        eng.execute(HANDLE, "osd_pool_quota_get", pool="rbd")


def test_count_map_rejects_negative_counts(catalog):
    eng, _ = _engine(catalog, Reply(primary='{"ceph version 12.0.3": -1}'))
    with pytest.raises(MalformedResponse):
        eng.execute(HANDLE, "mgr_versions")
