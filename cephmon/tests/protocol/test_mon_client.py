from __future__ import annotations

import pytest

from cephmon.model import MonDump, OsdFlag, PoolOption
from cephmon.protocol import CommandCatalog, CommandEngine, MonClient
from cephmon.transport.base import Reply, Transport

HANDLE = object()

# (method, args) for every state-changing call
MUTATING_CALLS = [
    ("osd_create", ()),
    ("osd_out", (1,)),
    ("osd_rm", (1,)),
    ("osd_set", (OsdFlag.NOOUT,)),
    ("osd_unset", ("noout",)),
    ("osd_crush_add", (1, 0.5, "node1")),
    ("osd_crush_remove", (1,)),
    ("osd_pool_set", ("rbd", PoolOption.SIZE, 3)),
    ("auth_del", (1,)),
    ("osd_auth_add", (1,)),
    ("mgr_auth_add", ("node1",)),
    ("mgr_fail", ("node1",)),
    ("mgr_enable_module", ("dashboard",)),
    ("mgr_disable_module", ("dashboard",)),
]


class FakeTransport(Transport):
    def __init__(self, reply: Reply):
        self.reply = reply
        self.sent = []

    def mon_command(self, handle, command) -> Reply:
        self.sent.append((handle, command))
        return self.reply


def _client(reply: Reply = Reply()):
    transport = FakeTransport(reply)
    return MonClient(CommandEngine(CommandCatalog.load(), transport)), transport


@pytest.mark.parametrize("method,args", MUTATING_CALLS, ids=[m for m, _ in MUTATING_CALLS])
def test_simulated_mutations_never_reach_transport(method, args):
    client, transport = _client(Reply(primary="9"))

    out = getattr(client, method)(HANDLE, *args, simulate=True)

    assert transport.sent == []
    assert out == (0 if method == "osd_create" else None)


@pytest.mark.parametrize("method,args", MUTATING_CALLS, ids=[m for m, _ in MUTATING_CALLS])
def test_mutations_send_one_command_through_handle(method, args):
    client, transport = _client(Reply(primary="9"))

    getattr(client, method)(HANDLE, *args)

    assert len(transport.sent) == 1
    handle, command = transport.sent[0]
    assert handle is HANDLE
    assert command.prefix == client.engine.catalog.get(method).prefix


def test_every_catalog_command_has_a_method():
    client, _ = _client()
    for name in client.engine.catalog.names():
        assert callable(getattr(client, name))


def test_query_returns_typed_model():
    doc = (
        '{"epoch": 1, "fsid": "f", "modified": "m", "created": "c",'
        ' "mons": [{"rank": 0, "name": "a", "addr": "1.2.3.4:6789/0"}], "quorum": [0]}'
    )
    client, transport = _client(Reply(primary=doc))

    dump = client.mon_dump(HANDLE)

    assert isinstance(dump, MonDump)
    assert dump.mons[0].name == "a"
    assert transport.sent[0][1].to_wire() == {"prefix": "mon dump", "format": "json"}


def test_forwarded_arguments_reach_the_wire():
    client, transport = _client(Reply(primary="key=="))

    assert client.auth_get_key(HANDLE, "client", "admin") == "key=="
    client.osd_set(HANDLE, "full", force=True)

    assert transport.sent[0][1].to_wire() == {"prefix": "auth get-key", "entity": "client.admin"}
    assert transport.sent[1][1]["sure"] == "--yes-i-really-mean-it"


def test_run_dispatches_by_name():
    client, transport = _client(Reply(primary="ceph version 12.0.3"))
    assert client.run(HANDLE, "version") == "ceph version 12.0.3"
    assert transport.sent[0][1].to_wire() == {"prefix": "version"}
