from __future__ import annotations

import pytest

HASH = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


def test_run_auto_attaches_to_existing_server(monkeypatch: pytest.MonkeyPatch) -> None:
    """If a node is reachable at host/port, docledger.run() should attach by default."""

    import docledger
    from docledger.runtime import RegistryServer
    from docledger.sdk import RegistryClient

    monkeypatch.delenv("DOCLEDGER_URL", raising=False)

    server = docledger.run(host="127.0.0.1", port=0, admin="0xdeployer", new_server=True)
    assert isinstance(server, RegistryServer)

    attached = docledger.run(host=server.host, port=server.port, admin="0xdeployer", connect_timeout_s=2.0)

    # Attached instance should be a client (not a second node).
    assert isinstance(attached, RegistryClient)
    assert attached.base_url.rstrip("/") == f"http://{server.host}:{server.port}"

    # Writes through the client land in the server's registry.
    attached.with_caller("0xuser").store_document(1, "QmTestCID123456789", HASH)
    assert server.registry.get_document(1).owner == "0xuser"
    assert attached.get_contract_info().administrator == "0xdeployer"


def test_run_new_server_forces_start_even_if_env_url_is_set(monkeypatch: pytest.MonkeyPatch) -> None:
    import docledger
    from docledger.runtime import RegistryServer

    s1 = docledger.run(host="127.0.0.1", port=0, new_server=True)
    assert isinstance(s1, RegistryServer)

    monkeypatch.setenv("DOCLEDGER_URL", f"http://{s1.host}:{s1.port}")
    s2 = docledger.run(host="127.0.0.1", port=0, new_server=True)

    assert isinstance(s2, RegistryServer)
    assert (s2.host, s2.port) != (s1.host, s1.port)
    assert s2.registry is not s1.registry


def test_server_handle_builds_clients() -> None:
    import docledger
    from docledger.runtime import RegistryServer

    server = docledger.run(host="127.0.0.1", port=0, admin="0xroot", new_server=True)
    assert isinstance(server, RegistryServer)

    client = server.client()
    assert client.caller == "0xroot"
    assert client.pause_contract().paused is True
    assert server.registry.paused is True
