from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass

import httpx
import uvicorn

from ..core.clock import Clock
from ..core.registry import RegistryService
from ..sdk.client import RegistryClient
from .app import create_app
from .config import load_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryServer:
    host: str
    port: int
    url: str
    registry: RegistryService

    def client(self, caller: str | None = None) -> RegistryClient:
        """HTTP client for this node acting as `caller` (defaults to the administrator)."""
        return RegistryClient(self.url.rstrip("/"), caller=caller or self.registry.administrator)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a docledger node is reachable."""

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            return bool(r.json().get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str | None = None,
    port: int | None = None,
    admin: str | None = None,
    clock: Clock | None = None,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 5.0,
) -> RegistryServer | RegistryClient:
    """Start a docledger node with a single Python call, or attach to a running one.

    Behavior:
    - If DOCLEDGER_URL is set, we *attach* to that node (client mode, acting as `admin`)
      unless `new_server=True`.
    - Otherwise, if `port != 0` and a node is already reachable at http://{host}:{port},
      we attach to it unless `new_server=True`.
    - Otherwise we deploy a fresh registry (administrator = `admin`), serve it with uvicorn
      on a daemon thread and return a `RegistryServer`.

    Unset arguments fall back to `load_settings()`. `port=0` means "pick a free port".
    """

    settings = load_settings()
    host = host or settings.host
    port = settings.port if port is None else int(port)
    admin = admin or settings.admin
    log_level = log_level or settings.log_level

    env_url = _normalize_base_url(settings.url)

    # 1) Try attaching to an explicitly provided node.
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attached to docledger node at %s", env_url)
            return RegistryClient(env_url, caller=admin)
        logger.warning("DOCLEDGER_URL=%s is not reachable; starting a local node", env_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attached to docledger node at %s", default_url)
            return RegistryClient(default_url, caller=admin)

    # 3) Start a fresh node.
    if port == 0:
        port = _find_free_port(host)

    registry = RegistryService(admin, clock=clock)
    app = create_app(registry)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Wait for uvicorn to bind so a subsequent client call doesn't race with startup.
    deadline = time.monotonic() + startup_timeout_s
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        raise RuntimeError(f"docledger node failed to start on {host}:{port}")

    url = f"http://{host}:{port}/"
    logger.info("docledger node listening on %s (administrator %s)", url, admin)
    return RegistryServer(host=host, port=port, url=url, registry=registry)
