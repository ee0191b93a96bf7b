from __future__ import annotations

from .app import create_app
from .config import Settings, load_settings
from .server import RegistryServer, run

__all__ = ["create_app", "Settings", "load_settings", "RegistryServer", "run"]
