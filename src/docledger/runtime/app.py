from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import RegistryService
from .config import load_settings


def create_app(registry: RegistryService | None = None) -> FastAPI:
    """Create a node app. Without an explicit registry, a fresh one is deployed by `DOCLEDGER_ADMIN`."""

    if registry is None:
        registry = RegistryService(load_settings().admin)
    return create_api_app(registry)
