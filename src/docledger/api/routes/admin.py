from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request

from ...core.errors import RegistryError
from ...core.registry import RegistryService
from ..errors import to_http_error
from ..parsing import require_caller
from ..serializers import contract_info_to_dict


def mount_admin_api(app: FastAPI, registry: RegistryService) -> None:
    """Mount administrator-only endpoints. All of them require `X-Caller`."""

    @app.post("/api/admin/pause")
    def pause_contract(request: Request) -> dict[str, Any]:
        caller = require_caller(request)
        try:
            registry.pause_contract(caller=caller)
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **contract_info_to_dict(registry.get_contract_info())}

    @app.post("/api/admin/unpause")
    def unpause_contract(request: Request) -> dict[str, Any]:
        caller = require_caller(request)
        try:
            registry.unpause_contract(caller=caller)
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **contract_info_to_dict(registry.get_contract_info())}

    @app.post("/api/admin/transfer-ownership")
    def transfer_ownership(body: dict, request: Request) -> dict[str, Any]:
        caller = require_caller(request)
        try:
            registry.transfer_ownership(body.get("newAdmin"), caller=caller)
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **contract_info_to_dict(registry.get_contract_info())}
