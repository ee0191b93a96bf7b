from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ...core.errors import RegistryError
from ...core.registry import RegistryService
from ..errors import to_http_error
from ..parsing import parse_bool, require_caller
from ..serializers import count_to_dict, document_to_dict, status_to_dict


def _probe_id(raw: str) -> int | None:
    # Plain ASCII digits only: int() would also take "1_0", " 1 " and "+1".
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def mount_documents_api(app: FastAPI, registry: RegistryService) -> None:
    """Mount record and owner-index endpoints for `registry`."""

    @app.post("/api/documents")
    def store_document(body: dict, request: Request) -> dict[str, Any]:
        """Create a record owned by the caller.

        Body:
          - id: int (> 0)
          - locator: str (non-empty)
          - integrityHash: str (64 characters)
        """

        caller = require_caller(request)
        try:
            d = registry.store_document(
                body.get("id"),
                body.get("locator"),
                body.get("integrityHash"),
                caller=caller,
            )
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **document_to_dict(d)}

    @app.get("/api/documents/{record_id}")
    def get_document(record_id: int) -> dict[str, Any]:
        try:
            d = registry.get_document(record_id)
        except RegistryError as e:
            raise to_http_error(e)
        return document_to_dict(d)

    @app.patch("/api/documents/{record_id}/metadata")
    def update_document_metadata(record_id: int, body: dict, request: Request) -> dict[str, Any]:
        caller = require_caller(request)
        try:
            d = registry.update_document_metadata(record_id, body.get("integrityHash"), caller=caller)
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **document_to_dict(d)}

    @app.post("/api/documents/{record_id}/deactivate")
    def deactivate_document(record_id: int, request: Request) -> dict[str, Any]:
        caller = require_caller(request)
        try:
            d = registry.deactivate_document(record_id, caller=caller)
        except RegistryError as e:
            raise to_http_error(e)
        return {"ok": True, **document_to_dict(d)}

    @app.get("/api/documents/{record_id}/verify")
    def verify_document(record_id: str, request: Request) -> dict[str, Any]:
        # Never an error: a malformed id or a missing hash simply does not match.
        candidate = request.query_params.get("hash")
        rid = _probe_id(record_id)
        return {"id": record_id if rid is None else rid, "valid": registry.verify_document(rid, candidate)}

    @app.get("/api/documents/{record_id}/status")
    def record_status(record_id: str) -> dict[str, bool]:
        return status_to_dict(registry.record_status(_probe_id(record_id)))

    @app.get("/api/owners/{owner:path}/records")
    def get_user_records(owner: str, request: Request) -> dict[str, Any]:
        active_param = request.query_params.get("active")
        try:
            active_only = parse_bool(active_param, field="active") if active_param is not None else False
        except ValueError as e:
            raise HTTPException(status_code=400, detail={"error": "InvalidQuery", "reason": str(e)})

        if active_only:
            ids = registry.get_user_active_records(owner)
        else:
            ids = registry.get_user_records(owner)
        return {"owner": owner, "activeOnly": active_only, "records": ids}

    @app.get("/api/owners/{owner:path}/count")
    def get_user_record_count(owner: str) -> dict[str, Any]:
        return {"owner": owner, **count_to_dict(registry.get_user_record_count(owner))}
