from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from ..core.events import EventLog
from ..core.registry import RegistryService
from .parsing import parse_cursor
from .routes import mount_admin_api, mount_documents_api
from .serializers import contract_info_to_dict, recorded_event_to_dict


def create_api_app(registry: RegistryService) -> FastAPI:
    app = FastAPI(title="docledger", version="0.1.0")
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_documents_api(app, registry)
    mount_admin_api(app, registry)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/info")
    def contract_info() -> dict[str, Any]:
        return contract_info_to_dict(registry.get_contract_info())

    @app.get("/api/events")
    def events(request: Request) -> dict[str, Any]:
        """Audit log polling endpoint.

        Query params:
          - after: int (optional; only events with seq > after)
          - name: str (optional; e.g. DocumentStored)
        """

        try:
            after = parse_cursor(request.query_params.get("after"))
        except ValueError as e:
            raise HTTPException(status_code=400, detail={"error": "InvalidQuery", "reason": str(e)})
        name = request.query_params.get("name") or None

        sink = registry.events
        # Custom sinks may not be queryable; only the revision is reported then.
        entries = sink.since(after, name=name) if isinstance(sink, EventLog) else []
        return {
            "globalRevision": registry.global_revision(),
            "events": [recorded_event_to_dict(e) for e in entries],
        }

    return app


__all__ = ["create_api_app"]
