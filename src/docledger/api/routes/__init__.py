from __future__ import annotations

from .admin import mount_admin_api
from .documents import mount_documents_api

__all__ = ["mount_documents_api", "mount_admin_api"]
