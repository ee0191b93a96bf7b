from __future__ import annotations

from .service import RegistryService

__all__ = ["RegistryService"]
