from __future__ import annotations

from .documents import (
    contract_info_to_dict,
    count_to_dict,
    document_to_dict,
    recorded_event_to_dict,
    status_to_dict,
)

__all__ = [
    "document_to_dict",
    "status_to_dict",
    "count_to_dict",
    "contract_info_to_dict",
    "recorded_event_to_dict",
]
