"""Repair malformed, JSON-like text into strictly valid JSON."""

from jsonmend.core.common.exceptions import (
    DocumentLoadError,
    EmptyInputError,
    JsonMendError,
    JsonRepairError,
    UnrepairableInputError,
)
from jsonmend.core.config.app_config import RepairConfig
from jsonmend.core.domain.repair_result import LoadedDocument, RepairResult, RepairStatus
from jsonmend.core.services.document_loader import DocumentLoader
from jsonmend.core.services.repair_engine import RepairEngine, repair_json
from jsonmend.core.services.validation import is_valid

__version__ = "0.1.0"

__all__ = [
    "DocumentLoadError",
    "DocumentLoader",
    "EmptyInputError",
    "JsonMendError",
    "JsonRepairError",
    "LoadedDocument",
    "RepairConfig",
    "RepairEngine",
    "RepairResult",
    "RepairStatus",
    "UnrepairableInputError",
    "is_valid",
    "repair_json",
]
