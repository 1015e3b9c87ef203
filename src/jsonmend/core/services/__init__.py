# Services package

from .document_loader import REPAIRED_ADVISORY, DocumentLoader
from .repair_engine import RepairEngine, repair_json

__all__ = [
    "REPAIRED_ADVISORY",
    "DocumentLoader",
    "RepairEngine",
    "repair_json",
]
