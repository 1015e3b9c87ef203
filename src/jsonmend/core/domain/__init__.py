# Domain package

from .repair_result import LoadedDocument, RepairResult, RepairStatus

__all__ = [
    "LoadedDocument",
    "RepairResult",
    "RepairStatus",
]
