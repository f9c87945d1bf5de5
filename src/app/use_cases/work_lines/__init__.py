"""Work line use cases"""
from .work_lines import CreateWorkLine, UpdateWorkLine, DeleteWorkLine, ListWorkLines
from .dtos import (
    CreateWorkLineCommandDTO,
    UpdateWorkLineCommandDTO,
    WorkLineResponseDTO,
    WorkLineListResponseDTO,
)

__all__ = [
    "CreateWorkLine",
    "UpdateWorkLine",
    "DeleteWorkLine",
    "ListWorkLines",
    "CreateWorkLineCommandDTO",
    "UpdateWorkLineCommandDTO",
    "WorkLineResponseDTO",
    "WorkLineListResponseDTO",
]
