"""Application layer - use cases and orchestration."""

from .commands import GenerateCabinetCommand
from .dtos import CabinetRequest, GenerationOutput

__all__ = [
    "CabinetRequest",
    "GenerateCabinetCommand",
    "GenerationOutput",
]
