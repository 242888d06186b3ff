"""Application layer - design state, actions and output assembly."""

from .commands import DesignCommands
from .dtos import DesignOutput, EditResult
from .output import assemble_output
from .state import DesignState, Room

__all__ = [
    "DesignCommands",
    "DesignOutput",
    "DesignState",
    "EditResult",
    "Room",
    "assemble_output",
]
