"""FastAPI dependency injection for design services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from carcass.application import DesignCommands


@lru_cache(maxsize=1)
def get_design_commands() -> DesignCommands:
    """Get cached DesignCommands instance."""
    return DesignCommands()


# Type alias for cleaner endpoint signatures
DesignCommandsDep = Annotated[DesignCommands, Depends(get_design_commands)]
