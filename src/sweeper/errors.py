"""
Exceptions raised by the Minesweeper core.

Invalid game actions are not errors (they return False); these cover
configurations the core cannot play and grids it cannot build.
"""


class SweeperError(Exception):
    """Base class for all Minesweeper errors."""


class ConfigurationError(SweeperError, ValueError):
    """Board dimensions or mine count outside the playable range."""


class GridAllocationError(SweeperError):
    """The grid arrays could not be allocated. Fatal for the session."""
