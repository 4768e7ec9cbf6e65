"""
Game configuration.

Presets and custom dimensions both resolve to a GameConfig. Custom values
are clamped into the playable range here, so the core only ever sees
valid settings.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .errors import ConfigurationError
from .grid import max_mines


# ============================================================================
# Constants
# ============================================================================

MIN_WIDTH = 9
MAX_WIDTH = 39
MIN_HEIGHT = 9
MAX_HEIGHT = 20
MIN_MINES = 1


class Difficulty(Enum):
    """Difficulty levels selectable from the command line."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
        color_enabled: Whether the player asked for colored output.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10
    color_enabled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within the playable range."""
        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise ConfigurationError(
                f"Width must be between {MIN_WIDTH} and {MAX_WIDTH}"
            )
        if not MIN_HEIGHT <= self.height <= MAX_HEIGHT:
            raise ConfigurationError(
                f"Height must be between {MIN_HEIGHT} and {MAX_HEIGHT}"
            )
        limit = max_mines(self.width, self.height)
        if not MIN_MINES <= self.mine_count <= limit:
            raise ConfigurationError(
                f"Mine count must be between {MIN_MINES} and {limit}"
            )

    @property
    def max_mines(self) -> int:
        """Largest mine count this board size allows."""
        return max_mines(self.width, self.height)

    @classmethod
    def clamped(
        cls,
        width: int,
        height: int,
        mine_count: int,
        color_enabled: bool = True,
    ) -> "GameConfig":
        """
        Build a config, clamping each value into its valid range.

        The mine limit is computed from the clamped dimensions.
        """
        width = _clamp(width, MIN_WIDTH, MAX_WIDTH)
        height = _clamp(height, MIN_HEIGHT, MAX_HEIGHT)
        mine_count = _clamp(mine_count, MIN_MINES, max_mines(width, height))
        return cls(width, height, mine_count, color_enabled)


# Preset difficulty levels
EASY = GameConfig(9, 9, 10)
MEDIUM = GameConfig(16, 16, 40)
HARD = GameConfig(30, 16, 99)

PRESETS: Dict[Difficulty, GameConfig] = {
    Difficulty.EASY: EASY,
    Difficulty.MEDIUM: MEDIUM,
    Difficulty.HARD: HARD,
}


# ============================================================================
# Resolution
# ============================================================================

def resolve_config(
    difficulty: Optional[Difficulty] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    mine_count: Optional[int] = None,
    color_enabled: bool = True,
) -> GameConfig:
    """
    Turn command-line style options into a valid GameConfig.

    Any custom dimension switches to a custom game, with unspecified values
    taken from the easy preset. Without custom values the chosen preset is
    used, defaulting to easy.

    Args:
        difficulty: Requested preset, if any.
        width: Custom column count.
        height: Custom row count.
        mine_count: Custom mine count.
        color_enabled: Whether colored output is wanted.

    Returns:
        Configuration ready for a game session.
    """
    custom = any(value is not None for value in (width, height, mine_count))
    if difficulty is Difficulty.CUSTOM or custom:
        return GameConfig.clamped(
            EASY.width if width is None else width,
            EASY.height if height is None else height,
            EASY.mine_count if mine_count is None else mine_count,
            color_enabled,
        )

    preset = PRESETS[difficulty or Difficulty.EASY]
    return GameConfig(
        preset.width, preset.height, preset.mine_count, color_enabled
    )


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
