"""
Unit tests for game configuration and preset resolution.
"""
import pytest

from sweeper import (
    ConfigurationError,
    Difficulty,
    EASY,
    GameConfig,
    HARD,
    MEDIUM,
    resolve_config,
)


# ============================================================================
# GameConfig Validation Tests
# ============================================================================

class TestGameConfig:
    """Test configuration validation."""

    def test_valid_config_creation(self, easy_config: GameConfig) -> None:
        """Valid configuration should be created successfully."""
        assert easy_config.width == 9
        assert easy_config.height == 9
        assert easy_config.mine_count == 10
        assert easy_config.color_enabled is True

    def test_narrow_board_raises_error(self) -> None:
        """Width below 9 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Width"):
            GameConfig(8, 9, 10)

    def test_tall_board_raises_error(self) -> None:
        """Height above 20 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Height"):
            GameConfig(9, 21, 10)

    def test_too_many_mines_raises_error(self) -> None:
        """More than half the cells should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Mine count"):
            GameConfig(9, 9, 41)

    def test_no_mines_raises_error(self) -> None:
        """At least one mine is required."""
        with pytest.raises(ConfigurationError, match="Mine count"):
            GameConfig(9, 9, 0)

    def test_max_mines_is_valid(self) -> None:
        """Maximum valid mines should be accepted."""
        config = GameConfig(9, 9, 40)
        assert config.max_mines == 40

    def test_presets(
        self,
        medium_config: GameConfig,
        hard_config: GameConfig,
    ) -> None:
        """Preset constants match the classic difficulty levels."""
        assert EASY == GameConfig(9, 9, 10)
        assert MEDIUM == medium_config
        assert HARD == hard_config


# ============================================================================
# Clamping Tests
# ============================================================================

class TestClamped:
    """Test clamping of custom values."""

    def test_too_many_mines_clamped_to_half(self) -> None:
        """Fifty mines on 9x9 become forty."""
        config = GameConfig.clamped(9, 9, 50)
        assert config.mine_count == 40

    def test_dimensions_clamped(self) -> None:
        """Width and height are pulled into range independently."""
        config = GameConfig.clamped(100, 1, 10)
        assert (config.width, config.height) == (39, 9)

    def test_mine_limit_uses_clamped_dimensions(self) -> None:
        """Mine limit follows the clamped board, not the requested one."""
        config = GameConfig.clamped(100, 100, 5000)
        assert config.mine_count == (39 * 20) // 2

    def test_mines_clamped_to_at_least_one(self) -> None:
        """Non-positive mine counts become one."""
        assert GameConfig.clamped(9, 9, -3).mine_count == 1

    def test_color_flag_passes_through(self) -> None:
        """Color preference is not touched by clamping."""
        assert GameConfig.clamped(9, 9, 10, False).color_enabled is False


# ============================================================================
# Resolution Tests
# ============================================================================

class TestResolveConfig:
    """Test turning command-line options into a config."""

    def test_default_is_easy(self) -> None:
        """No options gives the easy preset."""
        assert resolve_config() == EASY

    @pytest.mark.parametrize(
        "difficulty,expected",
        [
            (Difficulty.EASY, (9, 9, 10)),
            (Difficulty.MEDIUM, (16, 16, 40)),
            (Difficulty.HARD, (30, 16, 99)),
        ],
    )
    def test_presets_resolve(self, difficulty: Difficulty, expected) -> None:
        """Each preset resolves to its board."""
        config = resolve_config(difficulty=difficulty)
        assert (config.width, config.height, config.mine_count) == expected

    def test_custom_values_override_preset(self) -> None:
        """Any custom value starts a custom game."""
        config = resolve_config(difficulty=Difficulty.HARD, width=12)
        assert (config.width, config.height, config.mine_count) == (12, 9, 10)

    def test_custom_mines_clamped(self) -> None:
        """Custom mine count of 50 on 9x9 clamps to 40."""
        config = resolve_config(mine_count=50)
        assert config.mine_count == 40

    def test_custom_difficulty_without_values(self) -> None:
        """Custom with nothing set falls back to easy dimensions."""
        config = resolve_config(difficulty=Difficulty.CUSTOM)
        assert (config.width, config.height, config.mine_count) == (9, 9, 10)

    def test_color_preference_kept_for_presets(self) -> None:
        """Presets keep the requested color setting."""
        config = resolve_config(Difficulty.MEDIUM, color_enabled=False)
        assert config.color_enabled is False
