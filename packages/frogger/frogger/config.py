"""Game configuration - stage geometry, timings, and scoring."""
from __future__ import annotations

from dataclasses import dataclass

WATER_ROW = 0


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a session. Defaults reproduce the classic board."""

    # Stage
    stage_width: int = 505
    stage_height: int = 606
    tile_width: int = 101
    tile_height: int = 171
    cols: int = 5
    rows: int = 6

    # Player
    spawn_col: int = 2
    spawn_row: int = 5
    spawn_y: float = 400.0
    player_size: tuple[int, int] = (60, 84)
    jitter_span: int = 5
    jitter_offset: int = -2

    # Enemies
    enemy_size: tuple[int, int] = (90, 68)
    enemy_lanes: int = 3
    enemy_start_x: float = -100.0
    lane_top: float = 60.0
    min_speed: int = 50
    speed_base: int = 65
    initial_enemies: int = 3
    max_enemies: int = 8
    spawn_interval_ms: float = 1500.0

    # Gems (delays and lifespans in whole seconds: span, offset)
    gem_size: tuple[int, int] = (74, 82)
    gem_top: float = 58.0
    gem_rows: int = 3
    gem_delay: tuple[int, int] = (5, 1)
    gem_respawn_delay: tuple[int, int] = (5, 3)
    gem_lifespan: tuple[int, int] = (4, 4)

    # Scoring and pauses
    win_points: int = 10
    gem_points: int = 5
    win_pause_ms: float = 1000.0
    death_pause_ms: float = 750.0

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 1:
            raise ValueError("grid needs at least one column and two rows")
        if not (0 <= self.spawn_col < self.cols and 0 < self.spawn_row < self.rows):
            raise ValueError("spawn tile must lie on the grid, below the water")
        if self.min_speed > self.speed_base:
            raise ValueError("min_speed must not exceed speed_base")
        if not 0 < self.initial_enemies <= self.max_enemies:
            raise ValueError("initial_enemies must be in [1, max_enemies]")
        if self.enemy_lanes <= 0 or self.gem_rows <= 0:
            raise ValueError("enemy_lanes and gem_rows must be positive")
        for name in ("spawn_interval_ms", "win_pause_ms", "death_pause_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def row_step(self) -> float:
        """Vertical distance of one hop."""
        return self.tile_height / 2

    def tile_x(self, col: int) -> float:
        return float(col * self.tile_width)

    def tile_y(self, row: int) -> float:
        return self.spawn_y - (self.spawn_row - row) * self.row_step

    def lane_y(self, lane: int) -> float:
        return self.lane_top + lane * self.row_step

    def gem_tile_rows(self) -> range:
        """Grid rows a gem may occupy (the stone rows)."""
        first = round((self.gem_top - self.tile_y(0)) / self.row_step)
        return range(first, first + self.gem_rows)

    def baseline(self, score: int) -> int:
        """Upper bound of the enemy speed range for a given score."""
        return self.speed_base + score
