"""
K-Pop Choreo Formation Editor - Stage Configuration

Stage dimensions and dancer sizing supplied at construction time.
"""

from dataclasses import dataclass

from .constants import DANCER_RADIUS, GRID_SIZE, STAGE_HEIGHT, STAGE_WIDTH


@dataclass(frozen=True)
class StageConfig:
    """Stage size, grid pitch and default dancer radius."""

    width: float = STAGE_WIDTH
    height: float = STAGE_HEIGHT
    grid_size: int = GRID_SIZE
    radius: float = DANCER_RADIUS

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Stage size must be positive, got {self.width}x{self.height}"
            )
        if self.grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")
        if self.radius <= 0:
            raise ValueError(f"Dancer radius must be positive, got {self.radius}")
        if 2 * self.radius > min(self.width, self.height):
            raise ValueError(
                f"Dancer radius {self.radius} does not fit a "
                f"{self.width}x{self.height} stage"
            )

    @classmethod
    def from_args(cls, args) -> "StageConfig":
        """Build a config from parsed command-line options."""
        return cls(
            width=args.width,
            height=args.height,
            grid_size=args.grid,
            radius=args.radius,
        )
