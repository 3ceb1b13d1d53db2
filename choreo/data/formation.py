"""
K-Pop Choreo Formation Editor - Formation Data

Dancer snapshots and the formation table that owns their positions.
"""

from dataclasses import dataclass, replace

from choreo.core.config import StageConfig
from choreo.core.constants import DEFAULT_DANCERS, STAGE_HEIGHT, STAGE_WIDTH
from choreo.core.errors import EntityNotFound


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Dancer:
    """A circular dancer on the stage. Positions are the circle center."""

    id: str
    x: float
    y: float
    radius: float
    name: str = ""
    color: tuple[int, int, int] = (128, 128, 128)

    def moved_to(self, x: float, y: float) -> "Dancer":
        """Return a copy of this dancer centered at (x, y)."""
        return replace(self, x=x, y=y)

    def contains(self, point: tuple[float, float]) -> bool:
        """Check if a stage point lies inside the dancer's circle."""
        dx = point[0] - self.x
        dy = point[1] - self.y
        return dx * dx + dy * dy <= self.radius * self.radius


class Formation:
    """Stage-sized table of dancers keyed by id.

    Every stored dancer satisfies radius <= x <= width - radius and
    radius <= y <= height - radius. Insertion order is draw order.
    """

    def __init__(self, width: float, height: float):
        """
        Initialize an empty formation.

        Args:
            width: Stage width in stage units
            height: Stage height in stage units
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Stage size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._dancers: dict[str, Dancer] = {}

    @classmethod
    def default(cls, config: StageConfig | None = None) -> "Formation":
        """
        Create the starting five-dancer formation.

        The default positions are laid out on a STAGE_WIDTH x STAGE_HEIGHT
        stage; on other stage sizes they are scaled to match and then
        clamped so every dancer starts fully on stage.
        """
        config = config or StageConfig()
        formation = cls(config.width, config.height)
        scale_x = config.width / STAGE_WIDTH
        scale_y = config.height / STAGE_HEIGHT
        r = config.radius
        for dancer_id, name, x, y, color in DEFAULT_DANCERS:
            x = clamp(x * scale_x, r, config.width - r)
            y = clamp(y * scale_y, r, config.height - r)
            formation.add(Dancer(dancer_id, x, y, r, name=name, color=color))
        return formation

    def __len__(self) -> int:
        return len(self._dancers)

    def __contains__(self, dancer_id: str) -> bool:
        return dancer_id in self._dancers

    def dancers(self) -> list[Dancer]:
        """All dancers in draw order (bottom to top)."""
        return list(self._dancers.values())

    def get(self, dancer_id: str) -> Dancer:
        """
        Look up a dancer.

        Raises:
            EntityNotFound: If no dancer has this id
        """
        try:
            return self._dancers[dancer_id]
        except KeyError:
            raise EntityNotFound(dancer_id) from None

    def add(self, dancer: Dancer):
        """
        Add a dancer to the formation.

        Raises:
            ValueError: If the id is taken or the dancer does not fit on stage
        """
        if dancer.id in self._dancers:
            raise ValueError(f"Duplicate dancer id: {dancer.id}")
        min_x, max_x, min_y, max_y = self.bounds_for(dancer)
        if min_x > max_x or min_y > max_y:
            raise ValueError(
                f"Dancer {dancer.id} (radius {dancer.radius}) does not fit the stage"
            )
        if not (min_x <= dancer.x <= max_x and min_y <= dancer.y <= max_y):
            raise ValueError(
                f"Dancer {dancer.id} at ({dancer.x}, {dancer.y}) is outside the stage"
            )
        self._dancers[dancer.id] = dancer

    def bounds_for(self, dancer: Dancer) -> tuple[float, float, float, float]:
        """Allowed center range as (min_x, max_x, min_y, max_y)."""
        r = dancer.radius
        return (r, self.width - r, r, self.height - r)

    def move_dancer(self, dancer_id: str, x: float, y: float) -> Dancer:
        """
        Move a dancer, clamping its center so the circle stays on stage.

        Returns:
            The stored dancer snapshot
        """
        dancer = self.get(dancer_id)
        min_x, max_x, min_y, max_y = self.bounds_for(dancer)
        moved = dancer.moved_to(clamp(x, min_x, max_x), clamp(y, min_y, max_y))
        self._dancers[dancer_id] = moved
        return moved

    def hit_test(self, stage_point: tuple[float, float]) -> str | None:
        """Id of the topmost dancer under a stage point, or None."""
        for dancer in reversed(self._dancers.values()):
            if dancer.contains(stage_point):
                return dancer.id
        return None

    def resize_stage(self, width: float, height: float) -> list[str]:
        """
        Change the stage size and pull dancers back inside.

        Returns:
            Ids of dancers whose position changed
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Stage size must be positive, got {width}x{height}")
        for dancer in self._dancers.values():
            if 2 * dancer.radius > min(width, height):
                raise ValueError(
                    f"Dancer {dancer.id} (radius {dancer.radius}) does not fit "
                    f"a {width}x{height} stage"
                )
        self.width = width
        self.height = height
        return [dancer_id for dancer_id in list(self._dancers) if self._reclamp(dancer_id)]

    def set_radius(self, dancer_id: str, radius: float) -> bool:
        """
        Change a dancer's radius and pull it back inside the stage.

        Returns:
            True if the dancer's position changed
        """
        dancer = self.get(dancer_id)
        self.check_radius(radius)
        self._dancers[dancer_id] = replace(dancer, radius=radius)
        return self._reclamp(dancer_id)

    def adjust_radius(self, delta: float) -> list[str]:
        """
        Grow or shrink every dancer by delta.

        All new radii are checked before any dancer changes, so a rejected
        adjustment leaves the formation untouched.

        Returns:
            Ids of dancers whose position changed
        """
        radii = {dancer.id: dancer.radius + delta for dancer in self._dancers.values()}
        for radius in radii.values():
            self.check_radius(radius)
        return [dancer_id for dancer_id, radius in radii.items() if self.set_radius(dancer_id, radius)]

    def check_radius(self, radius: float):
        """Raise ValueError if a dancer of this radius cannot fit the stage."""
        if radius <= 0 or 2 * radius > min(self.width, self.height):
            raise ValueError(f"Radius {radius} does not fit the stage")

    def _reclamp(self, dancer_id: str) -> bool:
        before = self._dancers[dancer_id]
        after = self.move_dancer(dancer_id, before.x, before.y)
        return (after.x, after.y) != (before.x, before.y)
