"""
K-Pop Choreo Formation Editor - View State

Viewport transform between stage units and window pixels, and the
coordinate mapper that inverts it for pointer input.
"""

import math

from pygame import Rect

from choreo.core.errors import TransformUnavailable


class ViewportTransform:
    """Affine map from stage coordinates to device (window pixel) coordinates.

    device_x = a * x + c * y + e
    device_y = b * x + d * y + f
    """

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        e: float = 0.0,
        f: float = 0.0,
    ):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.e = e
        self.f = f

    @classmethod
    def fit(cls, canvas_rect: Rect, stage_width: float, stage_height: float) -> "ViewportTransform":
        """
        Letterbox the stage into a canvas rectangle.

        The stage is scaled uniformly to the largest size that fits and
        centered; spare space on one axis becomes empty bars.

        Args:
            canvas_rect: Canvas drawing area (screen coordinates)
            stage_width: Stage width in stage units
            stage_height: Stage height in stage units

        Returns:
            Transform for the current canvas. A zero-sized canvas produces a
            degenerate (non-invertible) transform.
        """
        scale = max(0.0, min(canvas_rect.width / stage_width, canvas_rect.height / stage_height))
        offset_x = canvas_rect.x + (canvas_rect.width - stage_width * scale) / 2
        offset_y = canvas_rect.y + (canvas_rect.height - stage_height * scale) / 2
        return cls(scale, 0.0, 0.0, scale, offset_x, offset_y)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def scale(self) -> float:
        """Average linear scale factor (stage unit -> pixels)."""
        return math.sqrt(abs(self.determinant))

    def is_invertible(self) -> bool:
        """Check that the transform is finite and has a non-zero determinant."""
        coefficients = (self.a, self.b, self.c, self.d, self.e, self.f)
        if not all(math.isfinite(v) for v in coefficients):
            return False
        det = self.determinant
        return math.isfinite(det) and det != 0.0

    def __eq__(self, other) -> bool:
        if not isinstance(other, ViewportTransform):
            return NotImplemented
        return (self.a, self.b, self.c, self.d, self.e, self.f) == (
            other.a, other.b, other.c, other.d, other.e, other.f
        )

    def __repr__(self) -> str:
        return (
            f"ViewportTransform(a={self.a}, b={self.b}, c={self.c}, "
            f"d={self.d}, e={self.e}, f={self.f})"
        )


class CoordinateMapper:
    """Stateless conversions between device and stage coordinates."""

    @staticmethod
    def to_stage(
        device_point: tuple[float, float], transform: ViewportTransform | None
    ) -> tuple[float, float]:
        """
        Convert a device position to stage coordinates.

        Args:
            device_point: Position (x, y) in window pixels
            transform: Current stage -> device transform

        Returns:
            Stage position (x, y)

        Raises:
            TransformUnavailable: If the transform is missing or not invertible
        """
        if transform is None:
            raise TransformUnavailable("No viewport transform available")
        if not transform.is_invertible():
            raise TransformUnavailable(f"Viewport transform is not invertible: {transform!r}")

        det = transform.determinant
        px = device_point[0] - transform.e
        py = device_point[1] - transform.f
        x = (transform.d * px - transform.c * py) / det
        y = (transform.a * py - transform.b * px) / det
        return (x, y)

    @staticmethod
    def to_device(
        stage_point: tuple[float, float], transform: ViewportTransform
    ) -> tuple[float, float]:
        """
        Convert a stage position to device coordinates.

        Args:
            stage_point: Position (x, y) in stage units
            transform: Current stage -> device transform

        Returns:
            Device position (x, y) in window pixels
        """
        x, y = stage_point
        return (
            transform.a * x + transform.c * y + transform.e,
            transform.b * x + transform.d * y + transform.f,
        )
