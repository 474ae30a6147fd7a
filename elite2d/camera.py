"""Two-dimensional camera that maps between screen and world space."""

from __future__ import annotations

from .vector2 import Vector2

DEFAULT_ZOOM = 20.0
ZOOM_STEP = 1.1


class Camera2D:
    """Orthographic 2D camera over a viewport of ``width`` x ``height`` pixels.

    The camera looks at ``center``; ``zoom`` is the half-height of the view
    in world units. Screen y grows downwards, world y grows upwards.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.center = Vector2()
        self.zoom = DEFAULT_ZOOM
        self.zoom_locked = False
        self.move_locked = False
        self._last_position = Vector2()
        self._dragging = False

    @property
    def dragging(self) -> bool:
        """True while a drag started by :meth:`begin_drag` is active."""
        return self._dragging

    def _bounds(self) -> tuple[Vector2, Vector2]:
        ratio = float(self.width) / float(self.height)
        extents = Vector2(ratio, 1.0) * self.zoom
        return self.center - extents, self.center + extents

    def screen_to_world(self, screen_point: Vector2) -> Vector2:
        """World position under a pixel position."""
        w = float(self.width)
        h = float(self.height)
        u = screen_point.x / w
        v = (h - screen_point.y) / h
        lower, upper = self._bounds()
        return Vector2(
            (1.0 - u) * lower.x + u * upper.x,
            (1.0 - v) * lower.y + v * upper.y,
        )

    def world_to_screen(self, world_point: Vector2) -> Vector2:
        """Pixel position of a world position."""
        w = float(self.width)
        h = float(self.height)
        lower, upper = self._bounds()
        u = (world_point.x - lower.x) / (upper.x - lower.x)
        v = (world_point.y - lower.y) / (upper.y - lower.y)
        return Vector2(u * w, (1.0 - v) * h)

    def projection_matrix(self, z_bias: float = 0.0) -> list[float]:
        """Column-major 4x4 matrix from world to normalised device coordinates."""
        lower, upper = self._bounds()
        width = upper.x - lower.x
        height = upper.y - lower.y
        return [
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / height, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            -(upper.x + lower.x) / width, -(upper.y + lower.y) / height, z_bias, 1.0,
        ]

    def begin_drag(self, screen_point: Vector2) -> None:
        """Grab the world point under ``screen_point`` to pan the view."""
        if self.move_locked:
            return
        self._dragging = True
        self._last_position = self.screen_to_world(screen_point)

    def drag(self, screen_point: Vector2) -> None:
        """Pan so that the grabbed world point stays under ``screen_point``."""
        if not self._dragging or self.move_locked:
            return
        position = self.screen_to_world(screen_point)
        self.center -= position - self._last_position

    def end_drag(self) -> None:
        """Release the grabbed point."""
        self._dragging = False

    def scroll(self, amount: float) -> None:
        """Zoom in for a positive wheel amount, out for a negative one."""
        if self.zoom_locked:
            return
        if amount > 0:
            self.zoom /= ZOOM_STEP
        elif amount < 0:
            self.zoom *= ZOOM_STEP