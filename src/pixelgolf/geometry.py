# geometry.py
"""Circle-vs-rectangle primitives shared by the collision resolver."""
import pygame


def closest_point_on_rect(point: pygame.Vector2, rect) -> pygame.Vector2:
    """Clamp ``point`` into ``rect`` (anything with left/right/top/bottom)."""
    return pygame.Vector2(max(rect.left, min(point.x, rect.right)),
                          max(rect.top, min(point.y, rect.bottom)))


def contact_normal(center: pygame.Vector2, closest: pygame.Vector2):
    """
    Returns (normal, distance) for the vector pointing from ``closest`` to
    ``center``. A centre embedded in the rectangle has no direction, so the
    normal falls back to (1, 0).
    """
    offset = center - closest
    distance = offset.length()
    if distance == 0:
        return pygame.Vector2(1, 0), 0.0
    return offset / distance, distance


def reflect(velocity: pygame.Vector2, normal: pygame.Vector2) -> pygame.Vector2:
    """v - 2 (v . n) n for a unit normal."""
    return velocity - 2 * velocity.dot(normal) * normal
