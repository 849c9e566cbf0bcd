# level.py
import random
from dataclasses import dataclass

import pygame
from pixelgolf.config import CONFIG

# --- Colors ---
OBSTACLE_BROWN = (160, 82, 45)
HOLE_BLACK = (34, 34, 34)

GROUND_HEIGHT = float(CONFIG['ground_height'])
HOLE_RADIUS = float(CONFIG['hole_radius'])
BALL_RADIUS = float(CONFIG['ball_radius'])

# Obstacles keep this much clearance from the tee and from the cup
TEE_CLEARANCE = 100
CUP_CLEARANCE = 150


@dataclass(frozen=True)
class Obstacle:
    """An axis-aligned block standing on the ground."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self):
        return self.x

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, OBSTACLE_BROWN, (self.x, self.y, self.width, self.height))


@dataclass(frozen=True)
class Hole:
    x: float
    y: float
    radius: float = HOLE_RADIUS

    @property
    def pos(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    def draw(self, surface: pygame.Surface):
        pygame.draw.circle(surface, HOLE_BLACK, self.pos, self.radius)


def generate_hole(width: float, height: float, rng: random.Random) -> Hole:
    """Places the cup somewhere in the right two-thirds, centred in the ground band."""
    x = rng.random() * (width * 0.66) + width * 0.33
    y = height - GROUND_HEIGHT / 2
    return Hole(x, y)


def generate_obstacles(width: float, height: float, start_x: float, hole: Hole,
                       rng: random.Random) -> list:
    """
    Builds 1 to 3 blocks between the tee and the cup, each resting on the ground.

    A block's left edge is drawn from ``[start_x + TEE_CLEARANCE, hole.x - 50]``
    and its right edge never reaches the cup rim. When the cup lands so close to
    the tee that the range is empty, the block slides back toward the tee
    instead of covering the cup.
    """
    ground_y = height - GROUND_HEIGHT
    obstacles = []
    for _ in range(rng.randint(1, 3)):
        obs_width = rng.random() * 30 + 10 # 10-40 wide
        obs_height = rng.random() * 80 + 20 # 20-100 high

        lo = start_x + TEE_CLEARANCE
        hi = min(hole.x - CUP_CLEARANCE + TEE_CLEARANCE, hole.x - hole.radius - obs_width)
        if hi < lo:
            lo = max(start_x + BALL_RADIUS, hi)
        obs_x = lo + rng.random() * max(0.0, hi - lo)
        obs_x = max(0.0, min(obs_x, width - obs_width))
        obstacles.append(Obstacle(obs_x, ground_y - obs_height, obs_width, obs_height))
    return obstacles
