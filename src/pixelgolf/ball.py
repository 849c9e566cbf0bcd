# ball.py
import pygame
from pixelgolf.config import CONFIG # Import the config object

# --- Colors ---
BALL_WHITE = (255, 255, 255)
BALL_OUTLINE = (204, 204, 204)

class Ball:
    def __init__(self, pos=(0, 0), radius=None):
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(0, 0)
        self.radius = float(CONFIG['ball_radius'] if radius is None else radius)

    @property
    def bottom(self) -> float:
        return self.pos.y + self.radius

    def reset(self, pos):
        """Places the ball at ``pos`` with no velocity."""
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(0, 0)

    def draw(self, surface: pygame.Surface):
        pygame.draw.circle(surface, BALL_WHITE, self.pos, self.radius)
        pygame.draw.circle(surface, BALL_OUTLINE, self.pos, self.radius, 1)

    def __repr__(self):
        return f"Ball(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}))"
