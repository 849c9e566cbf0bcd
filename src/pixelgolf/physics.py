# physics.py
"""
Fixed-step ball physics.

One call to ``step`` is one logical frame: there is no delta time and no
sub-stepping. Every constant below is tuned for that step, so running the
simulation at a different rate means re-deriving all of them, not scaling dt.
"""
import math

import pygame
from pixelgolf.config import CONFIG
from pixelgolf.geometry import closest_point_on_rect, contact_normal, reflect

# =========================
#     CONFIG -> CONSTANTS
# =========================
GRAVITY = float(CONFIG.get('gravity', 0.5))
FRICTION = float(CONFIG.get('friction', 0.90))
BOUNCE = float(CONFIG.get('bounce', -0.5))
REST_VY_THRESHOLD = float(CONFIG.get('rest_vy_threshold', 1.0))
POWER_SCALE = float(CONFIG.get('power_scale', 0.15))

MAX_POWER = 100.0
MAX_ANGLE = 90.0

# =========================
#         HELPERS
# =========================
def _clamp(v, lo, hi):
    if not math.isfinite(v):
        return lo
    return lo if v < lo else hi if v > hi else v

def launch_velocity(power: float, angle: float) -> pygame.Vector2:
    """Power 0-100 and angle 0-90 degrees -> initial velocity (y grows downward)."""
    power = _clamp(float(power), 0.0, MAX_POWER)
    angle = _clamp(float(angle), 0.0, MAX_ANGLE)
    speed = power * POWER_SCALE
    radians = math.radians(angle)
    return pygame.Vector2(speed * math.cos(radians), -speed * math.sin(radians))

def is_grounded(ball, ground_y: float) -> bool:
    return ball.bottom >= ground_y

# =========================
#        INTEGRATOR
# =========================
def integrate(ball, ground_y: float):
    # A ball resting on the ground gets no gravity, otherwise it would jitter
    if not (is_grounded(ball, ground_y) and ball.vel.y >= 0):
        ball.vel.y += GRAVITY
    ball.pos += ball.vel

# =========================
#     COLLISION RESOLVER
# =========================
def resolve_ground(ball, ground_y: float):
    # Contact includes touching, so a ball rolling on the line keeps losing speed
    if not is_grounded(ball, ground_y):
        return
    ball.pos.y = ground_y - ball.radius
    if abs(ball.vel.y) < REST_VY_THRESHOLD:
        ball.vel.y = 0
    else:
        ball.vel.y *= BOUNCE
    ball.vel.x *= FRICTION

def resolve_walls(ball, width: float):
    if ball.pos.x + ball.radius > width:
        ball.pos.x = width - ball.radius
        ball.vel.x *= BOUNCE
    elif ball.pos.x - ball.radius < 0:
        ball.pos.x = ball.radius
        ball.vel.x *= BOUNCE

def resolve_ceiling(ball):
    if ball.pos.y - ball.radius < 0:
        ball.pos.y = ball.radius
        ball.vel.y *= BOUNCE

def resolve_obstacle(ball, rect) -> bool:
    """Pushes the ball out of ``rect`` and bounces it. Returns True on contact."""
    closest = closest_point_on_rect(ball.pos, rect)
    normal, distance = contact_normal(ball.pos, closest)
    if distance >= ball.radius:
        return False

    ball.pos += normal * (ball.radius - distance)
    # Reflection is scaled by -BOUNCE (+0.5), unlike ground and walls
    ball.vel = reflect(ball.vel, normal) * -BOUNCE

    # Landing on the top face rolls like the ground does
    if rect.left < closest.x < rect.right and ball.pos.y < rect.top:
        ball.vel.x *= FRICTION
    return True

def resolve_collisions(state):
    ball = state.ball
    resolve_ground(ball, state.ground_y)
    resolve_walls(ball, state.width)
    resolve_ceiling(ball)
    for rect in state.obstacles:
        resolve_obstacle(ball, rect)

def step(state):
    """Advances the ball by one frame: integrate, then resolve every contact."""
    integrate(state.ball, state.ground_y)
    resolve_collisions(state)
