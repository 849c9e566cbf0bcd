# course.py
import math
import random
from dataclasses import dataclass, field

from pixelgolf import physics
from pixelgolf.ball import Ball
from pixelgolf.config import CONFIG
from pixelgolf.level import GROUND_HEIGHT, Hole, generate_hole, generate_obstacles

MAX_HOLES = int(CONFIG['max_holes'])
BALL_START_X = float(CONFIG['ball_start_x'])
WIN_MAX_SPEED = float(CONFIG.get('win_max_speed', 1.5))
STOP_MAX_SPEED = float(CONFIG.get('stop_max_speed', 0.1))


class Notifier:
    """Receives score and turn events from the course. Every hook is optional."""

    def update_scoreboard(self, hole: int, strokes: int, total_score: int):
        pass

    def end_turn(self):
        pass

    def end_course(self, total_score: int):
        pass


class BroadcastNotifier(Notifier):
    """Forwards every event to each wrapped notifier, in order."""

    def __init__(self, notifiers):
        self.notifiers = [n for n in notifiers if n is not None]

    def update_scoreboard(self, hole, strokes, total_score):
        for n in self.notifiers:
            n.update_scoreboard(hole, strokes, total_score)

    def end_turn(self):
        for n in self.notifiers:
            n.end_turn()

    def end_course(self, total_score):
        for n in self.notifiers:
            n.end_course(total_score)


@dataclass
class GameState:
    current_hole: int = 1
    total_score: int = 0
    current_strokes: int = 0
    is_ball_moving: bool = False


@dataclass
class SimulationState:
    """Everything a frame of simulation reads or writes."""
    width: float
    height: float
    ball: Ball = field(default_factory=Ball)
    hole: Hole = field(default_factory=lambda: Hole(0.0, 0.0))
    obstacles: list = field(default_factory=list)
    game: GameState = field(default_factory=GameState)

    @property
    def ground_y(self) -> float:
        return self.height - GROUND_HEIGHT

    @property
    def resting_y(self) -> float:
        return self.ground_y - self.ball.radius


class Course:
    """
    Runs a round of MAX_HOLES holes for a single ball.

    The course is either idle (waiting for a launch) or in motion; ``update``
    only simulates while in motion and hands control back through the
    notifier's ``end_turn`` once the ball stops or drops.
    """

    def __init__(self, notifier: Notifier = None, rng: random.Random = None,
                 max_holes: int = MAX_HOLES):
        self.notifier = notifier or Notifier()
        self.rng = rng or random.Random(CONFIG.get('seed'))
        self.max_holes = max_holes
        self.state = None

    @property
    def is_complete(self) -> bool:
        return self.state is not None and self.state.game.current_hole > self.max_holes

    def initialize(self, width: float, height: float):
        """Resets score and hole counter and sets up hole 1."""
        self.state = SimulationState(float(width), float(height))
        self.start_new_hole()

    def start_new_hole(self):
        state = self.state
        game = state.game
        state.ball.reset((BALL_START_X, state.resting_y))
        game.current_strokes = 0
        game.is_ball_moving = False

        state.hole = generate_hole(state.width, state.height, self.rng)
        state.obstacles = generate_obstacles(state.width, state.height, state.ball.pos.x,
                                             state.hole, self.rng)
        print(f"[GAME] Hole {game.current_hole}: cup at x={state.hole.x:.1f}, "
              f"{len(state.obstacles)} obstacle(s)")

        self.notifier.update_scoreboard(game.current_hole, game.current_strokes, game.total_score)
        self.notifier.end_turn()

    def launch(self, power: float, angle: float) -> bool:
        """Strikes the ball. Ignored while it is moving or after the last hole."""
        if self.state is None:
            return False
        game = self.state.game
        if game.is_ball_moving or self.is_complete:
            return False

        game.is_ball_moving = True
        game.current_strokes += 1
        self.notifier.update_scoreboard(game.current_hole, game.current_strokes, game.total_score)
        self.state.ball.vel = physics.launch_velocity(power, angle)
        return True

    def update(self):
        """One frame: physics, then the win and stop checks."""
        if self.state is None or not self.state.game.is_ball_moving:
            return
        physics.step(self.state)
        self.evaluate()

    def evaluate(self):
        state = self.state
        ball, hole, game = state.ball, state.hole, state.game
        grounded = physics.is_grounded(ball, state.ground_y)

        dist_to_hole = math.hypot(ball.pos.x - hole.x, ball.pos.y - hole.y)
        if grounded and dist_to_hole < hole.radius and abs(ball.vel.x) < WIN_MAX_SPEED:
            self._complete_hole()
            return

        # vy must be exactly zero; the ground resolver zeroes it once it settles
        if grounded and abs(ball.vel.x) < STOP_MAX_SPEED and ball.vel.y == 0:
            ball.vel.x = 0
            ball.pos.y = state.resting_y
            game.is_ball_moving = False
            self.notifier.end_turn()

    def _complete_hole(self):
        state = self.state
        game = state.game
        game.is_ball_moving = False
        state.ball.vel.update(0, 0)

        game.total_score += game.current_strokes
        print(f"[GAME] Hole {game.current_hole} complete in {game.current_strokes} stroke(s)")
        game.current_hole += 1

        if game.current_hole > self.max_holes:
            print(f"[GAME] Course complete. Total score: {game.total_score}")
            self.notifier.end_course(game.total_score)
        else:
            self.start_new_hole()
