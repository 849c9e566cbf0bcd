import os

# Headless pygame and built-in defaults for every test
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ['PIXELGOLF_CONFIG'] = os.path.join(os.path.dirname(__file__), 'no-such-config.json')

import pytest

from pixelgolf.course import Notifier


class RecordingNotifier(Notifier):
    """Keeps every event the course sends."""

    def __init__(self):
        self.scoreboards = []
        self.turn_ends = 0
        self.course_ends = []

    def update_scoreboard(self, hole, strokes, total_score):
        self.scoreboards.append((hole, strokes, total_score))

    def end_turn(self):
        self.turn_ends += 1

    def end_course(self, total_score):
        self.course_ends.append(total_score)

    def reset(self):
        self.__init__()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def other_notifier():
    return RecordingNotifier()
