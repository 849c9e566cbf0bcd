# game.py
import math
import sys

import pygame
from pixelgolf.config import CONFIG
from pixelgolf.course import BroadcastNotifier, Course, Notifier
from pixelgolf.physics import MAX_ANGLE, MAX_POWER

# --- Constants ---
SURFACE_WIDTH = int(CONFIG['surface_width'])
SURFACE_HEIGHT = int(CONFIG['surface_height'])
PIXEL_SCALE = max(1, int(CONFIG['pixel_scale']))
SCREEN_WIDTH = SURFACE_WIDTH * PIXEL_SCALE
SCREEN_HEIGHT = SURFACE_HEIGHT * PIXEL_SCALE
TARGET_FPS = int(CONFIG['target_fps'])
POWER_STEP = float(CONFIG['power_step'])
ANGLE_STEP = float(CONFIG['angle_step'])

# --- Colors ---
SKY_BLUE = (112, 197, 206)
GROUND_GREEN = (95, 183, 74)
UI_TEXT_COLOR = (240, 240, 240)
AIM_LINE_COLOR = (255, 255, 0)
OVERLAY_COLOR = (0, 0, 0, 180)
HUD_BG_COLOR = (40, 40, 40, 200)


def draw_scene(surface: pygame.Surface, state):
    """Flat-color draw of one frame in simulation coordinates."""
    surface.fill(SKY_BLUE)
    ground = pygame.Rect(0, 0, state.width, state.height - state.ground_y)
    ground.bottomleft = (0, state.height)
    pygame.draw.rect(surface, GROUND_GREEN, ground)
    state.hole.draw(surface)
    for obstacle in state.obstacles:
        obstacle.draw(surface)
    state.ball.draw(surface)


class Game(Notifier):
    def __init__(self, panel=None, rng=None):
        pygame.init()
        self.panel = panel
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pixel Golf")
        self.canvas = pygame.Surface((SURFACE_WIDTH, SURFACE_HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 32)
        self.title_font = pygame.font.Font(None, 72)
        self.is_running = True

        # --- State Management ---
        self.game_state = 'PLAYING'
        self.course = Course(BroadcastNotifier([self, panel]), rng=rng)
        self.controls_enabled = False
        self.final_score = None

        # --- Scoreboard ---
        self.hud_hole = 1
        self.hud_strokes = 0
        self.hud_total = 0

        # --- Shot controls (slider equivalents) ---
        self.power = 50.0
        self.angle = 45.0

    def start_game(self):
        """Resets the course and sets up hole 1."""
        self.final_score = None
        self.game_state = 'PLAYING'
        if self.panel is not None:
            # Shots queued during the summary screen belong to the old round
            self.panel.pending_launches()
        self.course.initialize(SURFACE_WIDTH, SURFACE_HEIGHT)

    # ---- Notifier ----
    def update_scoreboard(self, hole, strokes, total_score):
        self.hud_hole, self.hud_strokes, self.hud_total = hole, strokes, total_score

    def end_turn(self):
        self.controls_enabled = True

    def end_course(self, total_score):
        self.final_score = total_score
        self.controls_enabled = False
        self.game_state = 'COURSE_COMPLETE'

    # ---- Loop ----
    def run(self):
        self.start_game()
        while self.is_running:
            self.clock.tick(TARGET_FPS)
            self.process_input()
            if self.game_state == 'PLAYING':
                self.update()
            self.render(self.screen)
        self.cleanup()

    def process_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                self.is_running = False; return
            self.handle_event(event)

    def handle_event(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if self.game_state == 'COURSE_COMPLETE':
            if event.key in (pygame.K_r, pygame.K_SPACE): self.start_game()
            return

        if event.key == pygame.K_UP: self.power = min(self.power + POWER_STEP, MAX_POWER)
        elif event.key == pygame.K_DOWN: self.power = max(self.power - POWER_STEP, 0.0)
        elif event.key == pygame.K_RIGHT: self.angle = max(self.angle - ANGLE_STEP, 0.0)
        elif event.key == pygame.K_LEFT: self.angle = min(self.angle + ANGLE_STEP, MAX_ANGLE)
        elif event.key == pygame.K_SPACE and self.controls_enabled:
            self.launch(self.power, self.angle)

    def launch(self, power, angle):
        if self.course.launch(power, angle):
            self.controls_enabled = False

    def update(self):
        if self.panel is not None:
            for power, angle in self.panel.pending_launches():
                self.launch(power, angle)
        self.course.update()

    # ---- Rendering ----
    def render(self, surface: pygame.Surface):
        draw_scene(self.canvas, self.course.state)
        if self.controls_enabled:
            self.draw_aim_line(self.canvas)
        pygame.transform.scale(self.canvas, surface.get_size(), surface)
        self.draw_hud(surface)
        if self.game_state == 'COURSE_COMPLETE':
            self.draw_course_complete(surface)
        pygame.display.flip()

    def draw_aim_line(self, canvas: pygame.Surface):
        ball = self.course.state.ball
        radians = math.radians(self.angle)
        direction = pygame.Vector2(math.cos(radians), -math.sin(radians))
        line_end = ball.pos + direction * (10 + self.power * 0.4)
        pygame.draw.line(canvas, AIM_LINE_COLOR, ball.pos, line_end, 1)

    def draw_hud(self, surface: pygame.Surface):
        texts = [f"Hole: {self.hud_hole}", f"Strokes: {self.hud_strokes}", f"Total: {self.hud_total}",
                 f"Power: {int(self.power)}", f"Angle: {int(self.angle)}"]
        box = pygame.Surface((180, 10 + len(texts) * 28), pygame.SRCALPHA)
        box.fill(HUD_BG_COLOR)
        surface.blit(box, (8, 8))
        for i, text in enumerate(texts):
            text_surface = self.font.render(text, True, UI_TEXT_COLOR)
            surface.blit(text_surface, (16, 14 + i * 28))

    def draw_course_complete(self, surface: pygame.Surface):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        width, height = surface.get_size()
        title_surf = self.title_font.render("Course Complete!", True, UI_TEXT_COLOR)
        surface.blit(title_surf, title_surf.get_rect(center=(width / 2, height / 3)))
        score_surf = self.font.render(f"Total score: {self.final_score}", True, UI_TEXT_COLOR)
        surface.blit(score_surf, score_surf.get_rect(center=(width / 2, height / 2)))
        again_surf = self.font.render("Press R to play again", True, UI_TEXT_COLOR)
        surface.blit(again_surf, again_surf.get_rect(center=(width / 2, height * 0.7)))

    def cleanup(self):
        pygame.quit()
        sys.exit()
