"""
flappy_client.py

Pygame presentation for the simulation engine: input translation, rendering
and the start / game-over overlays. Holds no game rules of its own.
"""

import logging
from typing import Optional

import pygame

from .autopilot import Autopilot
from .constants import RENDER_FPS
from .data_models import RenderSnapshot, RunState
from .engine import SimulationEngine, command_for_press

logger = logging.getLogger(__name__)

SKY = (0, 191, 255)
ACTOR_COLOR = (255, 255, 0)
OBSTACLE_COLOR = (0, 150, 0)
WHITE = (255, 255, 255)
OVERLAY = (0, 0, 0, 160)


class FlappyClient:
    def __init__(self, engine: SimulationEngine, fps: int = RENDER_FPS, autopilot: bool = False):
        pygame.init()
        self.engine = engine
        self.fps = fps
        cfg = engine.config
        self.screen = pygame.display.set_mode((cfg.playfield_width, cfg.playfield_height))
        pygame.display.set_caption("Flappy")

        self.clock = pygame.time.Clock()
        self.autopilot: Optional[Autopilot] = Autopilot.for_engine(engine) if autopilot else None

        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        running = True
        snapshot = self.engine.snapshot()
        while running:
            self.clock.tick(self.fps)

            # Handle Pygame Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.engine.submit(command_for_press(self.engine.get_state()))
                    elif event.key == pygame.K_a:
                        self._toggle_autopilot()
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.engine.submit(command_for_press(self.engine.get_state()))

            if self.autopilot is not None:
                command = self.autopilot(snapshot)
                if command is not None:
                    self.engine.submit(command)

            snapshot = self.engine.step(pygame.time.get_ticks())
            self._draw_game(snapshot)

        pygame.quit()

    def _toggle_autopilot(self):
        if self.autopilot is None:
            self.autopilot = Autopilot.for_engine(self.engine)
        else:
            self.autopilot = None
        logger.info("Autopilot %s", "on" if self.autopilot else "off")

    def _draw_game(self, snapshot: RenderSnapshot):
        """Renders one snapshot using Pygame."""
        screen = self.screen
        cfg = self.engine.config
        screen.fill(SKY)

        # Draw Obstacles
        for obstacle in snapshot.obstacles:
            _, gap_bottom = obstacle.gap_bounds(cfg.gap_height)
            pygame.draw.rect(screen, OBSTACLE_COLOR,
                             (obstacle.x, 0, cfg.obstacle_width, obstacle.top_height))
            pygame.draw.rect(screen, OBSTACLE_COLOR,
                             (obstacle.x, gap_bottom, cfg.obstacle_width, cfg.playfield_height - gap_bottom))

        # Draw Actor
        actor = snapshot.actor
        pygame.draw.rect(screen, ACTOR_COLOR, (actor.x, actor.y, actor.width, actor.height))

        # HUD
        score_text = self.large_font.render(f"Score: {snapshot.score}", True, WHITE)
        screen.blit(score_text, (cfg.playfield_width // 2 - score_text.get_width() // 2, 20))

        if snapshot.state is RunState.IDLE:
            self._draw_overlay("Flappy", "Space / Click to start")
        elif snapshot.state is RunState.ENDED:
            self._draw_overlay(f"Game Over: {snapshot.final_score}", "Space / Click to restart")

        if self.autopilot is not None:
            tag = self.font.render("AUTO", True, WHITE)
            screen.blit(tag, (10, 10))

        pygame.display.flip()

    def _draw_overlay(self, title: str, hint: str):
        cfg = self.engine.config
        shade = pygame.Surface((cfg.playfield_width, cfg.playfield_height), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.screen.blit(shade, (0, 0))

        title_surf = self.large_font.render(title, True, WHITE)
        hint_surf = self.font.render(hint, True, WHITE)
        mid_x = cfg.playfield_width // 2
        mid_y = cfg.playfield_height // 2
        self.screen.blit(title_surf, (mid_x - title_surf.get_width() // 2, mid_y - 40))
        self.screen.blit(hint_surf, (mid_x - hint_surf.get_width() // 2, mid_y + 10))
