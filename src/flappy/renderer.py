"""
renderer.py: Immediate-mode pygame view of a SimulationState.
"""

import pygame

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, BIRD_TILT_PER_VELOCITY, SKY_COLOR, BIRD_COLOR,
    PIPE_TOP_COLOR, PIPE_BOTTOM_COLOR, TEXT_COLOR, OVERLAY_COLOR, BUTTON_COLOR
)
from .physics_core import SimulationState

BUTTON_SIZE = (160, 50)


class Renderer:
    """
    Draws one frame per draw() call onto a surface of the field size.
    Each frame starts by clearing the whole surface, so nothing from the
    previous frame survives. Never writes to the state it is given.
    """

    def __init__(self, surface: pygame.Surface):
        if not isinstance(surface, pygame.Surface):
            raise TypeError(f"Renderer needs a pygame.Surface, got {type(surface).__name__}")
        if not pygame.font.get_init():
            pygame.font.init()

        self.surface = surface
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)

        # Overlay state
        self.start_visible = False
        self.game_over_visible = False
        self.final_score = 0
        self.score_text = "0"

        center = (FIELD_WIDTH // 2, FIELD_HEIGHT // 2 + 60)
        self.start_button = pygame.Rect((0, 0), BUTTON_SIZE)
        self.start_button.center = center
        self.restart_button = pygame.Rect((0, 0), BUTTON_SIZE)
        self.restart_button.center = center

        self.bird_image = pygame.Surface((1, 1), pygame.SRCALPHA)

    def draw(self, state: SimulationState):
        screen = self.surface
        screen.fill(SKY_COLOR)

        # Pipes
        for pipe in state.pipes:
            color = PIPE_TOP_COLOR if pipe.is_top else PIPE_BOTTOM_COLOR
            pygame.draw.rect(screen, color, (pipe.x, pipe.y, pipe.width, pipe.height))

        # Bird, tilted with its velocity. pygame rotates counter-clockwise.
        bird = state.bird
        if self.bird_image.get_size() != (bird.width, bird.height):
            self.bird_image = pygame.Surface((bird.width, bird.height), pygame.SRCALPHA)
            pygame.draw.ellipse(self.bird_image, BIRD_COLOR, self.bird_image.get_rect())
        rotated = pygame.transform.rotate(self.bird_image, -bird.velocity * BIRD_TILT_PER_VELOCITY)
        center = (bird.x + bird.width / 2, bird.y + bird.height / 2)
        screen.blit(rotated, rotated.get_rect(center=center))

        # HUD
        self.score_text = str(state.score)
        score_surf = self.large_font.render(self.score_text, True, TEXT_COLOR)
        screen.blit(score_surf, (FIELD_WIDTH // 2 - score_surf.get_width() // 2, 20))

        if self.start_visible:
            self._draw_overlay("Flappy Bird", "Space / tap to flap", "Start", self.start_button)
        if self.game_over_visible:
            self._draw_overlay("Game Over", f"Score: {self.final_score}", "Restart", self.restart_button)

    def _draw_overlay(self, title: str, subtitle: str, label: str, button: pygame.Rect):
        shade = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        self.surface.blit(shade, (0, 0))

        title_surf = self.large_font.render(title, True, TEXT_COLOR)
        self.surface.blit(title_surf, (FIELD_WIDTH // 2 - title_surf.get_width() // 2, FIELD_HEIGHT // 2 - 100))
        sub_surf = self.font.render(subtitle, True, TEXT_COLOR)
        self.surface.blit(sub_surf, (FIELD_WIDTH // 2 - sub_surf.get_width() // 2, FIELD_HEIGHT // 2 - 40))

        pygame.draw.rect(self.surface, BUTTON_COLOR, button, border_radius=8)
        label_surf = self.font.render(label, True, TEXT_COLOR)
        self.surface.blit(label_surf, label_surf.get_rect(center=button.center))

    def show_start_screen(self):
        self.start_visible = True
        self.game_over_visible = False

    def hide_start_screen(self):
        self.start_visible = False

    def show_game_over_screen(self, score: int):
        self.game_over_visible = True
        self.final_score = score

    def hide_game_over_screen(self):
        self.game_over_visible = False
