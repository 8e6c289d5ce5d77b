"""
UI Manager - draws a RenderFrame: maze geometry, markers, player and HUD
"""

import pygame

from utils.colors import (
    get_palette, COLOR_PLAYER, COLOR_START, COLOR_GOAL, COLOR_MARKER_TEXT,
    COLOR_TEXT_HIGHLIGHT, COLOR_GAME_OVER, COLOR_OVERLAY
)
from utils.helpers import format_time, format_score


class UIManager:
    """
    Manages all drawing; reads frames, never mutates game state
    """
    def __init__(self, theme='light'):
        self.theme = theme
        self.palette = get_palette(theme)

        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 16, bold=True)
        self.font_medium = pygame.font.SysFont("consolas", 20)
        self.font_large = pygame.font.SysFont("consolas", 40, bold=True)

    def set_theme(self, theme):
        self.theme = theme
        self.palette = get_palette(theme)

    def draw_frame(self, screen, frame, panel_y, screen_w, panel_h):
        """
        Draw a full frame

        Args:
            screen: Pygame screen
            frame: RenderFrame from the game core
            panel_y: Y position of HUD panel
            screen_w: Screen width
            panel_h: Panel height
        """
        screen.fill(self.palette['bg'])

        self._draw_walls(screen, frame.wall_rects)
        self._draw_marker(screen, frame.start_rect, COLOR_START, "S")
        self._draw_marker(screen, frame.goal_rect, COLOR_GOAL, "G")
        pygame.draw.rect(screen, COLOR_PLAYER, pygame.Rect(frame.player_rect))

        self.draw_hud(screen, frame, panel_y, screen_w, panel_h)

        if frame.is_over:
            self._draw_game_over(screen, frame)

    def _draw_walls(self, screen, wall_rects):
        color = self.palette['wall']
        for rect in wall_rects:
            pygame.draw.rect(screen, color, rect)

    def _draw_marker(self, screen, rect, color, label):
        """Filled cell with a centered letter"""
        pygame.draw.rect(screen, color, rect)
        text = self.font_small.render(label, True, COLOR_MARKER_TEXT)
        screen.blit(text, text.get_rect(center=pygame.Rect(rect).center))

    def draw_hud(self, screen, frame, panel_y, screen_w, panel_h):
        """
        Draw HUD (score, round, time left)
        """
        pygame.draw.rect(screen, self.palette['panel'], (0, panel_y, screen_w, panel_h))

        color = self.palette['text']
        score = self.font_medium.render(f"Score: {format_score(frame.score)}", True, color)
        screen.blit(score, (10, panel_y + (panel_h - score.get_height()) // 2))

        round_text = self.font_medium.render(f"Round {frame.round}", True, color)
        screen.blit(round_text, round_text.get_rect(center=(screen_w // 2, panel_y + panel_h // 2)))

        # Timer turns red in the last five seconds
        time_color = COLOR_GAME_OVER if frame.time_remaining <= 5 else color
        timer = self.font_medium.render(f"Time: {format_time(frame.time_remaining)}", True, time_color)
        screen.blit(timer, (screen_w - timer.get_width() - 10, panel_y + (panel_h - timer.get_height()) // 2))

    def _draw_game_over(self, screen, frame):
        """Dimmed overlay with final score"""
        w, h = screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))

        title = self.font_large.render("GAME OVER", True, COLOR_GAME_OVER)
        screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 30)))

        final = self.font_medium.render(f"Final score: {format_score(frame.final_score)}", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(final, final.get_rect(center=(w // 2, h // 2 + 15)))

        hint = self.font_medium.render("R: Restart | ESC: Quit", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + 45)))
