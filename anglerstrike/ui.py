"""Heads-up display: score, ammo, timer and end-of-round messages."""

from typing import Tuple

import pygame

from config.config import (
    AMMO_BAR_SIZE,
    AMMO_BAR_SPACING,
    GAME_OVER_FONT_SIZE,
    GREEN,
    UI_COLOR,
    UI_FONT_NAME,
    UI_FONT_SIZE,
    UI_MARGIN,
    UI_SHADOW_COLOR,
)


def format_timer(remaining_ms: float) -> str:
    """Format the remaining round time in seconds with one decimal."""
    return f"Timer: {max(0.0, remaining_ms) / 1000:.1f}"


def game_over_messages(won: bool) -> Tuple[str, str]:
    """Return the headline and sub-message shown when the round ends."""
    if won:
        return "You win!", "Well done!"
    return "You lose!", "Try again next time!"


class UI:
    """Draws score, timer and other information that needs to be displayed to the user."""

    def __init__(self, game) -> None:
        self.game = game
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(UI_FONT_NAME, UI_FONT_SIZE)
        self.large_font = pygame.font.SysFont(UI_FONT_NAME, GAME_OVER_FONT_SIZE)
        self.color = UI_COLOR

    def _blit_text(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        color: Tuple[int, int, int],
        **anchor,
    ) -> pygame.Rect:
        """Render text with a drop shadow at the given rect anchor."""
        shadow_surf = font.render(text, True, UI_SHADOW_COLOR)
        text_surf = font.render(text, True, color)
        text_rect = text_surf.get_rect(**anchor)
        surface.blit(shadow_surf, text_rect.move(2, 2))
        surface.blit(text_surf, text_rect)
        return text_rect

    def draw(self, surface: pygame.Surface) -> None:
        game = self.game

        score_rect = self._blit_text(
            surface,
            self.font,
            f"Score: {game.score}",
            self.color,
            topleft=(UI_MARGIN, UI_MARGIN),
        )

        # One bar per round of ammo
        bar_width, bar_height = AMMO_BAR_SIZE
        bar_y = score_rect.bottom + 10
        for i in range(game.ammo):
            pygame.draw.rect(
                surface,
                self.color,
                (UI_MARGIN + AMMO_BAR_SPACING * i, bar_y, bar_width, bar_height),
            )

        self._blit_text(
            surface,
            self.font,
            format_timer(game.time_limit - game.game_time),
            self.color,
            topleft=(UI_MARGIN, bar_y + bar_height + 10),
        )

        if game.game_over:
            headline, message = game_over_messages(game.won)
            center_x = game.width // 2
            center_y = game.height // 2
            self._blit_text(
                surface, self.large_font, headline, self.color, midbottom=(center_x, center_y - 10)
            )
            self._blit_text(surface, self.font, message, self.color, midtop=(center_x, center_y + 10))
            self._blit_text(
                surface,
                self.font,
                "Press Space To Play Again",
                GREEN,
                midtop=(center_x, center_y + 50),
            )
