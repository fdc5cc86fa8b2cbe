"""HUD, play field, text box, feedback effects and the end-of-session overlay"""

from __future__ import annotations

import random

import pygame

from .constants import (
    HUD_PADDING, HUD_HEIGHT, INPUT_HEIGHT, TEXT_COLOR, DIM_TEXT_COLOR, ACCENT_COLOR,
    ERROR_COLOR, FIELD_COLOR, ZOMBIE_COLOR, ZOMBIE_OUTLINE, MAX_LIVES,
    FLASH_MS, SHAKE_MS, TOAST_MS, DEATH_ANIM_MS
)
from .models import SessionSummary, Zombie

FLASH_COLORS = {
    "kill": (120, 255, 140),
    "damage": (255, 40, 40),
    "heal": (120, 180, 255),
}

LANES = 5


def field_rect(surf: pygame.Surface) -> pygame.Rect:
    """Area between the HUD band and the text box band."""
    width, height = surf.get_size()
    return pygame.Rect(0, HUD_HEIGHT, width, max(1, height - HUD_HEIGHT - INPUT_HEIGHT))


def draw_heart(surf: pygame.Surface, center: tuple[int, int], size: int, color) -> None:
    x, y = center
    r = size // 4
    pygame.draw.circle(surf, color, (x - r, y - r // 2), r)
    pygame.draw.circle(surf, color, (x + r, y - r // 2), r)
    pygame.draw.polygon(surf, color, [(x - 2 * r, y - r // 3), (x + 2 * r, y - r // 3), (x, y + 2 * r)])


class HUD:
    """Heads-Up Display: score block on the left, status block on the right."""

    def __init__(self, font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = small_font
        self.highlight_until = 0

    def update_fonts(self, font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font = font
        self.small_font = small_font

    def highlight(self, now_ms: int, duration_ms: int = 800) -> None:
        """Make score and high score glow after a new record."""
        self.highlight_until = now_ms + duration_ms

    def draw(self, surf: pygame.Surface, now_ms: int, score: int, high_score: int, streak: int,
             lives: int, difficulty: str, sound_on: bool, hint: str, paused: bool = False) -> None:
        current_width = surf.get_width()
        pygame.draw.rect(surf, (18, 20, 24), (0, 0, current_width, HUD_HEIGHT))

        # LEFT SIDE: Score, High Score, Streak
        glow = now_ms < self.highlight_until
        score_color = ACCENT_COLOR if glow else TEXT_COLOR
        x = HUD_PADDING
        for label, value, color in (
            ("Score", score, score_color),
            ("High", high_score, score_color),
            ("Streak", streak, TEXT_COLOR),
        ):
            text = self.font.render(f"{label}: {value}", True, color)
            surf.blit(text, (x, HUD_PADDING))
            x += text.get_width() + 24

        # Lives as hearts
        for i in range(MAX_LIVES):
            color = ERROR_COLOR if i < lives else (70, 70, 80)
            draw_heart(surf, (x + 12 + i * 26, HUD_PADDING + 12), 20, color)

        # RIGHT SIDE: difficulty and sound state
        status = f"{difficulty} | Sound {'ON' if sound_on else 'OFF'}"
        status_surf = self.small_font.render(status, True, DIM_TEXT_COLOR)
        surf.blit(status_surf, (current_width - status_surf.get_width() - HUD_PADDING, HUD_PADDING + 4))

        hint_surf = self.small_font.render(hint, True, DIM_TEXT_COLOR)
        surf.blit(hint_surf, (HUD_PADDING, HUD_HEIGHT - hint_surf.get_height() - 8))

        if paused:
            pause_text = self.font.render("PAUSED", True, ACCENT_COLOR)
            text_rect = pause_text.get_rect(center=(current_width // 2, field_rect(surf).centery))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class FieldView:
    """Draws walking zombies with their words; killed ones fade out briefly."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.dying: list[tuple[Zombie, int]] = []

    def update_fonts(self, font: pygame.font.Font) -> None:
        self.font = font

    def mark_dead(self, zombie: Zombie, now_ms: int) -> None:
        self.dying.append((zombie, now_ms))

    def clear(self) -> None:
        self.dying.clear()

    def lane_y(self, field: pygame.Rect, zombie: Zombie) -> int:
        lane_h = field.height / LANES
        return int(field.top + lane_h * (zombie.id % LANES) + lane_h / 2)

    def draw(self, surf: pygame.Surface, now_ms: int, zombies: list[Zombie],
             target: Zombie | None, typed: str) -> None:
        field = field_rect(surf)
        pygame.draw.rect(surf, FIELD_COLOR, field)
        pygame.draw.line(surf, ERROR_COLOR, (0, field.top), (0, field.bottom), 4)

        self.dying = [(z, t) for z, t in self.dying if now_ms - t < DEATH_ANIM_MS]
        for z, t in self.dying:
            alpha = int(255 * (1 - (now_ms - t) / DEATH_ANIM_MS))
            self._draw_zombie(surf, field, z, alpha, None)

        for z in zombies:
            prefix = typed.strip() if target is not None and z.id == target.id else None
            self._draw_zombie(surf, field, z, 255, prefix)

    def _draw_zombie(self, surf: pygame.Surface, field: pygame.Rect, z: Zombie,
                     alpha: int, prefix: str | None) -> None:
        x, y = int(z.x), self.lane_y(field, z)
        body = pygame.Surface((36, 36), pygame.SRCALPHA)
        pygame.draw.circle(body, (*ZOMBIE_COLOR, alpha), (18, 18), 16)
        pygame.draw.circle(body, (*ZOMBIE_OUTLINE, alpha), (18, 18), 16, 2)
        pygame.draw.circle(body, (20, 20, 20, alpha), (12, 14), 3)
        pygame.draw.circle(body, (20, 20, 20, alpha), (24, 14), 3)
        surf.blit(body, (x, y - 30))

        if prefix:
            done = self.font.render(prefix, True, ACCENT_COLOR)
            rest = self.font.render(z.word[len(prefix):], True, TEXT_COLOR)
            surf.blit(done, (x, y + 8))
            surf.blit(rest, (x + done.get_width(), y + 8))
        else:
            word = self.font.render(z.word, True, TEXT_COLOR)
            word.set_alpha(alpha)
            surf.blit(word, (x, y + 8))


class InputBox:
    """The text field at the bottom of the window."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.text = ""
        self.error = False
        self.shake_until = 0

    def update_fonts(self, font: pygame.font.Font) -> None:
        self.font = font

    def clear(self) -> None:
        self.text = ""
        self.error = False

    def flag_error(self, now_ms: int, duration_ms: int) -> None:
        self.error = True
        self.shake_until = now_ms + duration_ms

    def draw(self, surf: pygame.Surface, now_ms: int, enabled: bool, placeholder: str = "") -> None:
        width, height = surf.get_size()
        rect = pygame.Rect(HUD_PADDING, height - INPUT_HEIGHT + 12, width - 2 * HUD_PADDING, INPUT_HEIGHT - 24)
        if now_ms < self.shake_until:
            rect.x += random.randint(-4, 4)
        border = ERROR_COLOR if self.error else (TEXT_COLOR if enabled else (90, 90, 90))
        pygame.draw.rect(surf, (12, 14, 18), rect)
        pygame.draw.rect(surf, border, rect, 2)

        shown = self.text or ("" if enabled else placeholder)
        text_surf = self.font.render(shown, True, TEXT_COLOR if enabled else DIM_TEXT_COLOR)
        surf.blit(text_surf, (rect.x + 10, rect.centery - text_surf.get_height() // 2))
        if enabled and (now_ms // 500) % 2 == 0:
            cursor_x = rect.x + 12 + text_surf.get_width()
            pygame.draw.line(surf, TEXT_COLOR, (cursor_x, rect.y + 8), (cursor_x, rect.bottom - 8), 2)


class Feedback:
    """Transient flashes, screen shake and the toast message."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.flashes: list[tuple[str, int]] = []
        self.shake_until = 0
        self.toast: str | None = None
        self.toast_until = 0

    def update_fonts(self, font: pygame.font.Font) -> None:
        self.font = font

    def flash(self, kind: str, now_ms: int) -> None:
        self.flashes.append((kind, now_ms))

    def shake(self, now_ms: int) -> None:
        self.shake_until = now_ms + SHAKE_MS

    def show_toast(self, message: str, now_ms: int) -> None:
        self.toast = message
        self.toast_until = now_ms + TOAST_MS

    def offset(self, now_ms: int) -> tuple[int, int]:
        if now_ms < self.shake_until:
            return random.randint(-6, 6), random.randint(-3, 3)
        return 0, 0

    def draw(self, surf: pygame.Surface, now_ms: int) -> None:
        field = field_rect(surf)
        self.flashes = [(k, t) for k, t in self.flashes if now_ms - t < FLASH_MS]
        for kind, t in self.flashes:
            alpha = int(90 * (1 - (now_ms - t) / FLASH_MS))
            layer = pygame.Surface(field.size, pygame.SRCALPHA)
            layer.fill((*FLASH_COLORS.get(kind, FLASH_COLORS["heal"]), alpha))
            surf.blit(layer, field.topleft)

        if self.toast and now_ms < self.toast_until:
            toast_surf = self.font.render(self.toast, True, ACCENT_COLOR)
            toast_rect = toast_surf.get_rect(center=(surf.get_width() // 2, field.top + 40))
            bg = pygame.Surface(toast_rect.inflate(24, 12).size, pygame.SRCALPHA)
            bg.fill((0, 0, 0, 170))
            surf.blit(bg, toast_rect.inflate(24, 12))
            surf.blit(toast_surf, toast_rect)


class Overlay:
    """Modal panel for the title screen and the end-of-session summary."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def update_fonts(self, new_font_big: pygame.font.Font, new_font_small: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font_big = new_font_big
        self.font_small = new_font_small

    def draw_summary(self, surf: pygame.Surface, summary: SessionSummary) -> None:
        color = (120, 255, 140) if summary.cleared else ERROR_COLOR
        self.draw(surf, summary.title, summary.lines(), color)

    def draw(self, surf: pygame.Surface, title: str, lines: list[str], title_color=ACCENT_COLOR) -> None:
        current_width, current_height = surf.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        title_surf = self.font_big.render(title, True, title_color)
        title_y = max(80, int(current_height * 0.25))
        surf.blit(title_surf, title_surf.get_rect(center=(current_width // 2, title_y)))

        y_offset = max(title_y + 60, int(current_height * 0.38))
        for line in lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, text_surf.get_rect(center=(current_width // 2, y_offset)))
            y_offset += 30

        controls = "[F2] start | [F3] pause | [F4] sound | [F5] difficulty | [ESC] quit"
        inst_surf = self.font_small.render(controls, True, (150, 150, 150))
        surf.blit(inst_surf, inst_surf.get_rect(center=(current_width // 2, y_offset + 30)))
