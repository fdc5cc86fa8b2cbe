"""Game entry point"""

from __future__ import annotations

import pygame

from .constants import (
    WIDTH, HEIGHT, FPS, BG_COLOR, FONT_NAME, FONT_SIZE_SMALL, FONT_SIZE_MEDIUM,
    FONT_SIZE_LARGE, INPUT_ERROR_MS, STORE_FILE, LOG_FILE
)
from .difficulty import next_difficulty
from .logger import GameLogger
from .models import EventKind, GameEvent
from .simulation import GameState, Simulation, SubmitResult
from .sound import ToneBoard
from .storage import JsonStore
from .ui import HUD, FieldView, InputBox, Feedback, Overlay

PAUSE_KEYS = (pygame.K_F3, pygame.K_TAB)
SUBMIT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class Game:
    """
    Main game controller: owns the window and the frame clock, feeds keyboard
    input to the simulation and draws the frame.
    """

    def __init__(self, difficulty: str = "normal") -> None:
        """Initialize subsystems and wire presentation to simulation events."""
        pygame.init()
        pygame.display.set_caption("Zombie Typer")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.current_width = WIDTH
        self.current_height = HEIGHT
        self.make_fonts(1.0)

        self.store = JsonStore(STORE_FILE)
        self.logger = GameLogger(LOG_FILE)
        self.difficulty = difficulty
        self.sim = Simulation(difficulty, store=self.store, field_width=WIDTH,
                              clock=pygame.time.get_ticks)
        self.sound = ToneBoard(self.store)

        self.hud = HUD(self.font_medium, self.font_small)
        self.field = FieldView(self.font_medium)
        self.input_box = InputBox(self.font_medium)
        self.feedback = Feedback(self.font_big)
        self.overlay = Overlay(self.font_big, self.font_medium)

        self.sim.subscribe(self.sound.handle)
        self.sim.subscribe(self.logger.handle)
        self.sim.subscribe(self.on_event)

    def make_fonts(self, scale_factor: float) -> None:
        self.font_small = pygame.font.Font(FONT_NAME, max(12, int(FONT_SIZE_SMALL * scale_factor)))
        self.font_medium = pygame.font.Font(FONT_NAME, max(14, int(FONT_SIZE_MEDIUM * scale_factor)))
        self.font_big = pygame.font.Font(FONT_NAME, max(20, int(FONT_SIZE_LARGE * scale_factor)))

    # --------------------------------- Events ---------------------------------------

    def on_event(self, event: GameEvent) -> None:
        """Turn simulation events into visual feedback."""
        now = pygame.time.get_ticks()
        if event.kind is EventKind.KILL:
            self.field.mark_dead(event.zombie, now)
            self.feedback.flash("kill", now)
        elif event.kind is EventKind.MISS:
            self.feedback.flash("damage", now)
            self.feedback.shake(now)
        elif event.kind is EventKind.STREAK_PENALTY:
            self.feedback.flash("damage", now)
            self.feedback.shake(now)
        elif event.kind is EventKind.LIFE_GAINED:
            self.feedback.flash("heal", now)
        elif event.kind is EventKind.NEW_RECORD:
            self.hud.highlight(now)
            self.feedback.show_toast("NEW RECORD!", now)
        elif event.kind is EventKind.STARTED:
            self.field.clear()
            self.input_box.clear()
        elif event.kind is EventKind.ENDED:
            self.input_box.clear()

    def start_game(self) -> None:
        self.sim.resize(self.current_width)
        self.sim.start(self.difficulty)
        pygame.key.start_text_input()

    def cycle_difficulty(self) -> None:
        """Switching difficulty restarts the run, like picking it from a menu."""
        self.difficulty = next_difficulty(self.difficulty)
        self.start_game()

    def toggle_sound(self) -> None:
        enabled = self.sound.toggle()
        self.feedback.show_toast(f"Sound {'ON' if enabled else 'OFF'}", pygame.time.get_ticks())

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Handle window resize events and update the field width and fonts."""
        if new_width != self.current_width or new_height != self.current_height:
            self.current_width = new_width
            self.current_height = new_height
            scale_factor = min(new_width / WIDTH, new_height / HEIGHT)
            self.make_fonts(scale_factor)
            self.hud.update_fonts(self.font_medium, self.font_small)
            self.field.update_fonts(self.font_medium)
            self.input_box.update_fonts(self.font_medium)
            self.feedback.update_fonts(self.font_big)
            self.overlay.update_fonts(self.font_big, self.font_medium)
            self.sim.resize(new_width)

    # --------------------------------- Input ----------------------------------------

    def handle_text(self, text: str) -> None:
        if not self.sim.running:
            return
        self.input_box.text += text
        self.refresh_input_state()

    def handle_backspace(self) -> None:
        if not self.sim.running:
            return
        self.input_box.text = self.input_box.text[:-1]
        self.refresh_input_state()

    def refresh_input_state(self) -> None:
        self.input_box.error = self.sim.preview_input(self.input_box.text).error

    def handle_submit(self) -> None:
        result = self.sim.submit(self.input_box.text)
        if result is SubmitResult.IGNORED:
            return
        self.input_box.clear()
        if result is not SubmitResult.KILL:
            self.input_box.flag_error(pygame.time.get_ticks(), INPUT_ERROR_MS)

    def handle_keydown(self, event: pygame.event.Event) -> bool:
        """Returns False when the player asked to quit."""
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_F2:
            self.start_game()
        elif event.key in PAUSE_KEYS:
            self.sim.toggle_pause()
        elif event.key == pygame.K_F4:
            self.toggle_sound()
        elif event.key == pygame.K_F5:
            self.cycle_difficulty()
        elif event.key in SUBMIT_KEYS:
            self.handle_submit()
        elif event.key == pygame.K_BACKSPACE:
            self.handle_backspace()
        return True

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, tick the simulation, render; exits on quit."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)
                elif event.type == pygame.WINDOWFOCUSLOST:
                    self.sim.blur()
                elif event.type == pygame.KEYDOWN:
                    if not self.handle_keydown(event):
                        running = False
                elif event.type == pygame.TEXTINPUT:
                    self.handle_text(event.text)

            now = pygame.time.get_ticks()
            self.sim.tick(now)
            self.draw(now)

            self.clock.tick(FPS)

        pygame.quit()

    # --------------------------------- Rendering ------------------------------------

    def target_hint(self) -> str:
        if self.sim.state is GameState.IDLE:
            return "Read the word of the nearest zombie and type it exactly."
        front = self.sim.nearest()
        if front is None:
            return "Waiting for new zombies..."
        return f'Nearest zombie word: "{front.word}"'

    def draw(self, now_ms: int) -> None:
        """Compose the frame: field -> zombies -> HUD -> text box -> effects -> overlay."""
        frame = pygame.Surface(self.screen.get_size())
        frame.fill(BG_COLOR)

        typed = self.input_box.text
        target = self.sim.preview_input(typed).target
        self.field.draw(frame, now_ms, self.sim.zombies, target, typed)

        tracker = self.sim.tracker
        self.hud.draw(frame, now_ms, tracker.score, tracker.high_score, tracker.streak,
                      tracker.lives, self.sim.profile.label,
                      self.sound.enabled and self.sound.available,
                      self.target_hint(), self.sim.paused)

        if not typed and now_ms >= self.input_box.shake_until:
            self.input_box.error = False
        placeholder = "Paused - press F3 to resume" if self.sim.paused else "Press F2 to start"
        self.input_box.draw(frame, now_ms, self.sim.running, placeholder)
        self.feedback.draw(frame, now_ms)

        if self.sim.ended and self.sim.summary is not None:
            self.overlay.draw_summary(frame, self.sim.summary)
        elif self.sim.state is GameState.IDLE:
            self.overlay.draw(frame, "ZOMBIE TYPER", [
                "Zombies walk in from the right carrying words.",
                "Type a zombie's word and press Enter before it reaches the left edge.",
                f"Difficulty: {self.sim.profile.label}",
            ])

        self.screen.fill(BG_COLOR)
        self.screen.blit(frame, self.feedback.offset(now_ms))
        pygame.display.flip()


def main() -> None:
    Game().run()
