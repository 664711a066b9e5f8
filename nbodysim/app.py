"""Interactive window that runs and draws the simulation."""

from __future__ import annotations

import os
import re
import signal
import sys
import threading
from collections.abc import Iterable, Sequence

import pygame

from .benchmark import Benchmark
from .body import Body
from .controls import (
    TEXT_COLOR,
    TEXT_SIZE,
    Action,
    Key,
    Settings,
    UIManager,
    apply_key,
    zoom_level_after_scroll,
)
from .simulation import Simulation

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
GRAVITATIONAL_CONSTANT = 1.0
DEFAULT_BODIES = 250
FALLBACK_BODIES = 100
INITIAL_SOFTENING = 2.0
INITIAL_DT = 0.001
MAX_MASS_SMALL = 100.0
MAX_MASS_BIG = 8000.0
FONT_PATH = "/usr/share/fonts/TTF/JetBrainsMono-SemiBoldItalic.ttf"

BACKGROUND = (0, 0, 0)
FADE_COLOR = (10, 10, 40, 10)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def _draw_body(surface: pygame.Surface, body: Body) -> None:
    radius = max(1, round(body.radius))
    pygame.draw.circle(
        surface, body.color, (round(body.position.x), round(body.position.y)), radius
    )


class TrailManager:
    """An off-screen canvas on which bodies leave slowly fading trails."""

    def __init__(self, window_width: int, window_height: int) -> None:
        self.surface = pygame.Surface((window_width, window_height))
        self._fade = pygame.Surface((window_width, window_height), pygame.SRCALPHA)
        self._fade.fill(FADE_COLOR)
        self.enabled = False
        self.clear()

    def clear(self) -> None:
        """Wipe the trail canvas to black."""
        self.surface.fill(BACKGROUND)

    def update(self, bodies: Iterable[Body]) -> None:
        """Fade the previous trails and stamp the bodies at their new positions."""
        if not self.enabled:
            return
        self.surface.blit(self._fade, (0, 0))
        for body in bodies:
            _draw_body(self.surface, body)

    def draw(self, surface: pygame.Surface) -> None:
        """Copy the trail canvas onto ``surface`` while trails are enabled."""
        if self.enabled:
            surface.blit(self.surface, (0, 0))

    def toggle(self) -> None:
        """Switch trails on or off; switching off clears the canvas."""
        self.enabled = not self.enabled
        if not self.enabled:
            self.clear()


class _View:
    """The visible part of the world: a centre point and a zoom level."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.center_x = width / 2
        self.center_y = height / 2
        self.zoom = 1.0

    def _top_left(self) -> tuple[float, float]:
        return (
            self.center_x - self.width * self.zoom / 2,
            self.center_y - self.height * self.zoom / 2,
        )

    def to_world(self, pixel: tuple[int, int]) -> tuple[float, float]:
        left, top = self._top_left()
        return left + pixel[0] * self.zoom, top + pixel[1] * self.zoom

    def zoom_at(self, pixel: tuple[int, int], new_zoom: float) -> None:
        """Change the zoom while keeping the world point under ``pixel`` fixed."""
        before = self.to_world(pixel)
        self.zoom = new_zoom
        after = self.to_world(pixel)
        self.center_x += before[0] - after[0]
        self.center_y += before[1] - after[1]

    def present(self, canvas: pygame.Surface, window: pygame.Surface) -> None:
        """Blit the visible part of ``canvas`` onto ``window``, scaled to fit."""
        left, top = self._top_left()
        wanted = pygame.Rect(
            int(left), int(top), int(self.width * self.zoom), int(self.height * self.zoom)
        )
        src = wanted.clip(canvas.get_rect())
        if src.width <= 0 or src.height <= 0:
            return
        size = (max(1, round(src.width / self.zoom)), max(1, round(src.height / self.zoom)))
        dest = ((src.x - left) / self.zoom, (src.y - top) / self.zoom)
        window.blit(pygame.transform.scale(canvas.subsurface(src), size), dest)


def detect_implementation(binary_path: str) -> str:
    """Guess the implementation name from the file name of the running program."""
    filename = re.split(r"[/\\]", binary_path)[-1]
    if any(tag in filename for tag in ("omp", "OpenMP", "openmp")):
        return "OpenMP"
    if "serial" in filename or "Serial" in filename:
        return "Serial"
    return "Unknown"


def parse_body_count(argv: Sequence[str]) -> int:
    """Read the body count from the first argument, falling back on bad input."""
    if not argv:
        return DEFAULT_BODIES
    match = _INT_PREFIX.match(argv[0])
    value = int(match.group(1)) if match else None
    if value is None or not _INT32_MIN <= value <= _INT32_MAX:
        print(f"Invalid number of bodies. Using default: {FALLBACK_BODIES}")
        return FALLBACK_BODIES
    if value <= 1:
        print(f"Number of bodies must be at least 2. Using default: {FALLBACK_BODIES}")
        return FALLBACK_BODIES
    return value


def _key_map() -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_f: Key.F,
        pygame.K_s: Key.S,
        pygame.K_h: Key.H,
        pygame.K_k: Key.K,
        pygame.K_r: Key.R,
        pygame.K_KP_PLUS: Key.ADD,
        pygame.K_EQUALS: Key.EQUAL,
        pygame.K_KP_MINUS: Key.SUBTRACT,
        pygame.K_MINUS: Key.DASH,
        pygame.K_t: Key.T,
    }


def _new_simulation(settings: Settings) -> Simulation:
    simulation = Simulation(
        GRAVITATIONAL_CONSTANT,
        settings.softening,
        settings.dt,
        WINDOW_WIDTH,
        WINDOW_HEIGHT,
    )
    simulation.initialize_random_bodies(settings.num_bodies, MAX_MASS_SMALL, MAX_MASS_BIG)
    return simulation


def _load_font() -> pygame.font.Font | None:
    try:
        return pygame.font.Font(FONT_PATH, TEXT_SIZE)
    except (OSError, FileNotFoundError, pygame.error):
        print("Warning: Could not load font. UI text won't be displayed.")
        return None


def _draw_ui(canvas: pygame.Surface, ui: UIManager, font: pygame.font.Font | None) -> None:
    if font is None:
        return
    for line in ui.visible_lines():
        x, y = line.position
        for row, text in enumerate(line.text.split("\n")):
            if text:
                canvas.blit(
                    font.render(text, True, TEXT_COLOR),
                    (x, y + row * font.get_linesize()),
                )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulation window and run until it is closed or interrupted."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "nbodysim"
    args = list(sys.argv[1:] if argv is None else argv)
    implementation = detect_implementation(program)
    num_bodies = parse_body_count(args)

    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(f"N-Body Simulation - {implementation}")
        canvas = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        view = _View(WINDOW_WIDTH, WINDOW_HEIGHT)

        settings = Settings(num_bodies, INITIAL_DT, INITIAL_SOFTENING)
        simulation = _new_simulation(settings)
        ui = UIManager(WINDOW_WIDTH, WINDOW_HEIGHT)
        font = _load_font()
        trails = TrailManager(WINDOW_WIDTH, WINDOW_HEIGHT)
        benchmark = Benchmark(implementation, num_bodies)
        keys = _key_map()

        should_exit = threading.Event()

        def on_signal(signum, frame):
            print("\nReceived shutdown signal. Saving results...")
            benchmark.save_results()
            should_exit.set()

        previous = {
            sig: signal.signal(sig, on_signal) for sig in (signal.SIGTERM, signal.SIGINT)
        }

        print(f"Detected implementation: {implementation} (from binary: {program})")
        print(f"Running simulation with {num_bodies} bodies")
        print("Close the window or press Ctrl+C to save benchmark results.")

        try:
            while not should_exit.is_set():
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        benchmark.save_results()
                        return 0
                    if event.type == pygame.KEYDOWN and event.key in keys:
                        settings, action = apply_key(settings, keys[event.key])
                        if action is Action.QUIT:
                            benchmark.save_results()
                            return 0
                        if action is Action.TOGGLE_UI:
                            ui.toggle_ui()
                        elif action is Action.RESET:
                            simulation = _new_simulation(settings)
                            trails.clear()
                        elif action is Action.TOGGLE_TRAILS:
                            trails.toggle()
                            settings = Settings(
                                settings.num_bodies,
                                settings.dt,
                                settings.softening,
                                trails.enabled,
                            )
                    elif event.type == pygame.MOUSEWHEEL:
                        new_zoom = zoom_level_after_scroll(view.zoom, event.y)
                        view.zoom_at(pygame.mouse.get_pos(), new_zoom)

                if should_exit.is_set():
                    break

                simulation.update()
                ui.fps_counter.update()
                trails.update(simulation.bodies)
                benchmark.add_frame(ui.fps_counter.fps)
                ui.update_texts(
                    settings.num_bodies,
                    settings.dt,
                    settings.softening,
                    trails.enabled,
                    ui.fps_counter.fps,
                )

                canvas.fill(BACKGROUND)
                if trails.enabled:
                    trails.draw(canvas)
                else:
                    for body in simulation.bodies:
                        _draw_body(canvas, body)
                _draw_ui(canvas, ui, font)

                window.fill(BACKGROUND)
                view.present(canvas, window)
                pygame.display.flip()
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())