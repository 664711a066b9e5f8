"""Frame counting, on-screen text state and keyboard/mouse control logic."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum, auto

CONTROLS_HELP = (
    "Space to hide interface\n"
    "R to reset with random bodies\n"
    "T to toggle trails\n"
    "F to increase time step\n"
    "S to decrease time step\n"
    "+ to add 100 more bodies\n"
    "- to remove 100 bodies\n"
    "H to increase softening\n"
    "K to decrease softening\n"
    "ESC to exit"
)

TEXT_SIZE = 12
TEXT_COLOR = (255, 255, 255)

BODY_STEP = 100
MIN_BODIES = 11
SOFTENING_STEP = 1.0
MIN_SOFTENING = 1.0
TIME_STEP_FACTOR = 10
SOFTENING_BUMP_THRESHOLD = 0.001

ZOOM_IN_FACTOR = 0.9
ZOOM_OUT_FACTOR = 1.1
MIN_ZOOM = 0.2
MAX_ZOOM = 1.0


class FPSCounter:
    """Counts frames and reports how many were shown in the last full second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._frames = 0
        self._fps = 0
        self._started = clock()

    def update(self) -> None:
        """Register one frame, publishing the count once a second has elapsed."""
        now = self._clock()
        if now - self._started >= 1.0:
            self._fps = self._frames
            self._frames = 0
            self._started = now
        self._frames += 1

    @property
    def fps(self) -> int:
        """Frames counted during the last completed one-second window."""
        return self._fps


@dataclass(frozen=True)
class TextLine:
    """A piece of interface text and the pixel position it is drawn at."""

    text: str
    position: tuple[float, float]


class UIManager:
    """Holds the overlay texts and whether the overlay is shown."""

    def __init__(self, window_width: int, window_height: int) -> None:
        self.hidden = False
        self.body_count = TextLine("", (10, 10))
        self.time_step = TextLine("", (10, 30))
        self.softening = TextLine("", (10, 50))
        self.trails = TextLine("", (10, 70))
        self.controls = TextLine(CONTROLS_HELP, (10, window_height - 156))
        self.fps_text = TextLine("", (window_width - 80, 10))
        self.fps_counter = FPSCounter()

    def update_texts(
        self,
        num_bodies: int,
        dt: float,
        softening: float,
        show_trails: bool,
        current_fps: int,
    ) -> None:
        """Refresh every overlay line from the current simulation settings."""
        self.body_count = replace(self.body_count, text=f"Bodies: {num_bodies}")
        self.time_step = replace(self.time_step, text=f"Time Step: {dt:.6f}s")
        self.softening = replace(self.softening, text=f"Softening: {softening:.2f}")
        self.trails = replace(self.trails, text="Trails: ON" if show_trails else "")
        self.fps_text = replace(self.fps_text, text=f"FPS: {current_fps}")

    def toggle_ui(self) -> None:
        """Show the overlay if hidden, hide it otherwise."""
        self.hidden = not self.hidden

    def visible_lines(self) -> list[TextLine]:
        """The lines to draw this frame; empty while the overlay is hidden."""
        if self.hidden:
            return []
        return [
            self.body_count,
            self.time_step,
            self.softening,
            self.trails,
            self.controls,
            self.fps_text,
        ]


class Key(Enum):
    """Keys the simulator reacts to."""

    ESCAPE = auto()
    SPACE = auto()
    F = auto()
    S = auto()
    H = auto()
    K = auto()
    R = auto()
    ADD = auto()
    EQUAL = auto()
    SUBTRACT = auto()
    DASH = auto()
    T = auto()


class Action(Enum):
    """What the main loop has to do after a key press."""

    NONE = auto()
    QUIT = auto()
    TOGGLE_UI = auto()
    RESET = auto()
    TOGGLE_TRAILS = auto()


@dataclass(frozen=True)
class Settings:
    """User-adjustable simulation parameters."""

    num_bodies: int
    dt: float
    softening: float
    show_trails: bool = False


def _lower_softening(softening: float) -> float:
    return softening - SOFTENING_STEP if softening > MIN_SOFTENING else softening


def apply_key(settings: Settings, key: Key) -> tuple[Settings, Action]:
    """Return the settings after ``key`` is pressed and the action it requires."""
    if key is Key.ESCAPE:
        return settings, Action.QUIT
    if key is Key.SPACE:
        return settings, Action.TOGGLE_UI
    if key is Key.T:
        return replace(settings, show_trails=not settings.show_trails), Action.TOGGLE_TRAILS
    if key is Key.F:
        dt = settings.dt * TIME_STEP_FACTOR
        softening = settings.softening
        if dt >= SOFTENING_BUMP_THRESHOLD:
            softening += SOFTENING_STEP
        return replace(settings, dt=dt, softening=softening), Action.RESET
    if key is Key.S:
        return (
            replace(
                settings,
                dt=settings.dt / TIME_STEP_FACTOR,
                softening=_lower_softening(settings.softening),
            ),
            Action.RESET,
        )
    if key is Key.H:
        return replace(settings, softening=settings.softening + SOFTENING_STEP), Action.RESET
    if key is Key.K:
        return replace(settings, softening=_lower_softening(settings.softening)), Action.RESET
    if key is Key.R:
        return settings, Action.RESET
    if key in (Key.ADD, Key.EQUAL):
        return replace(settings, num_bodies=settings.num_bodies + BODY_STEP), Action.RESET
    if key in (Key.SUBTRACT, Key.DASH):
        count = max(MIN_BODIES, settings.num_bodies - BODY_STEP)
        return replace(settings, num_bodies=count), Action.RESET
    return settings, Action.NONE


def zoom_level_after_scroll(zoom_level: float, delta: float) -> float:
    """Return the zoom level after one wheel step, kept within the allowed range."""
    change = ZOOM_IN_FACTOR if delta > 0 else ZOOM_OUT_FACTOR
    return min(max(zoom_level * change, MIN_ZOOM), MAX_ZOOM)