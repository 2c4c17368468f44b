"""The interactive simulation window and its control panel."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import NamedTuple

import pygame

from particlesim.camera import Camera2D
from particlesim.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_TITLE,
    DEFAULT_WIDTH,
    PARTICLE_COUNT_MAX,
    PARTICLE_COUNT_MIN,
)
from particlesim.field import Field
from particlesim.input import (
    MOUSE_BUTTON_LEFT,
    MOUSE_BUTTON_MIDDLE,
    MOUSE_BUTTON_RIGHT,
    InputManager,
)
from particlesim.motion import Motion
from particlesim.vector import Dimensions, Vector3

BACKGROUND = (25, 25, 38)
PARTICLE_COLOR = (255, 255, 255)
PANEL_COLOR = (36, 36, 48)
PANEL_BORDER = (110, 110, 140)
WIDGET_COLOR = (66, 150, 250)
TEXT_COLOR = (230, 230, 230)

PANEL_RECT = pygame.Rect(10, 10, 350, 150)
SLIDER_RECT = pygame.Rect(20, 50, 240, 20)
BUTTON_RECT = pygame.Rect(20, 90, 100, 28)

_PYGAME_BUTTONS = {1: MOUSE_BUTTON_LEFT, 2: MOUSE_BUTTON_MIDDLE, 3: MOUSE_BUTTON_RIGHT}


@dataclass
class RuntimeState:
    """User-controlled settings of the running application."""

    count: int = 250
    is_running: bool = False


class Circle(NamedTuple):
    """A disc in normalised device coordinates."""

    x: float
    y: float
    radius: float


class Application:
    """Holds the world, camera, input and simulation, and drives the window."""

    def __init__(self, resolution: Dimensions | None = None) -> None:
        resolution = resolution or Dimensions(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.state = RuntimeState()
        self.world = Field(resolution)
        self.camera = Camera2D(self.world)
        self.input = InputManager(self.world, self.camera, resolution)
        self.motion: Motion | None = None
        self._fps = 0.0
        self._font: pygame.font.Font | None = None
        self._dragging_slider = False

    @property
    def resolution(self) -> Dimensions:
        return self.input.resolution

    def set_count(self, count: int) -> None:
        """Set the particle count for the next start, clamped to the allowed range."""
        self.state.count = max(PARTICLE_COUNT_MIN, min(int(count), PARTICLE_COUNT_MAX))

    def start(self) -> None:
        """Start, or restart, the simulation with the current particle count."""
        self.state.is_running = True
        self.motion = Motion(self.state.count, self.world)

    def update(self, dt: float) -> None:
        if self.motion is not None:
            self.motion.update(dt)

    def draw_shapes(self) -> list[Circle]:
        """The particles as discs in normalised device coordinates."""
        if self.motion is None:
            return []
        circles = []
        for particle in self.motion.particles:
            ndc = self.camera.world_to_ndc(particle.position)
            edge = self.camera.world_to_ndc(
                particle.position + Vector3(particle.radius, 0.0, 0.0)
            )
            circles.append(Circle(ndc.x, ndc.y, abs(edge.x - ndc.x)))
        return circles

    def render(self, surface: pygame.Surface) -> None:
        """Draw the particles and the control panel onto a surface."""
        surface.fill(BACKGROUND)
        width, height = surface.get_size()
        for circle in self.draw_shapes():
            cx = round((circle.x + 1.0) * 0.5 * width)
            cy = round((1.0 - circle.y) * 0.5 * height)
            radius = max(1, round(circle.radius * 0.5 * width))
            pygame.draw.circle(surface, PARTICLE_COLOR, (cx, cy), radius)
        self._draw_panel(surface)

    def _font_for_panel(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 22)
        return self._font

    def _draw_panel(self, surface: pygame.Surface) -> None:
        font = self._font_for_panel()
        pygame.draw.rect(surface, PANEL_COLOR, PANEL_RECT)
        pygame.draw.rect(surface, PANEL_BORDER, PANEL_RECT, 1)

        surface.blit(font.render(f"FPS: {self._fps:.1f}", True, TEXT_COLOR), (20, 22))

        pygame.draw.rect(surface, PANEL_BORDER, SLIDER_RECT, 1)
        span = PARTICLE_COUNT_MAX - PARTICLE_COUNT_MIN
        fraction = (self.state.count - PARTICLE_COUNT_MIN) / span
        knob_x = SLIDER_RECT.x + round(fraction * (SLIDER_RECT.width - 8))
        pygame.draw.rect(
            surface, WIDGET_COLOR, pygame.Rect(knob_x, SLIDER_RECT.y + 1, 8, SLIDER_RECT.height - 2)
        )
        label = font.render(f"{self.state.count}  Particles", True, TEXT_COLOR)
        surface.blit(label, (SLIDER_RECT.right + 8, SLIDER_RECT.y + 2))

        pygame.draw.rect(surface, WIDGET_COLOR, BUTTON_RECT)
        caption = font.render("Restart" if self.state.is_running else "Start", True, TEXT_COLOR)
        surface.blit(caption, caption.get_rect(center=BUTTON_RECT.center))

    def _set_count_from_slider(self, x: float) -> None:
        fraction = (x - SLIDER_RECT.x) / SLIDER_RECT.width
        fraction = max(0.0, min(fraction, 1.0))
        span = PARTICLE_COUNT_MAX - PARTICLE_COUNT_MIN
        self.set_count(round(PARTICLE_COUNT_MIN + fraction * span))

    def _handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one window event; False when the window should close."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            if self._dragging_slider:
                self._set_count_from_slider(x)
            self.input.on_cursor(x, y, PANEL_RECT.collidepoint(x, y))
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _PYGAME_BUTTONS.get(event.button)
            if button is None:
                return True
            x, y = event.pos
            pressed = event.type == pygame.MOUSEBUTTONDOWN
            captured = PANEL_RECT.collidepoint(x, y)
            if button == MOUSE_BUTTON_LEFT:
                if pressed and SLIDER_RECT.collidepoint(x, y):
                    self._dragging_slider = True
                    self._set_count_from_slider(x)
                elif pressed and BUTTON_RECT.collidepoint(x, y):
                    self.start()
                elif not pressed:
                    self._dragging_slider = False
            self.input.on_mouse(button, pressed, x, y, captured)
        elif event.type == pygame.MOUSEWHEEL:
            x, y = pygame.mouse.get_pos()
            self.input.on_scroll(event.y, PANEL_RECT.collidepoint(x, y))
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            self.input.on_key(event.key, event.type == pygame.KEYDOWN)
        elif event.type == pygame.VIDEORESIZE:
            self.input.on_resize(event.w, event.h)
        return True

    def run(self) -> None:
        """Open the window and run the frame loop until it is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(
                (self.resolution.width, self.resolution.height), pygame.RESIZABLE
            )
            pygame.display.set_caption(DEFAULT_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                dt = clock.tick() / 1000.0
                self._fps = clock.get_fps()
                self.update(dt)
                self.render(pygame.display.get_surface())
                pygame.display.flip()
                for event in pygame.event.get():
                    if not self._handle_event(event):
                        running = False
        finally:
            self._font = None
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=DEFAULT_TITLE)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")

    try:
        pygame.init()
    except pygame.error:
        return -1
    Application(Dimensions(args.width, args.height)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())