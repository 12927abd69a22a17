import logging

import pygame

from .controls import Controls
from .messages import PAUSE, RESET, RESUME, STEP, Kind, Message, State
from .painting import Painting
from .settings import Settings

log = logging.getLogger(__name__)


def build_fonts():
    # SysFont takes the first installed name and falls back to the default font
    tf   = pygame.font.SysFont
    mono = ["Consolas", "Courier New", "Lucida Console"]
    sans = ["Segoe UI", "Tahoma", "Arial"]
    return dict(big=tf(sans, 22), mid=tf(sans, 17), small=tf(sans, 13), mono_sm=tf(mono, 12))


class SortingVisualizer:
    """
    Application state: the painting being sorted, play/pause state and
    the control panel. update() is the only place state changes.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.state    = State.PAUSED
        self.painting = Painting(settings.algorithm, settings)
        self.canvas   = pygame.Rect(0, 0, settings.canvas_width, settings.window_height)
        self.controls = Controls(settings.canvas_width, 0,
                                 settings.window_width - settings.canvas_width,
                                 settings.window_height, settings.algorithm)

    def _set_state(self, state: State):
        if state != self.state:
            log.info("%s -> %s", self.state.value, state.value)
        self.state = state
        self.controls.state_changed(state)

    def update(self, message: Message):
        kind = message.kind
        if kind == Kind.STEP:
            if self.state == State.PAUSED:
                return
            if not self.painting.sort_step():
                log.info("%s done, sorted=%s", self.painting.algorithm.label,
                         self.painting.is_sorted())
                self._set_state(State.PAUSED)
        elif kind == Kind.PAUSE:
            self._set_state(State.PAUSED)
        elif kind == Kind.RESUME:
            if self.painting.engine.finished:
                return
            self._set_state(State.RUNNING)
        elif kind == Kind.RESET:
            self._set_state(State.PAUSED)
            self.painting = Painting(self.painting.algorithm, self.settings)
        elif kind == Kind.ALGORITHM:
            self._set_state(State.PAUSED)
            self.controls.algorithm_changed(message.algorithm)
            self.painting = Painting(message.algorithm, self.settings)
            log.info("Algorithm: %s", message.algorithm.label)

    @property
    def label(self) -> str:
        label = self.painting.algorithm.label
        if self.painting.engine.finished and self.painting.is_sorted():
            label += "  [SORTED]"
        return label

    def draw(self, screen, fonts):
        self.painting.draw(screen, self.canvas, fonts['big'], self.label)
        self.controls.draw(screen, fonts, pygame.mouse.get_pos())

    def handle(self, ev):
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            msg = self.controls.hit(ev.pos)
            if msg is not None:
                self.update(msg)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                self.update(PAUSE if self.state == State.RUNNING else RESUME)
            elif ev.key == pygame.K_r:
                self.update(RESET)

    def run(self):
        s = self.settings
        pygame.init()
        try:
            screen = pygame.display.set_mode((s.window_width, s.window_height))
            pygame.display.set_caption("Sorting visualizer")
            fonts = build_fonts()
            clock = pygame.time.Clock()
            while True:
                clock.tick(s.fps)
                for ev in pygame.event.get():
                    if ev.type == pygame.QUIT:
                        return
                    if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                        return
                    self.handle(ev)
                for _ in range(s.steps_per_frame):
                    self.update(STEP)
                self.draw(screen, fonts)
                pygame.display.flip()
        finally:
            pygame.quit()
