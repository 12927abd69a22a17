import pygame

from .bars import generate_bars
from .engine import SortEngine, is_ordered
from .settings import BACKGROUND_COLOR, COMPARED_COLOR, Settings

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def bar_color(value, max_value):
    """Blend from blue (short bars) to red (tall bars)."""
    r = value / max_value if max_value > 0 else 0.0
    r = max(0.0, min(1.0, r))
    return (int(255 * r), 0, int(255 * (1 - r)))


class Painting:
    """
    The bar chart of one run: its array, its engine and the pair of
    positions the engine compared last.
    """

    def __init__(self, algorithm, settings: Settings):
        self.settings = settings
        self.bars     = generate_bars(settings.num_bars, settings.value_low,
                                      settings.value_high, settings.seed)
        self.engine   = SortEngine(algorithm)
        self.compared = (None, None)

    @property
    def algorithm(self):
        return self.engine.algorithm

    def sort_step(self) -> bool:
        """Advance the engine once. False when it had nothing left to do."""
        event = self.engine.step(self.bars)
        if event is None:
            self.compared = (None, None)
            return False
        self.compared = event.compared
        return True

    def is_sorted(self) -> bool:
        return is_ordered(self.bars)

    def draw(self, surface, rect, font=None, label=""):
        s = self.settings
        pygame.draw.rect(surface, BACKGROUND_COLOR, rect)
        if not self.bars:
            return
        # Negative values lift the baseline so every height stays >= 0
        base     = min(0, min(self.bars))
        span     = max(self.bars) - base
        usable_h = rect.height - 2 * s.padding
        x = rect.x + s.padding
        for i, v in enumerate(self.bars):
            h = int((v - base) / span * usable_h) if span > 0 else 0
            c = COMPARED_COLOR if i in self.compared else bar_color(v - base, span)
            pygame.draw.rect(surface, c, (x, rect.bottom - s.padding - h, s.bar_width, h))
            x += s.bar_width
        if font and label:
            surface.blit(font.render(label, True, (140, 140, 160)), (rect.x + 12, rect.y + 10))
