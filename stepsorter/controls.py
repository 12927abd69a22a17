import pygame

from .algorithms import Algorithm
from .messages import PAUSE, RESET, RESUME, State, choose

# ============================================================
# ========================= UI THEME =========================
# ============================================================

UI_PANEL      = (14, 14,  22)
UI_PANEL2     = (22, 22,  36)
UI_ACCENT     = (255, 55,  55)
UI_TEXT       = (215, 215, 228)
UI_SUBTEXT    = (105, 105, 130)
UI_HOVER      = (30,  22,  38)
UI_SEL_BG     = (50,  12,  12)
UI_BORDER     = (38,  38,  58)
UI_SEL_BORDER = (255, 55,  55)
UI_DIM        = (60,  60,  80)

BTN_H   = 42
BTN_GAP = 5
PAD     = 16

# ============================================================
# ========================= UI WIDGETS =======================
# ============================================================

class AlgoBtn:
    H = BTN_H

    def __init__(self, x, y, w, algorithm, idx):
        self.rect = pygame.Rect(x, y, w, self.H)
        self.algorithm, self.idx = algorithm, idx

    def draw(self, s, fonts, sel, hov):
        bg = UI_SEL_BG if sel else (UI_HOVER if hov else UI_PANEL)
        br = UI_SEL_BORDER if sel else (UI_DIM if hov else UI_BORDER)
        pygame.draw.rect(s, bg, self.rect, border_radius=5)
        pygame.draw.rect(s, br, self.rect, 1, border_radius=5)
        nc = UI_ACCENT if sel else UI_SUBTEXT
        tc = UI_TEXT   if sel or hov else (150, 150, 170)
        s.blit(fonts['mono_sm'].render(f"{self.idx+1:02d}", True, nc),
               (self.rect.x+10, self.rect.y+14))
        s.blit(fonts['mid'].render(self.algorithm.label, True, tc), (self.rect.x+40, self.rect.y+12))


def draw_button(s, fonts, rect, text, active, hover):
    """Flat push button; the active one is filled with the accent colour."""
    fill = UI_ACCENT if active else (UI_HOVER if hover else UI_PANEL2)
    pygame.draw.rect(s, fill, rect, border_radius=5)
    pygame.draw.rect(s, UI_BORDER, rect, 1, border_radius=5)
    t = fonts['small'].render(text, True, (0, 0, 0) if active else UI_TEXT)
    s.blit(t, t.get_rect(center=rect.center))


# ============================================================
# ======================== CONTROLS ==========================
# ============================================================

class Controls:
    """
    Side panel: one button per algorithm, a play/pause toggle and reset.

    Only mirrors the visualizer's state; clicks are turned into messages
    by hit() and the visualizer decides what they mean.
    """

    def __init__(self, x, y, w, h, algorithm: Algorithm, state=State.PAUSED):
        self.rect      = pygame.Rect(x, y, w, h)
        self.state     = state
        self.algorithm = algorithm

        bx, bw = x + PAD, w - 2 * PAD
        self.algo_btns = [
            AlgoBtn(bx, y + PAD + 24 + i * (BTN_H + BTN_GAP), bw, algo, i)
            for i, algo in enumerate(Algorithm)
        ]
        half = (bw - BTN_GAP) // 2
        by   = self.rect.bottom - PAD - 46
        self.play_rect  = pygame.Rect(bx, by, half, 46)
        self.reset_rect = pygame.Rect(bx + half + BTN_GAP, by, half, 46)

    def state_changed(self, state: State):
        self.state = state

    def algorithm_changed(self, algorithm: Algorithm):
        self.algorithm = algorithm

    @property
    def play_label(self) -> str:
        return "Pause" if self.state == State.RUNNING else "Start"

    def hit(self, pos):
        """Message for a click at pos, or None if nothing was hit."""
        for b in self.algo_btns:
            if b.rect.collidepoint(pos):
                return choose(b.algorithm)
        if self.play_rect.collidepoint(pos):
            return PAUSE if self.state == State.RUNNING else RESUME
        if self.reset_rect.collidepoint(pos):
            return RESET
        return None

    def draw(self, s, fonts, mouse_pos):
        pygame.draw.rect(s, UI_PANEL,  self.rect, border_radius=7)
        pygame.draw.rect(s, UI_BORDER, self.rect, 1, border_radius=7)
        s.blit(fonts['small'].render("ALGORITHM", True, UI_SUBTEXT),
               (self.rect.x + PAD, self.rect.y + PAD))
        for b in self.algo_btns:
            b.draw(s, fonts, b.algorithm == self.algorithm, b.rect.collidepoint(mouse_pos))

        draw_button(s, fonts, self.play_rect, self.play_label,
                    self.state == State.RUNNING, self.play_rect.collidepoint(mouse_pos))
        draw_button(s, fonts, self.reset_rect, "Reset",
                    False, self.reset_rect.collidepoint(mouse_pos))
