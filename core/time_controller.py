"""
SimulationClock — tempo simulato avanzato dal render loop.

Il clock appartiene al driver esterno (il loop di rendering): il core legge
soltanto il valore t restituito da step() e lo passa invariato a tutti i
componenti dello stesso tick.

    t += dt_wall · time_scale · SPEEDS[speed_idx] · direction

Velocità disponibili (moltiplicatori di time_scale):
    SPEEDS = [0, 0.25, 0.5, 1, 2, 5, 10, 50]

Controllo:
    clock.speed_up()    — prossimo step di velocità avanti
    clock.speed_down()  — step indietro (0 = pausa)
    clock.reverse()     — inverte direzione
    clock.toggle_pause()
    clock.jump(dt)      — salto in avanti/indietro
    clock.reset()       — torna a t0
    clock.step(dt_wall) — chiamato ogni frame, ritorna t aggiornato
"""

from __future__ import annotations
import math

from .errors import ConfigurationError


SPEEDS = [0, 0.25, 0.5, 1, 2, 5, 10, 50]
SPEED_LABELS = ["PAUSED", "¼×", "½×", "1×", "2×", "5×", "10×", "50×"]

# indice di SPEEDS per velocità normale (1×)
NORMAL_SPEED_IDX = 3


class SimulationClock:
    """
    Tempo simulato in secondi.

    Parametri
    ----------
    time_scale : secondi simulati per secondo reale a velocità 1×
    start      : tempo iniziale (default 0)
    speed_idx  : indice in SPEEDS (default: 1×)
    """

    def __init__(self,
                 time_scale: float = 1.0,
                 start: float = 0.0,
                 speed_idx: int = NORMAL_SPEED_IDX):
        if not math.isfinite(time_scale):
            raise ConfigurationError(f"time_scale must be finite, got {time_scale}")
        if not math.isfinite(start):
            raise ConfigurationError(f"start time must be finite, got {start}")
        self._t0         = float(start)
        self._t          = float(start)
        self._time_scale = float(time_scale)
        self._speed_idx  = max(0, min(speed_idx, len(SPEEDS) - 1))
        self._direction  = +1    # +1 avanti, -1 indietro
        self._paused     = (self._speed_idx == 0)

    # ── Proprietà ────────────────────────────────────────────────────────────

    @property
    def t(self) -> float:
        return self._t

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @property
    def speed(self) -> float:
        """Secondi simulati per secondo reale (0 in pausa)."""
        if self._paused:
            return 0.0
        return self._time_scale * SPEEDS[self._speed_idx] * self._direction

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def speed_label(self) -> str:
        if self._paused:
            return "PAUSED"
        lbl = SPEED_LABELS[self._speed_idx]
        return ("◀◀ " if self._direction < 0 else "") + lbl

    @property
    def speed_idx(self) -> int:
        return self._speed_idx

    # ── Controlli ────────────────────────────────────────────────────────────

    def speed_up(self):
        """Aumenta velocità (o riprende se in pausa)."""
        if self._paused:
            self._paused = False
            if self._speed_idx == 0:
                self._speed_idx = 1
        elif self._speed_idx < len(SPEEDS) - 1:
            self._speed_idx += 1

    def speed_down(self):
        """Diminuisce velocità (pausa a 0)."""
        if self._speed_idx > 0:
            self._speed_idx -= 1
        if self._speed_idx == 0:
            self._paused = True

    def toggle_pause(self):
        self._paused = not self._paused
        if not self._paused and self._speed_idx == 0:
            self._speed_idx = NORMAL_SPEED_IDX

    def reverse(self):
        """Inverte la direzione del tempo."""
        self._direction *= -1

    def set_speed_idx(self, idx: int):
        self._speed_idx = max(0, min(idx, len(SPEEDS) - 1))
        self._paused    = (self._speed_idx == 0)

    def jump(self, delta_seconds: float):
        """Salta di delta_seconds simulati (può essere negativo)."""
        self._t += delta_seconds

    def reset(self):
        """Torna al tempo iniziale, velocità normale, in avanti."""
        self._t         = self._t0
        self._speed_idx = NORMAL_SPEED_IDX
        self._direction = +1
        self._paused    = False

    # ── Aggiornamento frame ───────────────────────────────────────────────────

    def step(self, dt_wall: float) -> float:
        """
        Avanza il tempo di dt_wall secondi reali.
        Ritorna il t aggiornato.
        dt_wall: secondi reali dall'ultimo frame (tipicamente 1/60).
        """
        self._t += dt_wall * self.speed
        return self._t

    def __repr__(self) -> str:
        return f"<SimulationClock t={self._t:.3f} speed={self.speed_label}>"
