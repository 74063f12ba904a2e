"""
State behind the interactive refinement loop.

A RefinementSession owns the extracted colors and the current palette, and
re-runs the affected pipeline stages after each edit. Every mutating
operation marks the session dirty and leaves the palette ready to serialize.
"""

import logging

import numpy as np

from .color import adjust_chroma, adjust_lightness, lab_distance_sq, to_lab
from .config import DEFAULT_ACCENT_CONTRAST, DEFAULT_CLUSTER_COUNT, DEFAULT_SEED
from .palette.assign import assign_slots
from .palette.contrast import enforce_contrast
from .palette.detect import detect_mode
from .palette.extract import extract_colors

logger = logging.getLogger(__name__)

LIGHTNESS_STEP = 0.02
CHROMA_STEP = 0.01


class RefinementSession:
    def __init__(
        self,
        pixels,
        k=DEFAULT_CLUSTER_COUNT,
        mode=None,
        min_contrast=DEFAULT_ACCENT_CONTRAST,
        seed=DEFAULT_SEED,
    ):
        self.pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
        self.k = k
        self.min_contrast = min_contrast
        self.seed = seed
        self.mode = mode if mode is not None else detect_mode(self.pixels)
        self.selected_slot = None
        self.dirty = False
        self.extracted = extract_colors(self.pixels, k=self.k, seed=self.seed)
        self.palette = None
        self._cycles = {}  # slot -> [candidate colors, position]
        self._rebuild()

    def _rebuild(self):
        self.palette = assign_slots(self.extracted, self.mode)
        self._enforce()
        self._cycles.clear()

    def _enforce(self):
        enforce_contrast(self.palette, min_contrast=self.min_contrast)

    def _require_selection(self):
        if self.selected_slot is None:
            raise ValueError("no slot selected")
        return self.selected_slot

    def _replace_slot(self, slot, color):
        self.palette.slots[slot] = color
        if slot == 0:
            self.palette.sync_background()
        self._enforce()
        self.dirty = True

    def select(self, slot):
        slot = int(slot)
        if not 0 <= slot <= 15:
            raise ValueError(f"slot must be between 0 and 15, got {slot}")
        self.selected_slot = slot

    def switch_mode(self):
        """Flip dark/light and rebuild the palette from the same extraction."""
        self.mode = self.mode.toggled()
        logger.info("switched to %s mode", self.mode.value)
        self._rebuild()
        self.dirty = True

    def regenerate(self):
        """Re-run extraction with the next seed."""
        self.seed += 1
        logger.info("regenerating with seed %d", self.seed)
        self.extracted = extract_colors(self.pixels, k=self.k, seed=self.seed)
        self._rebuild()
        self.dirty = True

    def nudge_lightness(self, delta=LIGHTNESS_STEP):
        slot = self._require_selection()
        self._cycles.pop(slot, None)
        self._replace_slot(slot, adjust_lightness(self.palette.slots[slot], delta))

    def nudge_chroma(self, delta=CHROMA_STEP):
        slot = self._require_selection()
        self._cycles.pop(slot, None)
        self._replace_slot(slot, adjust_chroma(self.palette.slots[slot], delta))

    def cycle_candidate(self, step=1):
        """Replace the selected slot with the next (or previous) extracted color.

        Candidates are ordered by Lab distance to the slot's color at the time
        cycling started, and the walk wraps around.
        """
        slot = self._require_selection()
        if not self.extracted:
            return self.palette.slots[slot]

        if slot not in self._cycles:
            current_lab = to_lab(self.palette.slots[slot])
            candidates = sorted(
                (c.color for c in self.extracted),
                key=lambda color: lab_distance_sq(to_lab(color), current_lab),
            )
            self._cycles[slot] = [candidates, -1 if step > 0 else 0]

        candidates, position = self._cycles[slot]
        position = (position + step) % len(candidates)
        if candidates[position] == self.palette.slots[slot] and len(candidates) > 1:
            position = (position + step) % len(candidates)
        self._cycles[slot][1] = position

        self._replace_slot(slot, candidates[position])
        return candidates[position]

    def mark_saved(self):
        self.dirty = False
