"""Choosing the next decision variable and steering phases from outside hints."""

from __future__ import annotations

from collections.abc import Mapping

from .core import AssignCore
from .var import FlagVar

__all__ = ["VarSelection"]


class VarSelection(AssignCore):
    """An assignment stack that also chooses decision literals from its var heap."""

    def reward_by_sls(self, assignment: Mapping[int, bool]) -> int:
        """Adopt the phases in ``assignment`` and reward every var whose phase flipped.

        Returns the number of flipped vars.
        """
        num_flipped = 0
        for vi, phase in assignment.items():
            var = self._vars[vi]
            if var.is_on(FlagVar.PHASE) != phase:
                num_flipped += 1
                var.set(FlagVar.PHASE, phase)
                var.reward *= self.activity_decay
                var.reward += self.activity_anti_decay
                self._heap.update(vi)
        return num_flipped

    def select_decision_literal(self) -> int:
        """Return a literal for the most active free var, signed by its saved phase.

        Raises ``IndexError`` when no free var is left in the heap.
        """
        vi = self._select_var()
        return vi if self._vars[vi].is_on(FlagVar.PHASE) else -vi

    def update_order(self, vi: int) -> None:
        """Restore heap order after the activity of ``vi`` has grown."""
        self._heap.update(vi)

    def rebuild_order(self) -> None:
        """Refill the heap with exactly the unassigned, non-eliminated vars."""
        self._heap.clear()
        for vi in range(1, len(self._vars)):
            if self._is_free(vi):
                self._heap.insert(vi)

    def _is_free(self, vi: int) -> bool:
        return self._assign[vi] is None and not self._vars[vi].is_on(FlagVar.ELIMINATED)

    def _select_var(self) -> int:
        while True:
            vi = self._heap.pop_root()
            if self._is_free(vi):
                return vi