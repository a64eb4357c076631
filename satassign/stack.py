"""The full assignment stack: statistics, new vars and model extension."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .heap import VarIdHeap
from .select import VarSelection
from .var import AssignReason, Var

__all__ = ["Stat", "AssignStack"]


class Stat(enum.Enum):
    """Integer statistics an assignment stack can report."""

    NUM_CONFLICT = enum.auto()
    NUM_DECISION = enum.auto()
    NUM_PROPAGATION = enum.auto()
    NUM_REPHASE = enum.auto()
    NUM_RESTART = enum.auto()
    NUM_VAR = enum.auto()
    NUM_ASSERTED_VAR = enum.auto()
    NUM_ELIMINATED_VAR = enum.auto()
    NUM_RECONFLICT = enum.auto()
    NUM_REPROPAGATION = enum.auto()
    NUM_UNASSERTED_VAR = enum.auto()
    NUM_UNASSIGNED_VAR = enum.auto()
    NUM_UNREACHABLE_VAR = enum.auto()
    ROOT_LEVEL = enum.auto()


class AssignStack(VarSelection):
    """An assignment stack with statistics and model extension over eliminated vars.

    ``eliminated`` holds records laid out as ``[target, r1, ..., rk, width]``
    where ``width`` (a plain count, ``k + 1``) is the number of entries before
    it in the record.  The target literal is made true when every ``ri`` is
    false in the model.
    """

    def __init__(self, num_vars: int, decay: float = 0.94) -> None:
        super().__init__(num_vars, decay)
        self.stage_scale = 1
        self.eliminated: list[int] = []
        self.num_rephase = 0
        self.num_reconflict = 0
        self.num_repropagation = 0

    def __str__(self) -> str:
        lits = list(self._trail)
        levels = self.decision_level()
        if levels == 0:
            return (
                f"ASG:: trail({len(lits)}):[(0, {lits})]\n"
                f"      level: {levels}, asserted: {self.num_asserted_vars}, "
                f"eliminated: {self.num_eliminated_vars}"
            )

        def segment(lv: int) -> tuple[int, list[int]]:
            if lv == 0:
                return (0, lits[: self.len_upto(0)])
            if lv == levels:
                return (levels, lits[self.len_upto(levels - 1):])
            return (lv, lits[self.len_upto(lv - 1): self.len_upto(lv)])

        segments = [segment(lv) for lv in range(levels + 1)]
        return (
            f"ASG:: trail({len(lits)}):{segments}\n"
            f"      stats: level: {levels}, asserted: {self.num_asserted_vars}, "
            f"eliminated: {self.num_eliminated_vars}"
        )

    def new_var(self) -> int:
        """Add a fresh unassigned var and return its id."""
        self._assign.append(None)
        self._level.append(0)
        self._reason.append(AssignReason.none())
        self._heap.expand()
        self.num_vars += 1
        self._vars.append(Var())
        return self.num_vars

    def reinitialize(self) -> None:
        """Backjump to the root level."""
        self.cancel_until(self.root_level)

    def best_assigned(self) -> int | None:
        """Return the number of vars outside the best assignment, if it is current."""
        if self.build_best_at == self.num_propagation:
            return self.num_vars - self.num_best_assign
        return None

    def extend_model(self) -> list[bool | None]:
        """Return the assignment (indexed by var id) completed for eliminated vars."""
        model: list[bool | None] = list(self._assign)
        records = self.eliminated

        def is_false(lit: int) -> bool:
            val = model[abs(lit)]
            return val is not None and val != (lit > 0)

        i = len(records)
        while i > 0:
            i -= 1
            width = records[i]
            if not 0 < width <= i:
                raise ValueError(f"broken elimination record at {i}: width {width}")
            target_index = i - width
            reasons = records[target_index + 1: i]
            i = target_index
            if all(is_false(lit) for lit in reasons):
                target = records[target_index]
                model[abs(target)] = target > 0
        return model

    def satisfies(self, lits: Iterable[int]) -> bool:
        """Return ``True`` if some literal is true under the current assignment."""
        return any(self.value(lit) is True for lit in lits)

    def stat(self, key: Stat) -> int:
        """Return the statistic named by ``key``."""
        unasserted = self.num_vars - self.num_asserted_vars - self.num_eliminated_vars
        values = {
            Stat.NUM_CONFLICT: self.num_conflict,
            Stat.NUM_DECISION: self.num_decision,
            Stat.NUM_PROPAGATION: self.num_propagation,
            Stat.NUM_REPHASE: self.num_rephase,
            Stat.NUM_RESTART: self.num_restart,
            Stat.NUM_VAR: self.num_vars,
            Stat.NUM_ASSERTED_VAR: self.num_asserted_vars,
            Stat.NUM_ELIMINATED_VAR: self.num_eliminated_vars,
            Stat.NUM_RECONFLICT: self.num_reconflict,
            Stat.NUM_REPROPAGATION: self.num_repropagation,
            Stat.NUM_UNASSERTED_VAR: unasserted,
            Stat.NUM_UNASSIGNED_VAR: unasserted - len(self._trail),
            Stat.NUM_UNREACHABLE_VAR: self.num_vars - self.num_best_assign,
            Stat.ROOT_LEVEL: self.root_level,
        }
        return values[key]