"""Assignment trail management: root-level assertions, decisions, implications and backjumps."""

from __future__ import annotations

from collections.abc import Iterator

from .heap import VarIdHeap
from .var import AssignReason, FlagVar, Var, new_vars

__all__ = ["RootLevelConflict", "AssignCore"]

DEFAULT_DECAY = 0.94


class RootLevelConflict(Exception):
    """A literal contradicts an assignment already made at the root level."""

    def __init__(self, lit: int, reason: AssignReason) -> None:
        super().__init__(f"root level conflict on {lit} ({reason})")
        self.lit = lit
        self.reason = reason


class AssignCore:
    """The assignment stack of a solver over ``num_vars`` variables.

    Literals are non-zero signed integers: ``v`` is the positive literal of
    variable ``v`` and ``-v`` its negation.
    """

    def __init__(self, num_vars: int, decay: float = DEFAULT_DECAY) -> None:
        if num_vars < 0:
            raise ValueError(f"negative number of vars: {num_vars}")
        self._assign: list[bool | None] = [None] * (num_vars + 1)
        # each var starts on a level of its own
        self._level: list[int] = list(range(num_vars + 1))
        self._reason: list[AssignReason] = [AssignReason.none()] * (num_vars + 1)
        self._trail: list[int] = []
        self._trail_lim: list[int] = []
        self._q_head = 0
        self.root_level = 0
        self._vars: list[Var] = new_vars(num_vars)
        self._heap = VarIdHeap(num_vars, self.activity)

        self.best_assign = False
        self.build_best_at = 0
        self.num_best_assign = 0

        self.num_vars = num_vars
        self.num_asserted_vars = 0
        self.num_eliminated_vars = 0
        self.num_decision = 0
        self.num_propagation = 0
        self.num_conflict = 0
        self.num_restart = 0

        self.tick = 0
        self.activity_decay = decay
        self.activity_anti_decay = 1.0 - decay

    # --- trail inspection -------------------------------------------------

    def __len__(self) -> int:
        return len(self._trail)

    def __iter__(self) -> Iterator[int]:
        return iter(self._trail)

    def _vi(self, lit: int) -> int:
        if lit == 0:
            raise ValueError("0 is not a literal")
        vi = abs(lit)
        if vi >= len(self._assign):
            raise IndexError(f"literal out of range: {lit}")
        return vi

    def value(self, lit: int) -> bool | None:
        """Return the truth value of ``lit``, or ``None`` if its var is unassigned."""
        val = self._assign[self._vi(lit)]
        if val is None:
            return None
        return val if lit > 0 else not val

    def assignment(self, vi: int) -> bool | None:
        return self._assign[vi]

    def level(self, vi: int) -> int:
        return self._level[vi]

    def reason(self, vi: int) -> AssignReason:
        return self._reason[vi]

    def decision_level(self) -> int:
        return len(self._trail_lim)

    def decision_vi(self, level: int) -> int:
        """Return the var decided at ``level`` (which must be at least 1)."""
        if not 0 < level <= len(self._trail_lim):
            raise ValueError(f"no decision at level {level}")
        return abs(self._trail[self._trail_lim[level - 1]])

    def len_upto(self, level: int) -> int:
        """Return the trail length below decision level ``level + 1``."""
        if 0 <= level < len(self._trail_lim):
            return self._trail_lim[level]
        return 0

    def remains(self) -> bool:
        """Return ``True`` if there are unpropagated assignments."""
        return self._q_head < len(self._trail)

    # --- assignment -------------------------------------------------------

    def assign_at_root_level(self, lit: int) -> None:
        """Assert ``lit`` at the root level, backjumping there first."""
        self.cancel_until(self.root_level)
        vi = self._vi(lit)
        self._level[vi] = self.root_level
        current = self._assign[vi]
        if current is None:
            self._assign[vi] = lit > 0
            self._trail.append(lit)
            self.make_var_asserted(vi)
        elif current != (lit > 0):
            raise RootLevelConflict(lit, self._reason[vi])

    def assign_by_implication(self, lit: int, reason: AssignReason) -> None:
        """Assign ``lit`` at the current level; the caller guarantees consistency."""
        vi = self._vi(lit)
        self._assign[vi] = lit > 0
        lv = self.decision_level()
        self._level[vi] = lv
        self._reason[vi] = reason
        self._trail.append(lit)
        if lv == self.root_level:
            self.make_var_asserted(vi)

    def assign_by_decision(self, lit: int) -> None:
        """Open a new decision level and assign ``lit`` there."""
        vi = self._vi(lit)
        self._trail_lim.append(len(self._trail))
        dl = len(self._trail_lim)
        self._level[vi] = dl
        self._assign[vi] = lit > 0
        self._reason[vi] = AssignReason.decision(dl)
        self._trail.append(lit)
        self.num_decision += 1

    def cancel_until(self, level: int) -> None:
        """Undo every assignment above decision level ``level``."""
        if len(self._trail_lim) <= level:
            return
        if self.best_assign:
            self.build_best_at = self.num_propagation
            self.best_assign = False
        lim = self._trail_lim[level]
        for lit in self._trail[lim:]:
            vi = abs(lit)
            var = self._vars[vi]
            var.set(FlagVar.PHASE, bool(self._assign[vi]))
            self._assign[vi] = None
            self._reason[vi] = AssignReason.none()
            self._reward_at_unassign(vi)
            self._heap.insert(vi)
        del self._trail[lim:]
        self._q_head = min(self._q_head, len(self._trail))
        del self._trail_lim[level:]
        if level == self.root_level:
            self.num_restart += 1

    def backtrack_sandbox(self) -> None:
        """Backjump to the root level without touching phases or rewards."""
        if not self._trail_lim:
            return
        lim = self._trail_lim[self.root_level]
        for lit in self._trail[lim:]:
            vi = abs(lit)
            self._assign[vi] = None
            self._reason[vi] = AssignReason.none()
            self._heap.insert(vi)
        del self._trail[lim:]
        del self._trail_lim[self.root_level:]
        self._q_head = len(self._trail)

    def make_var_asserted(self, vi: int) -> None:
        self._reason[vi] = AssignReason.decision(0)
        self.set_activity(vi, 0.0)
        self._heap.remove(vi)

    def make_var_eliminated(self, vi: int) -> None:
        var = self._vars[vi]
        if var.is_on(FlagVar.ELIMINATED):
            return
        var.turn_on(FlagVar.ELIMINATED)
        self.set_activity(vi, 0.0)
        self._heap.remove(vi)
        self._trail = [lit for lit in self._trail if abs(lit) != vi]
        self._q_head = min(self._q_head, len(self._trail))
        self.num_eliminated_vars += 1

    # --- activity (learning-rate rewarding) -------------------------------

    def activity(self, vi: int) -> float:
        return self._vars[vi].reward

    def set_activity(self, vi: int, value: float) -> None:
        self._vars[vi].reward = value

    def reward_at_analysis(self, vi: int) -> None:
        self._vars[vi].turn_on(FlagVar.USED)

    def _reward_at_unassign(self, vi: int) -> None:
        self._vars[vi].update_activity(self.activity_decay, self.activity_anti_decay)

    def update_activity_decay(self, scaling: float) -> None:
        self.activity_decay = scaling
        self.activity_anti_decay = 1.0 - scaling

    def update_activity_tick(self) -> None:
        self.tick += 1

    def rescale_activity(self, scaling: float) -> None:
        for var in self._vars[1:]:
            var.reward *= scaling