"""Variables, their flags and the reasons for an assignment."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["FlagVar", "ReasonKind", "AssignReason", "Var", "new_vars"]


class FlagVar(enum.Flag):
    """Per-variable status bits."""

    ELIMINATED = enum.auto()
    PHASE = enum.auto()
    USED = enum.auto()
    PROPAGATED = enum.auto()


class ReasonKind(enum.IntEnum):
    """Kinds of assignment reasons, in their natural ordering."""

    BINARY_LINK = 0
    DECISION = 1
    IMPLICATION = 2
    NONE = 3


@dataclass(frozen=True, order=True)
class AssignReason:
    """Why a variable holds its value: a literal, a level, a clause id, or nothing."""

    kind: ReasonKind
    value: int = 0

    @classmethod
    def binary_link(cls, lit: int) -> AssignReason:
        return cls(ReasonKind.BINARY_LINK, lit)

    @classmethod
    def decision(cls, level: int) -> AssignReason:
        return cls(ReasonKind.DECISION, level)

    @classmethod
    def implication(cls, cid: int) -> AssignReason:
        return cls(ReasonKind.IMPLICATION, cid)

    @classmethod
    def none(cls) -> AssignReason:
        return cls(ReasonKind.NONE, 0)

    def __str__(self) -> str:
        if self.kind is ReasonKind.BINARY_LINK:
            return "Implied by a binary clause"
        if self.kind is ReasonKind.DECISION:
            return "Asserted" if self.value == 0 else f"Decided at level {self.value}"
        if self.kind is ReasonKind.IMPLICATION:
            return f"Implied by {self.value}"
        return "Not assigned"


@dataclass
class Var:
    """A propositional variable: its flags and its activity score."""

    flags: FlagVar = field(default_factory=lambda: FlagVar(0))
    reward: float = 0.0

    def is_on(self, flag: FlagVar) -> bool:
        return flag in self.flags

    def set(self, flag: FlagVar, value: bool) -> None:
        if value:
            self.flags |= flag
        else:
            self.flags &= ~flag

    def turn_on(self, flag: FlagVar) -> None:
        self.flags |= flag

    def turn_off(self, flag: FlagVar) -> None:
        self.flags &= ~flag

    def toggle(self, flag: FlagVar) -> None:
        self.flags ^= flag

    def update_activity(self, decay: float, reward: float) -> float:
        """Decay the reward; add ``reward`` once if the var was used since last time."""
        self.reward *= decay
        if self.is_on(FlagVar.USED):
            self.reward += reward
            self.turn_off(FlagVar.USED)
        return self.reward

    def __str__(self) -> str:
        suffix = ", eliminated" if self.is_on(FlagVar.ELIMINATED) else ""
        return f"V{{{suffix}}}"


def new_vars(n: int) -> list[Var]:
    """Return ``n + 1`` fresh vars; index 0 is an unused placeholder."""
    return [Var() for _ in range(n + 1)]