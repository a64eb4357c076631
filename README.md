# satassign

This package is the assignment side of a CDCL SAT solver. It keeps the
trail of assigned literals and the decision levels. It tracks variable
activity and picks the next decision literal. It also reads answer files in
the DIMACS result format. It is pure Python and needs only the standard
library.

Literals are non-zero integers in DIMACS style. `3` means variable 3 is true
and `-3` means it is false. Variable ids start at 1.

## Modules

### `satassign.heap`

`VarIdHeap(n, activity)` is a binary max-heap of variable ids. It is ordered
by the caller's `activity(vi)` function.

- `insert`, `update` and `remove` change the heap.
- `pop_root` and `peek` read the top of the heap. Both raise `IndexError`
  when the heap is empty.
- `len()` and `in` work on the heap.
- `clear` empties it, and `expand` makes room for one more variable.
- `check` raises `ValueError` if the internal tables are not consistent.

### `satassign.var`

- `Var` holds a variable's flags and its reward. Its methods are `is_on`,
  `set`, `turn_on`, `turn_off`, `toggle` and `update_activity`.
  `update_activity` decays the reward, then adds a reward if the `USED` flag
  is set.
- `FlagVar` holds the flag bits: `ELIMINATED`, `PHASE`, `USED` and
  `PROPAGATED`.
- `AssignReason` says why a variable holds its value. Build one with
  `AssignReason.binary_link(lit)`, `.decision(level)`, `.implication(cid)`
  or `.none()`.
- `new_vars(n)` returns `n + 1` fresh vars. Index 0 is a placeholder.

### `satassign.core`

`AssignCore(num_vars, decay=0.94)` holds the trail.

- `assign_at_root_level(lit)` asserts a literal at the root level. It raises
  `RootLevelConflict` if the literal contradicts an earlier assertion.
- `assign_by_decision(lit)` opens a new decision level.
  `assign_by_implication(lit, reason)` assigns a literal at the current level.
- `cancel_until(level)` backjumps. It saves each variable's phase, decays its
  reward and returns the variable to the heap.
  `backtrack_sandbox()` returns to the root level without touching phases or
  rewards.
- Queries: `value(lit)`, `assignment(vi)`, `level(vi)`, `reason(vi)`,
  `decision_level()`, `decision_vi(level)`, `len_upto(level)` and
  `remains()`. `len()` and iteration go over the trail.
- Activity: `activity`, `set_activity`, `reward_at_analysis`,
  `update_activity_decay`, `update_activity_tick` and `rescale_activity`.
- `make_var_asserted` and `make_var_eliminated` change a variable's status.

### `satassign.select`

`VarSelection` extends `AssignCore` with these methods:

- `select_decision_literal()` takes the most active free variable and signs
  it by its saved phase.
- `reward_by_sls(assignment)` adopts the phases from a `{vi: bool}` mapping.
  It rewards each variable whose phase flipped and returns how many flipped.
- `update_order(vi)` and `rebuild_order()` maintain the heap.

### `satassign.stack`

`AssignStack` extends `VarSelection` with these members:

- `stat(Stat.NUM_DECISION)` and the other `Stat` members return statistics.
- `new_var()` adds a variable and returns its id.
- `reinitialize()` backjumps to the root level.
- `best_assigned()` returns the size of the best assignment, or `None` if it
  is not current.
- `satisfies(lits)` is true if any of the literals is true.
- `extend_model()` returns the assignment indexed by variable id. It completes
  the assignment for eliminated variables from the `eliminated` records. Each
  record has the layout `[target, r1, ..., rk, k + 1]`. The target is made
  true when every `ri` is false.
- `str()` shows the trail split by decision level.

```python
from satassign.stack import AssignStack, Stat

asg = AssignStack(3)
asg.assign_at_root_level(1)
asg.assign_by_decision(2)
print(asg.decision_level())      # 1
asg.cancel_until(0)
print(asg.value(1), asg.value(2))  # True None
print(asg.stat(Stat.NUM_RESTART))  # 1
```

### `satassign.answer`

```python
import io
from satassign.answer import read_assignment

text = "c produced by a solver\ns SATISFIABLE\nv 1 -2 3 0\n"
print(read_assignment(io.StringIO(text), "problem.cnf", "ans_problem.cnf"))
# [1, -2, 3]
```

`read_assignment(stream, cnf_name, assign_name=None)` skips comment lines and
the `s SATISFIABLE` line. It returns the literals of the first `v` line, up to
the `0`. If there is no `v` line it returns an empty list. Errors are raised
as follows:

- `s UNSATISFIABLE` raises `UnsatisfiableAnswer`.
- Any other `s` line raises `IllegalAnswerFormat` when `assign_name` is given,
  and a plain `AnswerError` otherwise.
- Any other line or a malformed literal raises `AnswerError`.

`UnsatisfiableAnswer` and `IllegalAnswerFormat` are subclasses of
`AnswerError`.

`status_line(result, no_color=False)` returns one of these lines, in ANSI
colour unless `no_color` is set:

- `s SATISFIABLE` for `True`
- `s UNSATISFIABLE` for `False`
- `s UNKNOWN` for anything else

## What it does not do

The package does not:

- hold clauses or perform unit propagation
- analyse conflicts or run a search
- provide a command-line solver or model checker

It keeps the assignment state that such a solver works on, and it reads and
formats answers.

## Running the tests

```
pip install -e ".[test]"
pytest
```