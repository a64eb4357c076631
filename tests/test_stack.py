import pytest

from satassign.core import RootLevelConflict
from satassign.stack import AssignStack, Stat


def test_propagation():
    asg = AssignStack(4)
    asg.assign_at_root_level(1)
    assert list(asg) == [1]

    asg.assign_at_root_level(1)
    assert list(asg) == [1]

    asg.assign_at_root_level(2)
    assert list(asg) == [1, 2]

    with pytest.raises(RootLevelConflict):
        asg.assign_at_root_level(-1)
    assert asg.decision_level() == 0
    assert len(asg) == 2

    asg.assign_by_decision(3)
    assert list(asg) == [1, 2, 3]
    assert asg.decision_level() == 1
    assert len(asg) == 3
    assert asg.len_upto(0) == 2

    asg.assign_by_decision(4)
    assert list(asg) == [1, 2, 3, 4]
    assert asg.decision_level() == 2
    assert len(asg) == 4
    assert asg.len_upto(1) == 3

    asg.cancel_until(1)
    assert list(asg) == [1, 2, 3]
    assert asg.decision_level() == 1
    assert len(asg) == 3
    assert asg.len_upto(0) == 2
    assert asg.value(1) is True
    assert asg.value(-1) is False
    assert asg.value(4) is None

    asg.assign_by_decision(4)
    assert list(asg) == [1, 2, 3, 4]
    assert asg.level(4) == 2
    assert (asg.len_upto(0), asg.len_upto(1)) == (2, 3)

    asg.assign_at_root_level(-4)
    assert list(asg) == [1, 2, -4]
    assert asg.decision_level() == 0
    assert len(asg) == 3
    assert asg.value(-4) is True
    assert asg.value(-3) is None


def test_str_at_root_level():
    asg = AssignStack(3)
    asg.assign_at_root_level(1)
    asg.assign_at_root_level(2)
    assert str(asg) == "ASG:: trail(2):[(0, [1, 2])]\n      level: 0, asserted: 0, eliminated: 0"


def test_str_with_levels():
    asg = AssignStack(4)
    asg.assign_at_root_level(1)
    asg.assign_at_root_level(2)
    asg.assign_by_decision(3)
    assert str(asg) == (
        "ASG:: trail(3):[(0, [1, 2]), (1, [3])]\n"
        "      stats: level: 1, asserted: 0, eliminated: 0"
    )


def test_new_var_extends_everything():
    asg = AssignStack(2)
    vi = asg.new_var()
    assert vi == 3
    assert asg.stat(Stat.NUM_VAR) == 3
    assert asg.value(3) is None
    asg.assign_by_decision(-3)
    assert asg.value(3) is False


def test_reinitialize_returns_to_root():
    asg = AssignStack(3)
    asg.assign_at_root_level(1)
    asg.assign_by_decision(2)
    asg.assign_by_decision(3)
    asg.reinitialize()
    assert asg.decision_level() == 0
    assert list(asg) == [1]
    assert asg.stat(Stat.NUM_RESTART) == 1


def test_best_assigned_initial():
    asg = AssignStack(5)
    assert asg.best_assigned() == 5


def test_stat_counts():
    asg = AssignStack(5)
    asg.assign_at_root_level(1)
    asg.assign_by_decision(2)
    asg.make_var_eliminated(5)
    assert asg.stat(Stat.NUM_DECISION) == 1
    assert asg.stat(Stat.NUM_ELIMINATED_VAR) == 1
    assert asg.stat(Stat.NUM_UNASSERTED_VAR) == 4
    assert asg.stat(Stat.NUM_UNASSIGNED_VAR) == 2
    assert asg.stat(Stat.ROOT_LEVEL) == 0


def test_satisfies():
    asg = AssignStack(3)
    asg.assign_at_root_level(1)
    asg.assign_at_root_level(-2)
    assert asg.satisfies([-1, -2]) is True
    assert asg.satisfies([-1, 2, 3]) is False
    assert asg.satisfies([]) is False


def test_extend_model_without_records():
    asg = AssignStack(2)
    asg.assign_at_root_level(2)
    assert asg.extend_model() == [None, None, True]


def test_extend_model_sets_target_when_reasons_false():
    asg = AssignStack(3)
    asg.assign_at_root_level(-1)
    asg.eliminated = [3, 1, 2]
    model = asg.extend_model()
    assert model[3] is True
    assert model[1] is False


def test_extend_model_leaves_target_when_reason_true():
    asg = AssignStack(3)
    asg.assign_at_root_level(1)
    asg.eliminated = [-3, 1, 2]
    assert asg.extend_model()[3] is None


def test_extend_model_unit_record_and_chaining():
    asg = AssignStack(4)
    asg.assign_at_root_level(-1)
    # processed from the end: first [-4] alone, then [3, 1, 4] with 1 and 4 false
    asg.eliminated = [3, 1, 4, 3, -4, 1]
    model = asg.extend_model()
    assert model[4] is False
    assert model[3] is True


def test_extend_model_broken_record():
    asg = AssignStack(2)
    asg.eliminated = [1, 5]
    with pytest.raises(ValueError):
        asg.extend_model()