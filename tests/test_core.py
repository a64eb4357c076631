import pytest

from satassign.core import AssignCore, RootLevelConflict
from satassign.var import AssignReason


def test_propagation_sequence():
    asg = AssignCore(4)
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


def test_conflict_carries_literal_and_reason():
    asg = AssignCore(2)
    asg.assign_at_root_level(2)
    with pytest.raises(RootLevelConflict) as info:
        asg.assign_at_root_level(-2)
    assert info.value.lit == -2
    assert info.value.reason == AssignReason.decision(0)
    assert str(info.value.reason) == "Asserted"


def test_reasons_and_decision_vi():
    asg = AssignCore(5)
    asg.assign_by_decision(-3)
    asg.assign_by_implication(4, AssignReason.implication(7))
    assert asg.reason(3) == AssignReason.decision(1)
    assert asg.reason(4) == AssignReason.implication(7)
    assert asg.level(4) == 1
    assert asg.decision_vi(1) == 3
    assert asg.assignment(3) is False
    with pytest.raises(ValueError):
        asg.decision_vi(2)


def test_implication_at_root_is_asserted():
    asg = AssignCore(3)
    asg.assign_by_implication(-2, AssignReason.binary_link(1))
    assert asg.reason(2) == AssignReason.decision(0)
    assert asg.value(-2) is True


def test_cancel_until_resets_and_counts_restart():
    asg = AssignCore(3)
    asg.assign_by_decision(1)
    asg.assign_by_implication(2, AssignReason.binary_link(1))
    asg.cancel_until(0)
    assert list(asg) == []
    assert asg.reason(2) == AssignReason.none()
    assert asg.assignment(1) is None
    assert asg.num_restart == 1
    asg.cancel_until(0)
    assert asg.num_restart == 1


def test_backtrack_sandbox():
    asg = AssignCore(4)
    asg.assign_at_root_level(1)
    asg.assign_by_decision(2)
    asg.assign_by_decision(3)
    asg.backtrack_sandbox()
    assert list(asg) == [1]
    assert asg.decision_level() == 0
    assert asg.value(3) is None
    assert not asg.remains()


def test_remains_after_assignments():
    asg = AssignCore(2)
    asg.assign_by_decision(1)
    assert asg.remains()


def test_make_var_eliminated_once():
    asg = AssignCore(3)
    asg.assign_at_root_level(2)
    asg.make_var_eliminated(2)
    asg.make_var_eliminated(2)
    assert list(asg) == []
    assert asg.num_eliminated_vars == 1


def test_reward_on_unassign_with_usage():
    asg = AssignCore(3, decay=0.8)
    asg.set_activity(1, 2.0)
    asg.set_activity(2, 2.0)
    asg.assign_by_decision(1)
    asg.assign_by_decision(2)
    asg.reward_at_analysis(1)
    asg.cancel_until(0)
    assert asg.activity(1) == pytest.approx(1.8)
    assert asg.activity(2) == pytest.approx(1.6)


def test_asserted_var_loses_activity():
    asg = AssignCore(2)
    asg.set_activity(1, 5.0)
    asg.assign_at_root_level(1)
    assert asg.activity(1) == 0.0


def test_decay_tick_and_rescale():
    asg = AssignCore(2)
    asg.update_activity_decay(0.9)
    assert asg.activity_decay == 0.9
    assert asg.activity_anti_decay == pytest.approx(0.1)
    asg.update_activity_tick()
    asg.update_activity_tick()
    assert asg.tick == 2
    asg.set_activity(1, 4.0)
    asg.set_activity(2, 2.0)
    asg.rescale_activity(0.5)
    assert (asg.activity(1), asg.activity(2)) == (2.0, 1.0)


def test_invalid_literal():
    asg = AssignCore(2)
    with pytest.raises(ValueError):
        asg.value(0)
    with pytest.raises(IndexError):
        asg.value(3)