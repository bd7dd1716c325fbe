"""Tests for coinweigh.sequential: hypotheses, classification, weighing, planner."""
import pytest

from coinweigh.errors import InvariantViolation
from coinweigh.sequential.hypotheses import initial_hypotheses, is_resolved, describe_hypothesis
from coinweigh.sequential.classify import TYPE_A, TYPE_B, Classification, classify
from coinweigh.sequential.weigh import MORE, EQUAL, LESS, OUTCOMES, Selection, weigh, outcome_for
from coinweigh.sequential.planner import (
    type_b_counts,
    select_type_a,
    select_type_b,
    plan_selection,
)


def _type_b_set(n_more, n_less):
    """Hypotheses with More coins 1..a, Less coins a+1..a+b; three spare genuine coins."""
    more = tuple(range(1, n_more + 1))
    less = tuple(-c for c in range(n_more + 1, n_more + n_less + 1))
    return more + less, n_more + n_less + 3


# --- hypotheses ---

def test_initial_hypotheses():
    assert initial_hypotheses(3) == (0, 1, 2, 3, -1, -2, -3)
    assert len(initial_hypotheses(12)) == 25


def test_is_resolved():
    assert is_resolved(())
    assert is_resolved((4,))
    assert not is_resolved((0, 1))


def test_describe_hypothesis():
    assert describe_hypothesis(0) == "all genuine"
    assert describe_hypothesis(3) == "coin 3 heavy"
    assert describe_hypothesis(-7) == "coin 7 light"


# --- classify ---

def test_classify_initial_is_type_a():
    cfg = classify(initial_hypotheses(3), 3)
    assert cfg.double == (1, 2, 3)
    assert cfg.equal == () and cfg.more == () and cfg.less == ()
    assert cfg.all_equal is True
    assert cfg.shape == TYPE_A
    assert cfg.possibilities == 7


def test_classify_type_b():
    cfg = classify((1, 2, -5), 6)
    assert cfg.more == (1, 2)
    assert cfg.less == (5,)
    assert cfg.equal == (3, 4, 6)
    assert cfg.double == ()
    assert cfg.all_equal is False
    assert cfg.shape == TYPE_B
    assert cfg.possibilities == 3


def test_classify_every_coin_labelled_once():
    hyps = (0, 2, -2, 3, -4)
    cfg = classify(hyps, 6)
    coins = cfg.equal + cfg.more + cfg.less + cfg.double
    assert sorted(coins) == [1, 2, 3, 4, 5, 6]


def test_classify_mixed_shape_rejected():
    # Double coin without "all genuine" fits neither shape.
    cfg = classify((2, -2, 3), 4)
    assert cfg.shape is None
    with pytest.raises(InvariantViolation):
        cfg.require_shape()
    with pytest.raises(InvariantViolation):
        plan_selection(cfg)


# --- weigh ---

def test_weigh_three_coins():
    parts = weigh(initial_hypotheses(3), Selection(left=(1,), right=(2,)))
    assert parts[MORE] == (1, -2)
    assert parts[EQUAL] == (0, 3, -3)
    assert parts[LESS] == (2, -1)


def test_weigh_partitions_parent():
    hyps = initial_hypotheses(9)
    sel = Selection(left=(1, 2, 3, 7), right=(4, 5, 6, 8))
    parts = weigh(hyps, sel)
    merged = [h for o in OUTCOMES for h in parts[o]]
    assert sorted(merged) == sorted(hyps)
    assert sum(len(parts[o]) for o in OUTCOMES) == len(hyps)


def test_outcome_for():
    sel = Selection(left=(1,), right=(2,))
    assert outcome_for(1, sel) == MORE
    assert outcome_for(-1, sel) == LESS
    assert outcome_for(2, sel) == LESS
    assert outcome_for(-2, sel) == MORE
    assert outcome_for(3, sel) == EQUAL
    assert outcome_for(0, sel) == EQUAL


def test_selection_validate():
    assert Selection(left=(1, 2), right=(3, 4)).validate() is not None
    with pytest.raises(InvariantViolation):
        Selection(left=(1, 2), right=(3,)).validate()
    with pytest.raises(InvariantViolation):
        Selection(left=(1, 2), right=(2, 3)).validate()
    with pytest.raises(InvariantViolation):
        Selection(left=(), right=()).validate()


# --- planner: type A ---

def test_type_a_twelve_coins():
    cfg = classify(initial_hypotheses(12), 12)
    sel = plan_selection(cfg)
    assert sel == Selection(left=(1, 2, 3, 4), right=(5, 6, 7, 8))


def test_type_a_uses_genuine_filler():
    # 4 Double coins and known-genuine coins: 2 vs 1 + one genuine filler.
    hyps = (0, 9, 10, 11, 12, -9, -10, -11, -12)
    sel = plan_selection(classify(hyps, 12))
    assert sel == Selection(left=(9, 10), right=(11, 1))
    parts = weigh(hyps, sel)
    assert [len(parts[o]) for o in OUTCOMES] == [3, 3, 3]


@pytest.mark.parametrize("m", range(2, 21))
@pytest.mark.parametrize("e", [0, 1, 2, 3])
def test_type_a_children_balanced(m, e):
    if m % 3 == 1 and e == 0:
        pytest.skip("uneven first weighing without a genuine filler")
    hyps = initial_hypotheses(m)
    parts = weigh(hyps, plan_selection(classify(hyps, m + e)))
    sizes = [len(parts[o]) for o in OUTCOMES]
    assert max(sizes) - min(sizes) <= 1
    assert sum(sizes) == 2 * m + 1


def test_type_a_without_filler_is_uneven():
    # m = 4, no genuine coin: 1 vs 1, leaving 2 Double coins off the scale.
    hyps = initial_hypotheses(4)
    sel = select_type_a(classify(hyps, 4))
    assert sel == Selection(left=(1,), right=(2,))
    parts = weigh(hyps, sel)
    assert [len(parts[o]) for o in OUTCOMES] == [2, 5, 2]


def test_type_a_single_double_without_filler_fails():
    with pytest.raises(InvariantViolation):
        plan_selection(classify((0, 1, -1), 1))


def test_select_type_a_wrong_shape():
    with pytest.raises(InvariantViolation):
        select_type_a(classify((1, -2), 3))


# --- planner: type B ---

def test_type_b_counts_cases():
    assert type_b_counts(4, 4) == (2, 1, 1, 0)
    assert type_b_counts(1, 1) == (0, 0, 0, -1)
    assert type_b_counts(1, 2) == (1, 1, 0, 2)
    assert type_b_counts(3, 3) == (2, 1, 0, 2)
    assert type_b_counts(0, 3) == (0, 1, 1, 0)
    assert not type_b_counts(3, 0).feasible


def test_type_b_eight_suspects():
    hyps = (1, 2, 3, 4, -5, -6, -7, -8)
    sel = plan_selection(classify(hyps, 12))
    assert sel == Selection(left=(1, 2, 5), right=(3, 4, 6))
    parts = weigh(hyps, sel)
    assert parts[MORE] == (1, 2, -6)
    assert parts[EQUAL] == (-7, -8)
    assert parts[LESS] == (3, 4, -5)


def test_type_b_swaps_roles():
    # Three heavy suspects, no light ones: only the swapped formula is feasible.
    hyps, n = _type_b_set(3, 0)
    sel = select_type_b(classify(hyps, n))
    assert sel == Selection(left=(1,), right=(2,))


def test_type_b_left_filler():
    hyps = (1, -2)
    sel = plan_selection(classify(hyps, 3))
    assert sel == Selection(left=(3,), right=(1,))


def test_select_type_b_wrong_shape():
    with pytest.raises(InvariantViolation):
        select_type_b(classify(initial_hypotheses(5), 5))


def test_type_b_missing_filler():
    # (1, 2) needs two genuine coins on the right arm; only one exists.
    cfg = Classification(equal=(4,), more=(1,), less=(2, 3), double=(), all_equal=False)
    with pytest.raises(InvariantViolation):
        select_type_b(cfg)


@pytest.mark.parametrize("n_more", range(0, 13))
@pytest.mark.parametrize("n_less", range(0, 13))
def test_type_b_children_balanced(n_more, n_less):
    if n_more + n_less < 2:
        pytest.skip("already resolved")
    hyps, n = _type_b_set(n_more, n_less)
    sel = plan_selection(classify(hyps, n))
    parts = weigh(hyps, sel)
    sizes = [len(parts[o]) for o in OUTCOMES]
    assert max(sizes) - min(sizes) <= 1
    assert sum(sizes) == len(hyps)
