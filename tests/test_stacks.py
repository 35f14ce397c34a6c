import io

import pytest

from pushswap.stacks import Stacks


def test_pb_then_pa_restores_the_stacks():
    stacks = Stacks([5, 6, 7])
    stacks.pb()
    assert stacks.a == [6, 7]
    assert stacks.b == [5]
    stacks.pa()
    assert stacks.a == [5, 6, 7]
    assert stacks.b == []
    assert stacks.operations == ["pb", "pa"]


def test_push_from_empty_stack_is_not_recorded():
    stacks = Stacks([1])
    stacks.pa()
    assert stacks.operations == []
    assert stacks.a == [1]
    stacks.pb()
    stacks.pb()
    assert stacks.operations == ["pb"]
    assert stacks.a == []
    assert stacks.b == [1]


def test_swap_on_short_stack_is_still_recorded():
    stacks = Stacks([9])
    stacks.sa()
    stacks.sb()
    assert stacks.a == [9]
    assert stacks.operations == ["sa", "sb"]


def test_sa_twice_is_identity():
    stacks = Stacks([4, 8, 2])
    stacks.sa()
    assert stacks.a[:2] == [8, 4]
    stacks.sa()
    assert stacks.a == [4, 8, 2]


def test_ss_swaps_b_only_when_a_has_two():
    stacks = Stacks([1], [2, 3])
    stacks.ss()
    assert stacks.b == [2, 3]
    stacks = Stacks([1, 4], [2, 3])
    stacks.ss()
    assert stacks.a == [4, 1]
    assert stacks.b == [3, 2]


def test_ra_moves_top_to_bottom_and_rra_undoes_it():
    original = [3, 1, 4, 1, 5]
    stacks = Stacks(original)
    stacks.ra()
    assert stacks.a == original[1:] + original[:1]
    stacks.rra()
    assert stacks.a == original
    assert stacks.operations == ["ra", "rra"]


def test_rb_and_rrb_round_trip():
    stacks = Stacks([], [7, 8, 9])
    stacks.rb()
    assert stacks.b[-1] == 7
    stacks.rrb()
    assert stacks.b == [7, 8, 9]


def test_rotation_of_single_element():
    stacks = Stacks([1], [2])
    stacks.ra()
    stacks.rra()
    stacks.rrb()
    assert stacks.operations == ["ra"]
    assert stacks.a == [1]


def test_rr_and_rrr_are_inverse():
    stacks = Stacks([1, 2, 3], [4, 5])
    stacks.rr()
    assert stacks.a[0] == 2
    assert stacks.b[0] == 5
    stacks.rrr()
    assert stacks.a == [1, 2, 3]
    assert stacks.b == [4, 5]
    assert stacks.operations == ["rr", "rrr"]


def test_moves_are_written_to_stream():
    out = io.StringIO()
    stacks = Stacks([2, 1], stream=out)
    stacks.sa()
    stacks.pb()
    assert out.getvalue() == "sa\npb\n"


@pytest.mark.parametrize("move", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_moves_preserve_contents(move):
    stacks = Stacks([3, 1, 2], [6, 5])
    getattr(stacks, move)()
    assert sorted(stacks.a + stacks.b) == [1, 2, 3, 5, 6]