import pytest

from pushswap.stacks import Op, StackPair, parse_op


@pytest.mark.parametrize("name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_parse_op_accepts_line_with_newline(name):
    assert parse_op(name + "\n") is Op(name)
    assert str(parse_op(name + "\n")) == name


@pytest.mark.parametrize("text", ["", "\n", "RA\n", "ra \n", "rra\n\n", "x\n", "rrrr\n", " sa\n"])
def test_parse_op_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_op(text)


def test_swap_top_two():
    pair = StackPair([5, 6, 7])
    pair.apply(Op.SA)
    assert pair.a == [5, 7, 6]
    assert pair.b == []


def test_swap_on_single_element_is_noop():
    pair = StackPair([4], [9])
    pair.apply(Op.SS)
    assert pair.a == [4]
    assert pair.b == [9]


def test_rotate_moves_top_to_bottom():
    pair = StackPair([1, 2, 3])
    pair.apply(Op.RA)
    assert pair.a == [3, 1, 2]


def test_reverse_rotate_moves_bottom_to_top():
    pair = StackPair([1, 2, 3])
    pair.apply(Op.RRA)
    assert pair.a == [2, 3, 1]


def test_push_moves_top_element():
    pair = StackPair([1, 2, 3], [8])
    pair.apply(Op.PB)
    assert pair.a == [1, 2]
    assert pair.b == [8, 3]


def test_push_from_empty_is_noop():
    pair = StackPair([1, 2], [])
    pair.apply(Op.PA)
    assert pair.a == [1, 2]
    assert pair.b == []


@pytest.mark.parametrize(
    "forward, back",
    [(Op.RA, Op.RRA), (Op.RB, Op.RRB), (Op.RR, Op.RRR), (Op.SA, Op.SA), (Op.SS, Op.SS), (Op.PB, Op.PA)],
)
def test_inverse_moves_restore_state(forward, back):
    a, b = [3, 1, 4, 5, 9], [2, 6, 8]
    pair = StackPair(a, b)
    pair.apply(forward)
    pair.apply(back)
    assert pair.a == a
    assert pair.b == b


@pytest.mark.parametrize(
    "combined, first, second",
    [(Op.SS, Op.SA, Op.SB), (Op.RR, Op.RA, Op.RB), (Op.RRR, Op.RRA, Op.RRB)],
)
def test_combined_moves_equal_both_halves(combined, first, second):
    one = StackPair([3, 1, 4, 5], [9, 2, 6])
    two = StackPair([3, 1, 4, 5], [9, 2, 6])
    one.apply(combined)
    two.apply(first)
    two.apply(second)
    assert one.a == two.a
    assert one.b == two.b


def test_full_rotation_is_identity():
    values = [7, 3, 9, 1, 5]
    pair = StackPair(values)
    for _ in values:
        pair.apply(Op.RA)
    assert pair.a == values


def test_history_records_moves_in_order():
    pair = StackPair([1, 2, 3])
    pair.apply(Op.PB)
    pair.apply("ra")
    pair.apply(Op.PA)
    assert pair.history == [Op.PB, Op.RA, Op.PA]


def test_apply_string_with_unknown_name_raises():
    pair = StackPair([1, 2])
    with pytest.raises(ValueError):
        pair.apply("nope")
    assert pair.history == []


def test_moves_preserve_elements():
    pair = StackPair([4, 8, 15, 16], [23, 42])
    for op in Op:
        pair.apply(op)
    assert sorted(pair.a + pair.b) == [4, 8, 15, 16, 23, 42]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([1], True),
        ([3, 2, 1], True),
        ([3, 3, 1], True),
        ([1, 2, 3], False),
        ([3, 1, 2], False),
    ],
)
def test_is_sorted_reads_from_top(values, expected):
    assert StackPair(values).is_sorted() is expected


def test_is_sorted_ignores_b():
    assert StackPair([2, 1], [1, 5, 3]).is_sorted() is True