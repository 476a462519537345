import pytest

from escape_snake.geometry import Block, Direction


@pytest.mark.parametrize("d", list(Direction))
def test_opposite_is_an_involution(d):
    assert d.opposite().opposite() == d
    assert d.opposite() != d


def test_opposite_pairs():
    assert Direction.UP.opposite() == Direction.DOWN
    assert Direction.LEFT.opposite() == Direction.RIGHT


def test_offsets_are_unit_vectors_in_fixed_order():
    assert list(Direction.offsets()) == [
        (Direction.UP, (0, -1)),
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (-1, 0)),
        (Direction.RIGHT, (1, 0)),
    ]


@pytest.mark.parametrize("d", list(Direction))
def test_opposite_offset_cancels(d):
    dx, dy = d.offset
    ox, oy = d.opposite().offset
    assert (dx + ox, dy + oy) == (0, 0)


def test_block_is_a_hashable_value():
    assert Block(3, 4) == Block(3, 4) == (3, 4)
    assert len({Block(1, 1), Block(1, 1), Block(2, 1)}) == 2
    assert Block(3, 4).shifted((1, -1)) == Block(4, 3)


@pytest.mark.parametrize(
    "block, expected",
    [
        (Block(0, 5), True),    # left wall
        (Block(1, 5), False),
        (Block(18, 5), False),
        (Block(19, 5), True),   # right wall
        (Block(5, 0), True),
        (Block(5, 1), False),
        (Block(5, 18), False),
        (Block(5, 19), True),
        (Block(-3, 5), True),
        (Block(5, 25), True),
    ],
)
def test_out_of_bounds_reserves_the_outer_ring(block, expected):
    assert block.out_of_bounds((0, 20), (0, 20)) is expected
