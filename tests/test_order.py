from __future__ import annotations

from types import SimpleNamespace

import pytest

from lessonpages.domain.exceptions import InvariantViolation, ValidationError
from lessonpages.domain.invariants.block import assert_block_positions
from lessonpages.utils.order import compact_order, next_position, swap_adjacent


def make_blocks(*positions: int) -> list[SimpleNamespace]:
    return [SimpleNamespace(id=f"b{i}", position=p) for i, p in enumerate(positions)]


def positions_by_id(blocks) -> dict[str, int]:
    return {b.id: b.position for b in blocks}


def test_next_position_appends_after_existing() -> None:
    assert next_position(0) == 1
    assert next_position(4) == 5


def test_compact_order_closes_gaps_in_existing_order() -> None:
    blocks = make_blocks(2, 5, 9)

    changed = compact_order(blocks)

    assert positions_by_id(blocks) == {"b0": 1, "b1": 2, "b2": 3}
    assert len(changed) == 3


def test_compact_order_leaves_a_valid_sequence_alone() -> None:
    blocks = make_blocks(1, 2, 3)
    assert compact_order(blocks) == []


def test_compact_order_resolves_duplicates() -> None:
    blocks = make_blocks(1, 1, 2)
    compact_order(blocks)
    assert sorted(b.position for b in blocks) == [1, 2, 3]


def test_move_middle_up_swaps_with_previous_only() -> None:
    blocks = make_blocks(1, 2, 3, 4)

    swapped = swap_adjacent(blocks, "b2", "up")

    assert swapped is not None
    assert positions_by_id(blocks) == {"b0": 1, "b1": 3, "b2": 2, "b3": 4}


def test_move_middle_down_swaps_with_next_only() -> None:
    blocks = make_blocks(1, 2, 3)
    swap_adjacent(blocks, "b0", "down")
    assert positions_by_id(blocks) == {"b0": 2, "b1": 1, "b2": 3}


@pytest.mark.parametrize("block_id, direction", [("b0", "up"), ("b2", "down")])
def test_move_past_the_edge_is_a_noop(block_id: str, direction: str) -> None:
    blocks = make_blocks(1, 2, 3)

    assert swap_adjacent(blocks, block_id, direction) is None
    assert positions_by_id(blocks) == {"b0": 1, "b1": 2, "b2": 3}


def test_move_uses_position_order_not_list_order() -> None:
    blocks = [
        SimpleNamespace(id="x", position=3),
        SimpleNamespace(id="y", position=1),
        SimpleNamespace(id="z", position=2),
    ]

    swap_adjacent(blocks, "x", "up")

    assert positions_by_id(blocks) == {"x": 2, "y": 1, "z": 3}


def test_invalid_direction_is_rejected() -> None:
    with pytest.raises(ValidationError):
        swap_adjacent(make_blocks(1, 2), "b0", "sideways")


def test_position_invariant() -> None:
    assert_block_positions([])
    assert_block_positions(make_blocks(2, 1, 3))

    with pytest.raises(InvariantViolation):
        assert_block_positions(make_blocks(1, 3))
    with pytest.raises(InvariantViolation):
        assert_block_positions(make_blocks(1, 1))
