from ..exceptions import InvariantViolation


def assert_block_positions(blocks):
    positions = [block.position for block in blocks]
    if not positions:
        return

    expected = list(range(1, len(positions) + 1))
    if sorted(positions) != expected:
        raise InvariantViolation(
            f"Block positions are not consecutive starting from 1: {positions}"
        )
