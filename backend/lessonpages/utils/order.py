from typing import Any, List, Optional, Sequence, Tuple

from lessonpages.domain.exceptions import ValidationError

DIRECTIONS = {"up": -1, "down": 1}


def _in_order(items: Sequence[Any], order_field: str) -> List[Any]:
    # id breaks ties so a damaged sequence still renumbers deterministically
    return sorted(items, key=lambda item: (getattr(item, order_field), str(item.id)))


def next_position(count: int) -> int:
    """Position for an appended item: always last in display order."""
    return count + 1


def compact_order(items: Sequence[Any], order_field: str = "position") -> List[Any]:
    """
    Re-assigns sequential order values (1..N) in ascending existing order.

    Full renumber pass: values are recomputed from what is there, never
    patched around a gap. Returns the items whose value changed.
    """
    changed = []

    for index, item in enumerate(_in_order(items, order_field), start=1):
        if getattr(item, order_field) != index:
            setattr(item, order_field, index)
            changed.append(item)

    return changed


def swap_adjacent(
    items: Sequence[Any],
    item_id: Any,
    direction: str,
    order_field: str = "position",
) -> Optional[Tuple[Any, Any]]:
    """
    Swap the order values of `item_id` and its neighbour in `direction`.

    Moving the first item up or the last item down is a no-op and returns
    None. Otherwise only the two order values are exchanged.
    """
    if direction not in DIRECTIONS:
        raise ValidationError(f"Invalid direction: {direction!r}. Use 'up' or 'down'.")

    ordered = _in_order(items, order_field)
    index = next((i for i, item in enumerate(ordered) if item.id == item_id), None)
    if index is None:
        return None

    target = index + DIRECTIONS[direction]
    if target < 0 or target >= len(ordered):
        return None

    a, b = ordered[index], ordered[target]
    a_value, b_value = getattr(a, order_field), getattr(b, order_field)
    setattr(a, order_field, b_value)
    setattr(b, order_field, a_value)

    return a, b
