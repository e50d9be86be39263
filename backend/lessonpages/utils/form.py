from typing import Any, Dict, Optional

from lessonpages.domain.exceptions import ValidationError


def text_field(
    data: Dict[str, Any],
    key: str,
    default: str = "",
    *,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Read a submitted text field. Missing or null gives `default`;
    a JSON number, list or object is rejected rather than coerced.
    """
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string.", context=context)
    return value
