"""Validators - Input validation at the gesture boundary.

Validators return Optional[ToastMessage]:
- None if valid
- A ToastMessage if invalid (caller decides whether to display it)

No exceptions for expected validation failures.
"""

from math import isfinite
from numbers import Real
from typing import Any

from dotlink.model.message import InvalidGestureMessage, ToastMessage


def validate_gesture_coordinates(x: Any, y: Any) -> ToastMessage | None:
    """Validate that gesture coordinates are finite real numbers.

    Returns:
        None if valid, InvalidGestureMessage otherwise.
    """
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, Real):
            return InvalidGestureMessage(x=x, y=y)
        if not isfinite(value):
            return InvalidGestureMessage(x=x, y=y)
    return None
