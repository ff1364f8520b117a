"""
Category colors and their display codes.
"""

from enum import IntEnum


class TaskColor(IntEnum):
    """Color tag for a category. Stored and serialized as its integer value."""
    GREEN = 0
    WHITE = 1
    RED = 2
    YELLOW = 3

    @property
    def hex_code(self) -> str:
        return _HEX_CODES[self]


_HEX_CODES = {
    TaskColor.GREEN: "#28a745",
    TaskColor.WHITE: "#ffffff",
    TaskColor.RED: "#dc3545",
    TaskColor.YELLOW: "#ffc107",
}
