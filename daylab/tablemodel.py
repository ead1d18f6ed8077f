"""A small fixed table of phones with Qt-style roles."""

from __future__ import annotations

DISPLAY_ROLE = 0
USER_ROLE = 0x0100


class TableModel:
    """A table of phones: name, cost and manufacturer per row."""

    def __init__(self) -> None:
        self._role_names = {
            DISPLAY_ROLE: "display",
            USER_ROLE: "name",
            USER_ROLE + 1: "cost",
            USER_ROLE + 2: "manufacturer",
        }
        self._phones: list[list[str]] = [
            [f"iphone{i}", str(i * 1000), f"IPHONE{i}"] for i in range(5)
        ]

    def row_count(self) -> int:
        """Number of phones."""
        return len(self._phones)

    def column_count(self) -> int:
        """Number of fields per phone, 0 when the table is empty."""
        if not self._phones:
            return 0
        return len(self._phones[0])

    def data(self, row: int, column: int = 0, role: int = DISPLAY_ROLE) -> str:
        """Return a cell.

        With the display role the cell at *column* is returned; any other role
        selects the field ``role - USER_ROLE`` and ignores *column*.
        """
        field = column if role == DISPLAY_ROLE else role - USER_ROLE
        if row < 0 or field < 0:
            raise IndexError(f"no cell at row {row}, field {field}")
        return self._phones[row][field]

    def role_names(self) -> dict[int, str]:
        """Map of role numbers to role names."""
        return dict(self._role_names)

    def clear(self) -> None:
        """Remove every row."""
        self._phones.clear()