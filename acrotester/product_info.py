"""Production summary shown as a list of ``key: value`` lines."""

from __future__ import annotations

_INITIAL_DATA: tuple[tuple[str, str], ...] = (
    ("工单", "ABCD123"),
    ("数量", "1000"),
    ("良品", "950"),
    ("不良", "50"),
    ("OS Fail", "10"),
    ("Program Fail", "10"),
    ("OS通过率", "80%"),
    ("Prog通过率", "80%"),
    ("模式", "MES模式"),
    ("自动", "自动模式"),
    ("UPH", "8000"),
    ("用户", "admin"),
)


class ProductInfo:
    """Ordered key/value pairs describing the current production run."""

    def __init__(self) -> None:
        self._data: list[list[str]] = [[key, value] for key, value in _INITIAL_DATA]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return ((key, value) for key, value in self._data)

    def display(self, row: int) -> str:
        """Return the display text of ``row``; raises IndexError if out of range."""
        if not 0 <= row < len(self._data):
            raise IndexError(f"row {row} out of range")
        key, value = self._data[row]
        return f"{key}: {value}"

    def lines(self) -> list[str]:
        """Return the display text of every row."""
        return [f"{key}: {value}" for key, value in self._data]

    def update_value(self, key: str, value: str) -> bool:
        """Set the value of the first entry named ``key``; return whether one existed."""
        for entry in self._data:
            if entry[0] == key:
                entry[1] = value
                return True
        return False

    def update_leakage_rate(self) -> bool:
        """Store the leakage pass rate under ``Leakage通过率`` if that entry exists."""
        total = 1000
        leakage_fail = 10
        rate = (total - leakage_fail) * 100.0 / total
        return self.update_value("Leakage通过率", f"{rate:.1f}%")