from typing import Iterator, List, Optional, Set


class DescendingNumberSet:
    """
    Duplicate-free collection of integers, iterated in descending order.

    Membership lives in a hash set (O(1) insert and dedup). The ordered view is
    sorted once on demand and cached until a new value arrives, which keeps a
    full run at O(N log N).
    """

    def __init__(self):
        self._values: Set[int] = set()
        self._ordered: Optional[List[int]] = []

    def add(self, value: int) -> bool:
        """Inserts `value`. Returns False when it was already present."""
        if value in self._values:
            return False
        self._values.add(value)
        self._ordered = None
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ordered())

    def ordered(self) -> List[int]:
        if self._ordered is None:
            self._ordered = sorted(self._values, reverse=True)
        return list(self._ordered)
