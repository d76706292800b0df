"""
FIFO queue of addresses awaiting a visit.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, Set


class Frontier:
    """
    Ordered, duplicate-free queue.

    The deque keeps traversal order, the set answers membership in O(1);
    both are updated together on every push and pop.
    """

    def __init__(self, urls: Iterable[str] = ()) -> None:
        self._queue: Deque[str] = deque()
        self._members: Set[str] = set()
        for url in urls:
            self.push(url)

    def push(self, url: str) -> bool:
        """Append ``url`` unless it is already queued. Returns True if added."""
        if url in self._members:
            return False
        self._queue.append(url)
        self._members.add(url)
        return True

    def popleft(self) -> str:
        """Remove and return the front entry. Raises IndexError when empty."""
        url = self._queue.popleft()
        self._members.discard(url)
        return url

    def __contains__(self, url: object) -> bool:
        return url in self._members

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[str]:
        return iter(self._queue)
