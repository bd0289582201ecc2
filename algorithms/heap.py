import heapq
from itertools import count
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class EmptyHeapError(IndexError):
    pass


class PriorityQueue(Generic[T]):
    """
    Binary min-heap with ascending extraction.

    Items are ordered by `key(item)`. Equal keys come out in insertion order.
    There is no decrease-key: stale entries are expected to be skipped by
    the caller.
    """

    __slots__ = ['_heap', '_key', '_counter']

    def __init__(self, key: Optional[Callable[[T], Any]] = None, items: Iterable[T] = ()):
        self._key = key if key is not None else (lambda item: item)
        self._counter = count()
        self._heap: List[Tuple[Any, int, T]] = [
            (self._key(item), next(self._counter), item) for item in items]
        heapq.heapify(self._heap)

    def insert(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def extract_min(self) -> T:
        if not self._heap:
            raise EmptyHeapError("extract_min() on an empty heap")
        return heapq.heappop(self._heap)[2]

    def peek_min(self) -> T:
        if not self._heap:
            raise EmptyHeapError("peek_min() on an empty heap")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
