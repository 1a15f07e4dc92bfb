"""Batcher - splits an ordered sequence into count-bounded batches."""

import math
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

DEFAULT_MAX_BATCH_SIZE = 10

T = TypeVar("T")


class Batches(Generic[T]):
    """
    Lazy, restartable view of `items` split into batches.

    Iterating walks the items in order and closes a batch once it holds
    `size` items. Each iteration starts over from the first item.
    """

    def __init__(self, items: Sequence[T], size: int) -> None:
        if size < 1:
            raise ValueError("max_batch_size must be at least 1")
        self._items = items
        self._size = size

    def __iter__(self) -> Iterator[list[T]]:
        batch: list[T] = []
        for item in self._items:
            batch.append(item)
            if len(batch) == self._size:
                yield batch
                batch = []
        if batch:
            yield batch

    def __len__(self) -> int:
        return math.ceil(len(self._items) / self._size)


def partition(items: Sequence[T], max_batch_size: int = DEFAULT_MAX_BATCH_SIZE) -> Batches[T]:
    """
    Partition items into batches of at most max_batch_size, keeping order.

    Example:
        list(partition([1, 2, 3], 2))  # [[1, 2], [3]]
        list(partition([], 10))        # []
    """
    return Batches(items, max_batch_size)
