from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from models import EmptyContainerError
from settings import settings

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class Queue(Generic[T]):
    """
    単方向リンクで実装した Queue（FIFO）
    enqueue/dequeue: O(1)
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size: int = 0
        if items is not None:
            for item in items:
                self.enqueue(item)

    def enqueue(self, item: T) -> None:
        node = _Node(value=item)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> T:
        if self._head is None:
            logger.debug("dequeue on empty queue")
            raise EmptyContainerError("dequeue", "queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> T:
        if self._head is None:
            logger.debug("peek on empty queue")
            raise EmptyContainerError("peek", "queue")
        return self._head.value

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"


class CircularQueue(Generic[T]):
    """
    配列リングバッファの Circular Queue（固定容量）
    満杯のときは enqueue が False を返し、何も追加しない
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = settings.ring_capacity
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._buf: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._count = 0

    def enqueue(self, item: T) -> bool:
        if self.is_full():
            logger.debug("enqueue on full circular queue (capacity=%d)", self._capacity)
            return False
        self._buf[self._tail] = item
        self._tail = (self._tail + 1) % self._capacity
        self._count += 1
        return True

    def dequeue(self) -> T:
        if self.is_empty():
            logger.debug("dequeue on empty circular queue")
            raise EmptyContainerError("dequeue", "circular queue")
        item = self._buf[self._head]
        self._buf[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return item  # type: ignore[return-value]

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyContainerError("peek", "circular queue")
        return self._buf[self._head]  # type: ignore[return-value]

    def size(self) -> int:
        return self._count

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._buf[(self._head + i) % self._capacity]  # type: ignore[misc]
