from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from models import EmptyContainerError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Stack(Generic[T]):
    """
    Stack（LIFO）
    push: O(1) amortized
    pop : O(1)

    空のときの pop / peek は None ではなく EmptyContainerError を送出する
    （None や -1 を値として積んだ場合と区別できないため）
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: T) -> None:
        self._data.append(item)

    def pop(self) -> T:
        if not self._data:
            logger.debug("pop on empty stack")
            raise EmptyContainerError("pop", "stack")
        return self._data.pop()

    def peek(self) -> T:
        if not self._data:
            logger.debug("peek on empty stack")
            raise EmptyContainerError("peek", "stack")
        return self._data[-1]

    def clear(self) -> None:
        self._data.clear()

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        # top -> bottom（取り出される順）
        return reversed(self._data)

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"
