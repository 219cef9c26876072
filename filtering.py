from __future__ import annotations

from typing import Callable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


def filter_items(items: Iterable[T], predicate: Predicate) -> List[T]:
    """
    predicate が True の要素だけを元の順序のまま新しい list で返す
    入力は変更しない
    """
    return [item for item in items if predicate(item)]


def partition(items: Iterable[T], predicate: Predicate) -> Tuple[List[T], List[T]]:
    matched: List[T] = []
    rest: List[T] = []
    for item in items:
        (matched if predicate(item) else rest).append(item)
    return matched, rest


def is_even(n: int) -> bool:
    return n % 2 == 0


def is_odd(n: int) -> bool:
    return n % 2 != 0


def negate(predicate: Predicate) -> Predicate:
    return lambda item: not predicate(item)


def all_of(*predicates: Predicate) -> Predicate:
    # 空なら常に True
    return lambda item: all(p(item) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    # 空なら常に False
    return lambda item: any(p(item) for p in predicates)
