from __future__ import annotations

import heapq
import logging
import math
from collections.abc import MutableSequence
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from models import NanPolicy, Ordering
from settings import settings

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], Union[Ordering, int]]

logger = logging.getLogger(__name__)


def natural_order(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(comparator: Comparator = natural_order) -> Callable[[T, T], Ordering]:
    def compare(a: T, b: T) -> Ordering:
        return Ordering.of(comparator(b, a))
    return compare


def by_key(key: Callable[[T], K], comparator: Comparator = natural_order) -> Callable[[T, T], Ordering]:
    """
    key(x) 同士を比較する比較関数を作る
    例: by_key(lambda p: p.last_name)
    """
    def compare(a: T, b: T) -> Ordering:
        return Ordering.of(comparator(key(a), key(b)))
    return compare


def chain_comparators(*comparators: Comparator) -> Callable[[T, T], Ordering]:
    """
    複数キーでの比較
    先頭の比較関数で EQUAL なら次の比較関数にフォールバックする
    """
    if not comparators:
        raise ValueError("at least one comparator is required")

    def compare(a: T, b: T) -> Ordering:
        for comparator in comparators:
            result = Ordering.of(comparator(a, b))
            if result is not Ordering.EQUAL:
                return result
        return Ordering.EQUAL
    return compare


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def nan_aware(
    comparator: Comparator = natural_order,
    policy: NanPolicy = NanPolicy.LAST,
) -> Callable[[Any, Any], Ordering]:
    """
    NaN を含む浮動小数点列でも全順序になるように比較関数を包む
    NaN 同士は EQUAL、NaN とそれ以外は policy に従って前／後に置く
    """
    if policy is NanPolicy.REJECT:
        def reject(a: Any, b: Any) -> Ordering:
            if _is_nan(a) or _is_nan(b):
                raise ValueError("NaN is not comparable under NanPolicy.REJECT")
            return Ordering.of(comparator(a, b))
        return reject

    nan_side = Ordering.GREATER if policy is NanPolicy.LAST else Ordering.LESS

    def compare(a: Any, b: Any) -> Ordering:
        a_nan = _is_nan(a)
        b_nan = _is_nan(b)
        if a_nan and b_nan:
            return Ordering.EQUAL
        if a_nan:
            return nan_side
        if b_nan:
            return Ordering(-nan_side.value)
        return Ordering.of(comparator(a, b))
    return compare


def _check_in_place(items: Iterable[T], in_place: bool) -> None:
    # 入力を読む前に確認する（ジェネレータを空にしないため）
    if in_place and not isinstance(items, MutableSequence):
        raise TypeError(f"in-place sort needs a mutable sequence, got {type(items).__name__}")


def _finish(items: Iterable[T], result: List[T], in_place: bool) -> List[T]:
    if not in_place:
        return result
    items[:] = result  # type: ignore[index]
    return items  # type: ignore[return-value]


def sort_stable(
    items: Iterable[T],
    comparator: Comparator = natural_order,
    *,
    in_place: bool = False,
) -> List[T]:
    """
    安定ソート（比較で EQUAL の要素は入力での相対順を保つ）
    in_place=False なら新しい list を返し、入力は変更しない
    """
    _check_in_place(items, in_place)
    result = sorted(items, key=cmp_to_key(lambda a, b: Ordering.of(comparator(a, b)).value))
    logger.debug("stable sort of %d item(s)", len(result))
    return _finish(items, result, in_place)


def sort_unstable(
    items: Iterable[T],
    comparator: Comparator = natural_order,
    *,
    in_place: bool = False,
) -> List[T]:
    """
    ヒープソート（EQUAL の要素の相対順は保証しない）
    heapify: O(n), 取り出し: O(log n) x n
    """
    _check_in_place(items, in_place)
    key = cmp_to_key(lambda a, b: Ordering.of(comparator(a, b)).value)
    heap = [key(item) for item in items]
    heapq.heapify(heap)
    result = [heapq.heappop(heap).obj for _ in range(len(heap))]
    logger.debug("unstable sort of %d item(s)", len(result))
    return _finish(items, result, in_place)


def is_sorted(
    items: Iterable[T],
    comparator: Comparator = natural_order,
    *,
    nan_policy: Optional[NanPolicy] = None,
) -> bool:
    """
    隣り合うどのペア (a, b) でも comparator(a, b) が GREATER でなければ True

    NaN の扱い:
    - REJECT（既定）: NaN を1つでも含めば False（NaN はどの値とも順序が付かないため）
    - FIRST / LAST : NaN を先頭／末尾に置かれるべき要素として扱う
    """
    if nan_policy is None:
        nan_policy = settings.nan_policy

    values = list(items)
    if nan_policy is NanPolicy.REJECT:
        if any(_is_nan(v) for v in values):
            return False
        compare: Comparator = comparator
    else:
        compare = nan_aware(comparator, nan_policy)

    for a, b in zip(values, values[1:]):
        if Ordering.of(compare(a, b)) is Ordering.GREATER:
            return False
    return True
