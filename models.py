from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: "Ordering | int") -> "Ordering":
        """
        比較結果を Ordering に正規化する
        int は符号だけを見る（cmp 形式の関数もそのまま使える）
        NaN（例: NaN に対する a - b）は順序が決まらないので ValueError
        """
        if isinstance(value, Ordering):
            return value
        if value != value:
            raise ValueError("comparator returned NaN; wrap it with nan_aware()")
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


class NanPolicy(Enum):
    REJECT = "reject"   # NaN を含む列は整列済みとみなさない
    FIRST = "first"     # NaN は他のどの値よりも前
    LAST = "last"       # NaN は他のどの値よりも後


class EmptyContainerError(IndexError):
    """
    空の Stack / Queue から取り出そうとしたときのエラー
    """

    def __init__(self, operation: str, container: str) -> None:
        super().__init__(f"{operation} from empty {container}")
        self.operation = operation
        self.container = container


@dataclass(frozen=True)
class Person:
    last_name: str
    first_name: str
