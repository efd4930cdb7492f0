"""
Optional と相互変換できるプレーンなレコード型。

JSON のように任意のオブジェクトを運べないフォーマットを経由するときに使う。
"""

from typing import Callable, Generic, Literal, TypeVar

from typing_extensions import ReadOnly, TypedDict

T = TypeVar("T")
U = TypeVar("U")


class PresentOption(TypedDict, Generic[T]):
    """値を持つ状態のレコード"""

    kind: ReadOnly[Literal["present"]]
    value: ReadOnly[T]


class EmptyOption(TypedDict):
    """値を持たない状態のレコード"""

    kind: ReadOnly[Literal["empty"]]


Option = PresentOption[T] | EmptyOption


class Cases(TypedDict, Generic[T, U]):
    """Optional.matches に渡す分岐の組"""

    present: ReadOnly[Callable[[T], U]]
    empty: ReadOnly[Callable[[], U]]
