"""
値が存在するかもしれないし、しないかもしれないことを表すコンテナのためのモジュール。

呼び出し側に None チェックを散らばらせず、値がある場合とない場合の両方を
同じコンビネーターで扱えるようにする。
"""

from dataclasses import dataclass
from typing import Any, Callable, Final, Generic, TypeVar, cast

from .option import Cases, EmptyOption, Option, PresentOption

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Optional(Generic[T]):
    """
    値を持つ (present) か持たない (empty) かのどちらか一方の状態を持つ不変コンテナ。

    状態は生成時に決まり、以後変わらない。変換系の操作は常に新しいコンテナ
    (変更が不要な場合は自分自身) を返す。present なコンテナが None を保持することはない。
    """

    _variant: Present[T] | Empty

    def __post_init__(self) -> None:
        if isinstance(self._variant, Present) and self._variant.value is None:
            raise TypeError("A present Optional cannot hold None.")

    @staticmethod
    def of(value: T | None) -> "Optional[T]":
        """
        None でない値を持つ Optional を返す。

        Raises:
            TypeError: value が None の場合
        """
        if value is None:
            raise TypeError("The passed value was None.")
        return Optional(Present(value))

    @staticmethod
    def of_non_null(value: T | None) -> "Optional[T]":
        """Optional.of の別名。"""
        return Optional.of(value)

    @staticmethod
    def of_nullable(value: T | None) -> "Optional[T]":
        """value が None なら空の Optional を、そうでなければ値を持つ Optional を返す。"""
        if value is None:
            return Optional.empty()
        return Optional(Present(value))

    @staticmethod
    def empty() -> "Optional[T]":
        return cast("Optional[T]", _EMPTY)

    @staticmethod
    def from_option(option: Option[T]) -> "Optional[T]":
        """
        プレーンなレコードを Optional に戻す。

        Raises:
            TypeError: option が認識できる kind を持たない場合
        """
        match option:
            case {"kind": "present", "value": value}:
                return Optional.of(cast(T, value))
            case {"kind": "empty"}:
                return Optional.empty()
            case _:
                raise TypeError("The passed value was not an Option.")

    def is_present(self) -> bool:
        return isinstance(self._variant, Present)

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """
        値を取り出す。空の場合は例外を送出する。

        Raises:
            TypeError: 空の場合
        """
        match self._variant:
            case Present(value):
                return value
            case Empty():
                raise TypeError("Called get on an empty Optional")

    def if_present(self, action: Callable[[T], object]) -> None:
        match self._variant:
            case Present(value):
                action(value)
            case Empty():
                pass

    def if_present_or_else(
        self,
        action: Callable[[T], object],
        empty_action: Callable[[], object],
    ) -> None:
        match self._variant:
            case Present(value):
                action(value)
            case Empty():
                empty_action()

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        match self._variant:
            case Present(value):
                return self if predicate(value) else Optional.empty()
            case Empty():
                return self

    def map(self, mapper: Callable[[T], U | None]) -> "Optional[U]":
        """
        値に mapper を適用する。

        結果は Optional.of_nullable で包まれるため、mapper が None を返した場合は空になる。
        """
        match self._variant:
            case Present(value):
                return Optional.of_nullable(mapper(value))
            case Empty():
                return Optional.empty()

    def flat_map(self, mapper: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        match self._variant:
            case Present(value):
                return mapper(value)
            case Empty():
                return Optional.empty()

    def or_(self, supplier: Callable[[], "Optional[T]"]) -> "Optional[T]":
        match self._variant:
            case Present():
                return self
            case Empty():
                return supplier()

    def or_else(self, other: T) -> T:
        match self._variant:
            case Present(value):
                return value
            case Empty():
                return other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """値を返す。空の場合に限り supplier を呼び出してその結果を返す。"""
        match self._variant:
            case Present(value):
                return value
            case Empty():
                return supplier()

    def or_else_raise(self, error_supplier: Callable[[], BaseException]) -> T:
        """
        値を返す。空の場合は error_supplier が生成した例外をそのまま送出する。

        例外クラスそのもの (例: ``KeyError``) を渡してもよい。
        """
        match self._variant:
            case Present(value):
                return value
            case Empty():
                raise error_supplier()

    def or_none(self) -> T | None:
        match self._variant:
            case Present(value):
                return value
            case Empty():
                return None

    def to_option(self) -> Option[T]:
        match self._variant:
            case Present(value):
                return PresentOption(kind="present", value=value)
            case Empty():
                return EmptyOption(kind="empty")

    def matches(self, cases: Cases[T, U]) -> U:
        match self._variant:
            case Present(value):
                return cases["present"](value)
            case Empty():
                return cases["empty"]()

    def to_json(self) -> T | None:
        """JSON エンコーダー向けの表現。present なら値そのもの、空なら None。"""
        return self.or_none()


_EMPTY: Final[Optional[Any]] = Optional(Empty())
