"""ErrorLike プロトコルと例外アダプター"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """自身のメッセージと原因を返せるエラー的な値のプロトコル。"""

    def describe(self) -> str: ...

    def cause(self) -> ErrorLike | None: ...


class ExceptionAdapter:
    """任意のオブジェクト（通常は BaseException）を ErrorLike として扱うアダプター。

    describe() は str(error) を返し、cause() は __cause__ を、それが無ければ
    抑制されていない __context__ を返す。
    """

    def __init__(
        self,
        error: object,
        *,
        follow_context: bool = True,
        include_type_name: bool = False,
    ) -> None:
        self.error = error
        self._follow_context = follow_context
        self._include_type_name = include_type_name

    def describe(self) -> str:
        """原因を含まない自身のメッセージを返す。"""
        message = str(self.error)
        if not self._include_type_name:
            return message
        name = type(self.error).__name__
        return f"{name}: {message}" if message else name

    def cause(self) -> ErrorLike | None:
        """チェーン上の次のエラーを返す。ルート原因なら None。"""
        source = getattr(self.error, "__cause__", None)
        if (
            source is None
            and self._follow_context
            and not getattr(self.error, "__suppress_context__", False)
        ):
            source = getattr(self.error, "__context__", None)
        if source is None:
            return None
        return as_error_like(
            source,
            follow_context=self._follow_context,
            include_type_name=self._include_type_name,
        )

    def __repr__(self) -> str:
        return f"ExceptionAdapter({self.error!r})"


def as_error_like(
    value: object,
    *,
    follow_context: bool = True,
    include_type_name: bool = False,
) -> ErrorLike:
    """value が ErrorLike ならそのまま、そうでなければ ExceptionAdapter で包んで返す。"""
    if isinstance(value, ErrorLike):
        return value
    return ExceptionAdapter(
        value,
        follow_context=follow_context,
        include_type_name=include_type_name,
    )


def identity_of(value: ErrorLike) -> object:
    """循環検出に使う実体を返す。アダプターの場合は包んでいるオブジェクト。"""
    if isinstance(value, ExceptionAdapter):
        return value.error
    return value
