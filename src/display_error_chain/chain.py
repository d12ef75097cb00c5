"""エラーとその原因チェーンを複数行テキストとして表示するフォーマッター"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from typing import Protocol

from .models import ChainConfig
from .protocol import ErrorLike, as_error_like, identity_of


class _Writer(Protocol):
    """テキストを書き込める出力先のプロトコル。"""

    def write(self, text: str, /) -> object: ...


logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ChainConfig()


class _ChainWalker:
    """チェーンを外側から1つずつ辿る。

    通常のメソッド呼び出しで進めるため、ジェネレーターを介さずに使えば
    cause() の例外は StopIteration を含めてそのまま伝播する。同じオブジェクトが
    再び現れた場合と max_depth 個の原因を返した場合はそこで打ち切る。
    """

    def __init__(self, error: object, config: ChainConfig) -> None:
        self._config = config
        self.top = self._adapt(error)
        self._current: ErrorLike | None = self.top
        # id の再利用を防ぐため、訪問済みオブジェクトへの参照を保持する
        self._seen: dict[int, object] = {}
        self._depth = 0
        self._mark(self.top)

    def _adapt(self, value: object) -> ErrorLike:
        return as_error_like(
            value,
            follow_context=self._config.follow_context,
            include_type_name=self._config.include_type_name,
        )

    def _mark(self, value: ErrorLike) -> None:
        target = identity_of(value)
        self._seen[id(target)] = target

    def next_cause(self) -> ErrorLike | None:
        """次の原因を返す。チェーンの終端または打ち切り後は None。"""
        if self._current is None:
            return None
        source = self._current.cause()
        self._current = None
        if source is None:
            return None
        source = self._adapt(source)
        if id(identity_of(source)) in self._seen:
            logger.debug("Error chain cycle detected; stopping after %d causes", self._depth)
            return None
        if self._config.max_depth is not None and self._depth >= self._config.max_depth:
            logger.debug("Error chain truncated at max_depth=%d", self._config.max_depth)
            return None
        self._depth += 1
        self._mark(source)
        self._current = source
        return source


def _walk(error: object, config: ChainConfig) -> Iterator[ErrorLike]:
    """先頭のエラーを含むチェーン全体を外側から順に返す。"""
    walker = _ChainWalker(error, config)
    current: ErrorLike | None = walker.top
    while current is not None:
        yield current
        current = walker.next_cause()


class DisplayErrorChain:
    """エラーをその原因チェーンとともに表示するフォーマッター。

    構築時には何もせず、str() や render() が呼ばれた時点でチェーンを辿る。
    ラップしたエラーを変更することはない。

    >>> try:
    ...     raise RuntimeError("Some I/O") from OSError("wow")
    ... except RuntimeError as e:
    ...     print(DisplayErrorChain(e))
    Some I/O
    Caused by:
      -> wow
    """

    def __init__(self, error: object, config: ChainConfig | None = None) -> None:
        self._error = error
        self._config = config or _DEFAULT_CONFIG

    @property
    def error(self) -> object:
        """ラップしているエラーを返す。"""
        return self._error

    def causes(self) -> Iterator[ErrorLike]:
        """先頭のエラーを除いた原因を外側から順に返す。"""
        walker = _ChainWalker(self._error, self._config)
        cause = walker.next_cause()
        while cause is not None:
            yield cause
            cause = walker.next_cause()

    def write_to(self, sink: _Writer) -> None:
        """整形したチェーンを sink に書き込む。

        sink.write や各エラーの describe()/cause() で発生した例外はそのまま伝播する。
        """
        walker = _ChainWalker(self._error, self._config)
        sink.write(f"{walker.top.describe()}")
        cause = walker.next_cause()
        if cause is not None:
            sink.write(f"\n{self._config.header}")
        while cause is not None:
            sink.write(f"\n{self._config.prefix}{cause.describe()}")
            cause = walker.next_cause()

    def render(self) -> str:
        """整形したチェーンを文字列で返す。末尾に改行は付かない。"""
        buffer = io.StringIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DisplayErrorChain({self._error!r})"


def display_chain(error: object, config: ChainConfig | None = None) -> str:
    """str(DisplayErrorChain(error, config)) のショートカット。"""
    return DisplayErrorChain(error, config).render()


def iter_chain(error: object, config: ChainConfig | None = None) -> Iterator[ErrorLike]:
    """先頭のエラーからルート原因までを順に返す。"""
    return _walk(error, config or _DEFAULT_CONFIG)


def root_cause(error: object, config: ChainConfig | None = None) -> ErrorLike:
    """チェーン末尾のルート原因を返す。原因が無ければ error 自身。"""
    walker = _ChainWalker(error, config or _DEFAULT_CONFIG)
    last = walker.top
    cause = walker.next_cause()
    while cause is not None:
        last = cause
        cause = walker.next_cause()
    return last
