"""structlog 連携: ログイベントの例外をエラーチェーンとして出力する"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, WrappedLogger

from .chain import display_chain
from .models import ChainConfig


def _resolve_exception(exc_info: Any) -> BaseException | None:
    """exc_info の値（例外・sys.exc_info() 形式のタプル・True）から例外を取り出す。"""
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1]
    return sys.exc_info()[1]


class ErrorChainProcessor:
    """exc_info を整形済みのエラーチェーン文字列に置き換える structlog プロセッサー。"""

    def __init__(self, config: ChainConfig | None = None, key: str = "error_chain") -> None:
        self._config = config
        self._key = key

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        exc_info = event_dict.pop("exc_info", None)
        if not exc_info:
            return event_dict
        error = _resolve_exception(exc_info)
        if error is not None:
            event_dict[self._key] = display_chain(error, self._config)
        return event_dict


error_chain_processor = ErrorChainProcessor()


def new_logger(
    level: str = "INFO",
    format: str = "json",
    config: ChainConfig | None = None,
) -> structlog.stdlib.BoundLogger:
    """エラーチェーン出力を組み込んだ structlog ロガーを返す。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
        config: エラーチェーンの描画設定

    Returns:
        設定済みの structlog.stdlib.BoundLogger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        ErrorChainProcessor(config),
    ]
    if format == "json":
        processors.append(structlog.processors.StackInfoRenderer())
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger()
