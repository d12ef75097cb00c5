"""ChainConfig の読み込み"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .exceptions import ErrorChainError, ErrorChainErrorCodes
from .models import ChainConfig


def load_config(data: Mapping[str, Any] | None = None) -> ChainConfig:
    """辞書から ChainConfig を生成する。

    data: アプリケーション設定の一部など。None や空辞書ならデフォルト設定。

    Raises:
        ErrorChainError: バリデーションに失敗した場合 (INVALID_CONFIG)
    """
    try:
        return ChainConfig.model_validate(dict(data or {}))
    except ValidationError as e:
        raise ErrorChainError(
            code=ErrorChainErrorCodes.INVALID_CONFIG,
            message=f"Error chain config validation failed with {e.error_count()} error(s)",
            cause=e,
        ) from e
