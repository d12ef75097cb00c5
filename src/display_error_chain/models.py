"""エラーチェーン表示設定モデル（pydantic BaseModel）"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HEADER = "Caused by:"
DEFAULT_PREFIX = "  -> "


class ChainConfig(BaseModel):
    """エラーチェーンの描画設定。

    デフォルト値のままであれば出力は

        <message>\\nCaused by:\\n  -> <cause-1>\\n  -> <cause-2>

    の形式になる。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    header: str = DEFAULT_HEADER
    prefix: str = DEFAULT_PREFIX
    # __cause__ が無い場合に暗黙の __context__ を辿るか
    follow_context: bool = True
    include_type_name: bool = False
    max_depth: int | None = Field(default=None, ge=1)
