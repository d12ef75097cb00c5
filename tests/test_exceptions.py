"""ErrorChainError のユニットテスト"""

from display_error_chain.exceptions import ErrorChainError, ErrorChainErrorCodes


def test_error_str_includes_code() -> None:
    """文字列表現にコードが含まれること。"""
    error = ErrorChainError(code="INVALID_CONFIG", message="bad config")
    assert str(error) == "INVALID_CONFIG: bad config"


def test_error_with_cause() -> None:
    """cause が __cause__ に設定されること。"""
    cause = ValueError("root cause")
    error = ErrorChainError(code="INVALID_CONFIG", message="failed", cause=cause)
    assert error.__cause__ is cause


def test_error_without_cause() -> None:
    """cause なしでも作成できること。"""
    error = ErrorChainError(code="INVALID_CONFIG", message="failed")
    assert error.code == "INVALID_CONFIG"
    assert error.__cause__ is None


def test_error_codes_constants() -> None:
    """エラーコード定数が正しい値を持つこと。"""
    assert ErrorChainErrorCodes.INVALID_CONFIG == "INVALID_CONFIG"
