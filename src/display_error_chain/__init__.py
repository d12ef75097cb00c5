"""display_error_chain library."""

from .chain import DisplayErrorChain, display_chain, iter_chain, root_cause
from .config import load_config
from .exceptions import ErrorChainError, ErrorChainErrorCodes
from .logger import ErrorChainProcessor, error_chain_processor, new_logger
from .models import ChainConfig
from .protocol import ErrorLike, ExceptionAdapter, as_error_like

__all__ = [
    "DisplayErrorChain",
    "display_chain",
    "iter_chain",
    "root_cause",
    "ErrorLike",
    "ExceptionAdapter",
    "as_error_like",
    "ChainConfig",
    "load_config",
    "ErrorChainProcessor",
    "error_chain_processor",
    "new_logger",
    "ErrorChainError",
    "ErrorChainErrorCodes",
]
