"""Core error-chain types and boundary adapters."""

from .result import Result, is_ok, is_err
from .chain_error import ChainError, ErrorHandle, is_chain_error, message_of, wrap
from .boundary import from_call, from_async, from_blocking, catching

__all__ = [
    "Result",
    "is_ok",
    "is_err",
    "ChainError",
    "ErrorHandle",
    "is_chain_error",
    "message_of",
    "wrap",
    "from_call",
    "from_async",
    "from_blocking",
    "catching",
]
