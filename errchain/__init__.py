"""errchain: exception-free error propagation with chained causes.

Main components:
* `Result`: value/error pair returned by fallible calls
* `ChainError`: immutable error node wrapping an optional cause
* `wrap`: build a new node around an existing error, as a failed Result
* `from_call` / `from_async`: run raising code and get a Result back
"""

# Version info
__version__ = "0.1.0"

# Core components
from errchain.core.result import Result, is_ok, is_err
from errchain.core.chain_error import (
    ChainError,
    ErrorHandle,
    is_chain_error,
    message_of,
    wrap,
)
from errchain.core.boundary import from_call, from_async, from_blocking, catching

# Export all important symbols
__all__ = [
    # Core classes
    "Result",
    "ChainError",
    "ErrorHandle",

    # Functions
    "wrap",
    "from_call",
    "from_async",
    "from_blocking",
    "catching",
    "is_ok",
    "is_err",
    "is_chain_error",
    "message_of",
]
