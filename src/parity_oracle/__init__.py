"""
Parity Oracle package.

Provides:
- An async client that asks a chat-completion model whether a number is odd
- A FastAPI surface and a command-line entry wrapping the same call
"""
from parity_oracle.client import ParityOracle, is_odd
from parity_oracle.common.errors import ErrorKind, OracleError
from parity_oracle.config import OracleSettings
from parity_oracle.version import __version__

__all__ = [
    "ErrorKind",
    "OracleError",
    "OracleSettings",
    "ParityOracle",
    "is_odd",
]
