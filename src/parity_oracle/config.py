"""Runtime configuration, read from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT = 5.0  # seconds

@dataclass(frozen=True)
class OracleSettings:
    """Connection settings injected into ``ParityOracle``.

    A missing API key is kept as an empty string; the endpoint then answers
    401, which surfaces as a transport error.
    """
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "OracleSettings":
        return cls(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            api_url=os.getenv("PARITY_ORACLE_API_URL", DEFAULT_API_URL),
            model=os.getenv("PARITY_ORACLE_MODEL", DEFAULT_MODEL),
            timeout=float(os.getenv("PARITY_ORACLE_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
