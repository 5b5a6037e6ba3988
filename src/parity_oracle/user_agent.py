"""Identifying headers sent with every completion request."""
from __future__ import annotations
import platform

CLIENT_NAME = "ParityOracle"


def construct_user_agent(version: str) -> str:
    """Constructs the User-Agent string for the parity oracle client

    Example:
        ParityOracle/0.1.0 (Linux 5.4.0-54-generic; x86_64) Language/Python 3.11.4
    """
    os_info = f"{platform.system()} {platform.release()}; {platform.machine()}"
    python_version = platform.python_version()

    ua_components = [
        f"{CLIENT_NAME}/{version}",
        f"({os_info})",
        f"Language/Python {python_version}",
    ]
    return " ".join(ua_components)
