"""Per-platform configuration directories and owner-only file permissions."""

from __future__ import annotations

import os
import sys
from pathlib import Path

__all__ = [
    "config_path",
    "config_path_with",
    "ethereum_default",
    "ethereum_test",
    "ethereum_with_default",
    "ethereum_with_testnet",
    "restrict_permissions_owner",
]


def config_path(name: str) -> Path:
    """Return the config directory for application `name` (capitalised, e.g. "Ethereum")."""
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / name
    if sys.platform.startswith("win"):
        return home / "AppData" / "Roaming" / name
    return home / f".{name.lower()}"


def config_path_with(name: str, then: str) -> Path:
    """Return a folder inside the config directory of `name`."""
    return config_path(name) / then


def ethereum_default() -> Path:
    """Default directory of an ethereum installation."""
    return config_path("Ethereum")


def ethereum_test() -> Path:
    """Default directory of an ethereum installation for testnet."""
    return ethereum_default() / "testnet"


def ethereum_with_default(name: str) -> Path:
    """A folder inside the default ethereum installation."""
    return ethereum_default() / name


def ethereum_with_testnet(name: str) -> Path:
    """A folder inside the default ethereum installation configured for testnet."""
    return ethereum_default() / "testnet" / name


def restrict_permissions_owner(file_path, write: bool, executable: bool) -> None:
    """Limit access to `file_path` to its owner; does nothing off POSIX systems."""
    if os.name != "posix":
        return
    mode = 0o400 | (0o200 if write else 0) | (0o100 if executable else 0)
    os.chmod(file_path, mode)