"""Shared type aliases for the core and domain layers."""
from typing import Literal

Screen = Literal["home", "battle"]

__all__ = ["Screen"]
