"""
Command-line interface: the interactive console menu.
"""

from .console import ConsoleUI

__all__ = [
    "ConsoleUI",
]
