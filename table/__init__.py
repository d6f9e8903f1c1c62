"""Terminal front end for the Flip 7 engine."""

from .prompt import ConsolePrompt

__all__ = ["ConsolePrompt"]
