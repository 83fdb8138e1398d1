"""Colloquy: turn-based dialog stack engine for conversational agents.

A host loads a per-conversation dialog stack, dispatches each inbound turn to
the active dialog, and persists the stack between turns.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
