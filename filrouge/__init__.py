"""Game logic for Mastermind and a memory card game."""

__version__ = "0.1.0"
__all__ = ["mastermind", "memory"]