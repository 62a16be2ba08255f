"""
connect4_engine.interfaces - User interfaces for the Connect Four engine

This package contains front ends that drive a GameEngine, currently the
text-mode CLI.
"""

# Don't import anything here to avoid circular imports
__all__ = []
