"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_session, websocket_session_required
from .game_logger import game_logger

__all__ = ['require_session', 'websocket_session_required', 'game_logger']
