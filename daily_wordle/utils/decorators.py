"""
Session Decorators

Resolve the player's game session for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_session(f):
    """
    Decorator for endpoints under /session/<session_id>/.
    Passes the live GameSession to the view as the `session` keyword.
    """
    @wraps(f)
    def decorated_function(session_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        session = game_service.get_session(session_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Session not found or expired'
            }), 404
        
        kwargs['session'] = session
        return f(session_id, *args, **kwargs)
    
    return decorated_function


def websocket_session_required(f):
    """Decorator for WebSocket events that carry a session_id."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return
        
        if not args or not isinstance(args[0], dict) or 'session_id' not in args[0]:
            emit('error', {'error': 'Session ID is required'})
            return
        
        session = game_service.get_session(args[0]['session_id'])
        if session is None:
            emit('error', {'error': 'Session not found or expired'})
            return
        
        kwargs['session'] = session
        return f(*args, **kwargs)
    
    return decorated_function
