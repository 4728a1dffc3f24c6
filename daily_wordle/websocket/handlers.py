"""
WebSocket Event Handlers

Lets a browser client drive its daily game over a socket, one key at a time.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger


def _session_room(session_id):
    return f"session_{session_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect():
        """Handle WebSocket disconnection. Sessions outlive the socket."""
        game_logger.logger.info(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('new_session')
    def handle_new_session(data=None):
        """Create a session for today's puzzle and join its room."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            session_id = game_service.create_session()
            join_room(_session_room(session_id))

            emit('session_created', {
                'success': True,
                'session_id': session_id,
                'state': asdict(game_service.get_game_state(session_id))
            })

        except Exception as e:
            game_logger.logger.error(f"WebSocket: error creating session: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('join_session')
    @websocket_session_required
    def handle_join_session(data, session=None):
        """Join an existing session's room and receive its current state."""
        session_id = data['session_id']
        join_room(_session_room(session_id))

        emit('state_update', {
            'success': True,
            'state': asdict(session.get_state())
        })

    @socketio.on('leave_session')
    @websocket_session_required
    def handle_leave_session(data, session=None):
        """Stop receiving updates for a session."""
        leave_room(_session_room(data['session_id']))

    @socketio.on('key')
    @websocket_session_required
    def handle_key(data, session=None):
        """Apply one key press and broadcast the result to the session room."""
        try:
            session_id = data['session_id']
            result = session.handle_key(data.get('key'))

            emit('action_result', asdict(result))
            emit('state_update', {
                'success': True,
                'state': asdict(session.get_state())
            }, room=_session_room(session_id))

            if result.action == 'submit' and result.accepted and session.is_over:
                event = 'game_won' if result.terminal == 'won' else 'game_lost'
                game_logger.log_game_event(
                    session_id, event, request.remote_addr or 'unknown',
                    rounds_used=len(session.attempts), target_word=session.secret_word,
                    day_ordinal=session.day_ordinal
                )

        except Exception as e:
            game_logger.logger.error(f"WebSocket: error handling key: {e}")
            emit('error', {'error': str(e)})
