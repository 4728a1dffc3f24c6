"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..utils.decorators import require_session
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _log_terminal_event(session_id, session, result):
    """Log game_won / game_lost the moment a submit ends the game."""
    if result.action != 'submit' or not result.accepted or not session.is_over:
        return

    event = 'game_won' if result.terminal == 'won' else 'game_lost'
    game_logger.log_game_event(
        session_id, event, request.remote_addr,
        rounds_used=len(session.attempts), target_word=session.secret_word,
        day_ordinal=session.day_ordinal
    )


def _action_response(action, session_id, session, result):
    """Build the JSON response for a player action and log it."""
    response_data = {
        'success': result.accepted,
        'result': asdict(result),
        'state': asdict(session.get_state())
    }

    if not result.accepted:
        response_data['error'] = result.message or result.reason
        game_logger.log_server_response(
            request, action, False, response_data, session_id,
            rejection=result.reason
        )
        return jsonify(response_data), 400

    game_logger.log_server_response(
        request, action, True, response_data, session_id,
        cursor_row=result.cursor_row, cursor_col=result.cursor_col
    )
    _log_terminal_event(session_id, session, result)
    return jsonify(response_data)


def _error_response(action, error, session_id=None):
    game_logger.log_error(request, error, action, session_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, session_id)
    return jsonify(error_response), 500


@game_bp.route('/daily', methods=['GET'])
def daily_info():
    """Today's day ordinal and game dimensions (never the word)."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'daily_info')

        puzzle = game_service.current_puzzle()
        response_data = {
            'success': True,
            'day_ordinal': puzzle.day_ordinal,
            'label': puzzle.label,
            'date': puzzle.puzzle_date.isoformat(),
            'word_length': game_service.word_length,
            'max_guesses': game_service.max_guesses
        }

        game_logger.log_server_response(request, 'daily_info', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('daily_info', e)


@game_bp.route('/session', methods=['POST'])
def new_session():
    """Create a new game session for today's puzzle."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_session')

        session_id = game_service.create_session()
        state = game_service.get_game_state(session_id)

        response_data = {
            'success': True,
            'session_id': session_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_session', True, response_data, session_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )
        return jsonify(response_data), 201

    except Exception as e:
        return _error_response('new_session', e)


@game_bp.route('/session/<session_id>/state', methods=['GET'])
@require_session
def get_state(session_id, session=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', session_id)

        response_data = {
            'success': True,
            'state': asdict(session.get_state())
        }

        game_logger.log_server_response(request, 'get_state', True, response_data, session_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e, session_id)


@game_bp.route('/session/<session_id>/letter', methods=['POST'])
@require_session
def type_letter(session_id, session=None):
    """Type one letter into the current row."""
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict) or 'letter' not in data:
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'type_letter', False, error_response, session_id)
            return jsonify(error_response), 400

        letter = data['letter']
        game_logger.log_user_action(request, 'type_letter', session_id, letter=letter)

        result = session.type_letter(letter)
        return _action_response('type_letter', session_id, session, result)

    except Exception as e:
        return _error_response('type_letter', e, session_id)


@game_bp.route('/session/<session_id>/delete', methods=['POST'])
@require_session
def delete_letter(session_id, session=None):
    """Remove the last letter of the current row."""
    try:
        game_logger.log_user_action(request, 'delete_letter', session_id)

        result = session.delete_letter()
        return _action_response('delete_letter', session_id, session, result)

    except Exception as e:
        return _error_response('delete_letter', e, session_id)


@game_bp.route('/session/<session_id>/submit', methods=['POST'])
@require_session
def submit_guess(session_id, session=None):
    """Submit the current row for evaluation."""
    try:
        game_logger.log_user_action(
            request, 'submit', session_id,
            guess_length=session.cursor_col
        )

        result = session.submit()
        return _action_response('submit', session_id, session, result)

    except Exception as e:
        return _error_response('submit', e, session_id)


@game_bp.route('/session/<session_id>/key', methods=['POST'])
@require_session
def press_key(session_id, session=None):
    """Apply a keyboard key: a letter, 'enter', or 'backspace'."""
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict) or 'key' not in data:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key', False, error_response, session_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key', session_id, key=key)

        result = session.handle_key(key)
        return _action_response('key', session_id, session, result)

    except Exception as e:
        return _error_response('key', e, session_id)


@game_bp.route('/session/<session_id>', methods=['DELETE'])
def delete_session(session_id):
    """Discard a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_session', session_id)

        success = game_service.delete_session(session_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_session', success, response_data, session_id)

        if not success:
            response_data['error'] = 'Session not found'
            return jsonify(response_data), 404
        return jsonify(response_data)

    except Exception as e:
        return _error_response('delete_session', e, session_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_sessions': game_service.active_session_count() if game_service else 0,
            'word_statistics': game_service.word_source.statistics() if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
