"""
Daily Wordle Server - Main Entry Point

Loads the word list, initializes the game service and starts the
Flask-SocketIO application.
"""

import threading
import time
from daily_wordle import create_app
from daily_wordle.config import Config
from daily_wordle.services.game_service import initialize_game_service, get_game_service
from daily_wordle.services.word_source import load_word_source, WordSourceError
from daily_wordle.utils.game_logger import game_logger


def session_cleanup_worker(interval_seconds=Config.SESSION_CLEANUP_INTERVAL_SECONDS):
    """
    Background worker that periodically discards sessions from past puzzle days.
    """
    print("Session cleanup worker started")
    while True:
        try:
            game_service = get_game_service()
            if game_service:
                cleanup_result = game_service.cleanup_stale_sessions()
                if cleanup_result["cleaned_count"] > 0:
                    game_logger.logger.info(
                        f"Session cleanup: Removed {cleanup_result['cleaned_count']} sessions from previous days"
                    )
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")
        
        time.sleep(interval_seconds)


def main():
    """Main function to load words, initialize services and start the server."""
    try:
        print("Loading word list...")
        try:
            word_source = load_word_source(Config.WORDS_FILE, Config.WORD_LENGTH)
        except WordSourceError as e:
            # No puzzle without words
            print(f"✗ Error loading words: {e}")
            game_logger.logger.critical(f"Cannot start without a word list: {e}")
            raise SystemExit(1) from e
        print(f"✓ Loaded {len(word_source.solutions)} solutions and {len(word_source.allowed)} extra guesses")
        
        game_service = initialize_game_service(word_source, Config)
        puzzle = game_service.current_puzzle()
        print(f"✓ Game service initialized - today is {puzzle.label}")
        
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")
        
        cleanup_thread = threading.Thread(target=session_cleanup_worker, daemon=True)
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {Config.SESSION_CLEANUP_INTERVAL_SECONDS} seconds")
        
        game_logger.logger.info(
            f"Daily Wordle Server Starting - {puzzle.label}, word length {Config.WORD_LENGTH}, "
            f"max guesses {Config.MAX_GUESSES}, word list enforced: {Config.ENFORCE_WORD_LIST}"
        )
        
        print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
