"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from datetime import date
from dotenv import load_dotenv

from . import game_settings

# Load environment variables from config.env (if present)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', False)
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', game_settings.WORD_LENGTH))
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', game_settings.MAX_GUESSES))
    EPOCH_DATE = date.fromisoformat(os.getenv('EPOCH_DATE', game_settings.EPOCH.isoformat()))
    ENFORCE_WORD_LIST = _env_flag('ENFORCE_WORD_LIST', game_settings.ENFORCE_WORD_LIST)
    WORDS_FILE = os.getenv('WORDS_FILE', game_settings.WORDS_FILE)
    
    # Session Settings
    SESSION_CLEANUP_INTERVAL_SECONDS = int(os.getenv('SESSION_CLEANUP_INTERVAL_SECONDS', 60))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WORD_LENGTH = game_settings.WORD_LENGTH
    MAX_GUESSES = game_settings.MAX_GUESSES
    EPOCH_DATE = game_settings.EPOCH
    ENFORCE_WORD_LIST = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
