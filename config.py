"""
Application Configuration

Centralizes Flask settings and the tunable matching parameters.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Ingredient matching
    MATCH_FUZZY_THRESHOLD = float(os.environ.get('MATCH_FUZZY_THRESHOLD', 0.8))
    MATCH_MIN_FUZZY_LENGTH = int(os.environ.get('MATCH_MIN_FUZZY_LENGTH', 4))

    # Receipt reconciliation
    RECEIPT_MIN_SCORE = float(os.environ.get('RECEIPT_MIN_SCORE', 0.3))
    RECEIPT_HIGH_CONFIDENCE = float(os.environ.get('RECEIPT_HIGH_CONFIDENCE', 0.6))

    # Recipe catalog (TheMealDB)
    MEALDB_BASE_URL = os.environ.get('MEALDB_BASE_URL', 'https://www.themealdb.com/api/json/v1/1')
    MEALDB_TIMEOUT = float(os.environ.get('MEALDB_TIMEOUT', 10))

    # Recipe suggestions
    SUGGEST_SEARCH_INGREDIENTS = 6
    SUGGEST_MEALS_PER_INGREDIENT = 4
    SUGGEST_MAX_CANDIDATES = 10
    SUGGEST_LIMIT = 8


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    MATCH_FUZZY_THRESHOLD = 0.8
    MATCH_MIN_FUZZY_LENGTH = 4


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
