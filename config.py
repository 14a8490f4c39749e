"""
Application Configuration

Centralizes Flask, database and logging settings.
"""

import logging
import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


class Config:
    """Base configuration class."""

    # Flask settings; the session holds each visitor's adjusted serving count
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


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
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'


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


def configure_logging(level='INFO'):
    """Set up root logging once; module loggers ('app.*') inherit it."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('app').setLevel(level)
