"""
Configuration Management
Environment-driven configuration for the rent schedule service
"""

import os
import tempfile
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

class Config:
    """Base configuration"""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'rent-schedule-secret-key-change-in-production')
    LOG_DIR = Path(os.environ.get('LOG_DIR', BASE_DIR / 'logs'))

    # Flask settings
    FLASK_ENV = os.environ.get('FLASK_ENV', 'development')
    DEBUG = FLASK_ENV == 'development'
    TESTING = False

    # API settings
    API_HOST = os.environ.get('API_HOST', 'localhost')
    API_PORT = int(os.environ.get('API_PORT', 5001))

    # CORS settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Longest window (in calendar months) accepted by /api/rent_schedule
    MAX_SCHEDULE_MONTHS = int(os.environ.get('MAX_SCHEDULE_MONTHS', 1200))

    # Logging
    LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True
    LOG_DIR = Path(tempfile.gettempdir()) / 'rent_application_logs'


# Get configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
