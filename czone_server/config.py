"""
Configuration settings for the Convenience Zone API
"""
import os


class Config:
    """Flask application configuration"""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration (relative SQLite paths live in the instance folder)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///czone.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Google Geocoding API
    GOOGLE_API_KEY = os.environ.get('GOOGLE_API_KEY', '')
    GEOCODING_URL = 'https://maps.googleapis.com/maps/api/geocode/json'
    GEOCODING_TIMEOUT = float(os.environ.get('GEOCODING_TIMEOUT', 10))

    # Application settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    PORT = int(os.environ.get('PORT', 1890))


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    GOOGLE_API_KEY = 'test-api-key'
