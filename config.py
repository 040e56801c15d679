import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Site Settings
    SITE_NAME = os.environ.get('SITE_NAME', 'Sixty4Bit Freelancing')

    # Hosted backend (Supabase REST API)
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_KEY = os.environ.get('SUPABASE_ANON_KEY')
    DATA_BACKEND = os.environ.get('DATA_BACKEND') or ('rest' if SUPABASE_URL else 'sql')
    DATA_REQUEST_TIMEOUT = float(os.environ.get('DATA_REQUEST_TIMEOUT', '10'))

    # Database Settings (local backend and seed command)
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///sixty4bit.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Contact form
    CONTACT_RATE_LIMIT = int(os.environ.get('CONTACT_RATE_LIMIT', '5'))
    CONTACT_RATE_WINDOW = int(os.environ.get('CONTACT_RATE_WINDOW', '60'))

    # Reverse proxies in front of the app; 0 ignores X-Forwarded-* entirely
    TRUSTED_PROXY_COUNT = int(os.environ.get('TRUSTED_PROXY_COUNT', '0'))

    # JSON Settings
    JSON_AS_ASCII = False

    # Admin Notification Settings
    ADMIN_TELEGRAM_BOT_TOKEN = os.environ.get('ADMIN_TELEGRAM_BOT_TOKEN')
    ADMIN_TELEGRAM_CHAT_ID = os.environ.get('ADMIN_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    TRUSTED_PROXY_COUNT = int(os.environ.get('TRUSTED_PROXY_COUNT', '1'))


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    DATA_BACKEND = 'sql'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite uses StaticPool, which rejects pool settings.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    CONTACT_RATE_LIMIT = 1000
    TRUSTED_PROXY_COUNT = 0
    ADMIN_TELEGRAM_BOT_TOKEN = None
    ADMIN_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
