import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 7 days


class Config:
    """
    Base configuration for Folio.
    Every value can be overridden through the environment or a .env file.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Admin session cookie
    SESSION_SECRET = os.getenv('SESSION_SECRET')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD')
    SESSION_COOKIE_NAME = '__admin_session'
    SESSION_MAX_AGE = int(os.getenv('SESSION_MAX_AGE', str(SESSION_MAX_AGE)))

    ENVIRONMENT = os.getenv('ENVIRONMENT', os.getenv('FLASK_ENV', 'development'))

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    PORTFOLIO_DB = os.getenv('PORTFOLIO_DB', os.path.join(DB_DIR, 'portfolio.db'))

    # Origins allowed to embed the public projects API
    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]

    # Port for local server
    port = int(os.getenv('PORT', '5000'))


def is_production(environment):
    return (environment or '').lower() == 'production'


@dataclass(frozen=True)
class AuthConfig:
    """Process-wide admin credentials, read once at startup."""
    admin_password: str
    session_secret: str
    secure: bool = False
    max_age: int = SESSION_MAX_AGE
    cookie_name: str = '__admin_session'

    @classmethod
    def from_app_config(cls, app_config):
        environment = app_config.get('ENVIRONMENT') or Config.ENVIRONMENT
        return cls(
            admin_password=app_config.get('ADMIN_PASSWORD') or Config.ADMIN_PASSWORD or '',
            session_secret=(app_config.get('SESSION_SECRET') or Config.SESSION_SECRET
                            or app_config.get('SECRET_KEY') or ''),
            secure=is_production(environment),
            max_age=int(app_config.get('SESSION_MAX_AGE') or Config.SESSION_MAX_AGE),
            cookie_name=app_config.get('SESSION_COOKIE_NAME_ADMIN') or Config.SESSION_COOKIE_NAME,
        )
