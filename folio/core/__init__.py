"""
Folio Core
==========

Core utilities and shared functionality for Folio modules.
"""

from .config import Config, AuthConfig
from .database import Database
from .logging_service import LoggingService, logger
from .session import SessionCodec
from .store import ContentStore, StoreError

__all__ = [
    'Config', 'AuthConfig', 'Database', 'LoggingService', 'logger',
    'SessionCodec', 'ContentStore', 'StoreError',
]
