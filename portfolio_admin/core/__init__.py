"""
Portfolio Admin Core
====================

Core utilities and shared functionality for the admin modules.
"""

from .config import Config, get_config_value
from .database import Database
from .logging_service import LoggingService
from .remote import RemoteDataClient, RemoteError, Result
from .editor import TableEditor, EditorRegistry, get_editor

__all__ = [
    'Config', 'get_config_value', 'Database', 'LoggingService',
    'RemoteDataClient', 'RemoteError', 'Result',
    'TableEditor', 'EditorRegistry', 'get_editor',
]
