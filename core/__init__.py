"""
Profile Service Core Library.

This package provides the core functionality for the profile service,
including database management, models, repositories, services, and logging.

Usage:
    # Database
    from core.db import DatabaseManager
    from core.models import Profile
    from core.repositories import ProfileRepository

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
