"""
FrogCrypto Database Package.

SQLAlchemy models and session management for the FrogCrypto feed service.
"""

from .models import Base

__all__ = ["Base"]
