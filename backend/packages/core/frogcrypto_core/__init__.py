"""
FrogCrypto Core Package.

This package contains the reservation engine, feed cache, sampling logic,
service classes and shared schemas for the FrogCrypto feed service.
"""

__version__ = "0.1.0"

from .logging_config import init_logging, get_logger

__all__ = ["init_logging", "get_logger"]
