"""
Utility modules for the layout engine.
"""

from wink_layout.utils.config import Config
from wink_layout.utils.logging import setup_logging, log_exception, get_default_log_file, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'get_default_log_file',
    'PerformanceLogger',
]
