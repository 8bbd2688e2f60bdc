"""
Core services exports.

Provides configuration loading.
"""

from ijs_logger.core.services.config_manager import load_config, load_settings

__all__ = [
    'load_config',
    'load_settings',
]
