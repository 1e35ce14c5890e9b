"""
AuroraSync Server - Managers Package

This package contains manager classes for configuration and the metadata index.
"""

from managers.config_manager import ConfigManager
from managers.metadata_manager import MetadataManager

__all__ = ['ConfigManager', 'MetadataManager']
