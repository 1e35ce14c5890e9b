"""
AuroraSync Server - Backup State Module

This module exports the process-wide metadata manager and backup root for use
across the application.
"""

from pathlib import Path

from managers.metadata_manager import MetadataManager

# Global metadata manager instance
# Initialized in server.py lifespan handler
metadata_manager: MetadataManager = None

# Root directory for received files
# Initialized in server.py lifespan handler
backup_root: Path = None
