"""
AuroraSync Server - Models Package

This package contains all data models for the AuroraSync server:
- api: Pydantic models for the inventory, metadata index and upload responses
- infrastructure: Dataclass models for request-scoped upload handling
"""

# Re-export all models for convenient importing
from models.api import *
from models.infrastructure import *
