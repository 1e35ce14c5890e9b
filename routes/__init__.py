"""
AuroraSync Server - Routes Package

This package contains the FastAPI routers for the AuroraSync server.
"""
