"""
AuroraSync Client

Enumerates a local folder, asks the AuroraSync server which files it is
missing, and uploads them.
"""
