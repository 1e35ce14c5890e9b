"""
AuroraSync Server - Main FastAPI Application

This module contains the main FastAPI application for the AuroraSync server.
Clients post an inventory of local files to /sync-list, receive the files the
server is missing, and upload them to /upload.
"""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
import uvicorn

import backup_state
from managers import ConfigManager, MetadataManager
from file_storage import InitializeStorage

logger = logging.getLogger(__name__)

# Set by main() before uvicorn starts; loaded from config.json otherwise
config_manager: Optional[ConfigManager] = None


# ==================== Logging ====================

def ConfigureLogging(log_dir: str = "logs", log_level: str = "INFO") -> Path:
    """
    Configure logging to write to both console and a daily log file

    Args:
        log_dir: Directory for log files (created if missing)
        log_level: Logging level name

    Returns:
        Path: Log file path
    """
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_filename = logs_dir / f"aurorasync-server-{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # Console handler
            logging.StreamHandler(),
            # File handler with rotation (max 10MB per file, keep 10 backup files)
            RotatingFileHandler(
                log_filename,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=10,
                encoding='utf-8'
            )
        ]
    )

    return log_filename


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    Loads configuration, the backup root and the metadata index
    """
    global config_manager

    if config_manager is None:
        config_manager = ConfigManager()
        config_manager.load_config()

    logger.info("AuroraSync Server starting up...")

    backup_state.backup_root = InitializeStorage(config_manager.get("backup_root"))

    metadata_path = config_manager.get("metadata_path")
    backup_state.metadata_manager = MetadataManager.Load(metadata_path)
    logger.info(f"Metadata index ready: {backup_state.metadata_manager.Count()} files ({metadata_path})")

    logger.info("Server startup complete")

    yield

    logger.info("AuroraSync Server shutting down...")
    logger.info("Shutdown complete")


# ==================== FastAPI Application ====================

app = FastAPI(
    title="AuroraSync Server",
    description="Backup receiving server for device file synchronization",
    version="1.0.0",
    lifespan=lifespan
)


# ==================== Include Routers ====================

from routes import status, sync, upload

app.include_router(status.router)
app.include_router(sync.router)
app.include_router(upload.router)


# ==================== Main Entry Point ====================

def main(argv=None) -> int:
    """
    Run the server using uvicorn
    """
    global config_manager

    parser = argparse.ArgumentParser(description='AuroraSync - Backup Receiving Server')
    parser.add_argument('--config', help='Path to config.json (default: ./config.json)')
    parser.add_argument('--host', help='Listen address (overrides config)')
    parser.add_argument('--port', type=int, help='Listen port (overrides config)')
    args = parser.parse_args(argv)

    config_manager = ConfigManager(args.config)
    config_manager.load_config()

    log_file = ConfigureLogging(config_manager.get("log_dir"), config_manager.get("log_level"))
    logger.info(f"Logging to {log_file}")

    host = args.host or config_manager.get("host")
    port = args.port or config_manager.get("port")

    logger.info(f"Starting AuroraSync Server on {host}:{port}...")

    # App object, not an import string: lifespan reads this module's config_manager
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=str(config_manager.get("log_level")).lower()
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
