"""
AuroraSync Client - CLI Mode Module

Command-line entry point for headless/automated backups. Logs to the console
and to a timestamped file.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from .api import AuroraSyncAPI
from .backup import backup_folder
from .exceptions import AuroraSyncAPIError


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def setup_cli_logging(log_dir: Path, log_level: str = "INFO") -> Path:
    """
    Setup logging for CLI mode with timestamped log file.

    Creates log file with format: aurorasync-YYYY-MM-DD-HH-MM-SS.log

    Args:
        log_dir: Directory for log files
        log_level: Logging level name

    Returns:
        Path to the created log file
    """
    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"aurorasync-{timestamp}.log"

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)  # Also output to console
        ]
    )

    return log_file


def main(argv=None) -> int:
    """
    Main entry point for the AuroraSync client.

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(description='AuroraSync - Backup Client')
    parser.add_argument('folder', help='Folder to back up')
    parser.add_argument('--server', default='http://localhost:5050',
                        help='Server base URL (default: http://localhost:5050)')
    parser.add_argument('--log-dir', default='logs', help='Directory for log files')
    parser.add_argument('--log-level', default='INFO', help='Logging level')
    args = parser.parse_args(argv)

    folder = Path(args.folder)
    if not folder.is_dir():
        print(f"Not a folder: {folder}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    log_file = setup_cli_logging(Path(args.log_dir), args.log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"AuroraSync CLI Mode - Log file: {log_file}")

    try:
        with AuroraSyncAPI(args.server) as api:
            logger.info(f"Server says: {api.ping()}")

            def cli_progress_callback(message: str, current: int, total: int):
                percentage = (current / total) * 100 if total else 100.0
                logger.info(f"[{percentage:5.1f}%] {message}")

            summary = backup_folder(api, folder, cli_progress_callback)

        if summary.success:
            logger.info("=" * 60)
            logger.info(f"BACKUP COMPLETED: {len(summary.uploaded)} uploaded, {summary.scanned} scanned")
            logger.info("=" * 60)
            return EXIT_SUCCESS

        logger.error("=" * 60)
        logger.error(f"BACKUP FAILED for {len(summary.failed)} file(s)")
        logger.error("=" * 60)
        return EXIT_FAILURE

    except AuroraSyncAPIError as e:
        logger.error(f"API Error: {e}")
        return EXIT_FAILURE

    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user (Ctrl+C)")
        return EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
