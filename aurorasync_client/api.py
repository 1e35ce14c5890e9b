"""
AuroraSync Client - API Communication Module

Handles all communication with the AuroraSync server via its HTTP API.
"""

import json
import logging
import requests
from pathlib import Path
from typing import Any, Dict, List, Union
from xml.etree.ElementTree import ParseError

from .exceptions import AuroraSyncServerError
from .inventory import build_inventory_xml, parse_needed_files

# Configure logging
logger = logging.getLogger(__name__)


class AuroraSyncAPI:
    """
    API client for communicating with the AuroraSync server.

    Responsibilities:
    - Send the local inventory and receive the need-upload list
    - Upload files with their relative path and timestamps
    - Translate transport and HTTP failures into AuroraSync exceptions
    """

    def __init__(self, server_url: str, timeout: int = 30):
        """
        Initialize API client.

        Args:
            server_url: Base URL of server (e.g., "http://192.168.1.10:5050")
            timeout: Request timeout in seconds
        """
        self.base_url = server_url.rstrip('/')
        self.timeout = timeout
        # Use session for connection pooling to avoid TCP handshake overhead on each request
        self.session = requests.Session()
        logger.debug(f"Initialized API client for {self.base_url}")

    def close(self):
        """
        Close the session and release resources.
        """
        if self.session:
            self.session.close()
            logger.debug("API client session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (e.g., "/sync-list")
            **kwargs: Additional arguments for request

        Returns:
            Successful response

        Raises:
            AuroraSyncServerError: If the server cannot be reached or returns an error
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"API request: {method} {endpoint}")

        if "timeout" not in kwargs:
            kwargs["timeout"] = self.timeout

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to server at {self.base_url}: {e}")
            raise AuroraSyncServerError(f"Cannot connect to server at {self.base_url}")
        except requests.exceptions.Timeout:
            logger.error("Request timed out")
            raise AuroraSyncServerError("Request timed out")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise AuroraSyncServerError(f"Request error: {str(e)}")

        if response.status_code >= 400:
            error_message = response.text
            try:
                error_message = response.json().get("detail", error_message)
            except (json.JSONDecodeError, ValueError, AttributeError):
                pass
            logger.error(f"Request failed with status {response.status_code}: {error_message}")
            raise AuroraSyncServerError(
                f"Request failed with status {response.status_code}: {error_message}",
                status_code=response.status_code
            )

        return response

    def ping(self) -> str:
        """Return the server banner."""
        return self._make_request("GET", "/").text

    def request_sync_list(self, files: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Send the local inventory and receive the files the server needs.

        Args:
            files: Inventory entries as returned by scan_folder

        Returns:
            List of dicts with rel, lastModified and size

        Raises:
            AuroraSyncServerError: If the request fails or the response is malformed
        """
        response = self._make_request(
            "POST",
            "/sync-list",
            data=build_inventory_xml(files).encode('utf-8'),
            headers={"Content-Type": "application/xml"}
        )

        try:
            return parse_needed_files(response.content)
        except (ParseError, ValueError) as e:
            raise AuroraSyncServerError(f"Malformed sync-list response: {str(e)}")

    def upload_file(self, local_path: Union[str, Path], rel: str,
                    last_modified: int, size: int) -> Dict[str, Any]:
        """
        Upload one file.

        Args:
            local_path: File to upload
            rel: Relative path the server should store it under
            last_modified: Modification time in epoch milliseconds
            size: File size in bytes

        Returns:
            Upload result with savedCount and saved
        """
        local_path = Path(local_path)
        fields = {
            "rel": rel,
            "filepath": str(local_path),
            "lastModified": str(last_modified),
            "size": str(size)
        }

        with open(local_path, 'rb') as f:
            response = self._make_request(
                "POST",
                "/upload",
                data=fields,
                files={"file": (local_path.name, f, "application/octet-stream")}
            )

        return response.json()
