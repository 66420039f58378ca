#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Local testing handlers for the Avalanche Forecast skill.

This module provides a file-based implementation of the cache handler
for local testing without requiring AWS DynamoDB access.
"""

import logging
import os
import re
import tempfile
from typing import Optional

from avalanche.errors import StoreError

# Configure logging
logger = logging.getLogger(__name__)


class LocalJsonCacheHandler(object):
    """
    Cache handler implementation using local JSON files for testing.
    This allows testing without requiring DynamoDB access.

    Each key is stored in its own file:
    - cache_dir/
      - <key>.json
    """

    def __init__(self, cache_dir: str = ".test_cache") -> None:
        """
        Initialize the cache handler with a local directory.

        Args:
            cache_dir: Directory to store cache JSON files
        """
        self.cache_dir = cache_dir

        # Create cache directory if it doesn't exist
        os.makedirs(cache_dir, exist_ok=True)

    def _get_file_path(self, key: str) -> str:
        # Sanitize key for filename (replace special chars)
        safe_id = re.sub(r"[^\w\s-]", "_", key).strip().replace(" ", "_")
        return os.path.join(self.cache_dir, f"{safe_id}.json")

    def get(self, key: str) -> Optional[bytes]:
        """
        Retrieve a blob from the cache.

        Args:
            key: Cache key

        Returns:
            The stored bytes, or None if nothing was stored under the key

        Raises:
            StoreError: If the file exists but cannot be read
        """
        file_path = self._get_file_path(key)
        if not os.path.exists(file_path):
            return None

        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Error getting cache item {key}: {e}")
            raise StoreError(f"Unable to read {file_path}: {e}") from e

    def put(self, key: str, data: bytes) -> None:
        """
        Store a blob in the cache.

        The data is written to a temporary file first and then moved over
        the old file, so readers never see a partial write.

        Args:
            key: Cache key
            data: Bytes to store

        Raises:
            StoreError: If the file cannot be written
        """
        file_path = self._get_file_path(key)
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_path, file_path)
            except OSError:
                os.remove(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Error putting cache item {key}: {e}")
            raise StoreError(f"Unable to write {file_path}: {e}") from e
