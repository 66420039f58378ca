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
Cache handler for the Avalanche Forecast skill.

This module provides a DynamoDB-based key-value store for cached blobs.
"""

import logging
from time import time
from typing import Dict, Optional

from boto3 import resource as resource
from botocore.exceptions import BotoCoreError, ClientError

from avalanche.errors import StoreError

# Configure logging
logger = logging.getLogger(__name__)


class CacheHandler(object):
    """
    Stores blobs in a single DynamoDB table.
    The table uses a composite key structure:
    - pk (partition key): 'cache#<key>'
    - sk (sort key): always 'data' for cache items

    The blob is stored as a binary 'cache_data' attribute and every put
    replaces the whole item.
    """

    CACHE_PREFIX = "cache#"

    def __init__(self, table_name: str, region: str = "us-east-1", ttl_days: int = 35) -> None:
        """
        Initialize the cache handler with the skill's table.

        Args:
            table_name: Name of the DynamoDB table to use
            region: AWS region name
            ttl_days: Days before DynamoDB may expire an item (0 = never)
        """
        self.ddb = resource("dynamodb", region_name=region)
        self.table = self.ddb.Table(table_name)
        self.ttl_days = ttl_days

    def _make_key(self, key: str) -> Dict[str, str]:
        return {
            "pk": f"{self.CACHE_PREFIX}{key}",
            "sk": "data"
        }

    def get(self, key: str) -> Optional[bytes]:
        """
        Retrieve a blob from the cache.

        Args:
            key: Cache key

        Returns:
            The stored bytes, or None if nothing was stored under the key

        Raises:
            StoreError: If DynamoDB cannot be read
        """
        try:
            response = self.table.get_item(Key=self._make_key(key))
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error getting cache item {key}: {e}")
            raise StoreError(f"Unable to read {key}: {e}") from e

        if "Item" not in response:
            return None

        data = response["Item"].get("cache_data")
        if data is None:
            return None
        # boto3 wraps binary attributes in boto3.dynamodb.types.Binary
        return bytes(getattr(data, "value", data))

    def put(self, key: str, data: bytes) -> None:
        """
        Store a blob in the cache, replacing any previous item.

        Args:
            key: Cache key
            data: Bytes to store

        Raises:
            StoreError: If DynamoDB cannot be written
        """
        item = {**self._make_key(key), "cache_data": data}
        if self.ttl_days > 0:
            item["ttl"] = int(time()) + (self.ttl_days * 24 * 60 * 60)

        try:
            self.table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error putting cache item {key}: {e}")
            raise StoreError(f"Unable to write {key}: {e}") from e
