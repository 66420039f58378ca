#!/usr/bin/env python3
"""
Unit tests for CacheHandler.
Tests the DynamoDB item layout without requiring DynamoDB.
"""
from unittest.mock import patch

import pytest
from boto3.dynamodb.types import Binary
from botocore.exceptions import ClientError

from avalanche.errors import StoreError
from storage.cache_handler import CacheHandler


def make_handler(ttl_days=35):
    with patch("storage.cache_handler.resource") as resource:
        handler = CacheHandler("test-table", region="us-west-2", ttl_days=ttl_days)
    resource.assert_called_once_with("dynamodb", region_name="us-west-2")
    resource.return_value.Table.assert_called_once_with("test-table")
    return handler, handler.table


def client_error(operation):
    return ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}},
                       operation)


def test_put_writes_whole_item():
    handler, table = make_handler()
    handler.put("forecasts", b'{"a": 1}')

    item = table.put_item.call_args.kwargs["Item"]
    assert item["pk"] == "cache#forecasts"
    assert item["sk"] == "data"
    assert item["cache_data"] == b'{"a": 1}'
    assert item["ttl"] > 0


def test_put_without_ttl():
    handler, table = make_handler(ttl_days=0)
    handler.put("forecasts", b"{}")
    assert "ttl" not in table.put_item.call_args.kwargs["Item"]


def test_get_returns_bytes():
    handler, table = make_handler()
    table.get_item.return_value = {"Item": {"pk": "cache#forecasts", "sk": "data",
                                            "cache_data": Binary(b"payload")}}

    assert handler.get("forecasts") == b"payload"
    table.get_item.assert_called_once_with(Key={"pk": "cache#forecasts", "sk": "data"})


def test_get_missing_item():
    handler, table = make_handler()
    table.get_item.return_value = {}
    assert handler.get("forecasts") is None


def test_errors_raise_store_error():
    handler, table = make_handler()
    table.get_item.side_effect = client_error("GetItem")
    table.put_item.side_effect = client_error("PutItem")

    with pytest.raises(StoreError):
        handler.get("forecasts")
    with pytest.raises(StoreError):
        handler.put("forecasts", b"{}")
