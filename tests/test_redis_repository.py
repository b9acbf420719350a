"""
Tests for the Redis product repository.
"""

import json
from unittest.mock import MagicMock

import pytest
import redis

from product_catalog.errors import (
    ConditionalCheckFailedError,
    ProductNotFoundError,
    RepositoryError,
)
from product_catalog.protocols import ProductStore
from product_catalog.repositories import RedisProductRepository


@pytest.fixture
def client():
    """Create a mock Redis client."""
    return MagicMock()


@pytest.fixture
def pipe(client):
    """The pipeline returned by ``with client.pipeline() as pipe``."""
    pipeline = MagicMock()
    client.pipeline.return_value.__enter__.return_value = pipeline
    return pipeline


@pytest.fixture
def repo(client):
    """Create a repository over the mock client."""
    return RedisProductRepository(redis_client=client, table_name="products")


def test_satisfies_protocol(repo):
    assert isinstance(repo, ProductStore)


def test_create_assigns_new_id(repo, client):
    """Any caller-supplied id is replaced by a generated one."""
    item = repo.create({"id": "caller-id", "name": "Widget", "price": 10})

    assert item["id"] != "caller-id"
    assert item["name"] == "Widget"
    client.set.assert_called_once_with(f"products:{item['id']}", json.dumps(item))


def test_create_storage_failure(repo, client):
    client.set.side_effect = redis.ConnectionError("down")

    with pytest.raises(RepositoryError):
        repo.create({"name": "Widget"})


def test_get_product_by_id(repo, client):
    client.get.return_value = json.dumps({"id": "p1", "name": "Eggs"})

    assert repo.get_product_by_id("p1") == {"id": "p1", "name": "Eggs"}
    client.get.assert_called_once_with("products:p1")


def test_get_product_by_id_missing(repo, client):
    client.get.return_value = None

    with pytest.raises(ProductNotFoundError, match="Product not found"):
        repo.get_product_by_id("p1")


def test_get_product_by_id_storage_failure(repo, client):
    client.get.side_effect = redis.TimeoutError("slow")

    with pytest.raises(RepositoryError):
        repo.get_product_by_id("p1")


def test_get_all_products(repo, client):
    """Keys removed between scan and fetch are skipped."""
    client.scan_iter.return_value = iter(["products:1", "products:2"])
    client.mget.return_value = [json.dumps({"id": "1"}), None]

    assert repo.get_all_products() == [{"id": "1"}]
    client.scan_iter.assert_called_once_with(match="products:*")
    client.mget.assert_called_once_with(["products:1", "products:2"])


def test_get_all_products_empty(repo, client):
    client.scan_iter.return_value = iter([])

    assert repo.get_all_products() == []
    client.mget.assert_not_called()


def test_update_product_merges_fields(repo, pipe):
    pipe.get.return_value = json.dumps({"id": "p1", "name": "Old", "price": 5})

    updated = repo.update_product("p1", {"name": "New", "id": "other"})

    assert updated == {"id": "p1", "name": "New", "price": 5}
    pipe.watch.assert_called_once_with("products:p1")
    pipe.multi.assert_called_once()
    pipe.set.assert_called_once_with("products:p1", json.dumps(updated))
    pipe.execute.assert_called_once()


def test_update_missing_product(repo, pipe):
    pipe.get.return_value = None

    with pytest.raises(ConditionalCheckFailedError):
        repo.update_product("p1", {"name": "New"})
    pipe.set.assert_not_called()


def test_update_concurrent_write_is_single_attempt(repo, pipe):
    """A concurrent write fails the update instead of retrying."""
    pipe.get.return_value = json.dumps({"id": "p1", "price": 5})
    pipe.execute.side_effect = redis.WatchError()

    with pytest.raises(RepositoryError) as exc_info:
        repo.update_product("p1", {"price": 6})
    assert not isinstance(exc_info.value, ConditionalCheckFailedError)
    assert pipe.watch.call_count == 1
    assert pipe.execute.call_count == 1


def test_update_storage_failure(repo, pipe):
    pipe.watch.side_effect = redis.ConnectionError("down")

    with pytest.raises(RepositoryError) as exc_info:
        repo.update_product("p1", {"price": 6})
    assert not isinstance(exc_info.value, ConditionalCheckFailedError)


def test_delete_product(repo, pipe):
    pipe.execute.return_value = [json.dumps({"id": "p1", "name": "Eggs"}), 1]

    assert repo.delete_product("p1") == {"id": "p1", "name": "Eggs"}
    pipe.get.assert_called_once_with("products:p1")
    pipe.delete.assert_called_once_with("products:p1")


def test_delete_missing_product(repo, pipe):
    pipe.execute.return_value = [None, 0]

    with pytest.raises(ProductNotFoundError, match="Product with ID p1 not found"):
        repo.delete_product("p1")


def test_custom_table_name(client):
    repo = RedisProductRepository(redis_client=client, table_name="catalog")
    client.get.return_value = json.dumps({"id": "p1"})

    repo.get_product_by_id("p1")

    client.get.assert_called_once_with("catalog:p1")
    assert repo.table_name == "catalog"


def test_health_check(repo, client):
    client.ping.return_value = True
    assert repo.health_check() is True

    client.ping.side_effect = redis.ConnectionError("down")
    assert repo.health_check() is False
