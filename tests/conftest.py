"""In-memory stand-in for a boto3 DynamoDB ``Table`` resource.

Only the calls the store makes are implemented. ``page_size`` forces
``scan`` to paginate with ``LastEvaluatedKey`` like DynamoDB does past 1 MB.
"""

import copy
import json

import pytest

from products.store import KEY_NAME, ProductStore


class FakeTable:

    def __init__(self, items=None, page_size=None):
        self._items = {}
        self.page_size = page_size
        self.calls = []
        for item in items or []:
            self._items[item[KEY_NAME]] = copy.deepcopy(item)

    def get_item(self, Key):
        self.calls.append(("get_item", Key))
        item = self._items.get(Key[KEY_NAME])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def put_item(self, Item):
        self.calls.append(("put_item", Item))
        for value in Item.values():
            if isinstance(value, float):
                raise TypeError("Float types are not supported. Use Decimal types instead.")
        self._items[Item[KEY_NAME]] = copy.deepcopy(Item)
        return {}

    def delete_item(self, Key):
        self.calls.append(("delete_item", Key))
        self._items.pop(Key[KEY_NAME], None)
        return {}

    def scan(self, ExclusiveStartKey=None):
        self.calls.append(("scan", ExclusiveStartKey))
        keys = sorted(self._items)
        if ExclusiveStartKey is not None:
            keys = [k for k in keys if k > ExclusiveStartKey[KEY_NAME]]
        if self.page_size is None or len(keys) <= self.page_size:
            return {"Items": [copy.deepcopy(self._items[k]) for k in keys]}
        page = keys[: self.page_size]
        return {
            "Items": [copy.deepcopy(self._items[k]) for k in page],
            "LastEvaluatedKey": {KEY_NAME: page[-1]},
        }


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def store(table):
    return ProductStore(table)


def make_event(body=None, product_id=None, **extra):
    event = {"body": body, "pathParameters": None}
    if product_id is not None:
        event["pathParameters"] = {"id": product_id}
    event.update(extra)
    return event


def body_of(resp):
    return json.loads(resp["body"])
