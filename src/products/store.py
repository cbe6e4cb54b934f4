import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

import boto3

from . import config

logger = logging.getLogger(__name__)

KEY_NAME = "productID"

Item = Dict[str, Any]


class ProductStore:
    """Accès DynamoDB par clé exacte (``productID``) + scan complet."""

    def __init__(self, table):
        self.table = table

    def get(self, product_id: str) -> Optional[Item]:
        res = self.table.get_item(Key={KEY_NAME: product_id})
        return res.get("Item")

    def put(self, item: Item) -> None:
        # écrase l'item entier, pas de merge
        self.table.put_item(Item=item)

    def delete(self, product_id: str) -> None:
        self.table.delete_item(Key={KEY_NAME: product_id})

    def scan_all(self) -> List[Item]:
        res = self.table.scan()
        items: List[Item] = res.get("Items", [])

        # suivre LastEvaluatedKey, sinon on s'arrête à 1 MB
        while "LastEvaluatedKey" in res:
            res = self.table.scan(ExclusiveStartKey=res["LastEvaluatedKey"])
            items.extend(res.get("Items", []))

        return items


@lru_cache(maxsize=None)
def get_store() -> ProductStore:
    """Créé au premier appel, réutilisé tant que le conteneur reste chaud."""
    logger.debug("connecting to table %s (%s)", config.TABLE_NAME, config.AWS_REGION)
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=config.AWS_REGION,
        endpoint_url=config.ENDPOINT_URL,
    )
    return ProductStore(dynamodb.Table(config.TABLE_NAME))
