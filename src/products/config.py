import logging
import os
from typing import Optional

TABLE_NAME = os.environ.get("PRODUCTS_TABLE", "ProductsTable")
AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")
# serverless-offline / DynamoDB Local
ENDPOINT_URL: Optional[str] = os.environ.get("DYNAMODB_ENDPOINT_URL") or None

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.getLogger("products").setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
