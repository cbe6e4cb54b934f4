import json
from decimal import Decimal
from typing import Any, Dict, List, Union

HEADERS = {"content-type": "application/json"}

JsonPayload = Union[Dict[str, Any], List[Any]]


def _json_default(o):
    if isinstance(o, Decimal):
        # si entier -> int, sinon -> float
        if o == o.to_integral_value():
            return int(o)
        return float(o)
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def response(status: int, payload: JsonPayload) -> Dict[str, Any]:
    return {
        "statusCode": status,
        "headers": dict(HEADERS),
        "body": json.dumps(payload, default=_json_default),
    }


def no_content() -> Dict[str, Any]:
    return {"statusCode": 204, "body": ""}
