import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .errors import Result, malformed_input

REQUIRED_FIELDS = ["name"]


def _to_decimal(value: Any) -> Any:
    # boto3 refuse les float : on passe tout en Decimal avant put_item
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_decimal(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_decimal(v) for v in value]
    return value


def parse_body(event: Dict[str, Any]) -> Result[Dict[str, Any]]:
    """
    Le body arrive soit déjà structuré (invocation locale / tests),
    soit en string JSON (proxy integration), éventuellement en base64.
    """
    body = event.get("body")
    if body is None:
        return {}, None

    if isinstance(body, str):
        try:
            if event.get("isBase64Encoded"):
                body = base64.b64decode(body, validate=True).decode("utf-8")
            body = json.loads(body, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError, binascii.Error) as e:
            return None, malformed_input(str(e))

    if not isinstance(body, dict):
        return None, malformed_input(f"expected a JSON object, got {type(body).__name__}")

    return _to_decimal(body), None


def _string_violation(name: str, value: Any) -> Optional[str]:
    # nombres et booléens passent (convertis en texte), listes/objets non
    if value is None or value == "":
        return f"{name} is a required field"
    if not isinstance(value, (str, int, Decimal)):
        return f"{name} must be a `string` type"
    return None


def validate_product(payload: Dict[str, Any]) -> List[str]:
    """Toutes les violations sont renvoyées, pas seulement la première."""
    errors = []
    for f in REQUIRED_FIELDS:
        error = _string_violation(f, payload.get(f))
        if error:
            errors.append(error)
    return errors
