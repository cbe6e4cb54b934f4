"""
Failures classées renvoyées explicitement par les étapes faillibles.

Chaque étape renvoie un couple ``(valeur, failure)`` ; ``to_response``
transforme une failure en réponse API Gateway. Ce qui n'est pas une
failure (ex: ``botocore.exceptions.ClientError``) n'est jamais attrapé ici
et remonte jusqu'au runtime Lambda.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, TypeVar

from .responses import response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(enum.Enum):
    VALIDATION = "validation"
    MALFORMED_INPUT = "malformed_input"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    errors: List[str] = field(default_factory=list)
    message: str = ""
    status_code: int = 400
    body: Dict[str, Any] = field(default_factory=dict)


Result = Tuple[Optional[T], Optional[Failure]]


def validation_error(errors: List[str]) -> Failure:
    return Failure(FailureKind.VALIDATION, errors=list(errors))


def malformed_input(message: str) -> Failure:
    return Failure(FailureKind.MALFORMED_INPUT, message=message)


def not_found(body: Optional[Dict[str, Any]] = None) -> Failure:
    return Failure(
        FailureKind.NOT_FOUND,
        status_code=404,
        body=body if body is not None else {"error": "not found"},
    )


def to_response(failure: Failure) -> Dict[str, Any]:
    logger.warning("request failed: %s", failure)

    if failure.kind is FailureKind.VALIDATION:
        return response(400, {"errors": failure.errors})

    if failure.kind is FailureKind.MALFORMED_INPUT:
        return response(400, {"error": f"invalid request body format : {failure.message}"})

    if failure.kind is FailureKind.NOT_FOUND:
        return response(failure.status_code, failure.body)

    raise ValueError(f"unhandled failure kind: {failure.kind!r}")
