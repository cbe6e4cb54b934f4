import logging
import uuid
from typing import Any, Dict, Optional

from . import config
from .errors import Result, not_found, to_response, validation_error
from .responses import no_content, response
from .store import KEY_NAME, Item, ProductStore, get_store
from .validation import parse_body, validate_product

config.configure_logging()
logger = logging.getLogger(__name__)

Event = Dict[str, Any]


def _product_id(event: Event) -> Optional[str]:
    path_params = event.get("pathParameters") or {}
    return path_params.get("id")


def _fetch_product_by_id(store: ProductStore, product_id: Optional[str]) -> Result[Item]:
    if not product_id:
        return None, not_found()
    item = store.get(product_id)
    if not item:
        return None, not_found()
    return item, None


def hello_world(event: Event, context=None):
    return response(200, {"message": "Hello World, Dorothi"})


def create_product(event: Event, context=None, store: Optional[ProductStore] = None):
    store = store or get_store()

    req_body, failure = _parse_valid_body(event)
    if failure:
        return to_response(failure)

    product = {**req_body, KEY_NAME: str(uuid.uuid4())}
    store.put(product)
    logger.info("created product %s", product[KEY_NAME])

    return response(201, product)


def get_product(event: Event, context=None, store: Optional[ProductStore] = None):
    store = store or get_store()

    product, failure = _fetch_product_by_id(store, _product_id(event))
    if failure:
        return to_response(failure)

    return response(200, product)


def update_product(event: Event, context=None, store: Optional[ProductStore] = None):
    """
    Remplace l'item entier : les champs absents du nouveau body disparaissent.
    Le lookup préalable et le put ne sont pas atomiques.
    """
    store = store or get_store()
    product_id = _product_id(event)

    _, failure = _fetch_product_by_id(store, product_id)
    if failure:
        return to_response(failure)

    req_body, failure = _parse_valid_body(event)
    if failure:
        return to_response(failure)

    # l'id du path gagne sur celui du body
    product = {**req_body, KEY_NAME: product_id}
    store.put(product)
    logger.info("replaced product %s", product_id)

    return response(200, product)


def delete_product(event: Event, context=None, store: Optional[ProductStore] = None):
    store = store or get_store()
    product_id = _product_id(event)

    _, failure = _fetch_product_by_id(store, product_id)
    if failure:
        return to_response(failure)

    store.delete(product_id)
    logger.info("deleted product %s", product_id)

    return no_content()


def list_products(event: Event, context=None, store: Optional[ProductStore] = None):
    store = store or get_store()
    return response(200, store.scan_all())


def _parse_valid_body(event: Event) -> Result[Dict[str, Any]]:
    req_body, failure = parse_body(event)
    if failure:
        return None, failure

    logger.debug("reqBody: %s", req_body)

    errors = validate_product(req_body)
    if errors:
        return None, validation_error(errors)

    return req_body, None


def _method(event: Event) -> str:
    # REST API (v1) -> httpMethod, HTTP API (v2) -> requestContext.http.method
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "").upper()


def handler(event: Event, context=None, store: Optional[ProductStore] = None):
    """Point d'entrée unique quand toute l'API est déployée en une seule fonction."""
    method = _method(event)
    path = event.get("rawPath") or event.get("path") or "/"
    parts = [p for p in path.split("/") if p]

    # HTTP API (v2) sur un stage nommé : rawPath = /<stage>/...
    stage = (event.get("requestContext") or {}).get("stage")
    if event.get("rawPath") and stage and stage != "$default" and parts[:1] == [stage]:
        parts = parts[1:]

    logger.debug("%s %s", method, path)

    try:
        # Détail: /products/{id}
        if len(parts) >= 2 and parts[-2] == "products":
            if not _product_id(event):
                event = {**event, "pathParameters": {**(event.get("pathParameters") or {}), "id": parts[-1]}}
            if method == "GET":
                return get_product(event, context, store=store)
            if method == "PUT":
                return update_product(event, context, store=store)
            if method == "DELETE":
                return delete_product(event, context, store=store)

        # Liste / création: /products
        elif parts and parts[-1] == "products":
            if method == "GET":
                return list_products(event, context, store=store)
            if method == "POST":
                return create_product(event, context, store=store)

        elif not parts and method == "GET":
            return hello_world(event, context)

    except Exception:
        logger.exception("unhandled error on %s %s", method, path)
        raise

    return response(404, {"error": "route_not_found"})
