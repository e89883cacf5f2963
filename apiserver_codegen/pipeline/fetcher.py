"""
Retrieval of the API server OpenAPI document.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request

from .config import GeneratorConfig
from .document import SchemaDocument
from .errors import EmptyDocumentError, FetchError

logger = logging.getLogger(__name__)


def http_get(url: str, timeout: float | None = None) -> str:
    """GET ``url`` and return the decoded body.

    Raises:
        FetchError: On connection failures and non-2xx answers
    """
    req = urllib.request.Request(url, method="GET", headers={"content-type": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:  # nosec - caller controls endpoint
            return resp.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise FetchError(f"GET {url} answered {e.code} {e.reason}") from e
    except (urllib.error.URLError, OSError) as e:
        raise FetchError(f"GET {url} failed: {e}") from e


def fetch_schema_document(config: GeneratorConfig, get=http_get) -> SchemaDocument:
    """Fetch and parse the document served at ``config.docs_path``.

    Args:
        config: Run configuration (protocol, host, port, path)
        get: Callable performing the GET, taking the url and a timeout

    Raises:
        EmptyDocumentError: If the body is empty
        SchemaDocumentError: If the body is not a schema document
    """
    url = config.base_url + config.docs_path
    logger.info("Fetching API server document from %s", url)
    body = get(url, config.fetch_timeout)
    if not body or not body.strip():
        raise EmptyDocumentError(f"GET {url} returned an empty document")
    return SchemaDocument.from_json(body)
