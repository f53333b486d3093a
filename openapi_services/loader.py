"""
Загрузка OpenAPI описания из URL или файла
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import httpx
import jsonref
import yaml

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")
_DOCUMENT_SUFFIXES = (".json",) + _YAML_SUFFIXES


def _fetch(url: str) -> Dict[str, Any]:
    if not url.endswith(_DOCUMENT_SUFFIXES):
        url = url + ("" if url.endswith("/") else "/") + "openapi.json"

    logger.debug("Fetching %s", url)
    response = httpx.get(url=url, follow_redirects=True)
    response.raise_for_status()

    if url.endswith(_YAML_SUFFIXES):
        return yaml.safe_load(response.text)
    return response.json()


def _read(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        if path.endswith(_YAML_SUFFIXES):
            return yaml.safe_load(f)
        return json.load(f)


def load_document(source: str) -> Dict[str, Any]:
    """Загрузка описания с заменой $ref на ленивые jsonref прокси"""
    try:
        if source.startswith(("http://", "https://")):
            document = _fetch(source)
            base_uri = source
        elif os.path.exists(source):
            document = _read(source)
            base_uri = Path(source).absolute().as_uri()
        else:
            # Попробуем как URL без протокола
            document = _fetch("https://" + source)
            base_uri = "https://" + source
    except (httpx.HTTPError, OSError, ValueError, yaml.YAMLError) as exc:
        raise ValueError(
            f"Не удалось загрузить спецификацию из {source}: {exc}"
        ) from exc

    if not isinstance(document, dict):
        raise ValueError(f"Спецификация {source} не является объектом")

    return dict(jsonref.replace_refs(document, base_uri=base_uri, lazy_load=True))
