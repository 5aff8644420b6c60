"""Load the anime catalog and site metadata from bangumi-data style JSON."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from .models import AnimeRecord, SiteMeta

logger = logging.getLogger(__name__)

_site_table_adapter = TypeAdapter(dict[str, SiteMeta])


@dataclass
class Catalog:
    """Anime entries together with the site table they refer to."""

    items: list[AnimeRecord]
    site_meta: dict[str, SiteMeta]


def parse_items(raw_items: list[dict[str, Any]]) -> list[AnimeRecord]:
    """Validate raw catalog items, skipping those without a begin time."""
    items = []
    for raw in raw_items:
        if not raw.get("begin"):
            logger.warning(f"Skipping {raw.get('title')!r}: no begin time")
            continue
        items.append(AnimeRecord.model_validate(raw))
    return items


def parse_site_meta(raw_meta: dict[str, Any]) -> dict[str, SiteMeta]:
    return _site_table_adapter.validate_python(raw_meta)


def _read_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_site_meta(path: str | Path) -> dict[str, SiteMeta]:
    """Load a site metadata table from a JSON object keyed by site id."""
    site_meta = parse_site_meta(_read_json(path))
    logger.info(f"Loaded {len(site_meta)} sites from {path}")
    return site_meta


def load_catalog(
    data_path: str | Path, site_meta_path: str | Path | None = None
) -> Catalog:
    """Load a catalog file.

    Args:
        data_path: JSON file holding either ``{"siteMeta": ..., "items": ...}``
            or a bare list of items
        site_meta_path: Separate site table, overriding any embedded one

    Returns:
        Validated catalog
    """
    data = _read_json(data_path)
    if isinstance(data, list):
        raw_items, raw_meta = data, {}
    else:
        raw_items, raw_meta = data.get("items", []), data.get("siteMeta", {})

    items = parse_items(raw_items)
    logger.info(f"Loaded {len(items)} anime from {data_path}")

    if site_meta_path is not None:
        site_meta = load_site_meta(site_meta_path)
    else:
        site_meta = parse_site_meta(raw_meta)

    return Catalog(items=items, site_meta=site_meta)
