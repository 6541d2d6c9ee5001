"""
Catalog seeding

Loads categories and products from a JSON seed file:

    {
        "categories": {"beer": {"name": "Beer", ...}, ...},
        "products": {"kingfisher-premium": {"name": "...", "createdAt": "2025-01-15T10:00:00Z", ...}}
    }

Document ids are the JSON keys. ISO createdAt/updatedAt strings become
timestamps; documents without them get the server timestamp.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from google.cloud.firestore_v1 import SERVER_TIMESTAMP

from app.repositories.category_repository import CategoryRepository
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[2] / "scripts" / "data" / "catalog_seed.json"

TIMESTAMP_FIELDS = ("createdAt", "updatedAt")


@dataclass
class SeedResult:
    categories: int = 0
    products: int = 0


def load_seed(path: Union[str, Path] = DEFAULT_SEED_PATH) -> Dict[str, Dict[str, Any]]:
    """
    Read a seed file

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a JSON object
    """
    with open(path, encoding="utf-8") as f:
        seed = json.load(f)
    if not isinstance(seed, dict):
        raise ValueError(f"Seed file {path} must contain a JSON object")
    return seed


def parse_timestamp(value: Any):
    """ISO-8601 string -> datetime; anything else -> server timestamp"""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return SERVER_TIMESTAMP


def prepare_document(data: Dict[str, Any]) -> Dict[str, Any]:
    document = dict(data)
    for field in TIMESTAMP_FIELDS:
        document[field] = parse_timestamp(document.get(field))
    return document


def seed_catalog(seed: Dict[str, Dict[str, Any]], client=None, dry_run: bool = False) -> SeedResult:
    """
    Write the seed's categories and products

    Existing documents with the same ids are overwritten.

    Args:
        seed: Parsed seed file
        client: Firestore client (defaults to the shared client)
        dry_run: Log what would be written without touching the store
    """
    result = SeedResult()
    targets = (
        ("categories", CategoryRepository(client)),
        ("products", ProductRepository(client)),
    )

    for section, repository in targets:
        for doc_id, data in (seed.get(section) or {}).items():
            document = prepare_document(data)
            if dry_run:
                logger.info(f"[dry-run] {section}/{doc_id}: {data.get('name', '')}")
            else:
                repository.set(doc_id, document, stamp=False)
                logger.info(f"Added {section}/{doc_id}: {data.get('name', '')}")
            setattr(result, section, getattr(result, section) + 1)

    return result
