"""
Phonetic Catalog Loader.

The catalog is the curated list of canonical dishes and the spellings an ASR
engine produces for them. It ships as one JSON data file shared by every
caller; a deployment can point PHONETIC_CATALOG_PATH at its own file.

Usage:
    from voice_menu.menu.catalog import get_default_catalog

    catalog = get_default_catalog()
    # (MenuItemVariant(id='pav-bhaji', canonical_name='Pav Bhaji', ...), ...)
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

from ..config import get_catalog_path
from ..schemas.menu import MenuItemVariant, PhoneticCatalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _load_catalog_file(path: Path) -> Tuple[MenuItemVariant, ...]:
    data = json.loads(path.read_text(encoding="utf-8"))
    catalog = PhoneticCatalog.model_validate(data)
    logger.info("Loaded %d phonetic catalog entries from %s", len(catalog.items), path)
    return tuple(catalog.items)


def load_catalog(path: Optional[Union[str, Path]] = None) -> Tuple[MenuItemVariant, ...]:
    """
    Load and validate a phonetic catalog file.

    Each file is read once per process; later calls return the cached tuple.

    Args:
        path: Catalog JSON path. Defaults to PHONETIC_CATALOG_PATH or the
              packaged catalog.

    Returns:
        Catalog entries in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If an entry is malformed or ids repeat.
    """
    resolved = Path(path) if path is not None else get_catalog_path()
    return _load_catalog_file(resolved.resolve())


def get_default_catalog() -> Tuple[MenuItemVariant, ...]:
    """Return the catalog configured for this process."""
    return load_catalog()
