# 📄 File: app/modules/care_management/infrastructure/memory/catalog_loader.py
# 🧭 Purpose (Layman Explanation):
# Reads the list of plant species and their care needs from a file so the app knows what plants can be registered
# 🧪 Purpose (Technical Summary):
# Loads and validates PlantCatalogEntry records from a JSON document into an in-memory catalog repository
# 🔗 Dependencies:
# pydantic TypeAdapter, json, pathlib, plant_catalog model
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.dependencies (catalog repository seeding)

import json
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.modules.care_management.domain.models.plant_catalog import PlantCatalogEntry
from app.shared.core.exceptions import InvalidConfigError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

_CATALOG_ADAPTER = TypeAdapter(List[PlantCatalogEntry])


def load_catalog_entries(path: Union[str, Path]) -> List[PlantCatalogEntry]:
    """
    Load catalog entries from a JSON file.

    The document is either a list of entries or an object with an
    ``entries`` list.

    Raises:
        InvalidConfigError: File missing, not JSON, or entries fail validation
    """
    catalog_path = Path(path)
    try:
        document = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise InvalidConfigError(
            f"Plant catalog file not found: {catalog_path}",
            field="PLANT_CATALOG_FILE",
            value=str(catalog_path),
        )
    except json.JSONDecodeError as e:
        raise InvalidConfigError(
            f"Plant catalog file is not valid JSON: {e.msg}",
            field="PLANT_CATALOG_FILE",
            value=str(catalog_path),
            details={"line": e.lineno, "column": e.colno},
        )

    raw_entries = document.get("entries", []) if isinstance(document, dict) else document
    try:
        entries = _CATALOG_ADAPTER.validate_python(raw_entries)
    except PydanticValidationError as e:
        raise InvalidConfigError(
            f"Plant catalog file has {e.error_count()} invalid field(s)",
            field="PLANT_CATALOG_FILE",
            value=str(catalog_path),
            details={"errors": e.errors(include_url=False, include_context=False)},
        )

    ids = [entry.id for entry in entries]
    duplicates = sorted({entry_id for entry_id in ids if ids.count(entry_id) > 1})
    if duplicates:
        raise InvalidConfigError(
            "Plant catalog file contains duplicate ids",
            field="PLANT_CATALOG_FILE",
            value=str(catalog_path),
            details={"duplicate_ids": duplicates},
        )

    logger.info(f"Loaded {len(entries)} plant catalog entries", path=str(catalog_path))
    return entries
