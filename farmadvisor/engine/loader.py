import json
import logging
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import TypeAdapter
from farmadvisor.schema import CropRecord, FertilizerProfile
from .crops import CROPS
from .fertilizers import FERTILIZER_TABLE

_LOGGER = logging.getLogger(__name__)

_CATALOG = TypeAdapter(List[CropRecord])
_TABLE = TypeAdapter(Dict[str, FertilizerProfile])

def _read_json(path: str):
    p = Path(path)
    if not p.is_file():
        raise RuntimeError(f"Reference file not found: {path}")
    return json.loads(p.read_text(encoding="utf-8"))

def load_catalog(path: Optional[str] = None) -> List[CropRecord]:
    """Crop catalog from a JSON array of crop records, or the built-in one."""
    if not path:
        return list(CROPS)
    catalog = _CATALOG.validate_python(_read_json(path))
    _LOGGER.info("Loaded %d crops from %s", len(catalog), path)
    return catalog

def load_fertilizer_table(path: Optional[str] = None) -> Dict[str, FertilizerProfile]:
    """Fertilizer profiles from a JSON object keyed by crop type, or the built-in table."""
    if not path:
        return dict(FERTILIZER_TABLE)
    table = _TABLE.validate_python(_read_json(path))
    # the calculator looks crop types up in lowercase
    table = {k.strip().lower(): v for k, v in table.items()}
    _LOGGER.info("Loaded fertilizer profiles for %s from %s", ", ".join(table), path)
    return table

def soil_types(catalog: List[CropRecord]) -> List[str]:
    seen: List[str] = []
    for c in catalog:
        for s in c.soil_types:
            if s not in seen:
                seen.append(s)
    return seen
