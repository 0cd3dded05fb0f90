# farmadvisor/reference.py
import logging
import random
from typing import Callable, Dict, List, Optional
from fastapi import FastAPI
from farmadvisor.config import Settings, settings as default_settings
from farmadvisor.engine.loader import load_catalog, load_fertilizer_table
from farmadvisor.schema import CropRecord, FertilizerProfile

_LOGGER = logging.getLogger(__name__)

class ReferenceData:
    catalog: List[CropRecord] = []
    fertilizer_table: Dict[str, FertilizerProfile] = {}
    rand: Callable[[], float] = random.random

ref = ReferenceData()

def setup_reference_data(app: FastAPI, cfg: Optional[Settings] = None):
    """Load crop catalog and fertilizer table once and pick the score random source."""
    cfg = cfg or default_settings
    ref.catalog = load_catalog(cfg.crop_catalog_path)
    ref.fertilizer_table = load_fertilizer_table(cfg.fertilizer_table_path)
    if cfg.score_seed is not None:
        ref.rand = random.Random(cfg.score_seed).random
        _LOGGER.info("Match scores seeded with %d", cfg.score_seed)
    else:
        ref.rand = random.random
    app.state.reference = ref

# ---------- FastAPI dependencies ----------
def get_catalog() -> List[CropRecord]:
    return ref.catalog

def get_fertilizer_table() -> Dict[str, FertilizerProfile]:
    return ref.fertilizer_table

def get_rand() -> Callable[[], float]:
    return ref.rand
