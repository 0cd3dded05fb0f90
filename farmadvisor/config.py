# farmadvisor/config.py
import os
from typing import List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

def _opt_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None

class Settings(BaseModel):
    app_title: str = os.getenv("APP_TITLE", "Farm Advisor - Engine")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Reference data; unset means the built-in tables
    crop_catalog_path: Optional[str] = os.getenv("CROP_CATALOG_PATH") or None
    fertilizer_table_path: Optional[str] = os.getenv("FERTILIZER_TABLE_PATH") or None

    # Fixes the "other factors" part of match scores (reproducible rankings)
    score_seed: Optional[int] = _opt_int("SCORE_SEED")

settings = Settings()
