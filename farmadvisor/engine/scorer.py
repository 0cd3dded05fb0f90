import logging
import random
from typing import Callable, List, Sequence
from farmadvisor.schema import CropRecord, ScoredCrop
from .numbers import round_half_up

_LOGGER = logging.getLogger(__name__)

SOIL_POINTS = 40
SEASON_POINTS = 30
ANNUAL_POINTS = 20
OTHER_FACTORS_POINTS = 30   # climate, market price etc. are not modelled
TOP_N = 3

Rand = Callable[[], float]

def is_eligible(crop: CropRecord, soil_type: str, season: str) -> bool:
    return soil_type in crop.soil_types and (crop.season == season or crop.season == "Annual")

def match_percentage(crop: CropRecord, soil_type: str, season: str, rand: Rand = random.random) -> int:
    s = 0.0
    if soil_type in crop.soil_types:
        s += SOIL_POINTS

    if crop.season == season:
        s += SEASON_POINTS
    elif crop.season == "Annual":
        s += ANNUAL_POINTS

    s += rand() * OTHER_FACTORS_POINTS
    return max(0, min(round_half_up(s), 100))

def recommend(
    soil_type: str,
    season: str,
    farm_size: float,
    catalog: Sequence[CropRecord],
    rand: Rand = random.random,
) -> List[ScoredCrop]:
    """Rank the catalog crops that fit soil_type and season, best first.

    Only crops listing the soil type and growing in the season (or all year)
    are scored. Equal scores keep catalog order. farm_size does not affect the
    ranking; callers use it to project income (see to_items).
    """
    out: List[ScoredCrop] = []
    for c in catalog:
        if not is_eligible(c, soil_type, season):
            continue
        out.append(ScoredCrop(**c.model_dump(), match_percentage=match_percentage(c, soil_type, season, rand)))

    if not out:
        _LOGGER.debug("No crops in catalog for soil=%r season=%r", soil_type, season)

    # sorted() is stable with reverse=True too
    out = sorted(out, key=lambda x: x.match_percentage, reverse=True)
    return out[:TOP_N]

def to_items(scored: List[ScoredCrop], farm_size: float) -> List[dict]:
    return [{
        "crop": c.name,
        "season": c.season,
        "match_percentage": c.match_percentage,
        "water_requirement": c.water_requirement,
        "duration_days": c.duration,
        "expected_yield": c.expected_yield,
        "estimated_income": c.estimated_income,
        "projected_income": c.estimated_income * farm_size,
        "diseases": list(c.diseases),
        "fertilizers": list(c.fertilizers),
    } for c in scored]
