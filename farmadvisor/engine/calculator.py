import logging
import math
from typing import Dict, List, Optional, Tuple
from farmadvisor.schema import (
    FertilizerPlan, FertilizerProduct, FertilizerProfile, FertilizerRecommendation, SoilTest,
)
from .fertilizers import BAG_SIZE_KG
from .numbers import round_half_up

_LOGGER = logging.getLogger(__name__)

# percentage points of a soil test -> kg/acre already available
SOIL_TEST_FACTOR = 10

def nutrient_needs(profile: FertilizerProfile, area: float, soil_test: Optional[SoilTest] = None) -> Dict[str, float]:
    """kg of N, P and K still to apply over `area` acres."""
    soil_test = soil_test or SoilTest()
    needs = {}
    for key, gross in (("n", profile.n_requirement * area),
                       ("p", profile.p_requirement * area),
                       ("k", profile.k_requirement * area)):
        level = getattr(soil_test, key)
        if level is None:
            needs[key] = gross
        else:
            needs[key] = max(0.0, gross - level * area * SOIL_TEST_FACTOR)
    return needs

def dose(fertilizer: FertilizerProduct, needs: Dict[str, float]) -> Tuple[float, List[str]]:
    """Quantity (kg) covering the most demanding nutrient the fertilizer carries.

    Returns the quantity and the nutrient name(s) that set it, in N, P, K order.
    """
    qty = 0.0
    drivers: List[str] = []
    for nutrient, percent, needed in (("Nitrogen", fertilizer.n_percent, needs["n"]),
                                      ("Phosphorus", fertilizer.p_percent, needs["p"]),
                                      ("Potash", fertilizer.k_percent, needs["k"])):
        if percent <= 0 or needed <= 0:
            continue
        candidate = needed / (percent / 100)
        if drivers and math.isclose(candidate, qty):
            qty = max(qty, candidate)
            drivers.append(nutrient)
        elif candidate > qty:
            qty, drivers = candidate, [nutrient]
    return qty, drivers

def calculate(
    crop_type: str,
    area: float,
    soil_test: Optional[SoilTest],
    table: Dict[str, FertilizerProfile],
) -> FertilizerPlan:
    profile = table.get(crop_type)
    if profile is None:
        _LOGGER.debug("No fertilizer profile for crop type %r", crop_type)
        return FertilizerPlan()
    if not math.isfinite(area) or area <= 0:
        return FertilizerPlan()

    needs = nutrient_needs(profile, area, soil_test)
    if not all(math.isfinite(v) for v in needs.values()):
        _LOGGER.debug("Nutrient needs overflow for area %r", area)
        return FertilizerPlan()

    recs: List[FertilizerRecommendation] = []
    total = 0
    for f in profile.base_fertilizers:
        qty, drivers = dose(f, needs)
        if qty <= 0:
            continue
        if not math.isfinite(qty):
            return FertilizerPlan()
        bags = math.ceil(qty / BAG_SIZE_KG)
        cost = bags * f.cost_per_bag
        total += cost
        recs.append(FertilizerRecommendation(
            name=f.name,
            nutrient_ratio=f.nutrient_ratio,
            quantity=round_half_up(qty),     # continuous need, not bag-rounded
            cost_per_bag=f.cost_per_bag,
            total_cost=cost,
            description=f"Primary source of {' & '.join(drivers)}",
        ))

    return FertilizerPlan(recommendations=recs, total_cost=total)
