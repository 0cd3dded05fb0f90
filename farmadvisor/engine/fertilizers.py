from typing import Dict
from farmadvisor.schema import FertilizerProduct, FertilizerProfile

BAG_SIZE_KG = 50

_UREA   = FertilizerProduct(name="Urea",   nutrient_ratio="46:0:0",   n_percent=46, p_percent=0,  k_percent=0,  cost_per_bag=1200)
_DAP    = FertilizerProduct(name="DAP",    nutrient_ratio="18:46:0",  n_percent=18, p_percent=46, k_percent=0,  cost_per_bag=1400)
_POTASH = FertilizerProduct(name="Potash", nutrient_ratio="0:0:60",   n_percent=0,  p_percent=0,  k_percent=60, cost_per_bag=900)

# keys are the lowercase crop types accepted by the calculator
FERTILIZER_TABLE: Dict[str, FertilizerProfile] = {
    "soybean": FertilizerProfile(n_requirement=40, p_requirement=60, k_requirement=40,
                                 base_fertilizers=[_UREA, _DAP, _POTASH]),
    "cotton":  FertilizerProfile(n_requirement=60, p_requirement=30, k_requirement=30,
                                 base_fertilizers=[_UREA, _DAP,
                                     FertilizerProduct(name="NPK", nutrient_ratio="19:19:19", n_percent=19, p_percent=19, k_percent=19, cost_per_bag=1100)]),
    "maize":   FertilizerProfile(n_requirement=80, p_requirement=40, k_requirement=40,
                                 base_fertilizers=[_UREA, _DAP, _POTASH]),
    "wheat":   FertilizerProfile(n_requirement=60, p_requirement=30, k_requirement=30,
                                 base_fertilizers=[_UREA, _DAP,
                                     FertilizerProduct(name="NPK", nutrient_ratio="12:32:16", n_percent=12, p_percent=32, k_percent=16, cost_per_bag=1300)]),
}
