from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional, List

Season = Literal["Kharif","Rabi","Zaid"]
CropSeason = Literal["Kharif","Rabi","Zaid","Annual"]
WaterRequirement = Literal["Low","Medium","High"]

# upper bound on farm size and fertilized area, in acres
MAX_ACRES = 100_000

# ---------- reference data ----------
class CropRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    season: CropSeason
    soil_types: List[str]
    water_requirement: WaterRequirement
    duration: int = Field(gt=0)              # days to maturity
    expected_yield: float = Field(gt=0)      # per acre
    estimated_income: float = Field(gt=0)    # INR per acre
    diseases: List[str] = []
    fertilizers: List[str] = []

class ScoredCrop(CropRecord):
    match_percentage: int = Field(ge=0, le=100)

class FertilizerProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    nutrient_ratio: str                      # N:P:K label, e.g. "46:0:0"
    n_percent: float = Field(ge=0, le=100)
    p_percent: float = Field(ge=0, le=100)
    k_percent: float = Field(ge=0, le=100)
    cost_per_bag: int = Field(ge=0)

class FertilizerProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    n_requirement: float = Field(ge=0)       # kg/acre
    p_requirement: float = Field(ge=0)
    k_requirement: float = Field(ge=0)
    base_fertilizers: List[FertilizerProduct]

class SoilTest(BaseModel):
    n: Optional[float] = None
    p: Optional[float] = None
    k: Optional[float] = None

class FertilizerRecommendation(BaseModel):
    name: str
    nutrient_ratio: str
    quantity: int                            # kg, continuous need rounded
    cost_per_bag: int
    total_cost: int                          # whole bags only
    description: str

class FertilizerPlan(BaseModel):
    recommendations: List[FertilizerRecommendation] = []
    total_cost: int = 0

# ---------- requests / responses ----------
class RecommendRequest(BaseModel):
    soilType: str = Field(min_length=1)
    season: Season
    farmSize: float = Field(default=1, gt=0, le=MAX_ACRES)  # acres

class CropItem(BaseModel):
    crop: str
    season: CropSeason
    match_percentage: int
    water_requirement: WaterRequirement
    duration_days: int
    expected_yield: float
    estimated_income: float
    projected_income: float
    diseases: List[str]
    fertilizers: List[str]

class RecommendResponse(BaseModel):
    items: List[CropItem]

class FertilizerRequest(BaseModel):
    cropType: str = Field(min_length=1)
    area: float = Field(gt=0, le=MAX_ACRES)               # acres
    nLevel: Optional[float] = Field(default=None, ge=0)
    pLevel: Optional[float] = Field(default=None, ge=0)
    kLevel: Optional[float] = Field(default=None, ge=0)

    def soil_test(self) -> SoilTest:
        return SoilTest(n=self.nLevel, p=self.pLevel, k=self.kLevel)
