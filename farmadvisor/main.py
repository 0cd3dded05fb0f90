import logging
from typing import Callable, List, Optional
from fastapi import FastAPI, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from farmadvisor.config import settings
from farmadvisor.reference import setup_reference_data, get_catalog, get_rand
from farmadvisor.schema import CropRecord, CropSeason, RecommendRequest, RecommendResponse
from farmadvisor.engine.scorer import recommend as recommend_crops, to_items
from farmadvisor.engine.loader import soil_types
from farmadvisor.fertilizer import router as fertilizer_router

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title=settings.app_title, version="0.1.0")
app.state.settings = settings
setup_reference_data(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

@app.get("/health")
def health():
    return {"ok": True}

app.include_router(fertilizer_router, prefix="/fertilizer", tags=["Fertilizer"])

@app.get("/crops", response_model=List[CropRecord])
def list_crops(season: Optional[CropSeason] = Query(None), catalog: List[CropRecord] = Depends(get_catalog)):
    if season is None:
        return catalog
    return [c for c in catalog if c.season == season or c.season == "Annual"]

@app.get("/soil-types")
def list_soil_types(catalog: List[CropRecord] = Depends(get_catalog)):
    return {"soil_types": soil_types(catalog)}

@app.post("/recommend", response_model=RecommendResponse)
def recommend(
    body: RecommendRequest,
    catalog: List[CropRecord] = Depends(get_catalog),
    rand: Callable[[], float] = Depends(get_rand),
):
    ranked = recommend_crops(body.soilType, body.season, body.farmSize, catalog, rand)
    return {"items": to_items(ranked, body.farmSize)}
