from typing import Dict
from fastapi import APIRouter, Depends, HTTPException
from farmadvisor.engine.calculator import calculate
from farmadvisor.reference import get_fertilizer_table
from farmadvisor.schema import FertilizerPlan, FertilizerProfile, FertilizerRequest

router = APIRouter()

@router.get("/crops", summary="Crop types the calculator knows")
def list_crop_types(table: Dict[str, FertilizerProfile] = Depends(get_fertilizer_table)):
    return {"crops": sorted(table)}

@router.post("/calculate", response_model=FertilizerPlan, summary="Fertilizer quantities and cost")
def calculate_fertilizer(body: FertilizerRequest, table: Dict[str, FertilizerProfile] = Depends(get_fertilizer_table)):
    crop_type = body.cropType.strip().lower()
    # calculate() returns an empty plan for unknown crops; surface that as 404
    if crop_type not in table:
        raise HTTPException(404, detail=f"Unknown crop type '{body.cropType}'. Known: {', '.join(sorted(table))}")
    return calculate(crop_type, body.area, body.soil_test(), table)
