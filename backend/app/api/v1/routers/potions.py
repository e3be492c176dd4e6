# app/api/v1/routers/potions.py
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from app.api.v1.deps import get_potion_service
from app.schemas.potion import PotionMessageOut, PotionOut, VendorScoreOut
from app.services.potion_service import PotionService

router = APIRouter(prefix="/potions", tags=["potions"])

# ===== Catalog =====
@router.get("/names", response_model=list[str])
async def list_potion_names(potions: PotionService = Depends(get_potion_service)):
    """Names of all potions, in insertion order."""
    return await potions.list_names()

@router.get("/vendor/{vendor_id}", response_model=list[PotionOut])
async def list_vendor_potions(vendor_id: str, potions: PotionService = Depends(get_potion_service)):
    """All potions sold by one vendor; an unknown vendor yields an empty list."""
    return await potions.list_by_vendor(vendor_id)

@router.get("", response_model=list[PotionOut])
async def list_potions(potions: PotionService = Depends(get_potion_service)):
    return await potions.list_all()

@router.post("", status_code=status.HTTP_201_CREATED, response_model=PotionMessageOut)
async def create_potion(
    body: dict[str, Any] = Body(...),
    potions: PotionService = Depends(get_potion_service),
):
    """
    Create a potion.

    Required: name, effects.strength, effects.flavor, price, vendorId.
    score defaults to 0; ingredients and categories default to [].

    Errors:
        400 {"error", "errors"}: schema violation (nothing is stored)
    """
    potion = await potions.create(body)
    return {"message": "Potion created successfully", "potion": potion}

@router.put("/{potion_id}", response_model=PotionMessageOut)
async def update_potion(
    potion_id: str,
    body: dict[str, Any] = Body(...),
    potions: PotionService = Depends(get_potion_service),
):
    """
    Partially update a potion.

    Only supplied fields change; the merged document is validated against
    the same rules as create.

    Errors:
        404: unknown id
        400: merged document invalid (record unchanged)
    """
    potion = await potions.update(potion_id, body)
    return {"message": "Potion updated successfully", "potion": potion}

@router.delete("/{potion_id}")
async def delete_potion(potion_id: str, potions: PotionService = Depends(get_potion_service)):
    await potions.delete(potion_id)
    return {"message": "Potion deleted successfully"}

# ===== Analytics =====
@router.get("/analytics/average-score", response_model=float)
async def average_score(potions: PotionService = Depends(get_potion_service)):
    """Mean score over all potions (0 when there are none)."""
    return await potions.average_score()

@router.get("/analytics/total-price", response_model=float)
async def total_price(potions: PotionService = Depends(get_potion_service)):
    """Sum of all potion prices (0 when there are none)."""
    return await potions.total_price()

@router.get("/analytics/total-potions", response_model=int)
async def total_potions(potions: PotionService = Depends(get_potion_service)):
    return await potions.total_count()

@router.get("/analytics/distinct-categories", response_model=list[str])
async def distinct_categories(potions: PotionService = Depends(get_potion_service)):
    return await potions.distinct_categories()

@router.get("/analytics/average-score-by-vendor", response_model=list[VendorScoreOut])
async def average_score_by_vendor(potions: PotionService = Depends(get_potion_service)):
    """Mean score per vendor: [{vendorId, averageScore}, ...]."""
    return await potions.average_score_by_vendor()
