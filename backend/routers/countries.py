from fastapi import APIRouter, HTTPException

from models.country import CountryRecord
from services import country_service

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CountryRecord])
async def list_countries():
    return country_service.get_all()


@router.get("/{slug}", response_model=CountryRecord)
async def get_country(slug: str):
    country = country_service.get_by_slug(slug)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country
