"""Demo data endpoint."""

from fastapi import APIRouter, Depends

from legal_platform.application.services import DemoSeeder
from legal_platform.infrastructure.dependencies import get_demo_seeder

router = APIRouter(prefix="/demo", tags=["Demo"])


@router.post("/seed")
async def seed_demo_data(seeder: DemoSeeder = Depends(get_demo_seeder)) -> dict:
    """Fill every empty collection with the demo records.

    Nothing is written when nobody is signed in or the collections
    already hold data.
    """
    return {"seeded": await seeder.seed()}
