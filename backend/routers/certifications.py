from fastapi import APIRouter, HTTPException

from services.catalog_service import get_catalog

router = APIRouter(prefix="/api", tags=["certifications"])


@router.get("/organizations", response_model=list[str])
async def list_organizations():
    return [org.organization_name for org in get_catalog().organizations]


@router.get("/certifications", response_model=list[str])
async def list_certifications(organization_name: str | None = None):
    if not organization_name:
        raise HTTPException(status_code=400, detail="organization_name is required")
    org = next(
        (o for o in get_catalog().organizations if o.organization_name == organization_name),
        None,
    )
    if org is None:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org.name
