from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from chem_inventory.core.config import settings
from chem_inventory.core.rate_limit import limiter
from chem_inventory.db.store import get_store
from chem_inventory.models.chemical import ChemicalRecord
from chem_inventory.schemas.chemical import (
    CategoryDisplay,
    CategoryRead,
    ChemicalCreate,
    ChemicalRead,
    PaginatedChemicalRead,
    QRCodeRead,
    SDSRead,
)
from chem_inventory.services.category_style import (
    HEADER_AVATAR_LENGTH,
    avatar_text,
    category_color,
    category_label,
)
from chem_inventory.services.chemical_service import ChemicalService
from chem_inventory.services.inventory_store import InventoryStore
from chem_inventory.services.link_opener import BrowserLinkOpener, LinkOpener

router = APIRouter()


def get_link_opener() -> LinkOpener:
    return BrowserLinkOpener()


def get_chemical_service(
    store: InventoryStore = Depends(get_store),
    link_opener: LinkOpener = Depends(get_link_opener),
) -> ChemicalService:
    return ChemicalService(store, link_opener)


def to_chemical_read(chemical: ChemicalRecord) -> ChemicalRead:
    read = ChemicalRead.model_validate(chemical)
    read.display = CategoryDisplay(
        label=category_label(chemical.category),
        color=category_color(chemical.category),
    )
    read.avatar = avatar_text(chemical.symbol)
    return read


@router.get("/", response_model=PaginatedChemicalRead)
async def read_chemicals(
    q: str = Query("", description="Case-insensitive search on name, symbol, category and ID."),
    category: Optional[str] = Query(None, description="Exact category filter; overrides `q`."),
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Retrieve chemicals, optionally searched or filtered by category.
    """
    chemicals = await service.list(query=q, category=category)
    return {"count": len(chemicals), "results": [to_chemical_read(c) for c in chemicals]}


@router.get("/categories", response_model=List[CategoryRead])
async def read_categories(
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    List the distinct categories in the inventory, sorted by name.
    """
    return [
        CategoryRead(name=name, label=category_label(name), color=category_color(name))
        for name in await service.categories()
    ]


@router.post("/", response_model=ChemicalRead, status_code=201)
@limiter.limit(settings.create_rate_limit)
async def create_chemical(
    request: Request,
    chemical_in: ChemicalCreate,
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Add a new chemical with its safety data sheet.
    """
    chemical = await service.create(chemical_in=chemical_in)
    return to_chemical_read(chemical)


@router.get("/{chemical_id}", response_model=ChemicalRead)
async def read_chemical(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Get a specific chemical by its ID.
    """
    chemical = await service.get(chemical_id=chemical_id)
    if not chemical:
        raise HTTPException(status_code=404, detail="Chemical not found")
    return to_chemical_read(chemical)


@router.delete("/{chemical_id}", status_code=204)
async def delete_chemical(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> None:
    """
    Delete a chemical by its ID.
    """
    chemical = await service.delete(chemical_id=chemical_id)
    if not chemical:
        raise HTTPException(status_code=404, detail="Chemical not found")
    return None


@router.get("/{chemical_id}/sds", response_model=SDSRead)
async def read_chemical_sds(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Get the safety data sheet of a chemical as displayable sections.
    """
    chemical = await service.get(chemical_id=chemical_id)
    if not chemical:
        raise HTTPException(status_code=404, detail="Chemical not found")

    sections = await service.get_sds_sections(chemical_id=chemical_id)
    return SDSRead(
        id=chemical.id,
        name=chemical.name,
        symbol=chemical.symbol,
        category=chemical.category,
        avatar=avatar_text(chemical.symbol, HEADER_AVATAR_LENGTH),
        url=chemical.sds.url or None,
        sections=sections,
    )


@router.get("/{chemical_id}/sds/link", status_code=307)
async def follow_sds_link(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> RedirectResponse:
    """
    Redirect to the full SDS document online.
    """
    chemical = await service.get(chemical_id=chemical_id)
    if not chemical:
        raise HTTPException(status_code=404, detail="Chemical not found")
    if not chemical.sds.url:
        raise HTTPException(status_code=404, detail="Chemical has no SDS URL")
    return RedirectResponse(chemical.sds.url, status_code=307)


@router.post("/{chemical_id}/sds/open", status_code=202)
async def open_sds_link(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Open the SDS document with the host's default link handler.
    """
    try:
        opened = await service.open_sds_link(chemical_id=chemical_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if opened is None:
        raise HTTPException(status_code=404, detail="Chemical not found")
    if not opened:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not open the SDS link",
        )
    return {"detail": "SDS link opened"}


@router.get("/{chemical_id}/qr", response_model=QRCodeRead)
async def read_chemical_qr(
    *,
    chemical_id: str,
    service: ChemicalService = Depends(get_chemical_service),
) -> Any:
    """
    Get the QR code placeholder for a chemical.
    """
    qr = await service.get_qr_placeholder(chemical_id=chemical_id)
    if not qr:
        raise HTTPException(status_code=404, detail="Chemical not found")
    return qr
