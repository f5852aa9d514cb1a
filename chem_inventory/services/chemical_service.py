import logging
from typing import List, Optional

from chem_inventory.models.chemical import ChemicalRecord, SafetyDataSheet
from chem_inventory.schemas.chemical import ChemicalCreate, QRCodeRead, SDSSection
from chem_inventory.services.identifier import generate_chemical_id
from chem_inventory.services.inventory_store import InventoryStore
from chem_inventory.services.link_opener import LinkOpener

logger = logging.getLogger(__name__)

QR_PLACEHOLDER_MESSAGE = "Please insert an SDS URL in order to have a QR Code"


class ChemicalService:
    """Service for managing chemicals."""

    def __init__(self, store: InventoryStore, link_opener: Optional[LinkOpener] = None):
        self.store = store
        self.link_opener = link_opener

    async def get(self, chemical_id: str) -> Optional[ChemicalRecord]:
        """Get a chemical by its ID."""
        return self.store.get_by_id(chemical_id)

    async def list(self, query: str = "", category: Optional[str] = None) -> List[ChemicalRecord]:
        """
        List chemicals the way the inventory screen shows them.
        A selected category takes precedence over the search query.
        """
        if category is not None:
            return self.store.filter_by_category(category)
        return self.store.search(query)

    async def categories(self) -> List[str]:
        return self.store.categories()

    async def create(self, chemical_in: ChemicalCreate) -> ChemicalRecord:
        """Create a chemical with a freshly generated ID and add it to the store."""
        chemical_id = generate_chemical_id(
            lambda candidate: self.store.get_by_id(candidate) is not None)
        record = ChemicalRecord(
            id=chemical_id,
            name=chemical_in.name,
            symbol=chemical_in.symbol,
            category=chemical_in.category,
            sds=SafetyDataSheet(**chemical_in.sds.model_dump()),
        )
        self.store.add(record)
        return record

    async def delete(self, chemical_id: str) -> Optional[ChemicalRecord]:
        """Delete a chemical."""
        chemical = await self.get(chemical_id)
        if chemical:
            self.store.remove(chemical_id)
        return chemical

    async def get_sds_sections(self, chemical_id: str) -> Optional[List[SDSSection]]:
        """
        Build the SDS sections for a chemical.

        Handling and spill response are always present; the optional
        sections are left out when empty.
        """
        chemical = await self.get(chemical_id)
        if not chemical:
            return None

        sds = chemical.sds
        sections = [
            SDSSection(title="Handling", content=sds.handling),
            SDSSection(title="Spill Response", content=sds.spill_response),
        ]
        for title, content in (
            ("Hazards", sds.hazards),
            ("First Aid", sds.first_aid),
            ("Storage", sds.storage),
        ):
            if content:
                sections.append(SDSSection(title=title, content=content))
        return sections

    async def get_qr_placeholder(self, chemical_id: str) -> Optional[QRCodeRead]:
        """Describe the QR code for a chemical. No image is rendered."""
        chemical = await self.get(chemical_id)
        if not chemical:
            return None

        return QRCodeRead(
            id=chemical.id,
            name=chemical.name,
            symbol=chemical.symbol,
            category=chemical.category,
            payload=chemical.sds.url or None,
            message=None if chemical.sds.url else QR_PLACEHOLDER_MESSAGE,
        )

    async def open_sds_link(self, chemical_id: str) -> Optional[bool]:
        """
        Hand the chemical's SDS URL to the link opener.

        Returns None if the chemical does not exist, otherwise whether the
        opener accepted the link. Raises ValueError if there is no SDS URL.
        """
        if self.link_opener is None:
            raise RuntimeError("No link opener is configured.")

        chemical = await self.get(chemical_id)
        if not chemical:
            return None
        if not chemical.sds.url:
            raise ValueError(f"Chemical {chemical_id} has no SDS URL.")

        opened = self.link_opener.open(chemical.sds.url)
        if not opened:
            logger.warning(f"SDS link for {chemical_id} could not be opened")
        return opened
