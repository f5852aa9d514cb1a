import pytest
from unittest.mock import MagicMock, patch

from chem_inventory.schemas.chemical import ChemicalCreate, SafetyDataSheetCreate
from chem_inventory.services.chemical_service import QR_PLACEHOLDER_MESSAGE, ChemicalService
from chem_inventory.services.inventory_store import InventoryStore
from tests.helpers import make_chemical


@pytest.fixture
def service(store, link_opener):
    """Provides a ChemicalService over the sample store."""
    return ChemicalService(store, link_opener)


def sulfuric_acid_in(**sds) -> ChemicalCreate:
    return ChemicalCreate(
        name="Sulfuric Acid",
        symbol="H2SO4",
        category="Acid",
        sds=SafetyDataSheetCreate(handling="Use a fume hood.", spill_response="Neutralize.", **sds),
    )


@pytest.mark.asyncio
async def test_create_chemical_success(service, store):
    """Test successful creation of a new chemical."""
    created = await service.create(chemical_in=sulfuric_acid_in(hazards="Corrosive."))

    assert created.id.startswith("CHEM")
    assert created.name == "Sulfuric Acid"
    assert created.sds.hazards == "Corrosive."
    assert created.sds.storage == ""
    assert store.items[-1] is created


@pytest.mark.asyncio
async def test_create_chemical_redraws_taken_id(service, store):
    """Test that a generated ID already in the store is not reused."""
    with patch("chem_inventory.services.identifier.uuid.uuid4") as mock_uuid4:
        mock_uuid4.side_effect = [
            MagicMock(hex="00000001" + "0" * 24),
            MagicMock(hex="abcdef12" + "0" * 24),
        ]
        store.add(make_chemical("CHEM00000001"))

        created = await service.create(chemical_in=sulfuric_acid_in())

    assert created.id == "CHEMABCDEF12"


@pytest.mark.asyncio
async def test_get_chemical(service):
    chemical = await service.get(chemical_id="CHEM002")

    assert chemical.name == "Sodium Hydroxide"


@pytest.mark.asyncio
async def test_get_chemical_not_found(service):
    assert await service.get(chemical_id="CHEM404") is None


@pytest.mark.asyncio
async def test_list_searches_by_query(service):
    results = await service.list(query="ethan")

    assert [c.id for c in results] == ["CHEM003"]


@pytest.mark.asyncio
async def test_list_category_takes_precedence_over_query(service):
    results = await service.list(query="ethan", category="Base")

    assert [c.id for c in results] == ["CHEM002"]


@pytest.mark.asyncio
async def test_delete_chemical(service, store):
    deleted = await service.delete(chemical_id="CHEM001")

    assert deleted.name == "Hydrochloric Acid"
    assert store.get_by_id("CHEM001") is None


@pytest.mark.asyncio
async def test_delete_chemical_not_found(service, store):
    listener = MagicMock()
    store.on_change(listener)

    result = await service.delete(chemical_id="CHEM999")

    assert result is None
    listener.assert_not_called()


@pytest.mark.asyncio
async def test_sds_sections_skip_empty_optional_fields():
    service = ChemicalService(InventoryStore([make_chemical("CHEM010", first_aid="Rinse.")]))

    sections = await service.get_sds_sections(chemical_id="CHEM010")

    assert [s.title for s in sections] == ["Handling", "Spill Response", "First Aid"]


@pytest.mark.asyncio
async def test_sds_sections_full(service):
    sections = await service.get_sds_sections(chemical_id="CHEM003")

    assert [s.title for s in sections] == ["Handling", "Spill Response", "Hazards", "First Aid", "Storage"]
    assert sections[0].content == "Keep from heat/flames. Ventilated area."


@pytest.mark.asyncio
async def test_qr_placeholder_uses_sds_url(service, store):
    qr = await service.get_qr_placeholder(chemical_id="CHEM001")

    assert qr.payload == store.get_by_id("CHEM001").sds.url
    assert qr.message is None


@pytest.mark.asyncio
async def test_qr_placeholder_without_url():
    service = ChemicalService(InventoryStore([make_chemical("CHEM010")]))

    qr = await service.get_qr_placeholder(chemical_id="CHEM010")

    assert qr.payload is None
    assert qr.message == QR_PLACEHOLDER_MESSAGE


@pytest.mark.asyncio
async def test_open_sds_link(service, link_opener, store):
    opened = await service.open_sds_link(chemical_id="CHEM002")

    assert opened is True
    assert link_opener.opened == [store.get_by_id("CHEM002").sds.url]


@pytest.mark.asyncio
async def test_open_sds_link_without_url(link_opener):
    service = ChemicalService(InventoryStore([make_chemical("CHEM010")]), link_opener)

    with pytest.raises(ValueError, match="has no SDS URL"):
        await service.open_sds_link(chemical_id="CHEM010")
    assert link_opener.opened == []


@pytest.mark.asyncio
async def test_open_sds_link_not_found(service):
    assert await service.open_sds_link(chemical_id="CHEM404") is None


@pytest.mark.asyncio
async def test_open_sds_link_requires_opener(store):
    service = ChemicalService(store)

    with pytest.raises(RuntimeError, match="No link opener is configured."):
        await service.open_sds_link(chemical_id="CHEM001")
