from chem_inventory.models.chemical import ChemicalRecord, SafetyDataSheet


class RecordingLinkOpener:
    """Link opener that records URLs instead of launching a browser."""

    def __init__(self, result: bool = True):
        self.result = result
        self.opened = []

    def open(self, url: str) -> bool:
        self.opened.append(url)
        return self.result


def make_chemical(chemical_id: str, category: str = "Acid", name: str = None, symbol: str = "X", **sds) -> ChemicalRecord:
    """Build a chemical record with minimal SDS data."""
    sds.setdefault("handling", "Wear gloves.")
    sds.setdefault("spill_response", "Absorb.")
    return ChemicalRecord(
        id=chemical_id,
        name=name or f"Chemical {chemical_id}",
        symbol=symbol,
        category=category,
        sds=SafetyDataSheet(**sds),
    )
