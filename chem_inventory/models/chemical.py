from sqlmodel import Field, SQLModel


class SafetyDataSheet(SQLModel):
    """Safety information attached to a chemical record."""

    handling: str
    spill_response: str
    hazards: str = ""
    first_aid: str = ""
    storage: str = ""
    url: str = Field(default="", description="Link to the full SDS document.")


class ChemicalRecord(SQLModel):
    """A single chemical inventory entry."""

    id: str
    name: str
    symbol: str
    category: str
    sds: SafetyDataSheet


SAMPLE_CHEMICALS = [
    ChemicalRecord(
        id="CHEM001",
        name="Hydrochloric Acid",
        symbol="HCl",
        category="Acid",
        sds=SafetyDataSheet(
            handling="Wear gloves, goggles, lab coat. Ventilated area.",
            spill_response="Neutralize with sodium bicarbonate. Absorb with inert material.",
            hazards="Corrosive, severe burns. Harmful if inhaled.",
            first_aid="Eye: Rinse 15min. Skin: Wash with soap/water.",
            storage="Corrosive-resistant container, cool/dry.",
            url="https://sds.chemicalsafety.com/sds/pda/msds/getpdf.ashx?action=msdsdocument&auth=200C200C200C200C2008207A200D2078200C200C200C200C200C200C200C200C200C2008&param1=ZmRwLjJfMzk4NDAwMDNORQ==&unique=1770325572&session=ef445adfbbfeafaad45b7df6a3fa4574&hostname=45.134.79.159",
        ),
    ),
    ChemicalRecord(
        id="CHEM002",
        name="Sodium Hydroxide",
        symbol="NaOH",
        category="Base",
        sds=SafetyDataSheet(
            handling="Avoid skin/eye contact. Use PPE.",
            spill_response="Neutralize with dilute acid. Clean with absorbent.",
            hazards="Corrosive, severe burns.",
            first_aid="Flush 15+ minutes.",
            storage="Closed container, away from acids.",
            url="https://sds.chemicalsafety.com/sds/pda/msds/getpdf.ashx?action=msdsdocument&auth=200C200C200C200C2008207A200D2078200C200C200C200C200C200C200C200C200C2008&param1=ZmRwLjFfNjk3Nzg1MDNORQ==&unique=1770325681&session=ef445adfbbfeafaad45b7df6a3fa4574&hostname=45.134.79.159",
        ),
    ),
    ChemicalRecord(
        id="CHEM003",
        name="Ethanol",
        symbol="C2H5OH",
        category="Solvent",
        sds=SafetyDataSheet(
            handling="Keep from heat/flames. Ventilated area.",
            spill_response="Absorb with sand. Avoid ignition.",
            hazards="Highly flammable. Eye/respiratory irritant.",
            first_aid="If inhaled, fresh air.",
            storage="Flammable cabinet, away from oxidizers.",
            url="https://sds.chemicalsafety.com/sds/pda/msds/getpdf.ashx?action=msdsdocument&auth=200C200C200C200C2008207A200D2078200C200C200C200C200C200C200C200C200C2008&param1=ZmRwLjJfNTM5ODY5MzNORQ==&unique=1770325712&session=ef445adfbbfeafaad45b7df6a3fa4574&hostname=45.134.79.159",
        ),
    ),
]
