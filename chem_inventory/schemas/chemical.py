from typing import List, Optional

from pydantic import BaseModel, Field


class SafetyDataSheetCreate(BaseModel):
    handling: str = Field(..., min_length=1, description="Safety procedures for handling.")
    spill_response: str = Field(..., min_length=1, description="Emergency steps for a spill.")
    hazards: str = Field("", description="Known hazards.")
    first_aid: str = Field("", description="First aid treatment.")
    storage: str = Field("", description="Storage conditions.")
    url: str = Field("", description="Link to the full SDS document, e.g. 'https://www.chemicalsafety.com/sds-search'.")


class ChemicalCreate(BaseModel):
    name: str = Field(..., min_length=1, description="e.g., 'Sulfuric Acid'.")
    symbol: str = Field(..., min_length=1, description="e.g., 'H2SO4'.")
    category: str = Field(..., min_length=1, description="e.g., 'Acid', 'Base'.")
    sds: SafetyDataSheetCreate


class SafetyDataSheetRead(BaseModel):
    handling: str
    spill_response: str
    hazards: str
    first_aid: str
    storage: str
    url: str

    class Config:
        from_attributes = True


class CategoryDisplay(BaseModel):
    label: str
    color: str


class ChemicalRead(BaseModel):
    id: str
    name: str
    symbol: str
    category: str
    sds: SafetyDataSheetRead
    display: Optional[CategoryDisplay] = None
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class PaginatedChemicalRead(BaseModel):
    count: int
    results: List[ChemicalRead]


class CategoryRead(BaseModel):
    name: str
    label: str
    color: str


class SDSSection(BaseModel):
    title: str
    content: str


class SDSRead(BaseModel):
    id: str
    name: str
    symbol: str
    category: str
    avatar: str
    url: Optional[str] = None
    sections: List[SDSSection]


class QRCodeRead(BaseModel):
    id: str
    name: str
    symbol: str
    category: str
    payload: Optional[str] = Field(None, description="Content to encode in the QR code, when available.")
    message: Optional[str] = None
