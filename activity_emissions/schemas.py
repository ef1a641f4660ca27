# activity_emissions/schemas.py
from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

Category = Literal["transport", "energy", "food", "home"]

class EmissionIn(BaseModel):
    category: Category
    # strict: rejects booleans and numeric strings
    amount: float = Field(..., gt=0, allow_inf_nan=False, strict=True)
    unit: str = Field(..., min_length=1)
    # free text, e.g. "Car drive to work"
    label: Optional[str] = ""

class EmissionOut(BaseModel):
    category: str
    amount: float
    unit: str
    label: str
    emissions_kgco2: float

class BatchIn(BaseModel):
    items: List[EmissionIn] = Field(..., min_length=1)

class BatchOut(BaseModel):
    total_kgco2: float
    by_category: Dict[str, float]
    items: List[EmissionOut]

class CategoryOut(BaseModel):
    id: str
    name: str
    units: List[str]
