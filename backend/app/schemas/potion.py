# app/schemas/potion.py
"""
Pydantic schemas for potion endpoints.
`PotionIn` is the write-side validation schema: create validates the request
body against it, update validates the merged document against it.
"""
from pydantic import BaseModel, ConfigDict, Field, JsonValue

class Effects(BaseModel):
    strength: float  # Effect strength
    flavor: float  # Flavor rating

class PotionIn(BaseModel):
    """
    Full potion document as accepted by the store.
    Unknown keys are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(max_length=255)
    ingredients: list[JsonValue] = Field(default_factory=list)  # Any JSON values, order kept
    effects: Effects
    categories: list[str] = Field(default_factory=list)
    price: float
    score: float = 0
    vendorId: str = Field(min_length=1, max_length=64)  # Vendor reference, same cap as the column

class PotionOut(BaseModel):
    id: str
    name: str
    ingredients: list[JsonValue]
    effects: Effects
    categories: list[str]
    price: float
    score: float
    vendorId: str

class PotionMessageOut(BaseModel):
    message: str
    potion: PotionOut

class VendorScoreOut(BaseModel):
    vendorId: str
    averageScore: float
