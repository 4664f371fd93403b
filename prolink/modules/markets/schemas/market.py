from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class Market(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

class Profession(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    market_id: int
    created_at: Optional[datetime] = None
