from pydantic import BaseModel, ConfigDict
from typing import Optional

class DishImagePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dishName: Optional[str] = None
    description: Optional[str] = None
    cuisineType: Optional[str] = "modern"
    plating: Optional[str] = "elegant"
