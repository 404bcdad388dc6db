from typing import Optional

from pydantic import BaseModel, Field


class BranchCreate(BaseModel):
    name: str = Field(..., min_length=1)
    address: str
    sol_id: Optional[str] = Field(None, alias="solId")

    model_config = {"populate_by_name": True}
