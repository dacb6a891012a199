from pydantic import BaseModel, Field
from typing import List

class SummaryRequest(BaseModel):
    text: str
    num_phrases: int = Field(3, ge=0)

class SummaryResponse(BaseModel):
    phrases: List[str]
    keywords: List[str]

class HealthDTO(BaseModel):
    ok: bool
    ready: bool
