from typing import Optional
from pydantic import BaseModel


class StoreHealthOut(BaseModel):
    status: str
    kind: str
    count: int


class HealthOut(BaseModel):
    status: str
    version: str
    store: StoreHealthOut
    last_error_summary: Optional[str] = None
