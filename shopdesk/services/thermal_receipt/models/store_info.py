from typing import Optional
from pydantic import BaseModel, ConfigDict


class StoreInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    store_name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    gstin: Optional[str] = None
