from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer, StringConstraints

from inventory_app.models.inventory import InventoryItem

# exact in the data file, plain JSON number on the wire
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
# bounded so every accepted price is still a finite float on output
PriceIn = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class InventoryItemCreate(BaseModel):
    name: Name
    description: Optional[str] = ""
    quantity: int = Field(..., ge=0)
    price: PriceIn


class InventoryItemUpdate(BaseModel):
    name: Optional[Name] = None
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    price: Optional[PriceIn] = None


class InventoryItemOut(BaseModel):
    id: int
    name: str
    description: str
    quantity: int
    price: Price
    created_at: str

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryItemOut":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            quantity=item.quantity,
            price=item.price,
            created_at=item.created_at,
        )


class CreatedResponse(BaseModel):
    id: int


class ChangesResponse(BaseModel):
    changes: int
