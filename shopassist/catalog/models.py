"""Item data model."""

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A purchasable catalog item.

    Items are frozen once loaded, so a message holding a reference to one
    keeps the values it was created with.

    Attributes:
        id: Unique identifier within a catalog.
        name: Display name.
        description: Short marketing description.
        category: Exact, case-sensitive category label (e.g. ``"Electronics"``).
        price: Unit price, never negative.
        rating: Average review score between 0 and 5.
        in_stock: Whether the item can currently be ordered.
        image: Path or URL of the product picture.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    category: str
    price: float = Field(ge=0)
    rating: float = Field(ge=0, le=5)
    in_stock: bool
    image: str = "/placeholder.svg"
