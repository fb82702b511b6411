"""Product models for the storefront catalog"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product in the catalog"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: float = Field(ge=0)
    image_url: str = Field(alias="imageUrl")
    category: str
    stock: int = Field(ge=0)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0
