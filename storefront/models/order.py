"""Order models for the storefront"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    # Orders never leave their initial status
    PENDING = "Pending"


class CustomerInfo(BaseModel):
    """Customer details captured at checkout"""
    name: str = ""
    email: str = ""
    address: str = ""
    phone: str = ""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("name", "email", "address", "phone")

    def missing_fields(self) -> list[str]:
        """Names of required fields that are empty or whitespace"""
        return [f for f in self.REQUIRED_FIELDS if not getattr(self, f).strip()]


class OrderLineRequest(BaseModel):
    """
    One cart line as submitted by the client.

    Clients post their whole cart line (name, price, image...), only
    the id and quantity are used; the rest is ignored.
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    quantity: int = Field(ge=1)


class OrderRequest(BaseModel):
    """Request body for POST /api/order"""
    model_config = ConfigDict(populate_by_name=True)

    cart_items: Optional[list[OrderLineRequest]] = Field(default=None, alias="cartItems")
    customer_info: Optional[CustomerInfo] = Field(default=None, alias="customerInfo")


class OrderItem(BaseModel):
    """Item in an order, denormalized from the product at order time"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str
    quantity: int
    price: float


class Order(BaseModel):
    """Placed order"""
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(alias="orderId")
    customer_info: CustomerInfo = Field(alias="customerInfo")
    items: list[OrderItem]
    total_amount: float = Field(alias="totalAmount")
    order_date: datetime = Field(alias="orderDate")
    status: OrderStatus = OrderStatus.PENDING


class OrderResponse(BaseModel):
    """Response from a successful order"""
    message: str
    order: Order


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint"""
    message: str
