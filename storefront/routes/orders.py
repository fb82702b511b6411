"""Order API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends, Query

from ..models.order import Order, OrderRequest, OrderResponse, ErrorResponse
from ..database.orders import OrderDatabase
from ..dependencies import get_order_db, get_order_processor
from ..services.order_processor import OrderProcessor, OrderError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Orders"])


@router.post(
    "/order",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def place_order(
    request: OrderRequest,
    processor: OrderProcessor = Depends(get_order_processor),
):
    """
    Place an order.

    Stock for every line is checked before anything is deducted.
    Rejections come back as 400 (empty cart, missing customer details,
    not enough stock) or 404 (unknown product).
    """
    line_count = len(request.cart_items) if request.cart_items else 0
    logger.info(f"POST /api/order request received: {line_count} line(s)")

    try:
        order = processor.place_order(request.cart_items, request.customer_info)
    except OrderError as e:
        logger.warning(f"Order rejected ({e.status_code}): {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return OrderResponse(message="Order placed successfully!", order=order)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    orders: OrderDatabase = Depends(get_order_db),
):
    """Get order details"""
    order = orders.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order with ID {order_id} not found.")
    return order


@router.get("/orders", response_model=list[Order])
async def list_orders(
    limit: int = Query(50, ge=1, le=500),
    orders: OrderDatabase = Depends(get_order_db),
):
    """List recent orders"""
    return orders.list_orders(limit=limit)
