"""Product API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..models.product import Product
from ..database.products import ProductDatabase
from ..dependencies import get_product_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(products: ProductDatabase = Depends(get_product_db)):
    """List the full catalog with live stock counts"""
    logger.info("GET /api/products request received")
    return products.get_all_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    products: ProductDatabase = Depends(get_product_db),
):
    """Get a product by ID"""
    product = products.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=f"Product with ID {product_id} not found.")
    return product
