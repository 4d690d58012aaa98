from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront_relay.api.deps import get_relay
from storefront_relay.service.relay import RelayService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.list_products())


@router.get("/{product_id}")
async def get_product(product_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.get_product(product_id))


@router.get("/{product_id}/styles")
async def get_product_styles(product_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.get_product_styles(product_id))


@router.get("/{product_id}/related")
async def get_related_products(product_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.get_related_products(product_id))
