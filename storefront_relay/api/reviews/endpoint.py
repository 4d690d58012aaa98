from typing import Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from storefront_relay.api.deps import get_relay, read_body
from storefront_relay.schema.review import AddReviewRequest, ReviewListRequest
from storefront_relay.service.relay import RelayService

router = APIRouter(tags=["reviews"])


@router.get("/reviews/meta/{product_id}")
async def get_review_meta(product_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.get_review_meta(product_id))


# Listing is a POST so the client can send the page size in the body.
@router.post("/reviews/{product_id}")
async def list_reviews(
    product_id: str,
    body: Any = Depends(read_body),
    relay: RelayService = Depends(get_relay),
) -> JSONResponse:
    count = ReviewListRequest.model_validate(body).count if isinstance(body, dict) else None
    return JSONResponse(status_code=200, content=await relay.list_reviews(product_id, count))


@router.put("/reviews/{review_id}/helpful")
async def mark_review_helpful(review_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    await relay.mark_review_helpful(review_id)
    return JSONResponse(status_code=200, content="updated helpful")


@router.put("/reviews/{review_id}/report", status_code=204)
async def report_review(review_id: str, relay: RelayService = Depends(get_relay)) -> Response:
    await relay.report_review(review_id)
    return Response(status_code=204)


@router.post("/addReview")
async def add_review(
    body: Any = Depends(read_body),
    relay: RelayService = Depends(get_relay),
) -> JSONResponse:
    review = AddReviewRequest.model_validate(body).review if isinstance(body, dict) else None
    await relay.add_review(review)
    return JSONResponse(status_code=201, content="added!")
