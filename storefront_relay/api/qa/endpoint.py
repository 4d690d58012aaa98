from typing import Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from storefront_relay.api.deps import get_relay, read_body
from storefront_relay.service.relay import RelayService

router = APIRouter(prefix="/qa", tags=["qa"])


@router.get("/questions/{product_id}")
async def list_questions(product_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.list_questions(product_id))


@router.get("/questions/{question_id}/answers")
async def list_answers(question_id: str, relay: RelayService = Depends(get_relay)) -> JSONResponse:
    return JSONResponse(status_code=200, content=await relay.list_answers(question_id))


@router.post("/questions")
async def add_question(
    body: Any = Depends(read_body),
    relay: RelayService = Depends(get_relay),
) -> JSONResponse:
    return JSONResponse(status_code=201, content=await relay.add_question(body))


@router.post("/questions/{question_id}/answers")
async def add_answer(
    question_id: str,
    body: Any = Depends(read_body),
    relay: RelayService = Depends(get_relay),
) -> JSONResponse:
    return JSONResponse(status_code=201, content=await relay.add_answer(question_id, body))


@router.put("/questions/{question_id}/helpful", status_code=204)
async def mark_question_helpful(question_id: str, relay: RelayService = Depends(get_relay)) -> Response:
    await relay.mark_question_helpful(question_id)
    return Response(status_code=204)


@router.put("/answers/{answer_id}/helpful", status_code=204)
async def mark_answer_helpful(answer_id: str, relay: RelayService = Depends(get_relay)) -> Response:
    await relay.mark_answer_helpful(answer_id)
    return Response(status_code=204)


@router.put("/answers/{answer_id}/report", status_code=204)
async def report_answer(answer_id: str, relay: RelayService = Depends(get_relay)) -> Response:
    await relay.report_answer(answer_id)
    return Response(status_code=204)
