import json
import re
from typing import Any

from storefront_relay.adapter.client.http import UpstreamClient, decode_body, segment

PRODUCT_PAGE_SIZE = 20
QA_PAGE_SIZE = 50
DEFAULT_REVIEW_COUNT = 50

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> int | float:
    """Parse the leading base-10 integer of ``value``; NaN when there is none."""
    if isinstance(value, bool) or value is None:
        return float("nan")
    match = _LEADING_INT.match(str(value).lstrip())
    if match is None:
        return float("nan")
    return int(match.group())


def coerce_characteristics(review: Any) -> Any:
    characteristics = review.get("characteristics") if isinstance(review, dict) else None
    if isinstance(characteristics, dict):
        for key in characteristics:
            characteristics[key] = parse_int(characteristics[key])
    elif isinstance(characteristics, list):
        characteristics[:] = [parse_int(value) for value in characteristics]
    return review


class RelayService:
    def __init__(self, client: UpstreamClient) -> None:
        self.client = client

    async def _get(self, path: str, params: dict[str, str | int] | None = None) -> Any:
        return decode_body(await self.client.get(path, params))

    # products

    async def list_products(self) -> Any:
        return await self._get("/products", {"count": PRODUCT_PAGE_SIZE})

    async def get_product(self, product_id: str) -> Any:
        return await self._get(f"/products/{segment(product_id)}")

    async def get_product_styles(self, product_id: str) -> Any:
        return await self._get(f"/products/{segment(product_id)}/styles")

    async def get_related_products(self, product_id: str) -> Any:
        return await self._get(f"/products/{segment(product_id)}/related")

    # questions & answers

    async def list_questions(self, product_id: str) -> Any:
        return await self._get("/qa/questions", {"product_id": product_id, "count": QA_PAGE_SIZE})

    async def list_answers(self, question_id: str) -> Any:
        return await self._get(f"/qa/questions/{segment(question_id)}/answers", {"count": QA_PAGE_SIZE})

    async def add_question(self, payload: Any) -> Any:
        return decode_body(await self.client.post("/qa/questions", payload))

    async def add_answer(self, question_id: str, payload: Any) -> Any:
        response = await self.client.post(f"/qa/questions/{segment(question_id)}/answers", payload)
        return decode_body(response)

    async def mark_question_helpful(self, question_id: str) -> None:
        await self.client.put(f"/qa/questions/{segment(question_id)}/helpful", {})

    async def mark_answer_helpful(self, answer_id: str) -> None:
        await self.client.put(f"/qa/answers/{segment(answer_id)}/helpful", {})

    async def report_answer(self, answer_id: str) -> None:
        await self.client.put(f"/qa/answers/{segment(answer_id)}/report", {})

    # reviews

    async def list_reviews(self, product_id: str, count: Any = None) -> Any:
        count = count or DEFAULT_REVIEW_COUNT
        if not isinstance(count, (str, int, float)):
            count = json.dumps(count)
        return await self._get("/reviews", {"product_id": product_id, "count": count})

    async def mark_review_helpful(self, review_id: str) -> None:
        await self.client.put(f"/reviews/{segment(review_id)}/helpful", {})

    async def report_review(self, review_id: str) -> None:
        await self.client.put(f"/reviews/{segment(review_id)}/report", {})

    async def add_review(self, review: Any) -> None:
        await self.client.post("/reviews", coerce_characteristics(review))

    async def get_review_meta(self, product_id: str) -> Any:
        return await self._get("/reviews/meta", {"product_id": product_id})
