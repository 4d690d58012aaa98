import json
import logging

import httpx

from storefront_relay.service.errors import UPSTREAM_LOG_LIMIT, relay_error, translate_failure


def _status_error(response: httpx.Response) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://upstream.test/products")
    response.request = request
    return httpx.HTTPStatusError("Request failed", request=request, response=response)


def test_translate_failure_keeps_upstream_status_and_body() -> None:
    exc = _status_error(httpx.Response(401, json={"message": "bad token"}))

    assert translate_failure(exc) == (401, {"message": "bad token"})


def test_translate_failure_without_response() -> None:
    assert translate_failure(httpx.ConnectError("refused")) == (500, {"error": "refused"})
    assert translate_failure(RuntimeError()) == (500, {"error": "Server error"})


def test_relay_error_logs_truncated_upstream_body(caplog) -> None:
    exc = _status_error(httpx.Response(502, text="x" * 2000))

    with caplog.at_level(logging.ERROR, logger="storefront_relay.upstream"):
        response = relay_error(exc)

    assert response.status_code == 502
    assert json.loads(response.body) == "x" * 2000
    record = caplog.records[-1]
    assert record.status == 502
    assert record.error == "Request failed"
    assert len(record.upstream) == UPSTREAM_LOG_LIMIT


def test_relay_error_logs_json_body_as_text(caplog) -> None:
    exc = _status_error(httpx.Response(400, json={"error": "bad"}))

    with caplog.at_level(logging.ERROR, logger="storefront_relay.upstream"):
        relay_error(exc)

    assert caplog.records[-1].upstream == '{"error": "bad"}'


def test_falsy_upstream_body_gets_error_envelope() -> None:
    for body in ("0", "false", "null"):
        exc = _status_error(httpx.Response(400, content=body.encode(), headers={"content-type": "application/json"}))
        status, translated = translate_failure(exc)
        assert status == 400
        assert translated == {"error": "Request failed"}


def test_empty_collections_are_relayed_as_is() -> None:
    assert translate_failure(_status_error(httpx.Response(404, json=[]))) == (404, [])
    assert translate_failure(_status_error(httpx.Response(404, json={}))) == (404, {})


def test_access_log_records_relayed_upstream_status(client, upstream, caplog) -> None:
    upstream.get("/products/9").mock(return_value=httpx.Response(404, json={"message": "missing"}))

    with caplog.at_level(logging.INFO, logger="storefront_relay.access"):
        response = client.get("/products/9")

    assert response.status_code == 404
    record = [r for r in caplog.records if r.name == "storefront_relay.access"][-1]
    assert record.getMessage() == "request_relayed_failure"
    assert record.levelno == logging.WARNING
    assert record.upstream_status == 404
    assert record.upstream_error == "HTTPStatusError"
    assert record.route == "/products/{product_id}"


def test_access_log_for_successful_relay(client, upstream, caplog) -> None:
    upstream.get("/products/9").mock(return_value=httpx.Response(200, json={}))

    with caplog.at_level(logging.INFO, logger="storefront_relay.access"):
        client.get("/products/9")

    record = [r for r in caplog.records if r.name == "storefront_relay.access"][-1]
    assert record.getMessage() == "request_complete"
    assert not hasattr(record, "upstream_status")
