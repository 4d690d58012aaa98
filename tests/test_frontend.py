import httpx


def test_healthz_does_not_touch_upstream(client, upstream) -> None:
    route = upstream.route().mock(return_value=httpx.Response(500))

    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"
    assert not route.called


def test_unknown_path_serves_index(client) -> None:
    response = client.get("/item/40344")

    assert response.status_code == 200
    assert "storefront" in response.text
    assert response.headers["content-type"].startswith("text/html")


def test_root_serves_index(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "storefront" in response.text


def test_bundle_assets_are_served(client) -> None:
    response = client.get("/bundle.js")

    assert response.status_code == 200
    assert response.text == "console.log('bundle');"


def test_paths_outside_dist_fall_back_to_index(client, dist_dir) -> None:
    (dist_dir.parent / "secret.txt").write_text("nope", encoding="utf-8")

    response = client.get("/..%2Fsecret.txt")

    assert response.status_code == 200
    assert "nope" not in response.text


def test_missing_index_is_500(client, dist_dir) -> None:
    (dist_dir / "index.html").unlink()

    response = client.get("/checkout")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send index.html"}
