import pytest
import respx
from fastapi.testclient import TestClient

from storefront_relay.common.config import Settings
from storefront_relay.main import create_app

UPSTREAM = "https://upstream.test"
TOKEN = "test-token"


@pytest.fixture
def dist_dir(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<html><body>storefront</body></html>", encoding="utf-8")
    (dist / "bundle.js").write_text("console.log('bundle');", encoding="utf-8")
    return dist


@pytest.fixture
def settings(dist_dir) -> Settings:
    return Settings(upstream_base_url=UPSTREAM, upstream_token=TOKEN, dist_dir=dist_dir)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def upstream():
    with respx.mock(base_url=UPSTREAM, assert_all_called=False) as mock:
        yield mock
