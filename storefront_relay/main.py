import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from storefront_relay.adapter.client.http import UpstreamClient
from storefront_relay.adapter.client.media import MediaUploader
from storefront_relay.api.frontend.endpoint import router as frontend_router
from storefront_relay.api.health.endpoint import router as health_router
from storefront_relay.api.products.endpoint import router as products_router
from storefront_relay.api.qa.endpoint import router as qa_router
from storefront_relay.api.reviews.endpoint import router as reviews_router
from storefront_relay.api.upload.endpoint import router as upload_router
from storefront_relay.common.config import Settings
from storefront_relay.common.observability import RequestLoggingMiddleware, configure_logging
from storefront_relay.service.errors import register_error_handlers
from storefront_relay.service.relay import RelayService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Storefront Relay", version="0.1.0")
    app.state.settings = settings
    app.state.relay = RelayService(
        UpstreamClient(
            settings.upstream_base_url,
            settings.upstream_headers,
            timeout=settings.upstream_timeout,
        )
    )
    app.state.uploader = MediaUploader(
        settings.cloud_name,
        settings.cloudinary_api_key,
        settings.cloudinary_api_secret,
    )

    app.add_middleware(GZipMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(qa_router)
    app.include_router(reviews_router)
    app.include_router(upload_router)
    # Must stay last: it matches every GET path.
    app.include_router(frontend_router)
    return app


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    app = create_app(settings)
    logger.info("Listening on port %s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,
    )


if __name__ == "__main__":
    run()
