from typing import Optional

from fastapi import FastAPI

from user_service.observability.logger import setup_logging
from user_service.routers.status import router as status_router
from user_service.settings import Settings, settings as default_settings
from user_service.utils.runtime import RuntimeState


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.runtime = RuntimeState.capture(name=settings.app_name, version=settings.version)

    app.include_router(status_router)

    return app


app = create_app()
