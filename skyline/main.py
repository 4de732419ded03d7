from fastapi import FastAPI

from skyline.api.routes.contributions import router
from skyline.core.app_logging import configure_logging
from skyline.core.observability import init_sentry
from skyline.settings import Settings


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application around the contribution routes."""

    app_settings = app_settings or Settings()
    configure_logging(app_settings.log_level.upper())
    init_sentry(app_settings, entry_point="api")

    application = FastAPI(title="skylineg")
    application.state.settings = app_settings
    application.include_router(router)
    return application


app = create_app()
