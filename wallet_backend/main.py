from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from wallet_backend import __version__
from wallet_backend.api import create_api_router
from wallet_backend.core.config import Settings, get_settings
from wallet_backend.core.container import ApplicationContainer
from wallet_backend.core.logging import setup_logging
from wallet_backend.interfaces.http.error_handlers import register_error_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    setup_logging(container.settings.logging.level, container.settings.logging.format)
    await container.init_infrastructure()
    yield
    await container.shutdown()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or (container.settings if container else get_settings())
    container = container or ApplicationContainer.build(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Wallet and transaction management service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", summary="Liveness probe")
    async def health():
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wallet_backend.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
