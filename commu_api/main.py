import time
from contextlib import asynccontextmanager
from datetime import datetime
from fastapi import FastAPI, Request
import uvicorn

from .api.v1 import api_router
from .config import AppConfig, get_app_config
from .logging_config import log_api_access


def create_application(config: AppConfig = None) -> FastAPI:
    """Build the FastAPI app with the v1 router, lifecycle logs and access logging"""
    config = config or get_app_config()
    logger = config.logger

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        logger.info(f"Server started at {datetime.now().isoformat()}")
        yield
        logger.info(f"Server stopped at {datetime.now().isoformat()}")

    # trailing-slash variants are 404s, not redirects
    application = FastAPI(
        title=config.service_name,
        version=config.version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    application.include_router(api_router, prefix="/api/v1")

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, response.status_code, process_time)
            return response
        except Exception as e:
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, 500, process_time, error=str(e))
            logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
            raise

    return application


app = create_application()


def main() -> None:
    config = get_app_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
