import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking.api.routes import appointments
from booking.core.config import Settings, _ENV_FILE, settings
from booking.core.errors import BookingError
from booking.core.store import AppointmentStore

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _cors_headers(origin: str | None, config: Settings) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }
    origins = config.cors_origins_list
    if "*" in origins:
        headers["Access-Control-Allow-Origin"] = origin or "*"
    elif origin and origin in origins:
        headers["Access-Control-Allow-Origin"] = origin
    elif origins:
        headers["Access-Control-Allow-Origin"] = origins[0]
    return headers


def _error(request: Request, status_code: int, message: str) -> JSONResponse:
    config: Settings = request.app.state.settings
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=_cors_headers(request.headers.get("origin"), config),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error(request, exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Malformed request body: %s", exc.errors())
        return _error(request, 400, "Request body must be a JSON object with name, email, date, time")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(request, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Log the failure; the client only sees a generic message."""
        logger.exception("Unhandled exception: %s", exc)
        return _error(request, 500, "Internal server error")


def _register_client_routes(app: FastAPI, config: Settings) -> None:
    frontend_dir = config.frontend_dir.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str) -> FileResponse:
        """Serve client assets; any other non-API path gets index.html."""
        if full_path == API_PREFIX.lstrip("/") or full_path.startswith(API_PREFIX.lstrip("/") + "/"):
            raise HTTPException(status_code=404, detail="Not found")
        if full_path:
            candidate = (frontend_dir / full_path).resolve()
            if candidate.is_relative_to(frontend_dir) and candidate.is_file():
                return FileResponse(candidate)
        if not config.index_file.is_file():
            raise HTTPException(status_code=404, detail="Client application not found")
        return FileResponse(config.index_file)


def create_app(config: Settings | None = None, store: AppointmentStore | None = None) -> FastAPI:
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
        logger.info("Serving client from: %s", config.frontend_dir)
        yield
        logger.info("Shutting down with %d appointment(s) in memory (not persisted)", len(app.state.store))

    app = FastAPI(
        title="Appointment Booking API",
        description="Half-hour appointment slots between 09:00 and 17:00, booked in memory",
        version="0.1.0",
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=None,
        openapi_url=f"{API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.store = store if store is not None else AppointmentStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(appointments.router, prefix=API_PREFIX)
    _register_exception_handlers(app)
    _register_client_routes(app, config)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
