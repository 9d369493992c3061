from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .exception_handlers import register_exception_handlers
from .logging_config import log_startup
from .routes.booking import router as booking_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the ASGI app. Run it with ``uvicorn backend.app:create_app --factory``
    so the environment is read when the server starts, not on import.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title="Ticket Booking Mailer")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(booking_router)

    @app.get("/health")
    def health():
        return {"status": "OK", "message": "Server is running"}

    # Real preflights are answered by CORSMiddleware; any other OPTIONS gets a bare 200.
    @app.options("/{path:path}", include_in_schema=False)
    def options(path: str):
        return Response(status_code=200)

    log_startup(settings)
    return app
