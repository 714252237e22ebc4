# fakeso/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fakeso.config import settings
from fakeso.core.db import init_db, close_db
from fakeso.core.pubsub import Channel, channel as default_channel
from fakeso.api.routers import messaging, user, ws

logger = logging.getLogger("uvicorn.error")

def register_exception_handlers(app: FastAPI) -> None:
    """
    Bodies that fail to parse (malformed JSON, wrong types, bad datetimes)
    are answered with 400 in the same {"error": ...} shape the routes use.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("[main] invalid request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body."})

def create_app(channel: Channel | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        channel: Push channel shared by the messaging and WebSocket routers
                 (defaults to the module-level channel in fakeso.core.pubsub)
    """
    channel = channel or default_channel
    app = FastAPI(title=settings.APP_NAME)

    # CORS for the React client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup():
        await init_db()

    @app.on_event("shutdown")
    async def on_shutdown():
        await close_db()

    register_exception_handlers(app)

    # REST
    app.include_router(user.router)
    app.include_router(messaging.build_router(channel))

    # WebSocket push channel
    app.include_router(ws.build_router(channel))

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app

app = create_app()
