"""
Clipfeed Feed API: FastAPI app factory.

Use: uvicorn feed_server.app:app
Or:  from feed_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .errors import register_exception_handlers
from .routes import register_routes
from .routes.root import API_NAME, API_VERSION
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, error handlers, routes, and the session sweeper."""
    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=API_NAME,
        description="Personalized short-video feed with session dedup and sponsored slots",
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    register_routes(app)

    @app.on_event("startup")
    async def start_session_sweeper():
        state = get_state()
        state.sweeper.start()
        logger.info(
            "[startup] %s starting (data_source=%s, sessions=%s, cdn=%s)",
            API_NAME,
            state.config.data_source,
            state.config.session_backend,
            state.config.cdn_base_url or "none",
        )

    @app.on_event("shutdown")
    async def stop_session_sweeper():
        await get_state().sweeper.stop()

    return app


app = create_app()
