# server/main.py

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api import auth, blogs, users
from config import get_settings
from core.errors import register_error_handlers
from core.middleware import register_request_logger
from database import init_db


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    init_db()

    app = FastAPI(title="Blog List API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logger(app)
    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(blogs.router)
    app.include_router(users.router)
    return app


app = create_app()
