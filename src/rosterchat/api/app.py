"""HTTP application shell around the chat room.

FastAPI serves the health endpoint and the static client page; Socket.IO
wraps it so one ASGI app handles both. Use create_app() (uvicorn factory
mode) to get the combined app.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import socketio
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from rosterchat.config import Settings, get_settings
from rosterchat.connection.socketio_server import (
    create_sio,
    create_socketio_app,
    register_chat_handlers,
)
from rosterchat.connection.transport import SocketIOTransport
from rosterchat.logging_config import setup_logging
from rosterchat.services.chat_room import ChatRoom

logger = logging.getLogger(__name__)


def build_api(room: ChatRoom, settings: Settings) -> FastAPI:
    """Build the FastAPI app for a chat room."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Chat server listening at %s:%s", settings.host, settings.port)
        yield
        logger.info(
            "Shutting down chat server (participants=%d transcript_entries=%d)",
            room.participant_count, len(room.transcript),
        )

    app = FastAPI(title=settings.service_name, version=settings.service_version, lifespan=lifespan)
    app.state.chat_room = room
    app.state.settings = settings

    origins = settings.cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origins] if isinstance(origins, str) else origins,
        allow_credentials=origins != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health_check(request: Request):
        """Health check endpoint for monitoring."""
        chat_room: ChatRoom = request.app.state.chat_room
        return {
            "status": "healthy",
            "service": settings.service_name,
            "participants": chat_room.participant_count,
            "transcript_entries": len(chat_room.transcript),
        }

    # Mounted last so API routes take precedence
    if settings.client_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.client_dir, html=True), name="client")
    else:
        logger.warning("Client directory %s not found, static page disabled", settings.client_dir)

    return app


def create_app(settings: Optional[Settings] = None) -> socketio.ASGIApp:
    """Create the combined Socket.IO + FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    sio = create_sio(settings.cors_origins())
    transport = SocketIOTransport(sio, namespace=settings.socketio_namespace)
    room = ChatRoom(transport, transcript_limit=settings.transcript_limit)
    register_chat_handlers(sio, room, namespace=settings.socketio_namespace)

    app = build_api(room, settings)
    return create_socketio_app(sio, app)
