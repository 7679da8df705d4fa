from __future__ import annotations

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from envline.core.logging_config import setup_logging_from_settings
from envline.core.settings import EnvlineSettings, load_settings
from .routers.v1 import router as v1_router


def _parse_cors_origins(settings: EnvlineSettings) -> List[str]:
    """解析CORS origins配置，从settings读取"""
    raw = settings.cors_origins
    if not raw or not raw.strip():
        # 默认允许本地开发环境
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return [x.strip() for x in raw.split(",") if x.strip()]


def create_app(settings: EnvlineSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging_from_settings(settings)

    app = FastAPI(title="envline", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_parse_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")
    return app
