from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from envline.core.errors import DotenvIOError, DotenvParseError
from envline.core.settings import load_settings
from envline.domain.api import PairOut, ParseRequest, ParseResponse, SetValueRequest
from envline.domain.pair import Pair
from envline.grammar.document import parse
from envline.services.dotenv_service import read_pairs, set_string

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(pairs: List[Pair]) -> ParseResponse:
    return ParseResponse(pairs=[PairOut(key=p.key, value=p.value) for p in pairs])


@router.get("/health")
def health() -> dict:
    return {"ok": True}


@router.post("/dotenv/parse", response_model=ParseResponse)
def post_parse(payload: ParseRequest) -> ParseResponse:
    try:
        return _to_response(parse(payload.text))
    except DotenvParseError as e:
        raise HTTPException(status_code=422, detail={"error": "missing '='", "line": e.line})


@router.get("/dotenv", response_model=ParseResponse)
def get_dotenv() -> ParseResponse:
    """解析配置中的 dotenv 文件（只读，不修改进程环境变量）"""
    path = load_settings().resolve_dotenv_path()
    try:
        return _to_response(read_pairs(path))
    except DotenvIOError as e:
        status = 404 if isinstance(e.cause, FileNotFoundError) else 500
        raise HTTPException(status_code=status, detail=str(e))
    except DotenvParseError as e:
        raise HTTPException(status_code=422, detail={"error": "missing '='", "line": e.line})


@router.put("/dotenv/{key}")
def put_dotenv_value(key: str, payload: SetValueRequest) -> dict:
    settings = load_settings()
    if not settings.api_write_enabled:
        raise HTTPException(status_code=403, detail="dotenv writes are disabled")
    try:
        set_string(key, payload.value, path=settings.resolve_dotenv_path())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DotenvIOError as e:
        logger.error(f"❌ [API错误] 写入 dotenv 失败: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"ok": True, "key": key}
