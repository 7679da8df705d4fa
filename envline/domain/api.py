from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """解析请求：原始 dotenv 文本"""

    text: str = Field(..., description="dotenv 文件内容")


class PairOut(BaseModel):
    key: str
    value: str


class ParseResponse(BaseModel):
    pairs: List[PairOut] = Field(default_factory=list, description="按文件顺序排列的键值对")


class SetValueRequest(BaseModel):
    """写入请求：未转义的原始值"""

    value: str = Field(..., description="原始值，写入时会自动加双引号并转义")
