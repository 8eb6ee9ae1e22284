"""通用 Schema"""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel


def to_naive_utc(value: datetime) -> datetime:
    """带时区的时间统一转为 UTC 无时区时间，与存储保持一致"""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]


class IdResponse(BaseModel):
    """创建结果"""
    id: int


class AffectedResponse(BaseModel):
    """更新/删除结果"""
    affected: int
