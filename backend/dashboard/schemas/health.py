"""健康记录相关 Schema"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, Literal

from .common import UTCDateTime

SleepQuality = Literal["poor", "fair", "good", "excellent"]
Mood = Literal["bad", "okay", "good", "great"]


class HealthRecordCreate(BaseModel):
    """创建健康记录"""
    date: UTCDateTime
    sleep_hours: Optional[int] = Field(None, ge=0)  # 分钟
    sleep_quality: Optional[SleepQuality] = None
    meals: Optional[str] = None
    water: Optional[int] = Field(None, ge=0)  # ml
    exercise: Optional[str] = None
    exercise_duration: Optional[int] = Field(None, ge=0)  # 分钟
    mood: Optional[Mood] = None
    notes: Optional[str] = None


class HealthRecordUpdate(BaseModel):
    """更新健康记录"""
    date: Optional[UTCDateTime] = None
    sleep_hours: Optional[int] = Field(None, ge=0)
    sleep_quality: Optional[SleepQuality] = None
    meals: Optional[str] = None
    water: Optional[int] = Field(None, ge=0)
    exercise: Optional[str] = None
    exercise_duration: Optional[int] = Field(None, ge=0)
    mood: Optional[Mood] = None
    notes: Optional[str] = None


class HealthRecordResponse(BaseModel):
    """健康记录响应"""
    id: int
    user_id: int
    date: datetime
    sleep_hours: Optional[int] = None
    sleep_quality: Optional[str] = None
    meals: Optional[str] = None
    water: Optional[int] = None
    exercise: Optional[str] = None
    exercise_duration: Optional[int] = None
    mood: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
