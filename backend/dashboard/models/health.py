"""健康记录模型"""
from sqlalchemy import Column, String, DateTime, Text, Integer, ForeignKey
from datetime import datetime

from ..database import Base


class HealthRecord(Base):
    """健康记录表"""
    __tablename__ = "health_records"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False, index=True)
    sleep_hours = Column(Integer, nullable=True)  # 睡眠时长（分钟）
    sleep_quality = Column(String(20), nullable=True)  # poor / fair / good / excellent
    meals = Column(Text, nullable=True)
    water = Column(Integer, nullable=True)  # 饮水量（ml）
    exercise = Column(Text, nullable=True)
    exercise_duration = Column(Integer, nullable=True)  # 运动时长（分钟）
    mood = Column(String(20), nullable=True)  # bad / okay / good / great
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)
