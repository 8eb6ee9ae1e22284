"""财务相关模型

金额一律以最小货币单位（分）的整数存储。
"""
from sqlalchemy import Column, String, DateTime, Text, Integer, ForeignKey
from datetime import datetime

from ..database import Base


class Transaction(Base):
    """收支记录表"""
    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False, index=True)  # income / expense
    category = Column(String(100), nullable=False)
    amount = Column(Integer, nullable=False)
    currency = Column(String(10), nullable=False, default="CNY")
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)


class Balance(Base):
    """余额快照表"""
    __tablename__ = "balances"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    currency = Column(String(10), nullable=False, default="CNY")
    date = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
