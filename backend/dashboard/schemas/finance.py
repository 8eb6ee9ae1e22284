"""财务相关 Schema

金额均为最小货币单位（分）的整数。
"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, Literal

from .common import UTCDateTime

TransactionType = Literal["income", "expense"]


class TransactionCreate(BaseModel):
    """创建收支记录"""
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=100)
    amount: int = Field(..., gt=0)
    currency: str = Field("CNY", min_length=1, max_length=10)
    description: Optional[str] = None
    date: UTCDateTime


class TransactionUpdate(BaseModel):
    """更新收支记录"""
    type: Optional[TransactionType] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[int] = Field(None, gt=0)
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    description: Optional[str] = None
    date: Optional[UTCDateTime] = None


class TransactionResponse(BaseModel):
    """收支记录响应"""
    id: int
    user_id: int
    type: str
    category: str
    amount: int
    currency: str
    description: Optional[str] = None
    date: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FinanceSummary(BaseModel):
    """区间收支汇总"""
    total_income: int
    total_expense: int
    balance: int


class BalanceCreate(BaseModel):
    """追加余额快照"""
    amount: int
    currency: str = Field("CNY", min_length=1, max_length=10)
    date: UTCDateTime


class BalanceResponse(BaseModel):
    """余额快照响应"""
    id: int
    user_id: int
    amount: int
    currency: str
    date: datetime
    created_at: datetime

    class Config:
        from_attributes = True
