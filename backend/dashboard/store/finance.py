"""财务存储操作：收支记录与余额快照"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Transaction, Balance
from .base import insert, update_by_id, delete_by_id


# ==================== 收支记录 ====================

async def get_transactions_by_user(db: AsyncSession, user_id: int, limit: int = 100) -> List[Transaction]:
    result = await db.execute(
        select(Transaction)
        .where(Transaction.user_id == user_id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_transaction_by_id(db: AsyncSession, transaction_id: int) -> Optional[Transaction]:
    return await db.get(Transaction, transaction_id)


async def create_transaction(
    db: AsyncSession,
    user_id: int,
    type: str,
    category: str,
    amount: int,
    date: datetime,
    currency: Optional[str] = None,
    description: Optional[str] = None,
) -> int:
    return await insert(db, Transaction(
        user_id=user_id,
        type=type,
        category=category,
        amount=amount,
        currency=currency or "CNY",
        description=description,
        date=date,
    ))


async def update_transaction(db: AsyncSession, transaction_id: int, data: Dict[str, Any]) -> int:
    return await update_by_id(db, Transaction, transaction_id, data)


async def delete_transaction(db: AsyncSession, transaction_id: int) -> int:
    return await delete_by_id(db, Transaction, transaction_id)


async def get_transactions_summary(
    db: AsyncSession,
    user_id: int,
    start_date: datetime,
    end_date: datetime,
) -> Dict[str, int]:
    """统计 [start_date, end_date] 内的收入、支出和结余"""
    result = await db.execute(
        select(Transaction.type, func.coalesce(func.sum(Transaction.amount), 0))
        .where(
            Transaction.user_id == user_id,
            Transaction.date >= start_date,
            Transaction.date <= end_date,
        )
        .group_by(Transaction.type)
    )
    totals = {row[0]: int(row[1]) for row in result.all()}

    income = totals.get("income", 0)
    expense = totals.get("expense", 0)
    return {
        "total_income": income,
        "total_expense": expense,
        "balance": income - expense,
    }


# ==================== 余额快照 ====================

async def create_balance(
    db: AsyncSession,
    user_id: int,
    amount: int,
    date: datetime,
    currency: Optional[str] = None,
) -> int:
    return await insert(db, Balance(
        user_id=user_id,
        amount=amount,
        currency=currency or "CNY",
        date=date,
    ))


async def get_latest_balance(db: AsyncSession, user_id: int) -> Optional[Balance]:
    """日期最大的快照；同一日期取 ID 最大的"""
    result = await db.execute(
        select(Balance)
        .where(Balance.user_id == user_id)
        .order_by(Balance.date.desc(), Balance.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def get_balance_history(db: AsyncSession, user_id: int, limit: int = 30) -> List[Balance]:
    result = await db.execute(
        select(Balance)
        .where(Balance.user_id == user_id)
        .order_by(Balance.date.desc(), Balance.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
