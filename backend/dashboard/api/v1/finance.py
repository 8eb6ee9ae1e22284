"""财务路由：收支记录、区间汇总、余额快照"""
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from ...database import get_db
from ...errors import BadRequestError
from ...models import User, Transaction
from ...schemas import (
    TransactionCreate, TransactionUpdate, TransactionResponse,
    FinanceSummary, BalanceCreate, BalanceResponse,
    IdResponse, AffectedResponse,
)
from ...schemas.common import to_naive_utc
from ...store import finance as finance_store
from ..deps import get_current_user, ensure_owner

router = APIRouter()


async def get_own_transaction(db: AsyncSession, transaction_id: int, user: User) -> Transaction:
    transaction = await finance_store.get_transaction_by_id(db, transaction_id)
    ensure_owner(transaction, transaction.user_id if transaction else None, user, "交易记录不存在")
    return transaction


# ==================== 收支记录 ====================

@router.get("/transactions", response_model=List[TransactionResponse], name="finance.listTransactions")
async def list_transactions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """最近 100 条收支记录"""
    return await finance_store.get_transactions_by_user(db, current_user.id)


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse, name="finance.getTransaction")
async def get_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """获取单条收支记录"""
    return await get_own_transaction(db, transaction_id, current_user)


@router.post("/transactions", response_model=IdResponse, status_code=status.HTTP_201_CREATED,
             name="finance.createTransaction")
async def create_transaction(
    transaction_in: TransactionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """创建收支记录"""
    transaction_id = await finance_store.create_transaction(
        db,
        user_id=current_user.id,
        **transaction_in.model_dump(),
    )
    return IdResponse(id=transaction_id)


@router.patch("/transactions/{transaction_id}", response_model=AffectedResponse, name="finance.updateTransaction")
async def update_transaction(
    transaction_id: int,
    transaction_in: TransactionUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """更新收支记录"""
    await get_own_transaction(db, transaction_id, current_user)
    affected = await finance_store.update_transaction(
        db, transaction_id, transaction_in.model_dump(exclude_none=True)
    )
    return AffectedResponse(affected=affected)


@router.delete("/transactions/{transaction_id}", response_model=AffectedResponse, name="finance.deleteTransaction")
async def delete_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """删除收支记录"""
    await get_own_transaction(db, transaction_id, current_user)
    affected = await finance_store.delete_transaction(db, transaction_id)
    return AffectedResponse(affected=affected)


@router.get("/summary", response_model=FinanceSummary, name="finance.getSummary")
async def get_summary(
    start_date: datetime = Query(...),
    end_date: datetime = Query(...),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """区间 [start_date, end_date] 的收入、支出与结余"""
    start_date, end_date = to_naive_utc(start_date), to_naive_utc(end_date)
    if start_date > end_date:
        raise BadRequestError("开始日期不能晚于结束日期")

    summary = await finance_store.get_transactions_summary(db, current_user.id, start_date, end_date)
    return FinanceSummary(**summary)


# ==================== 余额 ====================

@router.get("/balance/latest", response_model=Optional[BalanceResponse], name="finance.getLatestBalance")
async def get_latest_balance(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """最新余额，没有记录时返回 null"""
    return await finance_store.get_latest_balance(db, current_user.id)


@router.get("/balance/history", response_model=List[BalanceResponse], name="finance.getBalanceHistory")
async def get_balance_history(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """最近 30 条余额快照"""
    return await finance_store.get_balance_history(db, current_user.id)


@router.post("/balance", response_model=IdResponse, status_code=status.HTTP_201_CREATED, name="finance.updateBalance")
async def update_balance(
    balance_in: BalanceCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """记录新的余额快照（追加，不修改历史）"""
    balance_id = await finance_store.create_balance(
        db,
        user_id=current_user.id,
        **balance_in.model_dump(),
    )
    return IdResponse(id=balance_id)
