"""数据库配置

实体存储由 ``Database`` 对象持有：引擎、会话工厂和一把全局锁。
每个应用实例在 lifespan 中创建自己的 ``Database``，测试之间互不影响。
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """模型基类"""
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url)


def set_sqlite_pragma(dbapi_connection, connection_record):
    """SQLite 性能优化"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA temp_store=MEMORY")
    cursor.close()


class Database:
    """实体存储"""

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs = {}
        if _is_memory_sqlite(url):
            # 内存库只存在于单个连接中，所有会话必须共用它
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        # 存储操作严格串行：同一时刻只有一个会话在读写
        self.lock = asyncio.Lock()

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", set_sqlite_pragma)

    async def init(self):
        """初始化数据库表"""
        # 注册所有模型
        from . import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("数据库已初始化: %s", self.url)

    async def dispose(self):
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """获取数据库会话，正常结束提交，异常回滚"""
        async with self.lock:
            async with self.session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise


def get_database(request: Request) -> Database:
    """获取当前应用的实体存储"""
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)):
    """获取数据库会话"""
    async with database.session() as session:
        yield session
