"""FastAPI 应用入口"""
import logging
import logging.config

from .config import settings


def setup_logging():
    """日志配置：控制台输出，配置 LOG_FILE 时同时写文件"""
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    }
    if settings.LOG_FILE:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "standard",
            "filename": settings.LOG_FILE,
            "mode": "a",
            "encoding": "utf-8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"}
        },
        "handlers": handlers,
        "root": {
            "level": settings.LOG_LEVEL,
            "handlers": list(handlers),
        },
        "loggers": {
            "dashboard": {"level": settings.LOG_LEVEL},
            "httpx": {"level": "WARNING"},
        },
    })


setup_logging()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .database import Database
from .errors import error_code_for
from .store import seed_defaults
from .utils.http_client import close_shared_client

logger = logging.getLogger("dashboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时：创建存储并写入种子数据
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    await database.init()
    async with database.session() as db:
        await seed_defaults(db)
    app.state.database = database

    logger.info("%s v%s 启动成功", settings.APP_NAME, settings.APP_VERSION)
    yield
    # 关闭时
    await close_shared_client()
    await database.dispose()
    logger.info("应用关闭完成")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """统一错误格式: {"code", "detail"}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": error_code_for(exc, exc.status_code), "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """参数校验失败按 400 返回"""
    return JSONResponse(
        status_code=400,
        content={"code": "BAD_REQUEST", "detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """创建应用"""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="个人工作台 API：文档、博客、健康、财务",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 注册路由
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["系统"], summary="健康检查")
    async def health_check():
        """检查服务运行状态"""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION
        }

    @app.get("/", tags=["系统"], summary="欢迎页")
    async def root():
        """返回 API 基本信息"""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": "/api/docs"
        }

    return app


app = create_app()
