"""应用配置"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path

# 本地开发: backend/dashboard/config.py -> 项目根目录是 ../../
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent
_project_root = _backend_dir.parent
_data_dir = _project_root / "data"
_env_file = _project_root / ".env" if (_project_root / ".env").exists() else None


class Settings(BaseSettings):
    """应用设置"""
    # 应用
    APP_NAME: str = "Personal Dashboard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 数据库（默认内存库，重启后仅保留种子数据）
    DATABASE_URL: str = "sqlite+aiosqlite://"

    # JWT（由外部身份服务签发，这里只做校验）
    JWT_SECRET_KEY: str = "change-this-secret-key-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 小时

    # 身份解析
    DEMO_MODE: bool = True  # 无令牌时使用演示用户
    DEMO_OPEN_ID: str = "demo_user"
    OWNER_OPEN_ID: Optional[str] = None  # 首次出现时授予 admin 角色

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # LLM（OpenAI 兼容接口）
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: str = "https://api.openai.com/v1"
    LLM_MODEL: str = "gpt-4o-mini"

    # 外部 HTTP 调用超时（秒）
    HTTP_TIMEOUT: float = 60.0

    # 语音转写
    VOICE_API_URL: Optional[str] = None
    VOICE_API_KEY: Optional[str] = None

    # 文件存储：配置 STORAGE_API_URL 时走远端，否则写本地目录
    STORAGE_API_URL: Optional[str] = None
    STORAGE_API_KEY: Optional[str] = None
    UPLOAD_DIR: str = str(_data_dir / "uploads")
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    MAX_UPLOAD_SIZE: int = 50 * 1024 * 1024  # 50MB

    class Config:
        env_file = str(_env_file) if _env_file else ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()


settings = get_settings()
