"""工具函数"""
from .security import create_access_token, decode_token
from .http_client import get_shared_client, close_shared_client, extract_error_message

__all__ = [
    "create_access_token", "decode_token",
    "get_shared_client", "close_shared_client", "extract_error_message",
]
