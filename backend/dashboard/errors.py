"""业务错误类型

所有错误都是 ``HTTPException``，额外带一个稳定的 ``code``，
由 main 中注册的异常处理器渲染为 ``{"code": ..., "detail": ...}``。
"""
from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class AppError(HTTPException):
    """业务错误基类"""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"
    default_detail: str = "服务器内部错误"

    def __init__(self, detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.http_status,
            detail=detail if detail is not None else self.default_detail,
            headers=headers,
        )


class BadRequestError(AppError):
    """请求参数错误"""
    http_status = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"
    default_detail = "请求参数错误"


class UnauthorizedError(AppError):
    """未登录"""
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_detail = "请先登录"


class ForbiddenError(AppError):
    """无权限"""
    http_status = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_detail = "无权访问"


class NotFoundError(AppError):
    """资源不存在"""
    http_status = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_detail = "资源不存在"


class UpstreamError(AppError):
    """外部服务（LLM、语音转写、文件存储）调用失败"""
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_SERVER_ERROR"
    default_detail = "外部服务调用失败"


# 非 AppError 的 HTTPException 按状态码映射
STATUS_CODE_NAMES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_SUPPORTED",
    409: "CONFLICT",
    413: "PAYLOAD_TOO_LARGE",
    422: "BAD_REQUEST",
    500: "INTERNAL_SERVER_ERROR",
}


def error_code_for(exc: Exception, status_code: int) -> str:
    return getattr(exc, "code", None) or STATUS_CODE_NAMES.get(status_code, "ERROR")
