"""触发收取 API 路由"""

from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from application.commands.fetch.fetch_mail import FetchMailCommand
from application.handlers.fetch.fetch_mail_handler import FetchMailHandler, FetchMailResult
from domain.common.exceptions import DomainException
from domain.fetch.value_objects.fetch_options import DEFAULT_OPERATION


router = APIRouter(tags=["Fetch"])


# ============ Handler 依赖注入 ============

_fetch_handler_getter: Optional[Callable[[], FetchMailHandler]] = None


def set_fetch_handler_getter(getter: Optional[Callable[[], FetchMailHandler]]) -> None:
    """设置 fetch handler 获取器（由 DI 容器调用）"""
    global _fetch_handler_getter
    _fetch_handler_getter = getter


def get_fetch_handler() -> Optional[FetchMailHandler]:
    """
    获取 FetchMailHandler 实例

    装配时的领域错误（如 MAIL_CONSUMER 无法解析）按错误代码映射为 HTTP 错误
    """
    if _fetch_handler_getter is None:
        return None
    try:
        return _fetch_handler_getter()
    except DomainException as e:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES.get(e.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
            detail=e.message,
        )


# 错误代码 -> HTTP 状态码
ERROR_STATUS_CODES = {
    "NO_CONSUMER": status.HTTP_400_BAD_REQUEST,
    "CONSUMER_INTERFACE": status.HTTP_400_BAD_REQUEST,
    "INVALID_VALUE_OBJECT": status.HTTP_400_BAD_REQUEST,
    "INVALID_CONFIGURATION": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "MAIL_CONNECTION_ERROR": status.HTTP_502_BAD_GATEWAY,
    "MAIL_AUTHENTICATION_ERROR": status.HTTP_502_BAD_GATEWAY,
    "MESSAGE_RETRIEVAL_ERROR": status.HTTP_502_BAD_GATEWAY,
}


# ============ Request/Response DTOs ============


class FetchRequestDTO(BaseModel):
    """触发收取请求 DTO"""

    operation_names: List[str] = Field(
        default_factory=lambda: [DEFAULT_OPERATION],
        description="每封邮件调用的消费者操作",
    )
    keep: bool = Field(default=False, description="是否保留服务器上的邮件")
    finish: bool = Field(default=False, description="周期结束后发送 QUIT（仅 POP）")
    live_session_operations: List[str] = Field(
        default_factory=list,
        description="接收实时 IMAP 连接的操作（仅 IMAP）",
    )


class FetchResponseDTO(BaseModel):
    """收取结果响应 DTO"""

    success: bool = Field(..., description="是否成功")
    message: str = Field(..., description="结果消息")
    dispatched: int = Field(0, description="分发的邮件数")
    deleted: int = Field(0, description="删除的邮件数")
    live_session: bool = Field(False, description="是否为实时会话模式")


# ============ API Endpoints ============


@router.post(
    "/fetch",
    response_model=FetchResponseDTO,
    responses={
        400: {"description": "消费者未设置或不满足接口要求，或参数无效"},
        500: {"description": "服务配置错误"},
        502: {"description": "邮件服务器连接、认证或收取失败"},
    },
    summary="执行一次收取周期",
)
async def trigger_fetch(
    request: FetchRequestDTO,
    handler: Optional[FetchMailHandler] = Depends(get_fetch_handler),
):
    """
    立即执行一次收取-分发-删除周期

    - 成功返回分发与删除的邮件数
    - 失败时不提供部分进度
    """
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    command = FetchMailCommand(
        operation_names=request.operation_names,
        keep=request.keep,
        finish=request.finish,
        live_session_operations=request.live_session_operations,
    )

    result: FetchMailResult = await handler.handle(command)

    if not result.success:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES.get(
                result.error_code or "", status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
            detail=result.message,
        )

    return FetchResponseDTO(
        success=True,
        message=result.message,
        dispatched=result.dispatched,
        deleted=result.deleted,
        live_session=result.live_session,
    )
