# push_notifications/notifications/router.py
"""
通知パイプライン用の FastAPI ルーター定義。

- /notifications/types
- /notifications/send
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from .builder import NotificationBuilder
from .decorators import describe_layers
from .exceptions import NotificationPipelineError
from .factory import NotificationManager
from .schemas import (
    BehaviorPreset,
    NotificationSendRequest,
    NotificationSendResponse,
    NotificationType,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _builder_from_request(request: NotificationSendRequest) -> NotificationBuilder:
    builder = NotificationBuilder.create(request.type, request.notification)

    if request.preset == BehaviorPreset.URGENT:
        builder.with_urgent_behaviors()
    elif request.preset == BehaviorPreset.SILENT:
        builder.with_silent_behaviors()
    elif request.preset == BehaviorPreset.STANDARD:
        builder.with_standard_behaviors()

    return builder.with_decorators(request.decorators).with_auto_process(request.auto_process)


@router.get(
    "/types",
    response_model=List[NotificationType],
    summary="登録済みの通知種別一覧",
)
def list_notification_types() -> List[NotificationType]:
    return NotificationManager.registered_types()


@router.post(
    "/send",
    response_model=NotificationSendResponse,
    summary="通知の生成と送信",
    description=(
        "種別と通知内容、デコレータ構成を受け取り、Builder で通知を組み立てて send() を実行する。"
        "実際の Push 配信は行わず、各効果はログに出力される。"
    ),
)
def send_notification(request: NotificationSendRequest) -> NotificationSendResponse:
    """
    通知を組み立てて送信するエンドポイント。

    - パイプライン由来の例外（未登録の種別など）は 422 として扱う
    - 予期しない例外発生時は 500 エラーとして扱う
    """
    try:
        notification = _builder_from_request(request).build_and_send()
    except NotificationPipelineError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # noqa: BLE001
        # 予期しない例外は 500 番台として扱う（詳細はログ側に残す）
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Notification pipeline failed unexpectedly.",
        ) from exc

    return NotificationSendResponse(
        id=notification.id,
        type=request.type,
        title=notification.title,
        priority=notification.priority,
        layers=describe_layers(notification),
    )
