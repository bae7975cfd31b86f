# push_notifications/notifications/strategy.py

"""
通知種別ごとの処理ストラテジ。

各ストラテジは実際の業務ロジック（在庫更新、チャットのファンアウトなど）の
代わりに、行う予定の処理をログに報告するだけの実装になっている。

- 状態を持たない（何度呼んでも同じ結果）
- 通知レコードは変更しない
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Protocol, Union

from .exceptions import UnknownNotificationTypeError
from .factory import coerce_notification_type
from .models import NotificationLike
from .schemas import NotificationType

logger = logging.getLogger(__name__)


class ProcessingStrategy(Protocol):
    """
    種別ごとの処理ストラテジの最小インターフェース。

    Builder.with_strategy() で独自実装を差し込むこともできる。
    """

    def process(self, notification: NotificationLike) -> None:  # pragma: no cover - Protocol
        ...


class PromotionProcessingStrategy:
    def process(self, notification: NotificationLike) -> None:
        logger.info(
            "Processing promotion: validate discounts, track analytics... [id=%s]",
            notification.id,
        )


class OrderProcessingStrategy:
    def process(self, notification: NotificationLike) -> None:
        logger.info(
            "Processing order: update inventory, send tracking... [id=%s]",
            notification.id,
        )


class ChatProcessingStrategy:
    def process(self, notification: NotificationLike) -> None:
        logger.info(
            "Processing chat: notify users, update chat history... [id=%s]",
            notification.id,
        )


class SystemProcessingStrategy:
    def process(self, notification: NotificationLike) -> None:
        logger.info(
            "Processing system: log events, monitor performance... [id=%s]",
            notification.id,
        )


class NotificationProcessor:
    """
    通知種別から処理ストラテジを引いて実行するディスパッチャ。

    種別は通知オブジェクトからは導出できないため、呼び出し側が別引数で渡す。
    """

    _strategies: Mapping[NotificationType, ProcessingStrategy] = MappingProxyType(
        {
            NotificationType.PROMOTION: PromotionProcessingStrategy(),
            NotificationType.ORDER: OrderProcessingStrategy(),
            NotificationType.CHAT: ChatProcessingStrategy(),
            NotificationType.SYSTEM: SystemProcessingStrategy(),
        }
    )

    @classmethod
    def strategy_for(cls, notification_type: Union[NotificationType, str]) -> ProcessingStrategy:
        """
        種別に対応するストラテジを返す。

        :raises UnknownNotificationTypeError: 種別がレジストリに存在しない場合
        """
        component = "processing strategy"
        key = coerce_notification_type(notification_type, component=component)
        strategy = cls._strategies.get(key)
        if strategy is None:
            raise UnknownNotificationTypeError(notification_type, component=component)
        return strategy

    @classmethod
    def process(
        cls,
        notification: NotificationLike,
        notification_type: Union[NotificationType, str],
    ) -> None:
        cls.strategy_for(notification_type).process(notification)
