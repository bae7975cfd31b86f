# push_notifications/notifications/factory.py

"""
通知種別ごとの Factory と、種別からFactoryを引くマネージャ。

- NotificationFactory: 具象通知を生成する抽象 Factory
- <Type>NotificationFactory: 種別ごとの具象 Factory
- NotificationManager: 種別 → Factory の読み取り専用レジストリ

Factory は生成のみを行い、send() は呼ばない（prepare_notification を除く）。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, List, Mapping, Union

from .exceptions import UnknownNotificationTypeError
from .models import (
    ChatNotification,
    NotificationData,
    NotificationLike,
    OrderNotification,
    PromotionNotification,
    SystemNotification,
)
from .schemas import NotificationType


def coerce_notification_type(
    value: Union[NotificationType, str, Any],
    *,
    component: str = "factory",
) -> NotificationType:
    """
    NotificationType または文字列値を NotificationType に変換する。

    列挙外の値は UnknownNotificationTypeError。
    """
    if isinstance(value, NotificationType):
        return value
    try:
        return NotificationType(value)
    except ValueError as exc:
        raise UnknownNotificationTypeError(value, component=component) from exc


class NotificationFactory(ABC):
    """具象通知を 1件生成する Factory の基底クラス。"""

    @abstractmethod
    def create_notification(self, data: NotificationData) -> NotificationLike:
        ...

    def prepare_notification(self, data: NotificationData) -> NotificationLike:
        """生成した通知をそのまま送信して返す。"""
        notification = self.create_notification(data)
        notification.send()
        return notification


class PromotionNotificationFactory(NotificationFactory):
    def create_notification(self, data: NotificationData) -> NotificationLike:
        return PromotionNotification(data)


class OrderNotificationFactory(NotificationFactory):
    def create_notification(self, data: NotificationData) -> NotificationLike:
        return OrderNotification(data)


class ChatNotificationFactory(NotificationFactory):
    def create_notification(self, data: NotificationData) -> NotificationLike:
        return ChatNotification(data)


class SystemNotificationFactory(NotificationFactory):
    def create_notification(self, data: NotificationData) -> NotificationLike:
        return SystemNotification(data)


class NotificationManager:
    """
    通知種別から Factory を引いて通知を生成する窓口。

    レジストリはモジュール読み込み時に一度だけ構築し、以降は変更しない。
    """

    _factories: Mapping[NotificationType, NotificationFactory] = MappingProxyType(
        {
            NotificationType.PROMOTION: PromotionNotificationFactory(),
            NotificationType.ORDER: OrderNotificationFactory(),
            NotificationType.CHAT: ChatNotificationFactory(),
            NotificationType.SYSTEM: SystemNotificationFactory(),
        }
    )

    @classmethod
    def factory_for(cls, notification_type: Union[NotificationType, str]) -> NotificationFactory:
        key = coerce_notification_type(notification_type)
        factory = cls._factories.get(key)
        if factory is None:
            raise UnknownNotificationTypeError(notification_type)
        return factory

    @classmethod
    def create_notification(
        cls,
        notification_type: Union[NotificationType, str],
        data: NotificationData,
    ) -> NotificationLike:
        """
        種別に対応する Factory で通知を生成する。

        :raises UnknownNotificationTypeError: 種別がレジストリに存在しない場合
        """
        return cls.factory_for(notification_type).create_notification(data)

    @classmethod
    def registered_types(cls) -> List[NotificationType]:
        """登録済みの通知種別（列挙定義順）。"""
        return [t for t in NotificationType if t in cls._factories]
