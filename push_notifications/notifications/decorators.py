# push_notifications/notifications/decorators.py

"""
通知に振る舞いを追加するデコレータ群。

各デコレータは通知オブジェクトを 1つだけ包み、
- id / title などの読み取りはすべて内側のオブジェクトに委譲する
- send() は必ず内側の send() を先に呼び、その後に自分の副作用を 1つだけ実行する

このため N 個積んだ場合の send() は「元の通知 → 内側のデコレータ → … → 最も外側」
の順で N+1 件の効果を出す。同じデコレータを重ねた場合も効果はそのまま加算される。

振動・サウンド・キャッシュは実デバイス / ストアの代わりにログ出力のみ行う。
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Type

from .config import get_notification_settings
from .exceptions import UnknownDecoratorError
from .models import NotificationLike
from .schemas import DecoratorType, NotificationPriority

logger = logging.getLogger(__name__)


class NotificationDecorator:
    """
    デコレータの基底クラス。

    自前ではフィールドを保持せず、すべて wrapped から読み出す。
    """

    decorator_type: ClassVar[Optional[DecoratorType]] = None

    def __init__(self, notification: NotificationLike) -> None:
        self._wrapped = notification

    @property
    def wrapped(self) -> NotificationLike:
        return self._wrapped

    @property
    def id(self) -> str:
        return self._wrapped.id

    @property
    def title(self) -> str:
        return self._wrapped.title

    @property
    def message(self) -> str:
        return self._wrapped.message

    @property
    def timestamp(self) -> float:
        return self._wrapped.timestamp

    @property
    def priority(self) -> NotificationPriority:
        return self._wrapped.priority

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        return self._wrapped.data

    def send(self) -> None:
        self._wrapped.send()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped!r})"


class VibrationDecorator(NotificationDecorator):
    decorator_type = DecoratorType.VIBRATION

    def send(self) -> None:
        super().send()
        self._vibrate_device()

    def _vibrate_device(self) -> None:
        logger.info("Vibrating the device... while sending notification [id=%s]", self.id)


class SoundDecorator(NotificationDecorator):
    decorator_type = DecoratorType.SOUND

    def send(self) -> None:
        super().send()
        self._play_sound()

    def _play_sound(self) -> None:
        logger.info("Playing notification sound... [id=%s]", self.id)


class LoggingDecorator(NotificationDecorator):
    """送信した通知を監査用 logger に記録する。"""

    decorator_type = DecoratorType.LOGGING

    def send(self) -> None:
        super().send()
        self._log_notification()

    def _log_notification(self) -> None:
        audit_logger = logging.getLogger(get_notification_settings().audit_logger_name)
        audit_logger.info(
            "Logging notification to the audit log... [id=%s title=%s priority=%s]",
            self.id,
            self.title,
            getattr(self.priority, "value", self.priority),
        )


class CacheDecorator(NotificationDecorator):
    decorator_type = DecoratorType.CACHE

    def send(self) -> None:
        super().send()
        self._cache_notification()

    def _cache_notification(self) -> None:
        logger.info("Caching notification for future reference... [id=%s]", self.id)


DECORATORS: Mapping[DecoratorType, Type[NotificationDecorator]] = MappingProxyType(
    {
        DecoratorType.CACHE: CacheDecorator,
        DecoratorType.LOGGING: LoggingDecorator,
        DecoratorType.SOUND: SoundDecorator,
        DecoratorType.VIBRATION: VibrationDecorator,
    }
)


def coerce_decorator_type(value: Any) -> DecoratorType:
    """DecoratorType または文字列値を DecoratorType に変換する。"""
    if isinstance(value, DecoratorType):
        return value
    try:
        return DecoratorType(value)
    except ValueError as exc:
        raise UnknownDecoratorError(value) from exc


def apply_decorators(
    notification: NotificationLike,
    tags: Iterable[DecoratorType],
) -> NotificationLike:
    """
    タグの順番どおりにデコレータを積む。

    先頭のタグが最も内側、末尾のタグが最も外側になる。
    """
    decorated = notification
    for tag in tags:
        decorated = DECORATORS[coerce_decorator_type(tag)](decorated)
    return decorated


def describe_layers(notification: NotificationLike) -> List[DecoratorType]:
    """適用されているデコレータのタグを内側 → 外側の順で返す。"""
    layers: List[DecoratorType] = []
    current = notification
    while isinstance(current, NotificationDecorator):
        if current.decorator_type is not None:
            layers.append(current.decorator_type)
        current = current.wrapped
    layers.reverse()
    return layers
