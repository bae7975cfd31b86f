# push_notifications/notifications/builder.py

"""
通知を組み立てるための Fluent Builder。

build() の処理順:
1. NotificationManager（Factory）で種別ごとの通知を生成
2. auto_process が有効なら処理ストラテジを実行（デコレータ適用前の素の通知に対して）
3. 記録された順番でデコレータを積む

build() は設定を消費しないため、同じ Builder から何度でも独立した通知を生成できる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Union

from .decorators import apply_decorators, coerce_decorator_type
from .exceptions import IncompleteBuilderConfigError
from .factory import NotificationManager
from .models import NotificationData, NotificationLike, to_notification_input
from .schemas import DecoratorType, NotificationInput, NotificationType
from .strategy import NotificationProcessor, ProcessingStrategy

logger = logging.getLogger(__name__)


@dataclass
class BuilderConfig:
    """
    Builder が build() までに蓄積する設定。

    - decorators: 指定順（重複可）
    - custom_strategy: 指定時は種別ごとのストラテジの後に追加で実行する
    """

    type: Optional[Union[NotificationType, str]] = None
    data: Optional[NotificationInput] = None
    decorators: List[DecoratorType] = field(default_factory=list)
    auto_process: bool = True
    custom_strategy: Optional[ProcessingStrategy] = None


class NotificationBuilder:
    """
    通知の種別・内容・振る舞いを段階的に設定し、最後に build() で生成する。

    例:
        notification = (
            NotificationBuilder.create(NotificationType.ORDER, data)
            .with_standard_behaviors()
            .with_sound()
            .build_and_send()
        )
    """

    def __init__(self) -> None:
        self._config = BuilderConfig()

    @classmethod
    def create(
        cls,
        notification_type: Union[NotificationType, str],
        data: Optional[NotificationData],
    ) -> "NotificationBuilder":
        """種別と内容を指定して新しい Builder を返す。"""
        return cls().with_type(notification_type).with_data(data)

    # ------------------------------------------------------------------
    # 種別・内容
    # ------------------------------------------------------------------
    def with_type(self, notification_type: Union[NotificationType, str]) -> "NotificationBuilder":
        self._config.type = notification_type
        return self

    def with_data(self, data: Optional[NotificationData]) -> "NotificationBuilder":
        self._config.data = None if data is None else to_notification_input(data)
        return self

    # ------------------------------------------------------------------
    # デコレータ
    # ------------------------------------------------------------------
    def with_cache(self) -> "NotificationBuilder":
        self._config.decorators.append(DecoratorType.CACHE)
        return self

    def with_logging(self) -> "NotificationBuilder":
        self._config.decorators.append(DecoratorType.LOGGING)
        return self

    def with_sound(self) -> "NotificationBuilder":
        self._config.decorators.append(DecoratorType.SOUND)
        return self

    def with_vibration(self) -> "NotificationBuilder":
        self._config.decorators.append(DecoratorType.VIBRATION)
        return self

    def with_decorators(
        self,
        decorators: Iterable[Union[DecoratorType, str]],
    ) -> "NotificationBuilder":
        """
        複数のデコレータを指定順にまとめて追加する。

        不明なタグが含まれる場合は何も追加せずに UnknownDecoratorError。
        """
        tags = [coerce_decorator_type(tag) for tag in decorators]
        self._config.decorators.extend(tags)
        return self

    # 定義済みの構成（順序がネストの順になるため、入れ替えないこと）
    def with_urgent_behaviors(self) -> "NotificationBuilder":
        return self.with_vibration().with_sound().with_logging()

    def with_silent_behaviors(self) -> "NotificationBuilder":
        return self.with_cache().with_logging()

    def with_standard_behaviors(self) -> "NotificationBuilder":
        return self.with_logging().with_cache()

    # ------------------------------------------------------------------
    # 処理ストラテジ
    # ------------------------------------------------------------------
    def with_strategy(self, strategy: Optional[ProcessingStrategy]) -> "NotificationBuilder":
        self._config.custom_strategy = strategy
        return self

    def with_auto_process(self, auto_process: bool) -> "NotificationBuilder":
        self._config.auto_process = bool(auto_process)
        return self

    # ------------------------------------------------------------------
    # 生成
    # ------------------------------------------------------------------
    def build(self) -> NotificationLike:
        """
        現在の設定から通知を生成する。

        :raises IncompleteBuilderConfigError: type / data が未設定の場合
        :raises UnknownNotificationTypeError: 種別がレジストリに存在しない場合
        """
        config = self._config
        missing = [
            name
            for name, value in (("type", config.type), ("data", config.data))
            if value is None
        ]
        if missing:
            raise IncompleteBuilderConfigError(missing)

        # 1. Factory で素の通知を生成
        notification = NotificationManager.create_notification(config.type, config.data)

        # 2. デコレータ適用前に処理ストラテジを実行
        if config.auto_process:
            NotificationProcessor.process(notification, config.type)
            if config.custom_strategy is not None:
                config.custom_strategy.process(notification)

        # 3. 記録順にデコレータを積む
        decorated = apply_decorators(notification, list(config.decorators))

        logger.debug(
            "Built notification id=%s type=%s decorators=%s",
            decorated.id,
            getattr(config.type, "value", config.type),
            [tag.value for tag in config.decorators],
        )
        return decorated

    def build_and_send(self) -> NotificationLike:
        notification = self.build()
        notification.send()
        return notification

    def inspect(self) -> BuilderConfig:
        """現在の設定のコピーを返す（返り値を変更しても Builder には影響しない）。"""
        return replace(self._config, decorators=list(self._config.decorators))

    def reset(self) -> "NotificationBuilder":
        """設定を初期状態に戻す（type / data も破棄する）。"""
        self._config = BuilderConfig()
        return self
