# push_notifications/notifications/__init__.py

"""
通知の組み立てパイプライン用モジュール群。

構成イメージ:
- schemas: 通知種別・優先度・デコレータタグ・入力データ
- models: 通知レコードと種別ごとの具象通知
- factory: 種別 → 具象通知の Factory
- strategy: 種別 → 処理ストラテジ
- decorators: send() に振る舞いを追加するデコレータ
- builder: 上記をまとめて組み立てる Fluent Builder
- router: /notifications エンドポイント
"""

from .builder import BuilderConfig, NotificationBuilder
from .decorators import (
    CacheDecorator,
    LoggingDecorator,
    NotificationDecorator,
    SoundDecorator,
    VibrationDecorator,
)
from .exceptions import (
    IncompleteBuilderConfigError,
    NotificationPipelineError,
    UnknownDecoratorError,
    UnknownNotificationTypeError,
)
from .factory import NotificationManager
from .models import NotificationLike
from .schemas import (
    DecoratorType,
    NotificationInput,
    NotificationPriority,
    NotificationType,
)
from .strategy import NotificationProcessor

__all__ = [
    "BuilderConfig",
    "NotificationBuilder",
    "CacheDecorator",
    "LoggingDecorator",
    "NotificationDecorator",
    "SoundDecorator",
    "VibrationDecorator",
    "IncompleteBuilderConfigError",
    "NotificationPipelineError",
    "UnknownDecoratorError",
    "UnknownNotificationTypeError",
    "NotificationManager",
    "NotificationLike",
    "DecoratorType",
    "NotificationInput",
    "NotificationPriority",
    "NotificationType",
    "NotificationProcessor",
]
