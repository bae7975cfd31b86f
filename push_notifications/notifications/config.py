# push_notifications/notifications/config.py

"""
通知パイプラインの設定値をまとめるモジュール。
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from push_notifications.utils.config import get_env, get_env_log_level


@dataclass(frozen=True)
class NotificationSettings:
    """通知パイプライン用の設定値コンテナ。"""

    audit_logger_name: str
    urgent_log_level: int


@lru_cache()
def get_notification_settings() -> NotificationSettings:
    """
    環境変数から通知パイプラインの設定を読み込む。

    任意:
      - NOTIFICATIONS_AUDIT_LOGGER      (デフォルト: push_notifications.audit)
        LoggingDecorator が監査レコードを書き込む logger 名
      - NOTIFICATIONS_URGENT_LOG_LEVEL  (デフォルト: WARNING)
        priority=urgent の通知を送信する際のログレベル
    """
    audit_logger_name = get_env(
        "NOTIFICATIONS_AUDIT_LOGGER",
        default="push_notifications.audit",
        required=False,
    )
    urgent_log_level = get_env_log_level(
        "NOTIFICATIONS_URGENT_LOG_LEVEL",
        default=logging.WARNING,
    )

    return NotificationSettings(
        audit_logger_name=audit_logger_name,
        urgent_log_level=urgent_log_level,
    )
