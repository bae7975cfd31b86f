# push_notifications/notifications/exceptions.py

"""
通知パイプラインの例外定義。

いずれも検出した時点で同期的に送出し、部分的に構築されたオブジェクトは返さない。
リトライは行わない（呼び出し側の責務）。
"""

from __future__ import annotations

from typing import Any, Iterable, Tuple


class NotificationPipelineError(Exception):
    """通知パイプライン由来の例外の基底クラス。"""


class UnknownNotificationTypeError(NotificationPipelineError, LookupError):
    """ファクトリ / 処理ストラテジのレジストリに存在しない通知種別を指定した場合の例外。"""

    def __init__(self, notification_type: Any, *, component: str = "factory") -> None:
        super().__init__(
            f"No {component} found for notification type: {notification_type}"
        )
        self.notification_type = notification_type
        self.component = component


class UnknownDecoratorError(NotificationPipelineError, ValueError):
    """登録されていないデコレータタグを指定した場合の例外。"""

    def __init__(self, tag: Any) -> None:
        super().__init__(f"Unknown notification decorator: {tag}")
        self.tag = tag


class IncompleteBuilderConfigError(NotificationPipelineError, ValueError):
    """
    type / data が揃っていない状態で build() を呼び出した場合の例外。

    Builder 自体はそのまま再利用可能（不足分を設定して再度 build() できる）。
    """

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(
            "Type and data are required to build notification "
            f"(missing: {', '.join(self.missing)})."
        )
