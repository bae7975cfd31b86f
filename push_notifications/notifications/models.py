# push_notifications/notifications/models.py

"""
通知レコードと種別ごとの具象通知クラス。

- NotificationLike: 通知として扱えるオブジェクトの最小インターフェース
- BasicNotification: フィールド代入と既定の send() を持つ共通実装
- Promotion / Order / Chat / System: send() の報告内容だけを差し替えたサブクラス

send() は「配信を行い、結果をログに報告する」という副作用を持つ。
実際の Push 配信は行わず、ログ出力がその代わりになる。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from .config import get_notification_settings
from .schemas import NotificationInput, NotificationPriority

logger = logging.getLogger(__name__)

NotificationData = Union[NotificationInput, Mapping[str, Any]]


@runtime_checkable
class NotificationLike(Protocol):
    """
    通知として扱えるオブジェクトのインターフェース。

    具象通知クラスとデコレータの両方がこれを満たす。
    """

    @property
    def id(self) -> str: ...  # pragma: no cover - Protocol

    @property
    def title(self) -> str: ...  # pragma: no cover - Protocol

    @property
    def message(self) -> str: ...  # pragma: no cover - Protocol

    @property
    def timestamp(self) -> float: ...  # pragma: no cover - Protocol

    @property
    def priority(self) -> NotificationPriority: ...  # pragma: no cover - Protocol

    @property
    def data(self) -> Optional[Dict[str, Any]]: ...  # pragma: no cover - Protocol

    def send(self) -> None: ...  # pragma: no cover - Protocol


def to_notification_input(data: NotificationData) -> NotificationInput:
    """dict 等で渡された入力を NotificationInput に検証・変換する。"""
    if isinstance(data, NotificationInput):
        return data
    return NotificationInput.model_validate(dict(data))


class BasicNotification:
    """
    通知レコードの共通実装。

    フィールドは構築時に一度だけ代入し、以降は読み取り専用プロパティとして公開する。
    """

    def __init__(
        self,
        data: NotificationData,
        *,
        logger_: logging.Logger | None = None,
    ) -> None:
        record = to_notification_input(data)
        self._id = record.id
        self._title = record.title
        self._message = record.message
        self._timestamp = record.timestamp
        self._priority = record.priority
        self._data = dict(record.data) if record.data is not None else None
        self._logger = logger_ or logger

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def message(self) -> str:
        return self._message

    @property
    def timestamp(self) -> float:
        return self._timestamp

    @property
    def priority(self) -> NotificationPriority:
        return self._priority

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        return self._data

    def send(self) -> None:
        self._report("Sending basic notification...")

    def _report(self, text: str) -> None:
        """
        送信内容を優先度に応じたログレベルで出力する。

        urgent は設定値（デフォルト WARNING）、それ以外は INFO。
        """
        if self._priority == NotificationPriority.URGENT:
            level = get_notification_settings().urgent_log_level
        else:
            level = logging.INFO
        self._logger.log(level, "%s [id=%s]", text, self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, title={self._title!r})"


class PromotionNotification(BasicNotification):
    def send(self) -> None:
        self._report(f"Processing promotion notification: {self.title}")


class OrderNotification(BasicNotification):
    def send(self) -> None:
        self._report(f"Processing order notification: {self.title}")


class ChatNotification(BasicNotification):
    def send(self) -> None:
        self._report(f"Processing chat notification: {self.title}")


class SystemNotification(BasicNotification):
    def send(self) -> None:
        self._report(f"Processing system notification: {self.title}")
