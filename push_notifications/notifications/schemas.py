# push_notifications/notifications/schemas.py

"""
通知パイプラインの共通スキーマ定義。

- 通知の種別（Factory / Strategy のディスパッチキー）
- 通知の優先度
- デコレータタグ
- 通知 1件分の入力データ
- /notifications エンドポイントのリクエスト / レスポンス

※ 通知レコード自体は種別（discriminant）を持たない。
  種別は常に呼び出し側から別引数で渡す。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NotificationType(str, Enum):
    """
    通知の種別（閉じた列挙）。

    NotificationManager（Factory）と NotificationProcessor（Strategy）の
    両方でレジストリのキーとして使う。
    """

    PROMOTION = "promotion"
    ORDER = "order"
    CHAT = "chat"
    SYSTEM = "system"


class NotificationPriority(str, Enum):
    """
    通知の優先度。

    表示・ソート用の序数であり、パイプラインはこれを元に並べ替えや流量制御はしない。
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class DecoratorType(str, Enum):
    """Builder で指定できるデコレータタグ。"""

    CACHE = "cache"
    LOGGING = "logging"
    SOUND = "sound"
    VIBRATION = "vibration"


class BehaviorPreset(str, Enum):
    """
    定義済みのデコレータ構成。

    - URGENT: vibration → sound → logging
    - SILENT: cache → logging
    - STANDARD: logging → cache
    """

    URGENT = "urgent"
    SILENT = "silent"
    STANDARD = "standard"


class NotificationInput(BaseModel):
    """
    通知 1件分の入力データ。

    id は呼び出し側が採番し、パイプライン内で再生成しない。
    構築後は変更しない前提のため frozen にしている。
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="通知の一意な識別子（呼び出し側が採番）。")
    title: str = Field(..., description="表示用タイトル。")
    message: str = Field(..., description="表示用本文。")
    timestamp: float = Field(..., description="生成時刻（エポックミリ秒）。")
    priority: NotificationPriority = Field(..., description="low / medium / high / urgent")
    data: Optional[Dict[str, Any]] = Field(
        None,
        description="種別ごとの補足データ（パイプラインからは不透明）。",
    )


class NotificationSendRequest(BaseModel):
    """
    /notifications/send のリクエストボディ。

    preset → decorators の順でデコレータが積まれる。
    """

    type: NotificationType = Field(..., description="通知の種別")
    notification: NotificationInput = Field(..., description="通知レコードの内容")
    preset: Optional[BehaviorPreset] = Field(
        None,
        description="定義済みのデコレータ構成（decorators より先に適用）",
    )
    decorators: List[DecoratorType] = Field(
        default_factory=list,
        description="追加で適用するデコレータ（指定順に内側から積む）",
    )
    auto_process: bool = Field(
        True,
        description="build 時に種別ごとの処理ストラテジを実行するかどうか",
    )


class NotificationSendResponse(BaseModel):
    """
    /notifications/send のレスポンスボディ。
    """

    id: str = Field(..., description="送信した通知の ID")
    type: NotificationType = Field(..., description="通知の種別")
    title: str = Field(..., description="通知タイトル")
    priority: NotificationPriority = Field(..., description="通知の優先度")
    layers: List[DecoratorType] = Field(
        ...,
        description="適用されたデコレータ（内側 → 外側の順）",
    )
