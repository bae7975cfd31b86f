# push_notifications/utils/config.py

"""
環境変数読み取り用のユーティリティ。

notifications.config の設定ロードから共通利用する。
"""

import logging
import os
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


class EnvVarInvalidError(ValueError):
    """環境変数の値が解釈できない場合に投げる例外。"""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(
            f"Environment variable '{name}' has invalid value '{value}' (expected {expected})."
        )
        self.name = name
        self.value = value


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値（空文字は未設定扱い）
    """
    value = os.getenv(name)

    if value is None or value.strip() == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value.strip()


def get_env_log_level(name: str, default: int = logging.INFO) -> int:
    """
    ログレベル名（INFO / WARNING など）の環境変数を数値レベルとして取得する。

    - 未設定の場合は default を返す
    - 不明なレベル名の場合は EnvVarInvalidError
    """
    raw = get_env(name, required=False)
    if raw is None:
        return default

    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise EnvVarInvalidError(name, raw, "a logging level name")
    return level
