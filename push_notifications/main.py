# push_notifications/main.py

"""
通知パイプラインのエントリーポイント。

主な責務:
- /notifications/types, /notifications/send エンドポイントを公開する
- /health を公開する
"""

from fastapi import FastAPI

from push_notifications.notifications.router import router as notifications_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 通知パイプラインのエンドポイント (/notifications/*)
    - ヘルスチェックエンドポイント (/health)
    """
    app = FastAPI(title="Push Notification Pipeline")

    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
