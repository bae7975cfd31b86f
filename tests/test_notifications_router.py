# tests/test_notifications_router.py

import logging
from unittest.mock import patch

from fastapi.testclient import TestClient

from push_notifications.main import create_app


def create_test_client() -> TestClient:
    app = create_app()
    return TestClient(app)


def _payload(**overrides) -> dict:
    payload = {
        "type": "order",
        "notification": {
            "id": "order-001",
            "title": "Pedido Confirmado",
            "message": "Tu pedido #12345 ha sido confirmado",
            "timestamp": 1_700_000_000_000,
            "priority": "medium",
            "data": {"orderId": "12345", "amount": 299.99},
        },
    }
    payload.update(overrides)
    return payload


def test_health():
    client = create_test_client()

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_notification_types():
    client = create_test_client()

    resp = client.get("/notifications/types")

    assert resp.status_code == 200
    assert resp.json() == ["promotion", "order", "chat", "system"]


def test_send_with_preset_and_extra_decorators(caplog):
    client = create_test_client()

    with caplog.at_level(logging.INFO):
        resp = client.post(
            "/notifications/send",
            json=_payload(preset="standard", decorators=["sound"]),
        )

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "order-001"
    assert body["type"] == "order"
    assert body["title"] == "Pedido Confirmado"
    assert body["priority"] == "medium"
    assert body["layers"] == ["logging", "cache", "sound"]

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("push_notifications")]
    assert messages[0].startswith("Processing order: update inventory")
    assert messages[1].startswith("Processing order notification: Pedido Confirmado")
    assert messages[-1].startswith("Playing notification sound")


def test_send_without_auto_process_skips_strategy(caplog):
    client = create_test_client()

    with caplog.at_level(logging.INFO):
        resp = client.post("/notifications/send", json=_payload(auto_process=False))

    assert resp.status_code == 200
    assert resp.json()["layers"] == []
    messages = [r.getMessage() for r in caplog.records if r.name.startswith("push_notifications")]
    assert messages == ["Processing order notification: Pedido Confirmado [id=order-001]"]


def test_send_rejects_unknown_type():
    client = create_test_client()

    resp = client.post("/notifications/send", json=_payload(type="newsletter"))

    assert resp.status_code == 422


def test_send_rejects_unknown_decorator():
    client = create_test_client()

    resp = client.post("/notifications/send", json=_payload(decorators=["confetti"]))

    assert resp.status_code == 422


def test_send_rejects_missing_record_fields():
    client = create_test_client()

    payload = _payload()
    del payload["notification"]["priority"]
    resp = client.post("/notifications/send", json=payload)

    assert resp.status_code == 422


def test_send_maps_pipeline_error_to_422():
    client = create_test_client()

    from push_notifications.notifications.exceptions import UnknownNotificationTypeError

    with patch(
        "push_notifications.notifications.builder.NotificationBuilder.build_and_send",
        side_effect=UnknownNotificationTypeError("order"),
    ):
        resp = client.post("/notifications/send", json=_payload())

    assert resp.status_code == 422
    assert "No factory found" in resp.json()["detail"]


def test_send_unexpected_error():
    client = create_test_client()

    # build_and_send が予期しない例外を投げた場合に 500 系を返すことを確認
    with patch(
        "push_notifications.notifications.builder.NotificationBuilder.build_and_send",
        side_effect=Exception("unexpected error"),
    ):
        resp = client.post("/notifications/send", json=_payload())

    assert resp.status_code >= 500
