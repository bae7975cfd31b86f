# tests/test_notifications_strategy.py

import logging

import pytest

from push_notifications.notifications.exceptions import UnknownNotificationTypeError
from push_notifications.notifications.factory import NotificationManager
from push_notifications.notifications.schemas import (
    NotificationInput,
    NotificationPriority,
    NotificationType,
)
from push_notifications.notifications.strategy import (
    ChatProcessingStrategy,
    NotificationProcessor,
    OrderProcessingStrategy,
    PromotionProcessingStrategy,
    SystemProcessingStrategy,
)


def _make_notification(notification_type: NotificationType = NotificationType.ORDER):
    return NotificationManager.create_notification(
        notification_type,
        NotificationInput(
            id="2",
            title="Pedido enviado",
            message="Tu pedido #12345 ha sido enviado",
            timestamp=1_700_000_000_000,
            priority=NotificationPriority.HIGH,
            data={"orderId": "12345", "trackingNumber": "TRK123456"},
        ),
    )


@pytest.mark.parametrize(
    "notification_type, expected_class, expected_text",
    [
        (NotificationType.PROMOTION, PromotionProcessingStrategy, "validate discounts"),
        (NotificationType.ORDER, OrderProcessingStrategy, "update inventory"),
        (NotificationType.CHAT, ChatProcessingStrategy, "update chat history"),
        (NotificationType.SYSTEM, SystemProcessingStrategy, "monitor performance"),
    ],
)
def test_process_dispatches_by_type(caplog, notification_type, expected_class, expected_text) -> None:
    notification = _make_notification(notification_type)

    assert isinstance(NotificationProcessor.strategy_for(notification_type), expected_class)

    with caplog.at_level(logging.INFO):
        NotificationProcessor.process(notification, notification_type)

    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 1
    assert expected_text in messages[0]
    assert "[id=2]" in messages[0]


def test_process_uses_given_type_not_the_variant(caplog) -> None:
    """
    通知オブジェクトは種別を持たないため、渡された種別タグだけでディスパッチされること。
    """
    notification = _make_notification(NotificationType.ORDER)

    with caplog.at_level(logging.INFO):
        NotificationProcessor.process(notification, NotificationType.CHAT)

    assert "Processing chat" in caplog.records[0].getMessage()


def test_process_is_idempotent_and_does_not_mutate(caplog) -> None:
    notification = _make_notification()
    before = (
        notification.id,
        notification.title,
        notification.message,
        notification.timestamp,
        notification.priority,
        dict(notification.data),
    )

    with caplog.at_level(logging.INFO):
        NotificationProcessor.process(notification, "order")
        NotificationProcessor.process(notification, "order")

    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert messages[0] == messages[1]
    after = (
        notification.id,
        notification.title,
        notification.message,
        notification.timestamp,
        notification.priority,
        dict(notification.data),
    )
    assert before == after


@pytest.mark.parametrize("bad_type", ["push", "Order", None])
def test_unknown_type_fails_fast(caplog, bad_type) -> None:
    notification = _make_notification()

    with caplog.at_level(logging.INFO):
        with pytest.raises(UnknownNotificationTypeError) as exc_info:
            NotificationProcessor.process(notification, bad_type)

    assert exc_info.value.component == "processing strategy"
    assert "No processing strategy found" in str(exc_info.value)
    assert caplog.records == []
