import httpx
import pytest

from barberapp import config, notifications
from barberapp.notifications import (
    NotificationError,
    build_message,
    notify_new_booking,
    send_booking_notification,
)
from barberapp.schemas import BookingNotification


@pytest.fixture
def payload():
    return BookingNotification(
        name="João Silva",
        phone="(11) 98765-4321",
        service="Corte + Barba",
        price=45,
        date="20/10/2026",
        time="09:00",
    )


@pytest.fixture
def webhook_url(monkeypatch):
    url = "https://wirepusher.com/send?id=GsCqmpGem"
    monkeypatch.setattr(config, "NOTIFICATION_URL", url)
    return url


@pytest.mark.notifications
class TestNotifications:
    def test_message_template(self, payload):
        message = build_message(payload)

        assert message.startswith("🔔 NOVO AGENDAMENTO!\n\n")
        assert "👤 Cliente: João Silva" in message
        assert "📞 Telefone: (11) 98765-4321" in message
        assert "✂️ Serviço: Corte + Barba" in message
        assert "💰 Preço: R$ 45.00" in message
        assert "📅 Data: 20/10/2026" in message
        assert message.endswith("⏰ Horário: 09:00")

    def test_sends_get_with_encoded_message(self, payload, webhook_url):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"success": True})

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            send_booking_notification(payload, client=client)

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "GET"
        assert request.url.host == "wirepusher.com"
        assert request.url.params["id"] == "GsCqmpGem"
        assert request.url.params["title"] == config.NOTIFICATION_TITLE
        assert request.url.params["message"] == build_message(payload)
        assert " " not in str(request.url)

    def test_non_success_raises(self, payload, webhook_url):
        transport = httpx.MockTransport(lambda request: httpx.Response(500))

        with httpx.Client(transport=transport) as client:
            with pytest.raises(NotificationError):
                send_booking_notification(payload, client=client)

    def test_background_task_swallows_failures(self, payload, webhook_url, monkeypatch):
        def broken(payload, client=None):
            raise NotificationError("Notification webhook answered 503")

        monkeypatch.setattr(notifications, "send_booking_notification", broken)

        notify_new_booking(payload)

    def test_background_task_skipped_without_url(self, payload, monkeypatch):
        called = []
        monkeypatch.setattr(config, "NOTIFICATION_URL", "")
        monkeypatch.setattr(notifications, "send_booking_notification", lambda *a, **kw: called.append(a))

        notify_new_booking(payload)

        assert called == []
