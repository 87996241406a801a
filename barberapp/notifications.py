# barberapp/notifications.py

import logging
from typing import Optional

import httpx

from . import config
from .data import NOTIFICATION_TEMPLATE
from .schemas import BookingNotification

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    pass


def build_message(payload: BookingNotification) -> str:
    return NOTIFICATION_TEMPLATE.format(
        name=payload.name,
        phone=payload.phone,
        service=payload.service,
        price=payload.price,
        date=payload.date,
        time=payload.time,
    )


def send_booking_notification(payload: BookingNotification, client: Optional[httpx.Client] = None) -> None:
    """GET the push webhook with the message as a query parameter.

    Raises NotificationError on any non-2xx answer. There is no retry.
    """
    params = {"title": config.NOTIFICATION_TITLE, "message": build_message(payload)}
    # Keep the device id already in the configured query string
    url = httpx.URL(config.NOTIFICATION_URL).copy_merge_params(params)

    logger.info(f"Sending booking notification: {payload.name} {payload.date} {payload.time}")

    if client is None:
        with httpx.Client(timeout=config.NOTIFICATION_TIMEOUT) as http_client:
            response = http_client.get(url)
    else:
        response = client.get(url)

    if not response.is_success:
        raise NotificationError(f"Notification webhook answered {response.status_code}")

    logger.info("Booking notification sent")


def notify_new_booking(payload: BookingNotification) -> None:
    """Background task: failures are logged and never reach the booking."""
    if not config.NOTIFICATION_URL:
        logger.info("NOTIFICATION_URL not set, skipping booking notification")
        return
    try:
        send_booking_notification(payload)
    except (NotificationError, httpx.HTTPError) as e:
        logger.error(f"Failed to send booking notification: {e}")
