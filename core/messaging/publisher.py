"""
AMQP event publisher.

Wraps a kombu connection opened once at process start and shared by every
request. Publishing is synchronous and never retried; broker errors reach the
caller unchanged.
"""

import threading
from typing import Any, Mapping, Optional, Protocol

from kombu import Connection, Producer

from core.logging import get_logger

from .events import EXCHANGES

logger = get_logger("messaging.publisher")


class Publisher(Protocol):
    """Anything the issue service can hand events to."""

    def publish(self, exchange: str, routing_key: str, payload: Mapping[str, Any]) -> None:
        ...


class EventPublisher:
    """
    kombu-backed publisher for the direct and news exchanges.

    Usage:
        publisher = EventPublisher(settings.amqp_url)
        publisher.connect()
        publisher.publish("news", "news.issue.create", {...})
        publisher.close()
    """

    def __init__(
        self,
        url: str | None = None,
        connect_timeout: float = 5.0,
        connection: Optional[Connection] = None,
    ):
        if connection is None and url is None:
            raise ValueError("EventPublisher needs a broker URL or a kombu Connection")
        self._connection = connection or Connection(url, connect_timeout=connect_timeout)
        self._producer: Optional[Producer] = None
        # kombu channels are not thread-safe and handlers run in a thread pool
        self._lock = threading.Lock()

    def connect(self) -> None:
        """Open the broker connection. Raises if the broker is unreachable."""
        self._connection.connect()
        logger.info("broker_connected", transport=self._connection.transport_cls)

    def close(self) -> None:
        """Release the producer channel and the connection."""
        with self._lock:
            self._discard_producer()
            self._connection.release()
        logger.info("broker_connection_closed")

    def __enter__(self) -> "EventPublisher":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def is_connected(self) -> bool:
        return bool(self._connection.connected)

    def _get_producer(self) -> Producer:
        if self._producer is None:
            self._producer = Producer(self._connection.channel())
        return self._producer

    def _discard_producer(self) -> None:
        producer, self._producer = self._producer, None
        if producer is None:
            return
        try:
            producer.release()
        except Exception as e:
            logger.warning("producer_release_failed", error=str(e), error_type=type(e).__name__)

    def publish(self, exchange: str, routing_key: str, payload: Mapping[str, Any]) -> None:
        """
        Publish a JSON payload to a named exchange.

        Not retried: a broker error reaches the caller, and the producer is
        dropped so the following publish starts on a fresh channel.

        Raises:
            KeyError: If the exchange is not one this service publishes to.
        """
        target = EXCHANGES[exchange]
        with self._lock:
            try:
                self._get_producer().publish(
                    dict(payload),
                    exchange=target,
                    routing_key=routing_key,
                    serializer="json",
                    delivery_mode=2,
                    declare=[target],
                    retry=False,
                )
            except Exception:
                # A failed publish may leave the channel dead; the next call opens a new one
                self._discard_producer()
                raise
        logger.info("event_published", exchange=exchange, routing_key=routing_key)


__all__ = ["EventPublisher", "Publisher"]
