"""Tests for the ring-buffer logger."""
import io
import logging

from vdwall.logging import RingBufferHandler, create_logger, get_ring_buffer


def test_ring_buffer_keeps_latest_events():
    logger = create_logger("vdwall.tests.ring", ring_size=2)
    logger.info("first")
    logger.info("second", extra={"details": {"n": 2}})
    logger.warning("third")

    events = get_ring_buffer(logger).get_events()
    assert [event["event"] for event in events] == ["second", "third"]
    assert events[0]["details"] == {"n": 2}
    assert events[1]["level"] == "WARNING"
    assert events[1]["details"] == {}


def test_create_logger_is_idempotent():
    first = create_logger("vdwall.tests.same")
    second = create_logger("vdwall.tests.same", ring_size=5)
    assert first is second
    assert len(first.handlers) == 1


def test_stream_output_includes_details():
    stream = io.StringIO()
    logger = create_logger("vdwall.tests.stream", level=logging.DEBUG, stream=stream)
    logger.debug("sent", extra={"details": {"data": "0501"}})
    assert "sent data=0501" in stream.getvalue()


def test_clear():
    handler = RingBufferHandler(max_entries=3)
    logger = logging.getLogger("vdwall.tests.clear")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.info("event")
    assert len(handler.get_events()) == 1
    handler.clear()
    assert handler.get_events() == []
    assert get_ring_buffer(logging.getLogger("vdwall.tests.none")) is None
