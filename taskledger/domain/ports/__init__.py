"""Domain ports - interfaces the lifecycle operations depend on."""

from taskledger.domain.ports.event_sink import EventSink

__all__: list[str] = ["EventSink"]
