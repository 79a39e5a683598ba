# pa_streams.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

import pulsectl


logger = logging.getLogger(__name__)

PA_INVALID_INDEX = 0xFFFFFFFF


class StreamLookup(Protocol):
    def card_index(self, stream_id: int) -> Optional[int]:
        ...


class PulseStreamLookup:
    """Maps a live sink index to the index of the card that owns it."""

    def __init__(self, client_name: str = "profilechooser") -> None:
        self._client_name = client_name
        self._pulse: Optional[pulsectl.Pulse] = None

    def _pulse_connect(self) -> pulsectl.Pulse:
        if self._pulse is None:
            try:
                self._pulse = pulsectl.Pulse(self._client_name)
            except Exception as e:
                raise RuntimeError(f"Failed to connect to the Pulse server: {e}") from e
        return self._pulse

    def close(self) -> None:
        pulse, self._pulse = self._pulse, None
        if pulse is None:
            return
        try:
            pulse.close()
        except pulsectl.PulseError as e:
            logger.debug("closing %s: %s", self._client_name, e)

    def card_index(self, stream_id: int) -> Optional[int]:
        pulse = self._pulse_connect()
        try:
            sink = pulse.sink_info(stream_id)
        except pulsectl.PulseIndexError:
            logger.debug("stream %s not found", stream_id)
            return None
        except Exception as e:
            raise RuntimeError(f"Failed to look up stream {stream_id}: {e}") from e

        card = getattr(sink, "card", None)
        if card is None or int(card) == PA_INVALID_INDEX:
            return None
        return int(card)
