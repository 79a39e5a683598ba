# resolver.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from card_store import CardStore
from models import Card, DeviceDescriptor, Port, Profile
from pa_streams import StreamLookup


logger = logging.getLogger(__name__)

INPUT_PROFILE_TAG = "+input:"


def find_port(card: Card, port_name: str) -> Optional[Port]:
    return next((p for p in card.ports if p.name == port_name), None)


def profiles_for_port(port_name: str, card: Card) -> Optional[List[Profile]]:
    """
    Output profiles of `card` that enable port `port_name`, in the port's order.

    None when the card has no such port. Combined output+input profiles are
    skipped, and port references to profiles the card does not list match nothing.
    """
    port = find_port(card, port_name)
    if port is None:
        return None

    out: List[Profile] = []
    for name in port.profiles:
        if INPUT_PROFILE_TAG in name:
            continue
        out.extend(p for p in card.profiles if p.name == name)
    return out


class ProfileResolver:
    def __init__(self, store: CardStore, streams: Optional[StreamLookup] = None) -> None:
        self._store = store
        self._streams = streams

    def _stream_card_index(self, device: DeviceDescriptor) -> Optional[str]:
        if device.stream_id is None or self._streams is None:
            return None
        idx = self._streams.card_index(device.stream_id)
        return None if idx is None else str(idx)

    def _scan(self, port_name: str, cards: Iterable[Card]) -> List[Profile]:
        for card in cards:
            profiles = profiles_for_port(port_name, card)
            if profiles:
                logger.debug("port %s matched on card %s: %d profile(s)", port_name, card.index, len(profiles))
                return profiles
        return []

    def resolve(self, device: DeviceDescriptor) -> List[Profile]:
        """
        Profiles that can enable `device`'s output port; empty when none are known.

        The card owning the device's live stream is tried first. Otherwise every
        card is scanned for the port name. At most one refresh happens per call,
        and a failed refresh raises CommandError.
        """
        refreshed = False

        if device.stream_id is not None:
            card_index = self._stream_card_index(device)
            card = self._store.get().get(card_index) if card_index is not None else None
            if card is None:
                logger.debug("%s not found", device.port_name)
                self._store.refresh()
                refreshed = True
                if card_index is not None:
                    card = self._store.get().get(card_index)

            if card is not None:
                logger.debug("%s found on card %s", device.port_name, card.index)
                return profiles_for_port(device.port_name, card) or []

        if not refreshed:
            self._store.refresh()

        return self._scan(device.port_name, self._store.get().values())
