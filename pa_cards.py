# pa_cards.py
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict, List, Optional

from models import Card, Port, Profile


logger = logging.getLogger(__name__)

CARD_RE = re.compile(r"^Card\s#(?P<index>\d+)$")
PROFILES_HEADER_RE = re.compile(r"^\t*Profiles:$")
PORTS_HEADER_RE = re.compile(r"^\t*Ports:$")
PROFILE_RE = re.compile(r"(?P<name>output:[^+]*?):\s(?P<human_name>.*?)\s\(sinks:")
PORT_RE = re.compile(r"\t*(?P<name>.*?output.*?):\s(?P<human_name>.*?)\s\(priority:")
PART_OF_RE = re.compile(r"\t*Part of profile\(s\):\s(?P<profiles>.*)")


class Section(Enum):
    CARDS = "cards"
    PROFILES = "profiles"
    PORTS = "ports"


class _PendingPort:
    __slots__ = ("name", "human_name")

    def __init__(self, name: str, human_name: str) -> None:
        self.name = name
        self.human_name = human_name

    def close(self, profiles: List[str]) -> Port:
        return Port(name=self.name, human_name=self.human_name, profiles=tuple(profiles))


def _card(cards: Dict[str, Card], index: str) -> Card:
    c = cards.get(index)
    if c is None:
        c = Card(index=index)
        cards[index] = c
    return c


def parse_cards(text: str) -> Dict[str, Card]:
    """
    Parse the output of `pactl list cards` into {card index: Card}.

    Lines that do not match any known shape are skipped. The current section
    is kept across card headers; a card without its own "Profiles:" or
    "Ports:" header keeps reading in the previous card's section.
    A port line only becomes a Port once its "Part of profile(s)" line is seen.
    """
    cards: Dict[str, Card] = {}
    card_index: Optional[str] = None
    section = Section.CARDS
    pending: Optional[_PendingPort] = None

    for line in (text or "").split("\n"):
        if line.endswith("\r"):
            line = line[:-1]

        m = CARD_RE.match(line)
        if m:
            card_index = m.group("index")
            _card(cards, card_index)
            logger.debug("card_index=%s", card_index)
            continue

        if PROFILES_HEADER_RE.match(line):
            section = Section.PROFILES
            continue

        if PORTS_HEADER_RE.match(line):
            section = Section.PORTS
            continue

        if card_index is None:
            continue

        if section is Section.PROFILES:
            m = PROFILE_RE.search(line)
            if m:
                _card(cards, card_index).profiles.append(
                    Profile(name=m.group("name"), human_name=m.group("human_name"))
                )

        elif section is Section.PORTS:
            m = PORT_RE.search(line)
            if m:
                pending = _PendingPort(m.group("name"), m.group("human_name"))
                continue

            if pending is None:
                continue

            m = PART_OF_RE.search(line)
            if m:
                port = pending.close(m.group("profiles").split(", "))
                _card(cards, card_index).ports.append(port)
                logger.debug("card %s: port %s part of %s", card_index, port.name, ", ".join(port.profiles))
                pending = None

    return cards
