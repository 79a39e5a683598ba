# card_store.py
from __future__ import annotations

import logging
from typing import Callable, Dict

from models import Card
from pa_cards import parse_cards
from pa_cli import pactl_list_cards


logger = logging.getLogger(__name__)

ReportRunner = Callable[[], str]


class CardStore:
    """
    Cache of the cards reported by the last successful `pactl list cards`.

    The cache is replaced as a whole on refresh. A failed refresh raises
    CommandError and keeps whatever was cached before.
    """

    def __init__(self, runner: ReportRunner = pactl_list_cards) -> None:
        self._runner = runner
        self._cards: Dict[str, Card] = {}
        self.refresh_count = 0

    def refresh(self) -> None:
        self.refresh_count += 1
        try:
            out = self._runner()
        except RuntimeError as e:
            logger.warning("card refresh failed, keeping %d cached card(s): %s", len(self._cards), e)
            raise

        self._cards = parse_cards(out)
        logger.info("refreshed cards: %d found", len(self._cards))

    def get(self) -> Dict[str, Card]:
        return self._cards
