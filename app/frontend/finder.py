# app/frontend/finder.py
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from app.domain.errors import ProductClientError
from app.domain.schemas import ProductView
from app.services.product_client import ProductClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class FinderStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FinderState:
    status: FinderStatus = FinderStatus.IDLE
    product_id: int | None = None
    product: ProductView | None = None
    error: str | None = None


def parse_product_id(raw: str | int | None) -> int | None:
    """Return a positive integer id, or None when the input must not trigger a search."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None

    text = str(raw).strip()
    if not text:
        return None
    try:
        product_id = int(text)
    except ValueError:
        return None
    return product_id if product_id > 0 else None


class ProductFinder:
    """
    Stan formularza wyszukiwania: idle -> loading -> success | error.

    Kazde wyszukiwanie dostaje numer (ticket); odpowiedz ze starszym
    numerem niz ostatni jest odrzucana, wiec wolna stara odpowiedz
    nie nadpisze nowszej.
    """

    def __init__(
        self,
        client: ProductClient,
        on_change: Callable[[FinderState], None] | None = None,
    ):
        self.client = client
        self.on_change = on_change
        self.state = FinderState()
        self._latest = 0
        self._lock = threading.Lock()

    def submit(self, raw_input: str | int | None) -> bool:
        product_id = parse_product_id(raw_input)
        if product_id is None:
            logger.debug(f"Ignoring search input {raw_input!r}")
            return False

        self.search(product_id)
        return True

    def search(self, product_id: int) -> FinderState:
        ticket = self.begin(product_id)
        try:
            product = self.client.get_product_by_id(product_id)
        except ProductClientError as e:
            self.complete(ticket, error=e.message)
        else:
            self.complete(ticket, product=product)
        return self.state

    def begin(self, product_id: int) -> int:
        with self._lock:
            self._latest += 1
            ticket = self._latest
            state = FinderState(status=FinderStatus.LOADING, product_id=product_id)
            self.state = state
        self._notify(state)
        return ticket

    def complete(
        self,
        ticket: int,
        product: ProductView | None = None,
        error: str | None = None,
    ) -> bool:
        with self._lock:
            if ticket != self._latest:
                logger.info(f"Discarding stale response for search #{ticket}")
                return False

            product_id = self.state.product_id
            if error is not None:
                new_state = FinderState(FinderStatus.ERROR, product_id, error=error)
            else:
                new_state = FinderState(FinderStatus.SUCCESS, product_id, product=product)
            self.state = new_state
        # callback poza lockiem, moze wywolac submit()
        self._notify(new_state)
        return True

    def _notify(self, state: FinderState):
        if self.on_change:
            self.on_change(state)
