# app/services/product_client.py
from decimal import Decimal
from typing import Any

import requests
from requests import RequestException
from pydantic import ValidationError

from app.domain.errors import (
    NetworkError,
    ProductClientError,
    ProductNotFoundError,
    ServerError,
)
from app.domain.schemas import ProductView
from app.utils.settings import PRODUCT_API_URL, HTTP_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """
    Klient HTTP do product API.
    Kazdy blad zamieniany na ProductClientError z czytelnym komunikatem,
    surowe wyjatki requests nie wychodza na zewnatrz. Bez retry.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or PRODUCT_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def get_product_by_id(self, product_id: int) -> ProductView:
        resp = self._get(f"/products/{product_id}")

        if resp.status_code == 404:
            raise ProductNotFoundError(product_id)
        if resp.status_code == 500:
            raise ServerError()
        if not resp.ok:
            raise self._http_error(resp)

        return self._parse(resp, lambda data: ProductView.model_validate(data))

    def get_all_products(self) -> list[ProductView]:
        return self._get_list("/products", None, "Failed to fetch products")

    def search_products(self, term: str) -> list[ProductView]:
        return self._get_list("/products/search", {"name": term}, "Failed to search products")

    def get_products_by_price_range(
        self, min_price: Decimal | float, max_price: Decimal | float
    ) -> list[ProductView]:
        return self._get_list(
            "/products/price-range",
            {"min": str(min_price), "max": str(max_price)},
            "Failed to fetch products",
        )

    def _get_list(self, path: str, params: dict | None, fallback: str) -> list[ProductView]:
        resp = self._get(path, params)
        if not resp.ok:
            logger.error(f"ProductClient GET {path} failed with {resp.status_code}")
            raise ProductClientError(fallback)
        return self._parse(resp, lambda data: [ProductView.model_validate(p) for p in data])

    def _get(self, path: str, params: dict | None = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.info(f"ProductClient GET {url}")

        try:
            return self.session.get(url, params=params, timeout=self.timeout)
        except RequestException as e:
            # brak odpowiedzi = blad sieci (connection refused, timeout, DNS)
            if e.response is None:
                logger.error(f"No response from {url}: {e}")
                raise NetworkError() from e
            raise ProductClientError(str(e) or "An unexpected error occurred") from e

    @staticmethod
    def _http_error(resp: requests.Response) -> ProductClientError:
        message = None
        try:
            body: Any = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail")
        if not isinstance(message, str) or not message:
            message = f"Request failed with status code {resp.status_code}"
        return ProductClientError(message)

    @staticmethod
    def _parse(resp: requests.Response, build):
        try:
            return build(resp.json())
        except (ValueError, TypeError) as e:
            # ValidationError i JSONDecodeError dziedzicza po ValueError
            logger.error(f"Unexpected response body from {resp.url}: {e}")
            message = str(e) if not isinstance(e, ValidationError) else "Invalid product data"
            raise ProductClientError(message or "An unexpected error occurred") from e
