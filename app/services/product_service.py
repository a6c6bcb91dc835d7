# app/services/product_service.py
from decimal import Decimal
from typing import Callable

from sqlalchemy.orm import Session, sessionmaker

from app.data.database import read_only_session
from app.data.models.product import ProductModel
from app.domain.schemas import ProductView
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def to_view(product: ProductModel) -> ProductView:
    #kopiujemy pola 1:1, tu kiedys moga wejsc np. rabaty
    return ProductView(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
    )


class ProductService:
    """
    Warstwa biznesowa dla produktow (tylko query).
    Kazde wywolanie = jedna sesja read-only, jedno zapytanie do repo.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        repo_factory: Callable[[Session], ProductRepo] = ProductRepo,
    ):
        self.session_factory = session_factory
        self.repo_factory = repo_factory

    def get_product_by_id(self, product_id: int) -> ProductView | None:
        with read_only_session(self.session_factory) as db:
            product = self.repo_factory(db).find_by_id(product_id)

            if product is None:
                logger.info(f"Product {product_id} not found")
                return None

            return to_view(product)

    def list_products(self) -> list[ProductView]:
        with read_only_session(self.session_factory) as db:
            return [to_view(p) for p in self.repo_factory(db).find_all()]

    def search_products(self, name: str) -> list[ProductView]:
        with read_only_session(self.session_factory) as db:
            products = self.repo_factory(db).find_by_name_containing(name)
            logger.info(f"Search '{name}' matched {len(products)} products")
            return [to_view(p) for p in products]

    def get_products_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[ProductView]:
        if min_price > max_price:
            raise ValueError("min price must not be greater than max price")

        with read_only_session(self.session_factory) as db:
            products = self.repo_factory(db).find_by_price_between(min_price, max_price)
            return [to_view(p) for p in products]
