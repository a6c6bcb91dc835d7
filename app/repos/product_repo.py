# app/repos/product_repo.py
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def find_all(self) -> list[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars())

    def find_by_name_containing(self, keyword: str) -> list[ProductModel]:
        #case-insensitive, % i _ traktowane doslownie
        stmt = (
            select(ProductModel)
            .where(ProductModel.name.icontains(keyword, autoescape=True))
            .order_by(ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars())

    def find_by_price_between(self, min_price: Decimal, max_price: Decimal) -> list[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.price.between(min_price, max_price))
            .order_by(ProductModel.price, ProductModel.id)
        )
        return list(self.db.execute(stmt).scalars())
