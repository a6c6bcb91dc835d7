from sqlalchemy import Column, Integer, String, Numeric

from app.data.database import Base


class ProductModel(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    description = Column(String(1024), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)

    def __repr__(self) -> str:
        return f"<ProductModel id={self.id} name={self.name!r} price={self.price}>"
