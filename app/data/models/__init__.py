#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from app.data.models.product import ProductModel

__all__ = ["ProductModel"]
