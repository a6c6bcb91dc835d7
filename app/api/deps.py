# app/api/deps.py
from fastapi import Request
from sqlalchemy.engine import Engine

from app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_engine(request: Request) -> Engine:
    return request.app.state.engine
