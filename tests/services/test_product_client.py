from unittest.mock import Mock

import pytest
import requests

from app.domain.errors import (
    NetworkError,
    ProductClientError,
    ProductNotFoundError,
    ServerError,
)
from app.domain.schemas import ProductView
from app.services.product_client import ProductClient

WIDGET = {"id": 100, "name": "Widget A", "description": "Premium widget for testing", "price": 19.99}


def make_response(status_code, body=None, json_error=None):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.url = "http://api.test/products"
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def client(session):
    return ProductClient("http://api.test/", session=session)


def test_get_product_by_id_success(client, session):
    session.get.return_value = make_response(200, WIDGET)

    product = client.get_product_by_id(100)

    assert product == ProductView(**WIDGET)
    session.get.assert_called_once_with(
        "http://api.test/products/100", params=None, timeout=10
    )


def test_not_found_message_names_the_id(client, session):
    session.get.return_value = make_response(404)

    with pytest.raises(ProductNotFoundError) as exc:
        client.get_product_by_id(999)

    assert str(exc.value) == "Product with ID 999 not found"
    assert exc.value.product_id == 999


def test_server_error_ignores_body(client, session):
    session.get.return_value = make_response(500, {"message": "NullPointerException at line 42"})

    with pytest.raises(ServerError) as exc:
        client.get_product_by_id(1)

    assert exc.value.message == "Server error - please try again later"


@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("refused"), requests.Timeout("timed out")],
)
def test_no_response_is_network_error(client, session, error):
    session.get.side_effect = error

    with pytest.raises(NetworkError) as exc:
        client.get_product_by_id(1)

    assert str(exc.value) == "Network error - please check your connection"


def test_other_status_passes_server_message(client, session):
    session.get.return_value = make_response(403, {"message": "Access forbidden"})

    with pytest.raises(ProductClientError) as exc:
        client.get_product_by_id(1)

    assert str(exc.value) == "Access forbidden"


def test_other_status_without_body_uses_transport_message(client, session):
    session.get.return_value = make_response(422, json_error=ValueError("no json"))

    with pytest.raises(ProductClientError) as exc:
        client.get_product_by_id(1)

    assert str(exc.value) == "Request failed with status code 422"


def test_request_exception_with_response_is_classified(client, session):
    session.get.side_effect = requests.HTTPError("bad gateway", response=Mock())

    with pytest.raises(ProductClientError) as exc:
        client.get_product_by_id(1)

    assert not isinstance(exc.value, NetworkError)
    assert str(exc.value) == "bad gateway"


def test_undecodable_body_is_classified(client, session):
    session.get.return_value = make_response(200, json_error=ValueError("Expecting value"))

    with pytest.raises(ProductClientError) as exc:
        client.get_product_by_id(1)

    assert str(exc.value) == "Expecting value"


def test_get_all_products(client, session):
    session.get.return_value = make_response(200, [WIDGET])

    assert client.get_all_products() == [ProductView(**WIDGET)]


def test_get_all_products_failure(client, session):
    session.get.return_value = make_response(500)

    with pytest.raises(ProductClientError) as exc:
        client.get_all_products()

    assert str(exc.value) == "Failed to fetch products"


def test_search_products_sends_term(client, session):
    session.get.return_value = make_response(200, [])

    assert client.search_products("wid") == []
    session.get.assert_called_once_with(
        "http://api.test/products/search", params={"name": "wid"}, timeout=10
    )


def test_search_network_failure(client, session):
    session.get.side_effect = requests.ConnectionError()

    with pytest.raises(NetworkError):
        client.search_products("wid")


def test_price_range(client, session):
    session.get.return_value = make_response(200, [WIDGET])

    assert client.get_products_by_price_range(10, 20) == [ProductView(**WIDGET)]
    session.get.assert_called_once_with(
        "http://api.test/products/price-range", params={"min": "10", "max": "20"}, timeout=10
    )


def test_empty_transport_message_falls_back_to_generic_text(client, session):
    session.get.side_effect = requests.RequestException(response=Mock())

    with pytest.raises(ProductClientError) as exc:
        client.get_product_by_id(1)

    assert str(exc.value) == "An unexpected error occurred"
