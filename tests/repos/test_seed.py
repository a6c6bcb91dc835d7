from app.data.models.product import ProductModel
from app.data.seed import SEED_PRODUCTS, seed


def test_seed_inserts_fixture_rows_once(session_factory):
    assert seed(session_factory) == len(SEED_PRODUCTS)
    # drugi raz nic nie dodaje
    assert seed(session_factory) == 0

    with session_factory() as db:
        assert db.query(ProductModel).count() == len(SEED_PRODUCTS)
