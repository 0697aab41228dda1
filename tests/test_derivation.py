from datetime import datetime

import pytest

from app.services.derivation import (
    FULFILLMENT_THRESHOLD, derive_production_fields, order_fulfilled, order_on_time
)


@pytest.mark.parametrize("qty,expected", [
    (0, False),
    (99, False),
    (100, True),
    (150, True),
])
def test_order_fulfilled_threshold(qty, expected):
    assert order_fulfilled(qty) is expected


def test_threshold_is_fixed_at_one_hundred():
    assert FULFILLMENT_THRESHOLD == 100


def test_on_time_compares_against_request_date():
    requested = datetime(2023, 10, 5)

    assert order_on_time(requested, datetime(2023, 10, 3)) is True
    assert order_on_time(requested, datetime(2023, 10, 5)) is True
    assert order_on_time(requested, datetime(2023, 10, 5, 0, 0, 1)) is False
    assert order_on_time(requested, datetime(2023, 10, 10)) is False


def test_derive_production_fields():
    derived = derive_production_fields(
        produced_qty=50,
        date_requested=datetime(2023, 10, 1),
        date_fulfilled=datetime(2023, 10, 10),
    )
    assert derived.order_fulfilled is False
    assert derived.order_on_time is False
