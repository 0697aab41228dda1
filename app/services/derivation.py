"""
Derived fields of production records.

Both functions are pure and are applied by ProductionService on every
create and update, so the stored flags always match the source fields.
"""
from datetime import datetime
from typing import NamedTuple

# Fixed business rule: a record counts as fulfilled from 100 units upward.
FULFILLMENT_THRESHOLD = 100


class ProductionDerivation(NamedTuple):
    order_fulfilled: bool
    order_on_time: bool


def order_fulfilled(produced_qty: int) -> bool:
    return produced_qty >= FULFILLMENT_THRESHOLD


def order_on_time(date_requested: datetime, date_fulfilled: datetime) -> bool:
    """
    True when the record was fulfilled no later than the *request* date.
    The work order due date is deliberately not consulted.
    """
    return date_fulfilled <= date_requested


def derive_production_fields(
    produced_qty: int,
    date_requested: datetime,
    date_fulfilled: datetime,
) -> ProductionDerivation:
    return ProductionDerivation(
        order_fulfilled=order_fulfilled(produced_qty),
        order_on_time=order_on_time(date_requested, date_fulfilled),
    )
