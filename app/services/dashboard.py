from collections import Counter
from typing import List
from sqlmodel import Session, select, func

from app.core.exceptions import ValidationError
from app.db.schema import ModuleRequest, ProductionRecord, WorkOrder, LogisticsStatus
from app.models.dashboard import ChartPoint, LateWorkOrders, ProductionVsOrdered


class DashboardService:
    """
    Read-only projections over the current tables for the dashboard charts.
    Every call recomputes from scratch.
    """
    TREND_VIEWS = ("daily", "weekly", "monthly")

    def __init__(self, session: Session):
        self.session = session

    # ==========================================================================
    # LOGISTICS CHARTS
    # ==========================================================================

    def logistics_summary(self) -> List[ChartPoint]:
        """Module requests per recipient factory (pie chart)."""
        rows = self.session.exec(
            select(ModuleRequest.recipient, func.count(ModuleRequest.id))
            .group_by(ModuleRequest.recipient)
        ).all()

        return [ChartPoint(name=recipient, value=count) for recipient, count in rows]

    def module_chart(self) -> List[ChartPoint]:
        """Module requests per module code, most requested first (bar chart)."""
        count = func.count(ModuleRequest.id).label("count")
        rows = self.session.exec(
            select(ModuleRequest.module, count)
            .group_by(ModuleRequest.module)
            .order_by(count.desc())
        ).all()

        return [ChartPoint(name=module, value=total) for module, total in rows]

    def fulfillment_rate(self) -> List[ChartPoint]:
        """
        Two buckets for the gauge chart. Everything that is not 'Pending',
        'In Transit' included, counts as fulfilled.
        """
        rows = self.session.exec(
            select(ModuleRequest.status, func.count(ModuleRequest.id))
            .group_by(ModuleRequest.status)
        ).all()

        total = sum(count for _, count in rows)
        pending = next(
            (count for status, count in rows if status == LogisticsStatus.PENDING),
            0
        )

        return [
            ChartPoint(name="Pending", value=pending),
            ChartPoint(name="Fulfilled", value=total - pending),
        ]

    def module_trend(self, view: str = "daily") -> List[ChartPoint]:
        """
        Module requests per request date bucket (line chart).
        Keys: 'YYYY-MM-DD' daily, ISO week 'YYYY-Www' weekly, 'YYYY-MM' monthly.
        """
        if view not in self.TREND_VIEWS:
            raise ValidationError(
                f"Unknown view '{view}'. Expected one of: {', '.join(self.TREND_VIEWS)}")

        dates = self.session.exec(select(ModuleRequest.request_date)).all()

        buckets = Counter()
        for requested in dates:
            if view == "daily":
                key = requested.strftime("%Y-%m-%d")
            elif view == "weekly":
                year, week, _ = requested.isocalendar()
                key = f"{year}-W{week:02d}"
            else:
                key = requested.strftime("%Y-%m")
            buckets[key] += 1

        # Zero-padded keys sort chronologically as strings
        return [ChartPoint(name=key, value=buckets[key]) for key in sorted(buckets)]

    # ==========================================================================
    # PRODUCTION CHARTS
    # ==========================================================================

    def late_work_orders(self) -> LateWorkOrders:
        late = self.session.exec(
            select(func.count(ProductionRecord.id))
            .where(ProductionRecord.order_on_time == False)
        ).one()
        return LateWorkOrders(late_work_orders=late)

    def production_vs_ordered(self) -> List[ProductionVsOrdered]:
        """
        Units produced per work order reference next to the quantity ordered.
        A reference that names no work order id reports 0 ordered.
        """
        rows = self.session.exec(
            select(ProductionRecord.work_order_id, func.sum(ProductionRecord.produced_qty))
            .group_by(ProductionRecord.work_order_id)
            .order_by(ProductionRecord.work_order_id)
        ).all()

        ordered = {
            str(order_id): quantity
            for order_id, quantity in self.session.exec(
                select(WorkOrder.id, WorkOrder.quantity)
            ).all()
        }

        return [
            ProductionVsOrdered(
                work_order_id=ref,
                produced_qty=produced or 0,
                ordered_qty=ordered.get(ref, 0)
            )
            for ref, produced in rows
        ]
