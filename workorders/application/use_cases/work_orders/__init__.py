"""Work order use cases."""

from workorders.application.use_cases.work_orders.work_order_operations import (
    WorkOrderService,
    build_work_order_filter,
    parse_page,
)

__all__ = ["WorkOrderService", "build_work_order_filter", "parse_page"]
