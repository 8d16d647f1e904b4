"""Unit tests for the listing query builder (compiled SQL, no database)."""

from sqlalchemy.dialects import postgresql

from workorders.application.dtos.work_order import WorkOrderFilter
from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus
from workorders.infrastructure.persistence.repositories.work_order_query import (
    build_work_order_query,
    escape_like,
    work_order_conditions,
)


def _sql(stmt) -> str:
    compiled = stmt.compile(
        dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
    )
    return " ".join(str(compiled).split())


class TestEscapeLike:
    def test_plain_text_unchanged(self) -> None:
        assert escape_like("pump") == "pump"

    def test_wildcards_escaped(self) -> None:
        assert escape_like("100%_done") == "100\\%\\_done"

    def test_escape_char_escaped_first(self) -> None:
        assert escape_like("a\\b") == "a\\\\b"


class TestConditions:
    def test_no_filters_no_conditions(self) -> None:
        assert work_order_conditions(WorkOrderFilter()) == []

    def test_each_filter_adds_one_condition(self) -> None:
        filters = WorkOrderFilter(
            search="pump",
            status=WorkOrderStatus.OPEN,
            priority=WorkOrderPriority.HIGH,
        )
        assert len(work_order_conditions(filters)) == 3
        assert len(work_order_conditions(filters, owner_id="user-1")) == 4


class TestBuildWorkOrderQuery:
    def test_first_page_ordering_and_limit(self) -> None:
        page_query, _ = build_work_order_query(WorkOrderFilter())
        sql = _sql(page_query)
        assert "ORDER BY work_order.created_at DESC, work_order.id DESC" in sql
        assert "LIMIT 10" in sql
        assert "OFFSET 0" in sql

    def test_page_three_offset(self) -> None:
        page_query, _ = build_work_order_query(WorkOrderFilter(page=3))
        assert "OFFSET 20" in _sql(page_query)

    def test_search_matches_title_or_description_case_insensitively(self) -> None:
        page_query, _ = build_work_order_query(WorkOrderFilter(search="Pump"))
        sql = _sql(page_query)
        assert "work_order.title ILIKE '%Pump%'" in sql
        assert "work_order.description ILIKE '%Pump%'" in sql
        assert " OR " in sql

    def test_status_and_priority_exact_match(self) -> None:
        page_query, _ = build_work_order_query(
            WorkOrderFilter(status=WorkOrderStatus.CLOSED, priority=WorkOrderPriority.LOW)
        )
        sql = _sql(page_query)
        assert "work_order.status = 'CLOSED'" in sql
        assert "work_order.priority = 'LOW'" in sql

    def test_owner_restriction_is_applied_with_search(self) -> None:
        page_query, count_query = build_work_order_query(
            WorkOrderFilter(search="pump"), owner_id="user-1"
        )
        for stmt in (page_query, count_query):
            sql = _sql(stmt)
            assert "work_order.created_by_id = 'user-1'" in sql
            assert "ILIKE" in sql

    def test_manager_listing_has_no_owner_restriction(self) -> None:
        page_query, count_query = build_work_order_query(WorkOrderFilter(), None)
        assert "created_by_id =" not in _sql(page_query)
        assert "created_by_id =" not in _sql(count_query)

    def test_count_query_ignores_pagination(self) -> None:
        _, count_query = build_work_order_query(
            WorkOrderFilter(page=5, status=WorkOrderStatus.OPEN)
        )
        sql = _sql(count_query)
        assert sql.startswith("SELECT count(work_order.id)")
        assert "work_order.status = 'OPEN'" in sql
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql
        assert "ORDER BY" not in sql
