"""
Pagination service for association lookups.

Flattens the offset/size-paged association endpoints into a single bounded,
score-filtered result.
"""

import logging
from typing import Any, Awaitable, Callable

from opentargets_mcp.constants import ASSOCIATION_PAGE_SIZE
from opentargets_mcp.schemas import AggregatedAssociations, AssociationRow, PagedBatch

logger = logging.getLogger(__name__)

# (page_index, page_size) -> one page of rows
PageFetcher = Callable[[int, int], Awaitable[PagedBatch]]


class PaginationService:
    """
    Aggregate paged upstream fetches into one bounded result.

    Pages are fetched sequentially in increasing index order. The first
    page's total count is authoritative for the whole aggregation.
    """

    def __init__(self, page_size: int = ASSOCIATION_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.page_size = page_size

    async def aggregate(
        self,
        fetch_page: PageFetcher,
        requested_size: int,
        min_score: float | None = None,
    ) -> AggregatedAssociations:
        """
        Fetch pages until enough rows are held, then filter and cap.

        Stops when a page comes back short, when the accumulator holds at
        least the first-page total, or when it holds at least requested_size
        rows. A failing fetch propagates and discards accumulated rows.

        Args:
            fetch_page: Async callable returning one PagedBatch
            requested_size: Maximum rows to return
            min_score: Optional minimum association score

        Returns:
            AggregatedAssociations with at most requested_size rows
        """
        accumulated: list[AssociationRow] = []
        page_index = 0
        total_count = 0
        entity_id: str | None = None
        entity_name: str | None = None

        while True:
            batch = await fetch_page(page_index, self.page_size)

            if page_index == 0:
                total_count = batch.total_count
                entity_id = batch.entity_id
                entity_name = batch.entity_name

            accumulated.extend(batch.rows)
            page_index += 1

            logger.debug(
                f"Fetched page {batch.page_index}: {len(batch.rows)} rows "
                f"({len(accumulated)}/{total_count} accumulated)"
            )

            if (
                len(batch.rows) < self.page_size
                or len(accumulated) >= total_count
                or len(accumulated) >= requested_size
            ):
                break

        filtered = self.filter_by_score(accumulated, min_score)
        limited = self.slice_results(filtered, offset=0, limit=requested_size)

        logger.info(
            f"Aggregated {entity_id or 'unknown entity'}: {page_index} page(s), "
            f"{len(accumulated)} fetched, {len(filtered)} after filter, "
            f"{len(limited)} returned (total {total_count})"
        )

        return AggregatedAssociations(
            entity_id=entity_id,
            entity_name=entity_name,
            total_count=total_count,
            filtered_count=len(filtered),
            requested=requested_size,
            pages_fetched=page_index,
            rows=limited,
        )

    @staticmethod
    def filter_by_score(
        rows: list[AssociationRow],
        min_score: float | None,
    ) -> list[AssociationRow]:
        """Keep rows scoring at least min_score (no-op when unset or zero)."""
        if not min_score:
            return list(rows)
        return [row for row in rows if row.score >= min_score]

    @staticmethod
    def slice_results(
        items: list[Any],
        offset: int,
        limit: int,
    ) -> list[Any]:
        """
        Slice list to pagination window.

        Args:
            items: Full list of items
            offset: Offset to start from
            limit: Maximum items to return

        Returns:
            Sliced list
        """
        return items[offset : offset + limit]


# Singleton instance
_pagination: PaginationService | None = None


def get_pagination() -> PaginationService:
    """Get global pagination service instance."""
    global _pagination
    if _pagination is None:
        _pagination = PaginationService()
    return _pagination
