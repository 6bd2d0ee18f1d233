"""
Gallery service orchestrator.

Paginated, searchable listing of generation history and single-item
retrieval. Listing runs a connectivity probe first and retries the whole
read on transient database failures.

Dependencies: sqlalchemy, tenacity, kram.boundary.db, kram.configs
System role: Gallery use case orchestration
"""

import asyncio
import logging
import uuid
from typing import Awaitable, Callable

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from kram.boundary.db.connection import ping_database
from kram.boundary.db.CRUD.history_crud import history_crud
from kram.configs.gallery import GallerySettings
from kram.core.exceptions import DatabaseUnavailableError, GalleryItemNotFoundError, ValidationError
from kram.core.kram_pattern.validator import is_valid_uuid
from kram.models.gallery import GalleryItem, GalleryQuery, PaginatedGallery, Pagination

logger = logging.getLogger(__name__)

TRANSIENT_DB_ERRORS = (OperationalError, DisconnectionError, PoolTimeoutError, InterfaceError)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Gallery query failed, retrying",
        extra={
            "attempt": retry_state.attempt_number,
            "next_delay_s": retry_state.next_action.sleep if retry_state.next_action else None,
            "error": str(exc),
        },
    )


class GalleryService:
    """Gallery service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        settings: GallerySettings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize gallery service.

        Args:
            db: Async SQLAlchemy session
            settings: Page size bounds and retry policy
            sleep: Awaitable sleep used between retries
        """
        self.db = db
        self.settings = settings or GallerySettings()
        self._sleep = sleep

    def build_query(
        self,
        search: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> GalleryQuery:
        """Normalize raw query parameters with the configured page size bounds."""
        return GalleryQuery.from_params(
            search=search,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            default_limit=self.settings.default_page_size,
            max_limit=self.settings.max_page_size,
        )

    async def _read_page(self, query: GalleryQuery) -> PaginatedGallery:
        try:
            await ping_database(self.db)
            total_items = await history_crud.count_matching(self.db, query.search)
            records = await history_crud.search_page(
                self.db,
                search=query.search,
                sort_by=query.sort_by,
                sort_order=query.sort_order,
                limit=query.limit,
                offset=query.offset,
            )
        except TRANSIENT_DB_ERRORS:
            await self.db.rollback()
            raise

        return PaginatedGallery(
            data=[GalleryItem.model_validate(record) for record in records],
            pagination=Pagination.build(query.page, query.limit, total_items),
        )

    async def list_gallery(self, query: GalleryQuery) -> PaginatedGallery:
        """
        Get one page of gallery items.

        Args:
            query: Normalized gallery query

        Returns:
            PaginatedGallery: Items with joined tag and outputs, plus pagination

        Raises:
            DatabaseUnavailableError: If the database stays unreachable for
                every attempt
        """
        attempts = self.settings.db_retry_attempts
        logger.debug(
            "Executing gallery query",
            extra={
                "search": query.search,
                "page": query.page,
                "limit": query.limit,
                "sort_by": query.sort_by,
                "sort_order": query.sort_order,
            },
        )

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(TRANSIENT_DB_ERRORS),
                stop=stop_after_attempt(attempts),
                wait=wait_exponential(multiplier=self.settings.db_retry_base_delay),
                before_sleep=_log_retry,
                sleep=self._sleep,
                reraise=True,
            ):
                with attempt:
                    result = await self._read_page(query)
        except TRANSIENT_DB_ERRORS as e:
            logger.error(
                "Gallery query failed after retries",
                extra={"attempts": attempts, "error": str(e)},
            )
            raise DatabaseUnavailableError(
                f"Database connection failed. Please try again later. (Failed after {attempts} attempts)",
                attempts=attempts,
            ) from e

        logger.info(
            "Gallery query completed",
            extra={
                "returned": len(result.data),
                "total_items": result.pagination.totalItems,
            },
        )
        return result

    async def get_item(self, item_id: str) -> GalleryItem:
        """
        Get one gallery item by history ID.

        Args:
            item_id: History ID as received in the path

        Returns:
            GalleryItem: History row with tag and outputs

        Raises:
            ValidationError: If the ID is not a well-formed UUID
            GalleryItemNotFoundError: If no history row has that ID
        """
        if not is_valid_uuid(item_id):
            raise ValidationError(
                "The provided ID is not a valid UUID",
                field="id",
                label="Invalid ID format",
            )

        record = await history_crud.get_with_outputs(self.db, uuid.UUID(item_id))
        if record is None:
            raise GalleryItemNotFoundError(item_id)
        return GalleryItem.model_validate(record)
