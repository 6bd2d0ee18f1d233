"""
Test suite for TagService.

System role: Verification of tag catalog listing and creation rules
"""

from unittest.mock import patch

import pytest
from sqlalchemy import func, select

from kram.application.services.tag_service import TagService
from kram.boundary.db.models import TagModel
from kram.core.exceptions import TagAlreadyExistsError, ValidationError


@pytest.fixture
def service(test_async_db) -> TagService:
    return TagService(db=test_async_db)


async def _tag_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(TagModel))).scalar_one()


class TestListTags:
    """Tag listing."""

    async def test_empty_catalog(self, service) -> None:
        assert await service.list_tags() == []

    async def test_sorted_by_name(self, service, make_tag) -> None:
        await make_tag("Star")
        await make_tag("Diamond")
        await make_tag("Lotus")

        tags = await service.list_tags()

        assert [tag["name"] for tag in tags] == ["Diamond", "Lotus", "Star"]
        assert set(tags[0]) == {"id", "image_url", "name", "description"}


class TestCreateTag:
    """Tag creation."""

    async def test_values_are_trimmed(self, service, test_async_db) -> None:
        # Act
        tag = await service.create_tag(
            "  Lotus ",
            " https://images.example.com/lotus.png ",
            "\tOpen lotus petals\n",
        )

        # Assert
        assert tag["name"] == "Lotus"
        assert tag["image_url"] == "https://images.example.com/lotus.png"
        assert tag["description"] == "Open lotus petals"
        assert tag["id"] is not None
        assert await _tag_count(test_async_db) == 1

    @pytest.mark.parametrize(
        "name,image_url,description",
        [
            (None, "https://x/1.png", "d"),
            ("Lotus", "   ", "d"),
            ("Lotus", "https://x/1.png", ""),
        ],
    )
    async def test_blank_fields_are_rejected(
        self, service, test_async_db, name, image_url, description
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.create_tag(name, image_url, description)

        assert exc_info.value.label == "Missing required fields"
        assert await _tag_count(test_async_db) == 0

    async def test_duplicate_name_ignores_case(self, service, make_tag, test_async_db) -> None:
        await make_tag("Diamond")

        with pytest.raises(TagAlreadyExistsError) as exc_info:
            await service.create_tag(" dIAMOND ", "https://x/2.png", "Another")

        assert exc_info.value.name == "dIAMOND"
        assert await _tag_count(test_async_db) == 1

    async def test_insert_failure_rolls_back(self, service, test_async_db) -> None:
        with patch(
            "kram.application.services.tag_service.tag_crud.create",
            side_effect=RuntimeError("insert failed"),
        ):
            with pytest.raises(RuntimeError):
                await service.create_tag("Lotus", "https://x/1.png", "Petals")

        assert await _tag_count(test_async_db) == 0
