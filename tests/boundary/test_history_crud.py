"""
Test suite for the database CRUD layer.

Runs against in-memory SQLite: tag lookups, gallery search across the
prompt, tag and outputs, sorting and pagination.

System role: Verification of the gallery read model
"""

from datetime import datetime, timedelta, timezone

import pytest

from kram.boundary.db.CRUD import history_crud, output_crud, tag_crud
from kram.boundary.db.models import HistoryModel, OutputGenerateModel


@pytest.fixture
async def seeded(test_async_db, make_tag):
    """Three history rows with distinct prompts, tags and outputs."""
    diamond = await make_tag("Diamond", "Interlocking diamonds")
    star = await make_tag("Star", "Eight-pointed Mekong star")
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)

    rows = [
        ("Lotus border", diamond.id, "ดอกบัวบนผ้าคราม", "ดอกบัว, คราม"),
        ("River waves", star.id, "คลื่นน้ำ", "น้ำ, คลื่น"),
        ("Plain grid", None, "ตารางเรียบ", "ตาราง, minimal"),
    ]
    histories = []
    for offset, (prompt, tag_id, description, output_tags) in enumerate(rows):
        history = HistoryModel(
            prompt_message=prompt,
            tags_id=tag_id,
            create_at=base + timedelta(days=offset),
        )
        test_async_db.add(history)
        await test_async_db.flush()
        test_async_db.add(
            OutputGenerateModel(
                history_id=history.id,
                prompt_image_url=f"https://images.example.com/{offset}.png",
                description=description,
                output_tags=output_tags,
            )
        )
        histories.append(history)
    await test_async_db.commit()
    return histories


class TestTagCRUD:
    """Test suite for TagCRUD queries."""

    async def test_list_ordered_by_name(self, test_async_db, make_tag) -> None:
        await make_tag("Zigzag")
        await make_tag("Arrow")

        tags = await tag_crud.list_ordered(test_async_db)

        assert [t.name for t in tags] == ["Arrow", "Zigzag"]

    async def test_name_lookup_ignores_case(self, test_async_db, make_tag) -> None:
        tag = await make_tag("Diamond")

        assert (await tag_crud.get_by_name_insensitive(test_async_db, "dIAMOND")).id == tag.id
        assert await tag_crud.get_by_name_insensitive(test_async_db, "Star") is None

    async def test_get_by_ids_skips_unknown(self, test_async_db, make_tag, history_id) -> None:
        tag = await make_tag("Diamond")

        found = await tag_crud.get_by_ids(test_async_db, [tag.id, history_id])

        assert [t.id for t in found] == [tag.id]


class TestHistorySearch:
    """Test suite for HistoryCRUD gallery queries."""

    async def test_default_sort_is_newest_first(self, test_async_db, seeded) -> None:
        page = await history_crud.search_page(test_async_db)

        assert [h.prompt_message for h in page] == ["Plain grid", "River waves", "Lotus border"]

    async def test_sort_by_prompt_ascending(self, test_async_db, seeded) -> None:
        page = await history_crud.search_page(
            test_async_db, sort_by="prompt_message", sort_order="asc"
        )

        assert [h.prompt_message for h in page] == ["Lotus border", "Plain grid", "River waves"]

    @pytest.mark.parametrize(
        ("search", "expected"),
        [
            ("LOTUS", ["Lotus border"]),
            ("mekong", ["River waves"]),
            ("diamond", ["Lotus border"]),
            ("คลื่น", ["River waves"]),
            ("MINIMAL", ["Plain grid"]),
            ("nothing-matches", []),
            ("%", []),
            ("_", []),
            ("L_tus", []),
        ],
    )
    async def test_search_is_case_insensitive_across_fields(
        self, test_async_db, seeded, search, expected
    ) -> None:
        page = await history_crud.search_page(test_async_db, search=search)
        total = await history_crud.count_matching(test_async_db, search)

        assert [h.prompt_message for h in page] == expected
        assert total == len(expected)

    async def test_relations_are_loaded(self, test_async_db, seeded) -> None:
        item = await history_crud.get_with_outputs(test_async_db, seeded[0].id)

        assert item.tag.name == "Diamond"
        assert [o.output_tags for o in item.output_logs] == ["ดอกบัว, คราม"]

    async def test_untagged_history_has_no_tag(self, test_async_db, seeded) -> None:
        item = await history_crud.get_with_outputs(test_async_db, seeded[2].id)

        assert item.tag is None
        assert item.tags_id is None

    async def test_get_missing_returns_none(self, test_async_db, history_id) -> None:
        assert await history_crud.get_with_outputs(test_async_db, history_id) is None

    async def test_created_output_is_linked_to_history(self, test_async_db) -> None:
        # Arrange
        history = await history_crud.create(test_async_db, prompt_message="Checkered sarong")
        output = await output_crud.create(
            test_async_db,
            history_id=history.id,
            prompt_image_url="https://images.example.com/sarong.png",
            description="ลายตาหมากรุก",
            output_tags="ตาหมากรุก, ผ้าซิ่น",
        )

        # Act
        item = await history_crud.get_with_outputs(test_async_db, history.id)

        # Assert
        assert [o.id for o in item.output_logs] == [output.id]

    async def test_wildcard_characters_match_literally(self, test_async_db, seeded) -> None:
        test_async_db.add(HistoryModel(prompt_message="Cotton 100% indigo_dye"))
        await test_async_db.flush()

        for search in ("100%", "indigo_dye"):
            page = await history_crud.search_page(test_async_db, search=search)

            assert [h.prompt_message for h in page] == ["Cotton 100% indigo_dye"]
