from __future__ import annotations

import logging

from finboard.schemas.category import Category, CategoryCreate, CategoryUpdate
from finboard.schemas.common import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON
from finboard.services.mapper import RecordMapper
from finboard.services.result import ErrorKind, Result
from finboard.store.query import where_equal

logger = logging.getLogger(__name__)

NOT_DELETABLE = "Category not found or cannot be deleted"


class CategoryService(RecordMapper[Category]):
    collection = "category_c"
    label = "categories"
    fields = ("Name", "name_c", "color_c", "icon_c", "is_custom_c")

    def to_entity(self, raw: dict) -> Category:
        return Category(
            id=raw.get("Id"),
            name=raw.get("name_c") or raw.get("Name"),
            color=raw.get("color_c") or DEFAULT_CATEGORY_COLOR,
            icon=raw.get("icon_c") or DEFAULT_CATEGORY_ICON,
            is_custom=bool(raw.get("is_custom_c") or False),
        )

    def to_create_record(self, data: CategoryCreate) -> dict:
        # categories created by the user are always custom
        return {
            "Name": data.name,
            "name_c": data.name,
            "color_c": data.color,
            "icon_c": data.icon,
            "is_custom_c": True,
        }

    def to_update_record(self, data: CategoryUpdate) -> dict:
        patch = data.model_dump(exclude_unset=True)
        out: dict = {}
        if "name" in patch:
            out["Name"] = patch["name"]
            out["name_c"] = patch["name"]
        if "color" in patch:
            out["color_c"] = patch["color"]
        if "icon" in patch:
            out["icon_c"] = patch["icon"]
        if "is_custom" in patch:
            out["is_custom_c"] = patch["is_custom"]
        return out

    def name_result(self, name: str) -> Result[Category]:
        return self.first_result([where_equal("name_c", name)])

    def get_by_name(self, name: str) -> Category | None:
        return self.name_result(name).get_or_else(None)

    def delete_result(self, record_id) -> Result[bool]:
        found = self.get_result(record_id)
        if not found.ok or not found.value.is_custom:
            logger.info("refusing to delete category %s", record_id)
            self.notifier.error(NOT_DELETABLE)
            return Result.failure(ErrorKind.RULE_VIOLATION, NOT_DELETABLE)
        return super().delete_result(record_id)
