from pydantic import Field

from finboard.schemas.common import CamelModel, DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=64)
    color: str = Field(default=DEFAULT_CATEGORY_COLOR, pattern=HEX_COLOR)
    icon: str = DEFAULT_CATEGORY_ICON


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=64)
    color: str | None = Field(default=None, pattern=HEX_COLOR)
    icon: str | None = None
    is_custom: bool | None = None


class Category(CamelModel):
    id: int
    name: str | None = None
    color: str = DEFAULT_CATEGORY_COLOR
    icon: str = DEFAULT_CATEGORY_ICON
    is_custom: bool = False
