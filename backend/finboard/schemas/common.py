from pydantic import BaseModel
from pydantic.alias_generators import to_camel

DEFAULT_CATEGORY_COLOR = "#6b7280"
DEFAULT_CATEGORY_ICON = "Tag"


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
