from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from catalog_query.domain.entities.actions import (
    Action,
    SetPage,
    SetPageSize,
    SetSearch,
    SetSort,
    ToggleCategory,
    ToggleSubCategory,
)
from catalog_query.domain.entities.query_state import SortMode


class ToggleCategorySchema(BaseModel):
    type: Literal["toggle_category"]
    tag: str = Field(min_length=1)

    def to_action(self) -> Action:
        return ToggleCategory(self.tag)


class ToggleSubCategorySchema(BaseModel):
    type: Literal["toggle_sub_category"]
    tag: str = Field(min_length=1)

    def to_action(self) -> Action:
        return ToggleSubCategory(self.tag)


class SetSortSchema(BaseModel):
    type: Literal["set_sort"]
    mode: SortMode

    def to_action(self) -> Action:
        return SetSort(self.mode)


class SetSearchSchema(BaseModel):
    type: Literal["set_search"]
    text: str = ""

    def to_action(self) -> Action:
        return SetSearch(self.text)


class SetPageSchema(BaseModel):
    type: Literal["set_page"]
    page: int

    def to_action(self) -> Action:
        return SetPage(self.page)


class SetPageSizeSchema(BaseModel):
    type: Literal["set_page_size"]
    page_size: int

    def to_action(self) -> Action:
        return SetPageSize(self.page_size)


ActionSchema = Annotated[
    Union[
        ToggleCategorySchema,
        ToggleSubCategorySchema,
        SetSortSchema,
        SetSearchSchema,
        SetPageSchema,
        SetPageSizeSchema,
    ],
    Field(discriminator="type"),
]


class ActionRequestSchema(BaseModel):
    action: ActionSchema


class QueryStateSchema(BaseModel):
    categories: list[str] = Field(default_factory=list)
    sub_categories: list[str] = Field(default_factory=list)
    sort: SortMode = SortMode.RELEVANT
    search: str = ""
    page: int = 1
    page_size: int = 10


class ProductSchema(BaseModel):
    id: str
    name: str
    slug: str
    price: float
    image: Any = None


class CollectionResponseSchema(BaseModel):
    query: QueryStateSchema
    items: list[ProductSchema]
    page: int
    total_pages: int
    page_label: str
    can_go_previous: bool
    can_go_next: bool
    is_loading: bool
    show_loading_indicator: bool
    failed: bool
    error: str | None = None
