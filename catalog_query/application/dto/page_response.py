from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from catalog_query.domain.entities.product import ProductSummary


class ProductSummaryDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    name: str
    slug: str = ""
    price: float
    image: Any = None

    def to_entity(self) -> ProductSummary:
        return ProductSummary(id=self.id, name=self.name, slug=self.slug, price=self.price, image=self.image)


class PageResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool
    data: list[ProductSummaryDTO] = Field(default_factory=list)
    total_pages: int = Field(default=1, alias="totalPages")

    @field_validator("total_pages")
    @classmethod
    def _at_least_one_page(cls, value: int) -> int:
        # an empty match set is reported as 0 pages; the UI always shows page 1
        return max(1, value)

    @model_validator(mode="after")
    def _page_fields_required_on_success(self) -> "PageResponseDTO":
        # failure bodies usually carry only a message
        missing = [name for name in ("data", "total_pages") if name not in self.model_fields_set]
        if self.success and missing:
            raise ValueError(f"successful response is missing {', '.join(missing)}")
        return self

    def products(self) -> tuple[ProductSummary, ...]:
        return tuple(item.to_entity() for item in self.data)
