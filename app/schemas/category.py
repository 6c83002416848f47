from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from app.schemas.localization import LocalizedText


class CategoryTranslation(BaseModel):
    name: str
    description: Optional[str] = None

    class Config:
        frozen = True


class Category(BaseModel):
    """A node of the static category hierarchy.

    Relationships are expressed only through ``parent_id``; the nested
    ``children`` shape lives on :class:`CategoryTreeNode`.
    """

    id: str
    slug: str
    name: LocalizedText
    description: Optional[LocalizedText] = None
    parent_id: Optional[str] = None
    level: int = Field(default=0, ge=0)
    sort_order: int = 0
    is_active: bool = True
    image_url: Optional[str] = None
    translations: Dict[str, CategoryTranslation] = Field(default_factory=dict)
    attributes: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class CategoryTreeNode(Category):
    children: List["CategoryTreeNode"] = Field(default_factory=list)


class CategoryResponse(BaseModel):
    id: str
    slug: str
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    level: int
    sort_order: int
    is_active: bool
    image_url: Optional[str] = None


class CategoryTreeResponse(CategoryResponse):
    children: List["CategoryTreeResponse"] = []
