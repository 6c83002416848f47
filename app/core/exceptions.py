from fastapi import HTTPException, status
from typing import Optional


class CategoryStructureError(ValueError):
    """The static category hierarchy is corrupt (raised at load time)."""

    def __init__(self, message: str, category_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.category_id = category_id


class DuplicateCategoryError(CategoryStructureError):
    pass


class OrphanCategoryError(CategoryStructureError):
    pass


class CategoryCycleError(CategoryStructureError):
    pass


class CategoryDepthError(CategoryStructureError):
    pass


class CategoryNotFound(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )

