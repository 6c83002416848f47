from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Set, Union

import structlog
from pydantic import BaseModel
from slugify import slugify

from app.core.config import settings
from app.core.exceptions import (
    CategoryCycleError,
    CategoryDepthError,
    CategoryStructureError,
    DuplicateCategoryError,
    OrphanCategoryError,
)
from app.data.categories import CATEGORY_HIERARCHY
from app.schemas.category import Category, CategoryTreeNode

logger = structlog.get_logger()

CategoryInput = Union[Category, Mapping]


class CategoryTree:
    """Id-indexed arena over the static category hierarchy.

    Parent/child links are id references. Siblings are kept ordered by
    ``sort_order``; ties keep the order in which the records were supplied.
    Lookups that miss return ``None`` (or an empty list); only corrupt
    configuration raises, as a :class:`CategoryStructureError`.
    """

    def __init__(
        self,
        categories: Iterable[CategoryInput],
        max_depth: Optional[int] = None,
        validate: bool = True,
    ):
        self.max_depth = max_depth if max_depth is not None else settings.CATEGORY_MAX_DEPTH
        self._by_id: Dict[str, Category] = {}
        self._by_slug: Dict[str, Category] = {}
        self._children: Dict[Optional[str], List[str]] = {}

        for item in categories:
            category = item if isinstance(item, Category) else Category.model_validate(item)
            if category.id in self._by_id:
                raise DuplicateCategoryError(f"Duplicate category id '{category.id}'", category.id)
            self._by_id[category.id] = category
            self._by_slug.setdefault(category.slug, category)
            self._children.setdefault(category.parent_id, []).append(category.id)

        for child_ids in self._children.values():
            child_ids.sort(key=lambda child_id: self._by_id[child_id].sort_order)

        if validate:
            self.validate()

    @classmethod
    def from_hierarchy(cls, forest: Sequence[Union[BaseModel, Mapping]], **kwargs) -> "CategoryTree":
        """Build a tree from a nested forest literal.

        ``parent_id`` and ``level`` are filled in from the nesting when a
        node omits them. A node that names a different parent than the one
        it is nested under is rejected.
        """
        records: List[dict] = []

        def visit(node, parent_id: Optional[str], level: int) -> None:
            data = node.model_dump(exclude_unset=True) if isinstance(node, BaseModel) else dict(node)
            children = data.pop("children", None) or []

            declared_parent = data.get("parent_id")
            if declared_parent is None:
                data["parent_id"] = parent_id
            elif declared_parent != parent_id:
                raise CategoryStructureError(
                    f"Category '{data.get('id')}' is nested under '{parent_id}' "
                    f"but declares parent '{declared_parent}'",
                    data.get("id"),
                )
            data.setdefault("level", level)

            records.append(data)
            for child in children:
                visit(child, data.get("id"), level + 1)

        for root in forest:
            visit(root, None, 0)

        return cls(records, **kwargs)

    def validate(self) -> None:
        """Fail fast on duplicate or unsafe slugs, orphans, cycles and bad levels."""
        seen_slugs: Dict[str, str] = {}
        try:
            for category in self._by_id.values():
                owner = seen_slugs.get(category.slug)
                if owner is not None:
                    raise DuplicateCategoryError(
                        f"Slug '{category.slug}' is used by both '{owner}' and '{category.id}'",
                        category.id,
                    )
                seen_slugs[category.slug] = category.id

                if not category.slug or slugify(category.slug) != category.slug:
                    raise CategoryStructureError(
                        f"Category '{category.id}' has a slug that is not URL-safe: '{category.slug}'",
                        category.id,
                    )

                if category.parent_id is not None and category.parent_id not in self._by_id:
                    raise OrphanCategoryError(
                        f"Category '{category.id}' references unknown parent '{category.parent_id}'",
                        category.id,
                    )

            for category in self._by_id.values():
                depth = len(self._path_to_root(category)) - 1
                if category.level != depth:
                    raise CategoryStructureError(
                        f"Category '{category.id}' declares level {category.level} but sits at depth {depth}",
                        category.id,
                    )
        except CategoryStructureError as exc:
            logger.error("category_structure_invalid", category_id=exc.category_id, reason=exc.message)
            raise

        logger.info("category_tree_validated", categories=len(self._by_id), max_depth=self.max_depth)

    def _path_to_root(self, category: Category) -> List[Category]:
        # Walk is bounded by max_depth so corrupt data cannot loop forever.
        path = [category]
        visited = {category.id}
        current = category
        while current.parent_id is not None:
            if len(path) >= self.max_depth:
                raise CategoryDepthError(
                    f"Category '{category.id}' is deeper than the maximum of {self.max_depth} levels",
                    category.id,
                )
            parent = self._by_id.get(current.parent_id)
            if parent is None:
                raise OrphanCategoryError(
                    f"Category '{current.id}' references unknown parent '{current.parent_id}'",
                    current.id,
                )
            if parent.id in visited:
                raise CategoryCycleError(
                    f"Parent chain of category '{category.id}' loops back to '{parent.id}'",
                    category.id,
                )
            visited.add(parent.id)
            path.append(parent)
            current = parent
        return path

    def _child_nodes(self, parent_id: Optional[str], active_only: bool) -> List[Category]:
        nodes = [self._by_id[child_id] for child_id in self._children.get(parent_id, [])]
        if active_only:
            nodes = [node for node in nodes if node.is_active]
        return nodes

    def _iter_subtree(self, category: Category, active_only: bool, visited: Set[str]) -> Iterator[Category]:
        if category.id in visited:
            raise CategoryCycleError(
                f"Category '{category.id}' is its own descendant",
                category.id,
            )
        visited.add(category.id)
        yield category
        for child in self._child_nodes(category.id, active_only):
            yield from self._iter_subtree(child, active_only, visited)

    def flatten(self, active_only: bool = False) -> List[Category]:
        """Every node in pre-order: parents first, siblings by sort_order.

        With ``active_only`` an inactive node hides its whole subtree.
        """
        result: List[Category] = []
        for root in self._child_nodes(None, active_only):
            result.extend(self._iter_subtree(root, active_only, set()))
        return result

    def roots(self, active_only: bool = False) -> List[Category]:
        return self._child_nodes(None, active_only)

    def find_by_id(self, category_id: str) -> Optional[Category]:
        return self._by_id.get(category_id)

    def find_by_slug(self, slug: str) -> Optional[Category]:
        return self._by_slug.get(slug)

    def children_of(self, parent_id: str, active_only: bool = False) -> List[Category]:
        if parent_id is None:
            return []
        return self._child_nodes(parent_id, active_only)

    def descendants_of(self, category_id: str, active_only: bool = False) -> List[Category]:
        category = self._by_id.get(category_id)
        if category is None:
            return []
        result: List[Category] = []
        visited = {category.id}
        for child in self._child_nodes(category.id, active_only):
            result.extend(self._iter_subtree(child, active_only, visited))
        return result

    def breadcrumbs(self, category_id: str) -> Optional[List[Category]]:
        """Root-first path ending at the category, or ``None`` if it does not exist."""
        category = self._by_id.get(category_id)
        if category is None:
            return None
        return list(reversed(self._path_to_root(category)))

    def as_tree(self, active_only: bool = False) -> List[CategoryTreeNode]:
        def build(category: Category) -> CategoryTreeNode:
            return CategoryTreeNode(
                **category.model_dump(),
                children=[build(child) for child in self._child_nodes(category.id, active_only)],
            )

        return [build(root) for root in self._child_nodes(None, active_only)]

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __iter__(self) -> Iterator[Category]:
        return iter(self.flatten())


def flatten(tree: Union[CategoryTree, Sequence[Mapping]]) -> List[Category]:
    """Flatten a ``CategoryTree`` or a nested forest literal in pre-order."""
    if not isinstance(tree, CategoryTree):
        tree = CategoryTree.from_hierarchy(tree)
    return tree.flatten()


@lru_cache(maxsize=1)
def get_category_tree() -> CategoryTree:
    """Process-wide tree over the static hierarchy, validated on first use."""
    tree = CategoryTree.from_hierarchy(CATEGORY_HIERARCHY)
    logger.info("category_tree_loaded", categories=len(tree), roots=len(tree.roots()))
    return tree
