from fastapi import APIRouter, Depends, Request, Query
from typing import List

from app.api.deps import LocaleContext, get_locale_context, get_tree
from app.core.exceptions import CategoryNotFound
from app.core.rate_limiter import limiter
from app.schemas.category import Category, CategoryResponse, CategoryTreeNode, CategoryTreeResponse
from app.services.category_tree import CategoryTree
from app.services.localization_service import category_description, category_name
from app.utils.response import success

router = APIRouter()


def _serialize(category: Category, ctx: LocaleContext) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        slug=category.slug,
        name=category_name(category, ctx.requested),
        description=category_description(category, ctx.requested),
        parent_id=category.parent_id,
        level=category.level,
        sort_order=category.sort_order,
        is_active=category.is_active,
        image_url=category.image_url,
    )


def _serialize_tree(node: CategoryTreeNode, ctx: LocaleContext) -> CategoryTreeResponse:
    base = _serialize(node, ctx)
    return CategoryTreeResponse(
        **base.model_dump(),
        children=[_serialize_tree(child, ctx) for child in node.children],
    )


def _serialize_many(categories: List[Category], ctx: LocaleContext) -> List[CategoryResponse]:
    return [_serialize(category, ctx) for category in categories]


@router.get("", response_model=dict)
@router.get("/", response_model=dict)
@limiter.limit("100/minute")
def get_public_categories(
    request: Request,
    active_only: bool = Query(True),
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    """Public: Return every category in navigation (pre-order) order."""
    categories = tree.flatten(active_only=active_only)
    return success(
        data=_serialize_many(categories, ctx),
        message="Categories retrieved",
        meta={**ctx.as_meta(), "total": len(categories)},
    )


@router.get("/tree", response_model=dict)
@limiter.limit("100/minute")
def get_public_category_tree(
    request: Request,
    active_only: bool = Query(True),
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    """Public: Return the nested category hierarchy."""
    nodes = tree.as_tree(active_only=active_only)
    return success(
        data=[_serialize_tree(node, ctx) for node in nodes],
        message="Category tree retrieved",
        meta=ctx.as_meta(),
    )


@router.get("/slug/{slug}", response_model=dict)
@limiter.limit("100/minute")
def get_category_by_slug(
    request: Request,
    slug: str,
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    category = tree.find_by_slug(slug)
    if category is None:
        raise CategoryNotFound()
    return success(data=_serialize(category, ctx), message="Category retrieved", meta=ctx.as_meta())


@router.get("/{category_id}", response_model=dict)
@limiter.limit("100/minute")
def get_category(
    request: Request,
    category_id: str,
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    category = tree.find_by_id(category_id)
    if category is None:
        raise CategoryNotFound()
    return success(data=_serialize(category, ctx), message="Category retrieved", meta=ctx.as_meta())


@router.get("/{category_id}/children", response_model=dict)
@limiter.limit("100/minute")
def get_category_children(
    request: Request,
    category_id: str,
    active_only: bool = Query(True),
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    """Public: Direct children; an unknown id simply has none."""
    children = tree.children_of(category_id, active_only=active_only)
    return success(data=_serialize_many(children, ctx), message="Subcategories retrieved", meta=ctx.as_meta())


@router.get("/{category_id}/descendants", response_model=dict)
@limiter.limit("100/minute")
def get_category_descendants(
    request: Request,
    category_id: str,
    active_only: bool = Query(True),
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    if category_id not in tree:
        raise CategoryNotFound()
    descendants = tree.descendants_of(category_id, active_only=active_only)
    return success(data=_serialize_many(descendants, ctx), message="Descendants retrieved", meta=ctx.as_meta())


@router.get("/{category_id}/breadcrumbs", response_model=dict)
@limiter.limit("100/minute")
def get_category_breadcrumbs(
    request: Request,
    category_id: str,
    tree: CategoryTree = Depends(get_tree),
    ctx: LocaleContext = Depends(get_locale_context),
):
    """Public: Root-first path down to the category."""
    path = tree.breadcrumbs(category_id)
    if path is None:
        raise CategoryNotFound()
    return success(data=_serialize_many(path, ctx), message="Breadcrumbs retrieved", meta=ctx.as_meta())
