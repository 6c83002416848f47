from app.data.categories import CATEGORY_HIERARCHY
from app.schemas.category import CategoryTreeNode
from app.services.category_tree import CategoryTree, flatten, get_category_tree
from app.services.localization_service import category_name, resolve


def _ids(categories) -> list:
    return [category.id for category in categories]


def test_reference_hierarchy_loads(tree: CategoryTree):
    assert len(tree) == 26
    assert _ids(tree.roots()) == ["1", "2"]


def test_flatten_is_pre_order(tree: CategoryTree):
    ids = _ids(tree.flatten())
    assert ids[:6] == ["1", "1-1", "1-1-1", "1-1-2", "1-1-3", "1-2"]
    assert ids.index("2") == 13
    assert ids[-1] == "2-3-3"


def test_flatten_is_stable_and_total(tree: CategoryTree):
    first = tree.flatten()
    second = tree.flatten()
    assert first == second
    assert len(first) == len(tree)
    assert len(set(_ids(first))) == len(first)


def test_parents_precede_descendants(tree: CategoryTree):
    ids = _ids(tree.flatten())
    for category in tree.flatten():
        if category.parent_id is not None:
            assert ids.index(category.parent_id) < ids.index(category.id)


def test_siblings_ordered_by_sort_order_with_stable_ties(small_forest):
    small_tree = CategoryTree.from_hierarchy(small_forest)
    assert _ids(small_tree.roots()) == ["a", "b"]
    assert _ids(small_tree.children_of("a")) == ["a-1", "a-2", "a-3"]
    assert _ids(small_tree.flatten()) == ["a", "a-1", "a-1-1", "a-2", "a-3", "b"]


def test_from_hierarchy_derives_parent_and_level(small_forest):
    small_tree = CategoryTree.from_hierarchy(small_forest)
    grandchild = small_tree.find_by_id("a-1-1")
    assert grandchild.parent_id == "a-1"
    assert grandchild.level == 2
    assert small_tree.find_by_id("a").parent_id is None
    assert small_tree.find_by_id("a").level == 0


def test_module_flatten_accepts_forest_literal(tree: CategoryTree):
    assert _ids(flatten(CATEGORY_HIERARCHY)) == _ids(tree.flatten())
    assert _ids(flatten(tree)) == _ids(tree.flatten())


def test_find_by_slug(tree: CategoryTree):
    category = tree.find_by_slug("bags-packs")
    assert category is not None
    assert category.id == "1-1-1"
    assert tree.find_by_slug("does-not-exist") is None


def test_find_by_id(tree: CategoryTree):
    assert tree.find_by_id("2-2").slug == "kitchen"
    assert tree.find_by_id("9") is None
    assert "2-2" in tree
    assert "9" not in tree


def test_children_of(tree: CategoryTree):
    assert _ids(tree.children_of("1-1")) == ["1-1-1", "1-1-2", "1-1-3"]
    assert tree.children_of("1-1-1") == []
    assert tree.children_of("missing") == []


def test_descendants_of(tree: CategoryTree):
    descendants = tree.descendants_of("1")
    assert len(descendants) == 12
    assert "1" not in _ids(descendants)
    assert _ids(descendants)[:4] == ["1-1", "1-1-1", "1-1-2", "1-1-3"]
    assert tree.descendants_of("missing") == []


def test_breadcrumbs_root_first(tree: CategoryTree):
    for category in tree.flatten():
        path = tree.breadcrumbs(category.id)
        assert path[0].parent_id is None
        assert path[-1] == category
        assert len(path) == category.level + 1


def test_breadcrumbs_for_root_is_self(tree: CategoryTree):
    root = tree.find_by_id("1")
    assert tree.breadcrumbs("1") == [root]


def test_breadcrumbs_missing_category(tree: CategoryTree):
    assert tree.breadcrumbs("404") is None


def test_inactive_categories_hidden_only_when_asked(small_forest):
    small_tree = CategoryTree.from_hierarchy(small_forest)

    assert _ids(small_tree.flatten(active_only=True)) == ["a", "a-2", "a-3", "b"]
    assert _ids(small_tree.children_of("a", active_only=True)) == ["a-2", "a-3"]
    assert _ids(small_tree.descendants_of("a", active_only=True)) == ["a-2", "a-3"]

    assert "a-1" in _ids(small_tree.flatten())
    assert small_tree.find_by_id("a-1").is_active is False
    assert small_tree.find_by_slug("alpha-one-one") is not None
    assert _ids(small_tree.breadcrumbs("a-1-1")) == ["a", "a-1", "a-1-1"]


def test_as_tree_rebuilds_nesting(small_forest):
    small_tree = CategoryTree.from_hierarchy(small_forest)
    nodes = small_tree.as_tree()
    assert _ids(nodes) == ["a", "b"]
    assert _ids(nodes[0].children) == ["a-1", "a-2", "a-3"]
    assert _ids(nodes[0].children[0].children) == ["a-1-1"]

    active_nodes = small_tree.as_tree(active_only=True)
    assert _ids(active_nodes[0].children) == ["a-2", "a-3"]


def test_cached_tree_is_shared():
    assert get_category_tree() is get_category_tree()
    assert len(get_category_tree()) == 26


def test_breadcrumb_scenario_with_fallback_name(tree: CategoryTree):
    grandchild = tree.find_by_slug("bags-packs")
    assert _ids(tree.breadcrumbs("1-1-1")) == ["1", "1-1", "1-1-1"]
    assert tree.breadcrumbs("1-1-1")[0].name == "Tactical & Outdoor"
    assert tree.breadcrumbs("1-1-1")[1].name == "Tactical Gear"

    assert resolve({"en": "Bags & Packs"}, "he") == "Bags & Packs"
    assert category_name(grandchild, "he") == "Bags & Packs"
    assert category_name(tree.find_by_id("1-1"), "he") == "ציוד טקטי"


def test_from_hierarchy_accepts_tree_node_models():
    forest = [
        CategoryTreeNode(
            id="r",
            slug="root",
            name="Root",
            children=[
                CategoryTreeNode(
                    id="c",
                    slug="child",
                    name="Child",
                    children=[CategoryTreeNode(id="g", slug="grandchild", name="Grandchild")],
                ),
            ],
        ),
    ]
    model_tree = CategoryTree.from_hierarchy(forest)
    assert _ids(model_tree.flatten()) == ["r", "c", "g"]
    assert model_tree.find_by_id("c").level == 1
    assert model_tree.find_by_id("g").parent_id == "c"
    assert model_tree.find_by_id("g").level == 2
