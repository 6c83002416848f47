"""Static category hierarchy for the storefront.

Nodes are nested under ``children``; ``CategoryTree.from_hierarchy`` turns
the forest into an id-indexed arena and validates it.
"""

TACTICAL_CATEGORIES = {
    "TACTICAL_GEAR": "tactical-gear",
    "OUTDOOR_EQUIPMENT": "outdoor-equipment",
    "SURVIVAL_TOOLS": "survival-tools",
}

HOME_CATEGORIES = {
    "LIVING_ROOM": "living-room",
    "KITCHEN": "kitchen",
    "DECOR": "decor",
}


def _leaf(id, name, slug, parent_id, sort_order, translations=None):
    return {
        "id": id,
        "name": name,
        "slug": slug,
        "parent_id": parent_id,
        "level": 2,
        "is_active": True,
        "sort_order": sort_order,
        "translations": translations or {},
        "children": [],
    }


CATEGORY_HIERARCHY = [
    {
        "id": "1",
        "name": "Tactical & Outdoor",
        "slug": "tactical-outdoor",
        "description": "High-quality tactical gear and outdoor equipment",
        "level": 0,
        "is_active": True,
        "sort_order": 1,
        "translations": {
            "he": {"name": "טקטי ושטח", "description": "ציוד טקטי וציוד שטח באיכות גבוהה"},
        },
        "children": [
            {
                "id": "1-1",
                "name": "Tactical Gear",
                "slug": TACTICAL_CATEGORIES["TACTICAL_GEAR"],
                "description": "Professional tactical equipment for military, law enforcement, and enthusiasts",
                "parent_id": "1",
                "level": 1,
                "is_active": True,
                "sort_order": 1,
                "translations": {
                    "he": {"name": "ציוד טקטי", "description": "ציוד טקטי מקצועי לצבא, אכיפת חוק וחובבים"},
                },
                "children": [
                    _leaf("1-1-1", "Bags & Packs", "bags-packs", "1-1", 1),
                    _leaf("1-1-2", "Belts & Holsters", "belts-holsters", "1-1", 2),
                    _leaf("1-1-3", "Tactical Vests", "tactical-vests", "1-1", 3,
                          {"he": {"name": "אפודים טקטיים"}}),
                ],
            },
            {
                "id": "1-2",
                "name": "Outdoor Equipment",
                "slug": TACTICAL_CATEGORIES["OUTDOOR_EQUIPMENT"],
                "description": "Premium outdoor gear for hiking, camping, and survival",
                "parent_id": "1",
                "level": 1,
                "is_active": True,
                "sort_order": 2,
                "translations": {
                    "he": {"name": "ציוד לשטח", "description": "ציוד חוץ פרימיום לטיולים, מחנאות והישרדות"},
                },
                "children": [
                    _leaf("1-2-1", "Camping Gear", "camping-gear", "1-2", 1,
                          {"he": {"name": "ציוד מחנאות"}}),
                    _leaf("1-2-2", "Hiking Equipment", "hiking-equipment", "1-2", 2,
                          {"he": {"name": "ציוד טיולים"}}),
                    _leaf("1-2-3", "Outdoor Cooking", "outdoor-cooking", "1-2", 3),
                ],
            },
            {
                "id": "1-3",
                "name": "Survival Tools",
                "slug": TACTICAL_CATEGORIES["SURVIVAL_TOOLS"],
                "parent_id": "1",
                "level": 1,
                "is_active": True,
                "sort_order": 3,
                "translations": {
                    "he": {"name": "כלי הישרדות"},
                },
                "children": [
                    _leaf("1-3-1", "Multi-tools", "multi-tools", "1-3", 1),
                    _leaf("1-3-2", "Survival Kits", "survival-kits", "1-3", 2),
                    _leaf("1-3-3", "Emergency Supplies", "emergency-supplies", "1-3", 3),
                ],
            },
        ],
    },
    {
        "id": "2",
        "name": "Home Accessories",
        "slug": "home-accessories",
        "description": "Stylish and functional accessories for your home",
        "level": 0,
        "is_active": True,
        "sort_order": 2,
        "children": [
            {
                "id": "2-1",
                "name": "Living Room",
                "slug": HOME_CATEGORIES["LIVING_ROOM"],
                "parent_id": "2",
                "level": 1,
                "is_active": True,
                "sort_order": 1,
                "children": [
                    _leaf("2-1-1", "Throw Pillows", "throw-pillows", "2-1", 1),
                    _leaf("2-1-2", "Blankets & Throws", "blankets-throws", "2-1", 2),
                    _leaf("2-1-3", "Wall Decor", "wall-decor", "2-1", 3),
                ],
            },
            {
                "id": "2-2",
                "name": "Kitchen",
                "slug": HOME_CATEGORIES["KITCHEN"],
                "parent_id": "2",
                "level": 1,
                "is_active": True,
                "sort_order": 2,
                "children": [
                    _leaf("2-2-1", "Cookware", "cookware", "2-2", 1),
                    _leaf("2-2-2", "Utensils", "utensils", "2-2", 2),
                    _leaf("2-2-3", "Storage Solutions", "kitchen-storage", "2-2", 3),
                ],
            },
            {
                "id": "2-3",
                "name": "Decor",
                "slug": HOME_CATEGORIES["DECOR"],
                "parent_id": "2",
                "level": 1,
                "is_active": True,
                "sort_order": 3,
                "children": [
                    _leaf("2-3-1", "Vases", "vases", "2-3", 1),
                    _leaf("2-3-2", "Candles & Holders", "candles-holders", "2-3", 2),
                    _leaf("2-3-3", "Decorative Objects", "decorative-objects", "2-3", 3),
                ],
            },
        ],
    },
]
