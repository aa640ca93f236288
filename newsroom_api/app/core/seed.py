"""
Sample data loaded when ``SEED_DATA`` is enabled.

Articles reference the journalists and categories by the ids they
receive when inserted in this order into an empty store.
"""

SEED_JOURNALISTS = [
    {"name": "Ada Park", "email": "ada.park@newsroom.example"},
    {"name": "Tomas Reyes", "email": "tomas.reyes@newsroom.example"},
]

SEED_CATEGORIES = [
    {"name": "Politics"},
    {"name": "Technology"},
    {"name": "Sports"},
]

SEED_ARTICLES = [
    {
        "title": "City council passes budget after late session",
        "content": "The council approved next year's budget by a narrow margin.",
        "journalist_id": 1,
        "category_id": 1,
    },
    {
        "title": "Local startup ships open hardware router",
        "content": "The device runs entirely on open firmware.",
        "journalist_id": 2,
        "category_id": 2,
    },
    {
        "title": "Harbour FC wins the regional cup",
        "content": "A stoppage-time goal settled the final.",
        "journalist_id": 1,
        "category_id": 3,
    },
]
