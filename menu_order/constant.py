"""Editable static menu configuration."""

from __future__ import annotations

SECTION_TITLES: dict[str, str] = {
    "appetizers": "Appetizers",
    "tacos": "Tacos",
    "burritos": "Burritos",
    "platters": "Platters",
    "desserts": "Desserts",
    "drinks": "Drinks",
}

# Canonical item values consumed by menu_order.data (which wraps these into MenuItem instances).
# Prices are strings so they convert to Decimal without float noise.
ITEM_META_BY_ID: dict[str, dict[str, str]] = {
    "chips_salsa": {
        "name": "Chips & Salsa",
        "price": "4.50",
        "category": "Appetizer",
        "description": "Warm corn tortilla chips with house roasted tomato salsa.",
    },
    "guacamole": {
        "name": "Fresh Guacamole",
        "price": "8.95",
        "category": "Appetizer",
        "description": "Avocado mashed tableside with lime, onion, cilantro and serrano.",
    },
    "queso_fundido": {
        "name": "Queso Fundido",
        "price": "9.50",
        "category": "Appetizer",
        "description": "Melted Chihuahua cheese with chorizo, served with flour tortillas.",
    },
    "chicken_taco": {
        "name": "Chicken Taco",
        "price": "10.00",
        "category": "Taco",
        "description": "Grilled chicken, pico de gallo and crema on a corn tortilla.",
    },
    "carnitas_taco": {
        "name": "Carnitas Taco",
        "price": "10.50",
        "category": "Taco",
        "description": "Slow braised pork, pickled onion and salsa verde.",
    },
    "fish_taco": {
        "name": "Baja Fish Taco",
        "price": "11.25",
        "category": "Taco",
        "description": "Beer battered cod, cabbage slaw and chipotle mayo.",
    },
    "veggie_taco": {
        "name": "Roasted Veggie Taco",
        "price": "9.25",
        "category": "Taco",
        "description": "Roasted squash, poblano rajas and queso fresco.",
    },
    "burrito": {
        "name": "Burrito",
        "price": "12.95",
        "category": "Burrito",
        "description": "Flour tortilla with rice, beans, cheese and your choice of meat.",
    },
    "california_burrito": {
        "name": "California Burrito",
        "price": "13.95",
        "category": "Burrito",
        "description": "Carne asada, french fries, cheese and sour cream.",
    },
    "enchiladas": {
        "name": "Enchiladas Verdes",
        "price": "14.50",
        "category": "Platter",
        "description": "Three chicken enchiladas in tomatillo sauce with rice and beans.",
    },
    "fajitas": {
        "name": "Sizzling Fajitas",
        "price": "17.95",
        "category": "Platter",
        "description": "Steak or chicken with peppers and onions, served with tortillas.",
    },
    "chile_relleno": {
        "name": "Chile Relleno",
        "price": "13.50",
        "category": "Platter",
        "description": "Cheese stuffed poblano pepper, ranchero sauce, rice and beans.",
    },
    "churros": {
        "name": "Churros",
        "price": "5.50",
        "category": "Dessert",
        "description": "Cinnamon sugar churros with chocolate dipping sauce.",
    },
    "flan": {
        "name": "Flan",
        "price": "5.95",
        "category": "Dessert",
        "description": "Vanilla custard with caramel sauce.",
    },
    "horchata": {
        "name": "Horchata",
        "price": "3.50",
        "category": "Drink",
        "description": "Sweet rice and cinnamon drink.",
    },
    "jarritos": {
        "name": "Jarritos",
        "price": "2.95",
        "category": "Drink",
        "description": "Mexican soda: mandarin, tamarind or lime.",
    },
}

MENU_ITEM_IDS_BY_SECTION: dict[str, list[str]] = {
    "appetizers": ["chips_salsa", "guacamole", "queso_fundido"],
    "tacos": ["chicken_taco", "carnitas_taco", "fish_taco", "veggie_taco"],
    "burritos": ["burrito", "california_burrito"],
    "platters": ["enchiladas", "fajitas", "chile_relleno"],
    "desserts": ["churros", "flan"],
    "drinks": ["horchata", "jarritos"],
}

CATEGORY_BADGE_STYLES: dict[str, str] = {
    "Appetizer": "bold #0b1f0f on #5fbf72",
    "Taco": "bold #ffffff on #b23a48",
    "Burrito": "bold #ffffff on #c0631c",
    "Platter": "bold #ffffff on #7a4fb5",
    "Dessert": "bold #1a1a1a on #f2a7c3",
    "Drink": "bold #ffffff on #2f6db5",
}
