"""Editable static menu, customization and store copy."""

from __future__ import annotations

# Category order here is display order; the first entry is the default tab.
MENU_CATEGORY_ORDER: list[str] = [
    "Coffee",
    "Tea",
    "Pastries",
    "Sandwiches",
    "Smoothies",
    "Seasonal",
]

# Raw product rows consumed by kiosk.data, which wraps them into Product instances.
# Image references are relative to the asset directory.
MENU_ITEMS_BY_CATEGORY: dict[str, list[dict[str, str]]] = {
    "Coffee": [
        {"name": "Signature Espresso", "price": "3.99", "description": "Our house blend espresso - rich, bold and smooth.", "image": "coffee/espresso.jpg"},
        {"name": "Caramel Macchiato", "price": "4.99", "description": "Espresso with steamed milk, vanilla syrup and caramel drizzle.", "image": "coffee/caramel_macchiato.jpg"},
        {"name": "Mocha Fusion", "price": "5.49", "description": "Espresso with chocolate, steamed milk and whipped cream.", "image": "coffee/mocha.jpg"},
        {"name": "Cold Brew", "price": "4.49", "description": "Slow-steeped for 20 hours for a smooth, rich flavor.", "image": "coffee/cold_brew.jpg"},
        {"name": "Vanilla Latte", "price": "4.79", "description": "Espresso with steamed milk and vanilla syrup.", "image": "coffee/vanilla_latte.jpg"},
        {"name": "Americano", "price": "3.49", "description": "Espresso diluted with hot water for a rich, full-bodied flavor.", "image": "coffee/americano.jpg"},
    ],
    "Tea": [
        {"name": "Chai Tea Latte", "price": "4.29", "description": "Black tea infused with cinnamon, clove, and other spices with steamed milk.", "image": "tea/chai_latte.jpg"},
        {"name": "Matcha Green Tea", "price": "4.99", "description": "Traditional Japanese green tea powder whisked with steamed milk.", "image": "tea/matcha.jpg"},
        {"name": "Earl Grey", "price": "3.49", "description": "Black tea infused with bergamot essence.", "image": "tea/earl_grey.jpg"},
        {"name": "Herbal Infusion", "price": "3.99", "description": "Caffeine-free blend of herbs and botanicals.", "image": "tea/herbal.jpg"},
        {"name": "Jasmine Green Tea", "price": "3.79", "description": "Fragrant green tea with jasmine blossoms.", "image": "tea/jasmine.jpg"},
    ],
    "Pastries": [
        {"name": "Butter Croissant", "price": "3.29", "description": "Flaky, buttery layers make this a perfect companion to coffee.", "image": "pastries/croissant.jpg"},
        {"name": "Blueberry Muffin", "price": "3.49", "description": "Moist muffin packed with blueberries and topped with turbinado sugar.", "image": "pastries/blueberry_muffin.jpg"},
        {"name": "Cinnamon Roll", "price": "4.29", "description": "Freshly baked with cream cheese frosting.", "image": "pastries/cinnamon_roll.jpg"},
        {"name": "Chocolate Chip Cookie", "price": "2.99", "description": "Baked fresh daily with premium chocolate chips.", "image": "pastries/cookie.jpg"},
        {"name": "Almond Croissant", "price": "3.99", "description": "Buttery croissant filled with almond cream and topped with sliced almonds.", "image": "pastries/almond_croissant.jpg"},
    ],
    "Sandwiches": [
        {"name": "Avocado & Egg", "price": "6.99", "description": "Freshly sliced avocado, cage-free egg, and aged white cheddar on artisan bread.", "image": "sandwiches/avocado_egg.jpg"},
        {"name": "Turkey & Pesto", "price": "7.49", "description": "Oven-roasted turkey, provolone, pesto, and sun-dried tomatoes on ciabatta.", "image": "sandwiches/turkey_pesto.jpg"},
        {"name": "Caprese Panini", "price": "6.99", "description": "Fresh mozzarella, tomatoes, basil, and balsamic glaze on focaccia.", "image": "sandwiches/caprese.jpg"},
        {"name": "Chicken Club", "price": "7.99", "description": "Grilled chicken, bacon, lettuce, tomato, and aioli on sourdough.", "image": "sandwiches/chicken_club.jpg"},
    ],
    "Smoothies": [
        {"name": "Berry Blast", "price": "5.99", "description": "Strawberries, blueberries, raspberries, yogurt, and honey.", "image": "smoothies/berry.jpg"},
        {"name": "Green Machine", "price": "6.49", "description": "Spinach, kale, mango, banana, and almond milk.", "image": "smoothies/green.jpg"},
        {"name": "Tropical Paradise", "price": "5.99", "description": "Pineapple, mango, banana, coconut milk, and a hint of lime.", "image": "smoothies/tropical.jpg"},
        {"name": "Protein Power", "price": "6.99", "description": "Banana, peanut butter, chocolate protein, and almond milk.", "image": "smoothies/protein.jpg"},
    ],
    "Seasonal": [
        {"name": "Pumpkin Spice Latte", "price": "5.49", "description": "Espresso with pumpkin spice syrup, steamed milk, and whipped cream.", "image": "seasonal/pumpkin_spice.jpg"},
        {"name": "Peppermint Mocha", "price": "5.49", "description": "Espresso with chocolate, peppermint syrup, and whipped cream.", "image": "seasonal/peppermint_mocha.jpg"},
        {"name": "Maple Pecan Scone", "price": "3.99", "description": "Freshly baked scone with maple glaze and pecans.", "image": "seasonal/maple_scone.jpg"},
        {"name": "Gingerbread Latte", "price": "5.29", "description": "Espresso with gingerbread syrup, steamed milk, and whipped cream.", "image": "seasonal/gingerbread.jpg"},
    ],
}

# Single-choice groups: (options, default).
CUSTOMIZE_CHOICES: dict[str, tuple[list[str], str]] = {
    "size": (["Small", "Medium", "Large"], "Medium"),
    "milk": (["Whole", "2%", "Skim", "Almond", "Soy", "Oat"], "2%"),
    "sweetener": (["None", "Sugar", "Honey", "Stevia", "Sugar-Free Syrup"], "None"),
}

CUSTOMIZE_EXTRAS: list[str] = [
    "Whipped Cream",
    "Extra Shot",
    "Vanilla Syrup",
    "Caramel Drizzle",
    "Chocolate Sauce",
]

PAYMENT_METHODS: dict[str, str] = {
    "credit": "Credit Card",
    "debit": "Debit Card",
    "gift": "Gift Card",
    "cash": "Cash (Pay at Counter)",
}

CARD_PAYMENT_METHODS: frozenset[str] = frozenset({"credit", "debit"})

REWARD_TIERS: list[tuple[int, str]] = [
    (100, "$5 off your next purchase"),
    (200, "Free coffee of your choice"),
    (300, "Free pastry of your choice"),
    (500, "Free sandwich of your choice"),
    (1000, "Free catering box (6 coffees + 6 pastries)"),
]

LOYALTY_HOW_IT_WORKS: list[str] = [
    "Earn 1 point for every $1 spent",
    "Redeem points for rewards at any time",
    "Points never expire",
    "Show your loyalty card to earn and redeem points",
    "Sign up for our newsletter to earn bonus points",
]

ABOUT_STORY = (
    "Bispos Bon Appétit was founded in 2010 with a simple mission: to create a haven "
    "for coffee lovers where quality, community, and sustainability come together.\n\n"
    "What started as a small corner café has grown into a beloved local chain, "
    "but our commitment to hand-crafted beverages and personal service remains unchanged. "
    "We source our beans directly from farmers who share our values of ethical and "
    "sustainable production.\n\n"
    "Every cup of Bispos Bon Appétit coffee represents our passion for the perfect brew "
    "and our dedication to creating a warm, welcoming space for our community. "
    "We're more than just a coffee shop - we're your daily retreat, your meeting spot, "
    "and your home away from home."
)

ABOUT_VALUES: list[str] = [
    "Quality: We never compromise on the quality of our ingredients or our service.",
    "Community: We strive to create spaces where people feel welcome and connected.",
    "Sustainability: We make environmentally responsible choices in everything we do.",
    "Innovation: We continuously explore new flavors and experiences for our customers.",
    "Integrity: We operate with honesty and transparency in all our relationships.",
]

ABOUT_CONTACT: dict[str, str] = {
    "Address": "123 Coffee Lane, Brewville, BV 98765",
    "Phone": "(555) 123-4567",
    "Email": "info@brewhaven.com",
    "Website": "www.brewhaven.com",
}
