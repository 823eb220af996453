"""
Demo catalog seeding.

Inserts a small set of categories and products when the store is empty so a
fresh deployment has something to browse.
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from sqlalchemy.orm import Session

from prodcats.models.category import Category
from prodcats.models.product import Product

logger = logging.getLogger(__name__)

# (name, description, is_active)
SEED_CATEGORIES = [
    ("Electronics", "Electronic devices and gadgets", True),
    ("Clothing", "Apparel and fashion items", True),
    ("Home & Garden", "Home improvement and garden supplies", True),
    ("Sports & Outdoors", "Sports equipment and outdoor gear", True),
    ("Books", "Books and reading materials", True),
    ("Toys - Inactive", "Toys and games", False),
]

# (category name, product name, description, price, stock, days ago)
SEED_PRODUCTS = [
    ("Electronics", "Wireless Bluetooth Headphones", "Premium noise-cancelling headphones with 30-hour battery life", "199.99", 45, 30),
    ("Electronics", "Smartphone 128GB", "Latest generation smartphone with advanced camera system", "899.99", 12, 15),
    ("Electronics", '4K Ultra HD TV 55"', "55-inch 4K smart TV with HDR support", "649.99", 8, 20),
    ("Electronics", "Laptop 16GB RAM", "High-performance laptop for work and gaming", "1299.99", 5, 10),
    ("Electronics", "Smart Watch", "Fitness tracker with heart rate monitor and GPS", "249.99", 0, 5),
    ("Clothing", "Cotton T-Shirt", "100% organic cotton t-shirt, available in multiple colors", "24.99", 150, 25),
    ("Clothing", "Denim Jeans", "Classic fit denim jeans, multiple sizes available", "79.99", 87, 22),
    ("Clothing", "Winter Jacket", "Waterproof winter jacket with insulated lining", "149.99", 23, 18),
    ("Clothing", "Running Shoes", "Lightweight running shoes with cushioned sole", "89.99", 34, 12),
    ("Home & Garden", "Garden Tool Set", "Complete set of essential gardening tools", "59.99", 28, 28),
    ("Home & Garden", "Indoor Plant Pot Set", "Set of 3 ceramic plant pots in various sizes", "34.99", 56, 14),
    ("Home & Garden", "LED String Lights", "50ft weatherproof LED string lights for outdoor use", "19.99", 92, 8),
    ("Home & Garden", "Coffee Maker", "Programmable coffee maker with thermal carafe", "79.99", 15, 16),
    ("Sports & Outdoors", "Yoga Mat", "Non-slip yoga mat with carrying strap", "29.99", 67, 19),
    ("Sports & Outdoors", "Camping Tent 4-Person", "Weather-resistant 4-person camping tent", "199.99", 11, 11),
    ("Sports & Outdoors", "Bicycle Helmet", "Safety-certified bicycle helmet with adjustable fit", "49.99", 38, 7),
    ("Sports & Outdoors", "Dumbbell Set 20lb", "Adjustable dumbbell set, 5-20 pounds per dumbbell", "129.99", 9, 13),
    ("Books", "Programming Fundamentals", "Comprehensive guide to programming concepts", "39.99", 42, 21),
    ("Books", "Mystery Novel", "Bestselling mystery thriller novel", "14.99", 78, 9),
    ("Books", "Cookbook Collection", "Set of 3 cookbooks with 500+ recipes", "49.99", 19, 6),
]


def seed_catalog(db: Session) -> bool:
    """
    Insert the demo catalog if no category exists yet.

    Returns:
        True if data was inserted, False if the store already had categories
    """
    if db.query(Category.id).first() is not None:
        logger.info("Catalog already seeded, skipping")
        return False

    categories = {
        name: Category(name=name, description=description, is_active=is_active)
        for name, description, is_active in SEED_CATEGORIES
    }
    db.add_all(categories.values())
    db.flush()

    now = datetime.now(timezone.utc)
    for category_name, name, description, price, stock, days_ago in SEED_PRODUCTS:
        db.add(
            Product(
                name=name,
                description=description,
                price=Decimal(price),
                category_id=categories[category_name].id,
                stock_quantity=stock,
                created_date=now - timedelta(days=days_ago),
                is_active=True,
            )
        )

    db.commit()
    logger.info(
        f"Seeded {len(SEED_CATEGORIES)} categories and {len(SEED_PRODUCTS)} products"
    )
    return True
