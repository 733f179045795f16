# backend/create_demo_data.py
"""
Seed a development database with one account per role, a few categories and
some products. Does nothing when users already exist.
"""

import logging

from database.session import SessionLocal, init_db
from models import Category, Product, User
from services.security import hash_password
from services.slugs import product_slug, slugify

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("create_demo_data")

DEMO_PASSWORD = "password123"

CATEGORIES = [
    ("Industrial Machinery", "Machines and spare parts", "gear", 1),
    ("Textiles & Fabrics", "Yarn, fabric and garments", "shirt", 2),
    ("Packaging Materials", "Boxes, films and labels", "box", 3),
]


def create_demo_data():
    init_db()
    db = SessionLocal()

    try:
        if db.query(User).first():
            logger.info("Demo data already present")
            return

        admin = User(name="Site Admin", email="admin@example.com", role="admin",
                     password_hash=hash_password(DEMO_PASSWORD), is_approved=True)
        seller = User(name="Ravi Kumar", email="seller@example.com", role="seller",
                      password_hash=hash_password(DEMO_PASSWORD), is_approved=True,
                      company_name="Kumar Industries", company_address="Plot 12, MIDC, Pune",
                      gst_number="27ABCDE1234F1Z5", established_year=2004,
                      employee_count="51-200", annual_turnover="10-25 Cr")
        pending = User(name="Anita Shah", email="pending@example.com", role="seller",
                       password_hash=hash_password(DEMO_PASSWORD), is_approved=False,
                       company_name="Shah Packaging")
        buyer = User(name="John Buyer", email="buyer@example.com", role="buyer",
                     password_hash=hash_password(DEMO_PASSWORD), phone="+91 98200 00000")
        db.add_all([admin, seller, pending, buyer])
        db.flush()

        cats = []
        for name, description, icon, order in CATEGORIES:
            c = Category(name=name, slug=slugify(name), description=description, icon=icon, sort_order=order)
            db.add(c)
            cats.append(c)
        db.flush()

        products = [
            Product(name="CNC Lathe Machine", description="Heavy duty CNC lathe, 3 axis.",
                    category_id=cats[0].id, seller_id=seller.id, price_min=450000, price_max=650000,
                    price_unit="per piece", moq=1, moq_unit="pieces",
                    specifications=[{"key": "Power", "value": "7.5 kW"}], tags=["cnc", "lathe"],
                    is_approved=True, is_featured=True),
            Product(name="Cotton Yarn 40s", description="Combed cotton yarn for weaving.",
                    category_id=cats[1].id, seller_id=seller.id, price_min=240, price_max=260,
                    price_unit="per kg", moq=500, moq_unit="kg", tags=["cotton", "yarn"],
                    is_approved=True),
            Product(name="Corrugated Boxes", description="5 ply corrugated shipping boxes.",
                    category_id=cats[2].id, seller_id=seller.id, price_min=18,
                    price_unit="per piece", moq=1000, moq_unit="pieces", tags=["boxes"],
                    is_approved=False),
        ]
        for p in products:
            p.slug = product_slug(p.name)
            db.add(p)

        db.commit()
        logger.info(f"Created 4 users, {len(cats)} categories and {len(products)} products "
                    f"(password for every account: {DEMO_PASSWORD})")

    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    create_demo_data()
