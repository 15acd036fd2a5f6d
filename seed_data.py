from decimal import Decimal
from sqlmodel import Session, select
from agrimart.db.session import engine, create_db_and_tables
from agrimart.models.product import Product, ProductCategory

SAMPLE_PRODUCTS = [
    dict(
        name="Basmati Rice Seeds",
        description="Certified long-grain basmati paddy seed with high germination rate.",
        category=ProductCategory.CROPS,
        price=Decimal("180.00"),
        unit="per kg",
        stock=500,
        image_url="https://images.pexels.com/photos/4110256/pexels-photo-4110256.jpeg"
    ),
    dict(
        name="Hybrid Wheat Seeds",
        description="Rust-resistant hybrid wheat suited to rabi sowing.",
        category=ProductCategory.CROPS,
        price=Decimal("65.00"),
        unit="per kg",
        stock=1200,
        image_url="https://images.pexels.com/photos/326082/pexels-photo-326082.jpeg"
    ),
    dict(
        name="Tomato Seeds",
        description="Determinate hybrid tomato, heat tolerant and high yielding.",
        category=ProductCategory.CROPS,
        price=Decimal("450.00"),
        unit="per 100 g",
        stock=80,
        image_url="https://images.pexels.com/photos/533280/pexels-photo-533280.jpeg"
    ),
    dict(
        name="DAP Fertilizer",
        description="Di-ammonium phosphate 18:46:0 for strong root development.",
        category=ProductCategory.FERTILIZERS,
        price=Decimal("1350.00"),
        unit="per 50 kg bag",
        stock=200,
        image_url="https://images.pexels.com/photos/2286895/pexels-photo-2286895.jpeg"
    ),
    dict(
        name="Organic Vermicompost",
        description="Earthworm compost that improves soil structure and water retention.",
        category=ProductCategory.FERTILIZERS,
        price=Decimal("12.50"),
        unit="per kg",
        stock=3000,
        image_url="https://images.pexels.com/photos/1301856/pexels-photo-1301856.jpeg"
    ),
    dict(
        name="Urea",
        description="46% nitrogen granular urea for vegetative growth.",
        category=ProductCategory.FERTILIZERS,
        price=Decimal("266.50"),
        unit="per 45 kg bag",
        stock=400,
        image_url="https://images.pexels.com/photos/2132171/pexels-photo-2132171.jpeg"
    ),
]

def seed_products():
    print("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        # Check if products already exist to avoid duplicates
        existing_products = session.exec(select(Product)).all()
        if existing_products:
            print(f"Database already contains {len(existing_products)} products. Skipping seed.")
            return

        print("Seeding initial products...")
        for data in SAMPLE_PRODUCTS:
            session.add(Product(**data))

        session.commit()
        print(f"Successfully seeded {len(SAMPLE_PRODUCTS)} products!")

if __name__ == "__main__":
    seed_products()
