import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database.session import Base, get_db
from main import app
from models import Category, Product, User
from services.security import create_token, hash_password
from services.slugs import product_slug, slugify

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

PASSWORD = "secret123"
_PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def _get_db():
        s = TestingSessionLocal()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db):
    counter = itertools.count(1)

    def _make(role="buyer", is_approved=True, is_active=True, **fields):
        n = next(counter)
        u = User(
            name=fields.pop("name", f"{role.title()} {n}"),
            email=fields.pop("email", f"{role}{n}@example.com"),
            role=role,
            password_hash=_PASSWORD_HASH,
            is_approved=is_approved,
            is_active=is_active,
            **fields,
        )
        db.add(u)
        db.commit()
        db.refresh(u)
        return u

    return _make


@pytest.fixture()
def make_category(db):
    def _make(name="Industrial Machinery", **fields):
        c = Category(name=name, slug=slugify(name), **fields)
        db.add(c)
        db.commit()
        db.refresh(c)
        return c

    return _make


@pytest.fixture()
def make_product(db):
    def _make(seller, category, name="Steel Pipe", is_approved=True, is_active=True, **fields):
        p = Product(
            name=name,
            slug=product_slug(name),
            description=fields.pop("description", f"{name} description"),
            category_id=category.id,
            seller_id=seller.id,
            price_min=fields.pop("price_min", 100.0),
            price_max=fields.pop("price_max", 150.0),
            is_approved=is_approved,
            is_active=is_active,
            **fields,
        )
        db.add(p)
        db.commit()
        db.refresh(p)
        return p

    return _make


@pytest.fixture()
def auth():
    def _headers(user):
        return {"Authorization": f"Bearer {create_token(user.id, user.role)}"}

    return _headers


@pytest.fixture()
def buyer(make_user):
    return make_user("buyer", name="Bob Buyer")


@pytest.fixture()
def seller(make_user):
    return make_user("seller", name="Sam Seller", company_name="Sam Steel Co")


@pytest.fixture()
def admin(make_user):
    return make_user("admin", name="Ada Admin")


@pytest.fixture()
def category(make_category):
    return make_category()


@pytest.fixture()
def product(make_product, seller, category):
    return make_product(seller, category)
