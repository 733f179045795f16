def test_admin_routes_reject_other_roles(client, auth, buyer, seller):
    assert client.get("/api/admin/analytics").status_code == 401
    for actor in (buyer, seller):
        r = client.get("/api/admin/analytics", headers=auth(actor))
        assert r.status_code == 403
        assert r.json()["detail"] == f"User role '{actor.role}' is not authorized to access this route"


def test_approve_seller(client, db, auth, admin, make_user):
    pending = make_user("seller", is_approved=False)

    r = client.put(f"/api/admin/users/{pending.id}/approve", json={"approved": True}, headers=auth(admin))
    assert r.status_code == 200
    assert r.json()["message"] == "Seller approved successfully"
    assert r.json()["data"]["isApproved"] is True

    r = client.put(f"/api/admin/users/{pending.id}/approve", json={"approved": False}, headers=auth(admin))
    assert r.json()["message"] == "Seller approval revoked"
    db.refresh(pending)
    assert pending.is_approved is False


def test_approve_seller_rejects_non_sellers_and_bad_input(client, auth, admin, buyer):
    r = client.put(f"/api/admin/users/{buyer.id}/approve", json={"approved": True}, headers=auth(admin))
    assert r.status_code == 400
    assert r.json()["detail"] == "User is not a seller"

    assert client.put("/api/admin/users/9999/approve", json={"approved": True},
                      headers=auth(admin)).status_code == 404
    assert client.put(f"/api/admin/users/{buyer.id}/approve", json={},
                      headers=auth(admin)).status_code == 400


def test_seller_approval_unlocks_product_creation(client, auth, admin, make_user, category):
    pending = make_user("seller", is_approved=False)
    body = {"name": "Widget", "description": "A widget", "categoryId": category.id, "priceMin": 10}

    assert client.post("/api/products", json=body, headers=auth(pending)).status_code == 403
    client.put(f"/api/admin/users/{pending.id}/approve", json={"approved": True}, headers=auth(admin))
    assert client.post("/api/products", json=body, headers=auth(pending)).status_code == 201


def test_toggle_active_and_login_gate(client, auth, admin, make_user):
    seller = make_user("seller", email="gate@example.com")
    headers = auth(seller)

    r = client.put(f"/api/admin/users/{seller.id}/toggle-active", headers=auth(admin))
    assert r.status_code == 200
    assert r.json()["message"] == "User deactivated"
    assert r.json()["data"]["isActive"] is False

    # the existing token stops working and so does logging in again
    assert client.get("/api/auth/me", headers=headers).status_code == 401
    r = client.post("/api/auth/login", json={"email": "gate@example.com", "password": "secret123"})
    assert r.status_code == 401

    r = client.put(f"/api/admin/users/{seller.id}/toggle-active", headers=auth(admin))
    assert r.json()["message"] == "User activated"
    assert client.get("/api/auth/me", headers=headers).status_code == 200


def test_admin_accounts_cannot_be_deactivated(client, auth, admin, make_user):
    other_admin = make_user("admin")
    r = client.put(f"/api/admin/users/{other_admin.id}/toggle-active", headers=auth(admin))
    assert r.status_code == 400
    assert r.json()["detail"] == "Cannot deactivate admin accounts"


def test_reject_product_also_deactivates(client, auth, admin, product):
    r = client.put(f"/api/admin/products/{product.id}/approve", json={"approved": False}, headers=auth(admin))
    assert r.status_code == 200
    assert r.json()["message"] == "Product rejected"
    assert r.json()["data"]["isApproved"] is False
    assert r.json()["data"]["isActive"] is False
    assert client.get("/api/products").json()["data"] == []

    assert client.put("/api/admin/products/9999/approve", json={"approved": True},
                      headers=auth(admin)).status_code == 404


def test_feature_toggle_and_admin_delete(client, db, auth, admin, product):
    r = client.put(f"/api/admin/products/{product.id}/feature", headers=auth(admin))
    assert r.json()["data"]["isFeatured"] is True
    r = client.put(f"/api/admin/products/{product.id}/feature", headers=auth(admin))
    assert r.json()["data"]["isFeatured"] is False

    assert client.delete(f"/api/admin/products/{product.id}", headers=auth(admin)).status_code == 200
    assert client.delete(f"/api/admin/products/{product.id}", headers=auth(admin)).status_code == 404


def test_moderation_lists(client, auth, admin, make_user, make_product, seller, category):
    make_user("seller", is_approved=False, company_name="Pending Plastics")
    draft = make_product(seller, category, name="Draft Item", is_approved=False, is_active=False)
    make_product(seller, category, name="Live Item")

    r = client.get("/api/admin/users", params={"role": "seller", "approved": "false"}, headers=auth(admin))
    assert [u["companyName"] for u in r.json()["data"]] == ["Pending Plastics"]

    r = client.get("/api/admin/users", params={"search": "plastics"}, headers=auth(admin))
    assert r.json()["pagination"]["total"] == 1

    r = client.get("/api/admin/products", params={"status": "pending"}, headers=auth(admin))
    assert [p["id"] for p in r.json()["data"]] == [draft.id]
    assert r.json()["data"][0]["seller"]["name"] == seller.name

    r = client.get("/api/admin/products", params={"status": "inactive"}, headers=auth(admin))
    assert [p["id"] for p in r.json()["data"]] == [draft.id]


def test_analytics_counts(client, auth, admin, buyer, make_user, make_product, seller, category):
    make_user("seller", is_approved=False)
    make_product(seller, category, name="Live")
    make_product(seller, category, name="Pending", is_approved=False)

    r = client.post("/api/inquiries", json={"productId": 1, "subject": "s", "message": "m"},
                    headers=auth(buyer))
    assert r.status_code == 201

    data = client.get("/api/admin/analytics", headers=auth(admin)).json()
    assert data["users"] == {"totalBuyers": 1, "totalSellers": 2, "pendingSellers": 1, "recentSignups": 4}
    assert data["products"] == {"total": 2, "pending": 1, "active": 1, "recentlyAdded": 2}
    assert data["inquiries"] == {"total": 1, "pending": 1, "recentInquiries": 1}
    assert data["categories"] == 1
