def test_register_buyer_and_login(client):
    r = client.post("/api/auth/register", json={"name": "Nina", "email": "Nina@Example.com", "password": "hunter22"})
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Account created successfully"
    assert body["user"]["role"] == "buyer"
    assert body["user"]["email"] == "nina@example.com"
    assert "passwordHash" not in body["user"]
    assert body["token"]

    r = client.post("/api/auth/login", json={"email": "nina@example.com", "password": "hunter22"})
    assert r.status_code == 200
    token = r.json()["token"]

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["name"] == "Nina"


def test_register_seller_starts_unapproved(client):
    r = client.post("/api/auth/register", json={
        "name": "Sid", "email": "sid@example.com", "password": "hunter22",
        "role": "seller", "companyName": "Sid Exports",
    })
    assert r.status_code == 201
    assert r.json()["message"] == "Seller account created. Awaiting admin approval."
    assert r.json()["user"]["isApproved"] is False
    assert r.json()["user"]["companyName"] == "Sid Exports"


def test_admin_role_cannot_be_self_registered(client):
    r = client.post("/api/auth/register", json={
        "name": "Eve", "email": "eve@example.com", "password": "hunter22", "role": "admin",
    })
    assert r.json()["user"]["role"] == "buyer"


def test_register_validation(client, buyer):
    r = client.post("/api/auth/register", json={"name": "Dup", "email": buyer.email, "password": "hunter22"})
    assert r.status_code == 400
    assert r.json()["detail"] == "An account with this email already exists"

    r = client.post("/api/auth/register", json={"name": "Short", "email": "s@example.com", "password": "123"})
    assert r.status_code == 400
    r = client.post("/api/auth/register", json={"name": "Bad", "email": "not-an-email", "password": "hunter22"})
    assert r.status_code == 400


def test_login_failures(client, buyer):
    r = client.post("/api/auth/login", json={"email": buyer.email, "password": "wrong-pass"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid email or password"
    r = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert r.status_code == 401


def test_bad_tokens_are_rejected(client, buyer, auth):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer abc.def.ghi"}).status_code == 401

    token = auth(buyer)["Authorization"]
    tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")
    assert client.get("/api/auth/me", headers={"Authorization": tampered}).status_code == 401


def test_profile_fields_depend_on_role(client, auth, buyer, seller):
    r = client.put("/api/auth/profile", json={"phone": "+91 11111", "companyName": "Sneaky"}, headers=auth(buyer))
    assert r.status_code == 200
    assert r.json()["phone"] == "+91 11111"
    assert r.json()["companyName"] is None

    r = client.put("/api/auth/profile", json={"gstNumber": "29ABCDE1234F1Z5", "role": "admin"},
                   headers=auth(seller))
    assert r.json()["gstNumber"] == "29ABCDE1234F1Z5"
    assert r.json()["role"] == "seller"


def test_change_password(client, auth, buyer):
    r = client.put("/api/auth/change-password", json={"currentPassword": "nope-nope", "newPassword": "brandnew1"},
                   headers=auth(buyer))
    assert r.status_code == 401

    r = client.put("/api/auth/change-password", json={"currentPassword": "secret123"}, headers=auth(buyer))
    assert r.status_code == 400

    r = client.put("/api/auth/change-password", json={"currentPassword": "secret123", "newPassword": "brandnew1"},
                   headers=auth(buyer))
    assert r.status_code == 200
    assert r.json()["token"]

    r = client.post("/api/auth/login", json={"email": buyer.email, "password": "brandnew1"})
    assert r.status_code == 200


def test_public_user_profile(client, seller):
    r = client.get(f"/api/users/{seller.id}")
    assert r.status_code == 200
    assert r.json()["companyName"] == "Sam Steel Co"
    assert "email" not in r.json()
    assert "isApproved" not in r.json()
    assert client.get("/api/users/9999").status_code == 404
