def bearer(token):
    return {"Authorization": f"Bearer {token}"}


VENDOR = {
    "name": "Pizza Palace",
    "email": "pizza@example.com",
    "password": "password123",
    "address": "123 Main Street",
    "phone": "555-0101",
}


def test_register_vendor(client):
    response = client.post("/api/vendors", json=VENDOR)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] is True
    assert body["message"] == "Vendor created successfully"
    assert "meta" not in body
    data = body["data"]
    assert "password" not in data
    assert data["name"] == "Pizza Palace"
    assert data["email"] == "pizza@example.com"
    assert data["address"] == "123 Main Street"
    assert data["phone"] == "555-0101"
    assert data["id"]
    assert data["created_at"]


def test_register_duplicate_email(client):
    assert client.post("/api/vendors", json=VENDOR).status_code == 201

    response = client.post("/api/vendors", json={**VENDOR, "name": "Copycat"})

    assert response.status_code == 409
    assert response.json() == {"status": False, "message": "Vendor already exists"}


def test_register_rejects_short_password(client):
    response = client.post("/api/vendors", json={**VENDOR, "password": "short"})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] is False
    assert body["message"].startswith("password")
    assert '"' not in body["message"]


def test_register_rejects_bad_email(client):
    response = client.post("/api/vendors", json={**VENDOR, "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("email")


def test_register_requires_body(client):
    response = client.post("/api/vendors")

    assert response.status_code == 400
    assert response.json() == {"status": False, "message": "Invalid request"}


def test_register_rejects_malformed_json(client):
    response = client.post(
        "/api/vendors",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


def test_authenticate_vendor(client, create_vendor):
    vendor, _ = create_vendor(email="pizza@example.com")

    response = client.post("/api/vendors/auth", json={"email": "pizza@example.com", "password": "password123"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token"]
    assert data["vendor"]["id"] == vendor["id"]
    assert "password" not in data["vendor"]


def test_authenticate_failures_are_indistinguishable(client, create_vendor):
    create_vendor(email="pizza@example.com")

    wrong_password = client.post("/api/vendors/auth", json={"email": "pizza@example.com", "password": "bad-password"})
    unknown_email = client.post("/api/vendors/auth", json={"email": "ghost@example.com", "password": "password123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "status": False,
        "message": "Invalid email or password",
    }


def test_list_and_get_vendors_are_public(client, create_vendor):
    first, _ = create_vendor(email="a@example.com", name="A")
    create_vendor(email="b@example.com", name="B")

    listing = client.get("/api/vendors")
    assert listing.status_code == 200
    assert [v["name"] for v in listing.json()["data"]] == ["A", "B"]
    assert all("password" not in v for v in listing.json()["data"])

    single = client.get(f"/api/vendors/{first['id']}")
    assert single.status_code == 200
    assert single.json()["data"]["email"] == "a@example.com"


def test_get_missing_vendor(client):
    response = client.get("/api/vendors/999")

    assert response.status_code == 404
    assert response.json() == {"status": False, "message": "Vendor not found"}


def test_update_own_profile(client, create_vendor):
    vendor, token = create_vendor(address="Old Street")

    response = client.put(f"/api/vendors/{vendor['id']}", json={"name": "Renamed"}, headers=bearer(token))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Renamed"
    assert data["address"] == "Old Street"
    assert "password" not in data


def test_update_requires_vendor_token(client, create_vendor, create_customer):
    vendor, _ = create_vendor()
    _, customer_token = create_customer()

    no_token = client.put(f"/api/vendors/{vendor['id']}", json={"name": "X"})
    wrong_type = client.put(f"/api/vendors/{vendor['id']}", json={"name": "X"}, headers=bearer(customer_token))

    assert no_token.status_code == 401
    assert no_token.json()["message"] == "No token provided"
    assert wrong_type.status_code == 401
    assert wrong_type.json()["message"] == "Invalid token type"


def test_update_other_vendor_forbidden(client, create_vendor):
    _, token_a = create_vendor(email="a@example.com")
    vendor_b, _ = create_vendor(email="b@example.com")

    response = client.put(f"/api/vendors/{vendor_b['id']}", json={"name": "Hijacked"}, headers=bearer(token_a))

    assert response.status_code == 403
    assert client.get(f"/api/vendors/{vendor_b['id']}").json()["data"]["name"] == "Vendor 1"


def test_update_unknown_vendor_is_404(client, create_vendor):
    _, token = create_vendor()

    response = client.put("/api/vendors/999", json={"name": "Nobody"}, headers=bearer(token))

    assert response.status_code == 404
    assert response.json()["message"] == "Vendor not found"
