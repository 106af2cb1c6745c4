from conftest import register_and_login


def create(client, headers, name, expiration_date):
    return client.post(
        "/products",
        json={"productName": name, "expirationDate": expiration_date},
        headers=headers,
    )


def test_products_crud_flow(client):
    headers = register_and_login(client)

    res = create(client, headers, "Milk", "2999-01-01")
    assert res.status_code == 201, res.text
    milk = res.json()
    assert milk["productName"] == "Milk"
    assert milk["expirationDate"] == "2999-01-01"
    assert isinstance(milk["ownerId"], int)

    # get
    res = client.get(f"/products/{milk['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json() == milk

    # update name only
    res = client.put(f"/products/{milk['id']}", json={"productName": "Oat milk"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["productName"] == "Oat milk"
    assert res.json()["expirationDate"] == "2999-01-01"

    # delete
    res = client.delete(f"/products/{milk['id']}", headers=headers)
    assert res.status_code == 204
    assert client.get(f"/products/{milk['id']}", headers=headers).status_code == 404
    assert client.delete(f"/products/{milk['id']}", headers=headers).status_code == 404


def test_create_validation_errors_are_400(client):
    headers = register_and_login(client)
    assert create(client, headers, "Mi", "2999-01-01").status_code == 400
    assert create(client, headers, "Milk", "2000-01-01").status_code == 400
    assert create(client, headers, "Milk", "someday").status_code == 400
    res = client.post("/products", json={"productName": "Milk"}, headers=headers)
    assert res.status_code == 400
    assert "message" in res.json()


def test_list_is_sorted_and_owner_scoped(client):
    alice = register_and_login(client, "alice@example.com")
    bob = register_and_login(client, "bob@example.com")

    assert client.get("/products", headers=bob).json() == []

    create(client, alice, "Yogurt", "2999-03-01")
    create(client, alice, "Cheese", "2999-01-01")
    create(client, bob, "Eggs", "2999-02-01")

    res = client.get("/products", headers=alice)
    assert res.status_code == 200
    assert [p["productName"] for p in res.json()] == ["Cheese", "Yogurt"]
    assert [p["productName"] for p in client.get("/products", headers=bob).json()] == ["Eggs"]


def test_cross_owner_access_looks_like_not_found(client):
    alice = register_and_login(client, "alice@example.com")
    bob = register_and_login(client, "bob@example.com")
    milk = create(client, alice, "Milk", "2999-01-01").json()

    assert client.get(f"/products/{milk['id']}", headers=bob).status_code == 404
    assert client.put(f"/products/{milk['id']}", json={"productName": "Mine"}, headers=bob).status_code == 404
    assert client.delete(f"/products/{milk['id']}", headers=bob).status_code == 404
    assert client.get(f"/products/{milk['id']}", headers=alice).json()["productName"] == "Milk"


def test_bad_ids_and_bad_patches(client):
    headers = register_and_login(client)
    milk = create(client, headers, "Milk", "2999-01-01").json()

    assert client.get("/products/abc", headers=headers).status_code == 400
    assert client.put("/products/abc", json={"productName": "Milk"}, headers=headers).status_code == 400
    assert client.delete("/products/abc", headers=headers).status_code == 400

    res = client.put(f"/products/{milk['id']}", json={"productName": "   "}, headers=headers)
    assert res.status_code == 400
    res = client.put(f"/products/{milk['id']}", json={"expirationDate": "2000-01-01"}, headers=headers)
    assert res.status_code == 400

    # only productName and expirationDate are updatable
    res = client.put(f"/products/{milk['id']}", json={"ownerId": 999}, headers=headers)
    assert res.status_code == 422

    assert client.get(f"/products/{milk['id']}", headers=headers).json() == milk


def test_root_endpoint(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["health"] == "/health"


def test_every_product_route_requires_a_token(client):
    assert client.post("/products", json={"productName": "Milk", "expirationDate": "2999-01-01"}).status_code == 401
    assert client.get("/products").status_code == 401
    assert client.get("/products/1").status_code == 401
    assert client.put("/products/1", json={"productName": "Milk"}).status_code == 401
    assert client.delete("/products/1").status_code == 401
