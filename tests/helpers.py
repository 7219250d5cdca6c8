"""Request helpers shared by the API tests."""


def create_category(client, name="Tools", description="Hand and power tools"):
    response = client.post(
        "/api/categories",
        json={"categoryName": name, "description": description}
    )
    assert response.status_code == 201, response.json()
    return response.json()


def create_supplier(client, name="Acme Corp", email="sales@acme.test", phone="+1-555-0100"):
    response = client.post(
        "/api/suppliers",
        json={"supplierName": name, "contactEmail": email, "phoneNumber": phone}
    )
    assert response.status_code == 201, response.json()
    return response.json()


def create_product(client, category_id, supplier_id, name="Hammer", quantity=10, price=9.99):
    response = client.post(
        "/api/products",
        json={
            "productName": name,
            "categoryId": category_id,
            "supplierId": supplier_id,
            "quantity": quantity,
            "price": price
        }
    )
    assert response.status_code == 201, response.json()
    return response.json()
