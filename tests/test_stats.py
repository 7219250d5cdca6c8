"""Tests for the stats endpoint and the end-to-end inventory workflow."""
from helpers import create_category, create_supplier, create_product


def test_stats_empty(auth_client):
    """Test stats on an empty inventory."""
    response = auth_client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalProducts": 0,
        "totalCategories": 0,
        "totalSuppliers": 0,
        "lowStockProducts": 0,
        "totalStockValue": 0
    }


def test_stats_totals(auth_client):
    """Test counts and stock value are computed from current data."""
    category = create_category(auth_client)
    supplier = create_supplier(auth_client)
    create_supplier(auth_client, "Globex")
    create_product(auth_client, category["id"], supplier["id"], "Hammer", 3, 9.99)
    create_product(auth_client, category["id"], supplier["id"], "Drill", 10, 49.50)
    create_product(auth_client, category["id"], supplier["id"], "Nails", 0, 0.05)

    stats = auth_client.get("/api/stats").json()

    assert stats["totalProducts"] == 3
    assert stats["totalCategories"] == 1
    assert stats["totalSuppliers"] == 2
    assert stats["lowStockProducts"] == 2
    assert stats["totalStockValue"] == 524.97


def test_stats_recomputed_after_delete(auth_client):
    """Test stats reflect deletions immediately."""
    category = create_category(auth_client)
    supplier = create_supplier(auth_client)
    product = create_product(auth_client, category["id"], supplier["id"], "Hammer", 2, 5.00)

    assert auth_client.get("/api/stats").json()["totalStockValue"] == 10.0

    auth_client.delete(f"/api/products/{product['id']}")
    stats = auth_client.get("/api/stats").json()
    assert stats["totalProducts"] == 0
    assert stats["totalStockValue"] == 0


def test_hammer_workflow(auth_client):
    """Test the full category/product lifecycle with the referential guard."""
    tools = create_category(auth_client, "Tools", "Hand tools")
    supplier = create_supplier(auth_client)
    hammer = create_product(auth_client, tools["id"], supplier["id"], "Hammer", 3, 9.99)

    low_stock = auth_client.get("/api/products?lowStock=true").json()
    assert "Hammer" in [p["product_name"] for p in low_stock]

    assert auth_client.delete(f"/api/categories/{tools['id']}").status_code == 400

    assert auth_client.delete(f"/api/products/{hammer['id']}").status_code == 200
    assert auth_client.delete(f"/api/categories/{tools['id']}").status_code == 200
