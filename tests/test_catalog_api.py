from decimal import Decimal


class TestBrandsAndCategories:

    def test_brand_crud(self, client):
        r = client.post("/brands", json={"name": "Osklen", "country": "Brazil"})
        assert r.status_code == 201
        brand_id = r.json()["id"]

        assert client.post("/brands", json={"name": "Osklen"}).status_code == 409

        r = client.put(f"/brands/{brand_id}", json={"description": "Beachwear"})
        assert r.status_code == 200
        assert r.json()["description"] == "Beachwear"
        assert r.json()["country"] == "Brazil"

        assert client.delete(f"/brands/{brand_id}").status_code == 204
        assert client.get(f"/brands/{brand_id}").status_code == 404

    def test_category_rename_conflict(self, client):
        shirts = client.post("/categories", json={"name": "Shirts"}).json()
        client.post("/categories", json={"name": "Dresses"})

        r = client.put(f"/categories/{shirts['id']}", json={"name": "Dresses"})

        assert r.status_code == 409

    def test_brand_with_products_cannot_be_deleted(self, client, store):
        r = client.delete(f"/brands/{store['brand_id']}")

        assert r.status_code == 409


class TestProducts:

    def test_create_requires_existing_brand_and_category(self, client, store):
        r = client.post(
            "/products",
            json={
                "name": "Polo",
                "price": "49.90",
                "category_id": store["category_id"],
                "brand_id": 9999,
            },
        )

        assert r.status_code == 404
        assert "Brand" in r.json()["detail"]

    def test_create_and_filter(self, client, store):
        r = client.post(
            "/products",
            json={
                "name": "Slim Fit",
                "size": "40",
                "color": "Grey",
                "price": "119.90",
                "category_id": store["category_id"],
                "brand_id": store["brand_id"],
            },
        )
        assert r.status_code == 201
        assert Decimal(str(r.json()["price"])) == Decimal("119.90")

        by_brand = client.get(f"/products/brand/{store['brand_id']}").json()
        by_category = client.get(f"/products/category/{store['category_id']}").json()
        assert len(by_brand) == 3
        assert len(by_category) == 3

    def test_non_positive_price_rejected(self, client, store):
        r = client.post(
            "/products",
            json={
                "name": "Free Socks",
                "price": "0",
                "category_id": store["category_id"],
                "brand_id": store["brand_id"],
            },
        )

        assert r.status_code == 422

    def test_update_price(self, client, store):
        r = client.put(f"/products/{store['jeans_id']}", json={"price": "34.99"})

        assert r.status_code == 200
        assert Decimal(str(r.json()["price"])) == Decimal("34.99")
        assert r.json()["name"] == "501 Original"

    def test_sold_product_cannot_be_deleted(self, client, store, past_date):
        client.post(
            "/sales",
            json={
                "customer_id": store["customer_id"],
                "employee_id": store["employee_id"],
                "sale_date": past_date.isoformat(),
                "payment_method": "CREDIT_CARD",
                "items": [{"product_id": store["jeans_id"], "quantity": 1, "unit_price": "29.99"}],
            },
        )

        assert client.delete(f"/products/{store['jeans_id']}").status_code == 409
        assert client.delete(f"/products/{store['jacket_id']}").status_code == 204


class TestPeople:

    def test_customer_cpf_is_unique(self, client, store):
        r = client.post(
            "/customers",
            json={"name": "Other", "cpf": "123.456.789-09", "email": "other@example.com"},
        )

        assert r.status_code == 409

    def test_customer_lookup_by_cpf(self, client, store):
        r = client.get("/customers/cpf/123.456.789-09")

        assert r.status_code == 200
        assert r.json()["id"] == store["customer_id"]
        assert client.get("/customers/cpf/000.000.000-00").status_code == 404

    def test_customer_invalid_email(self, client):
        r = client.post(
            "/customers",
            json={"name": "Bad", "cpf": "98765432100", "email": "not-an-email"},
        )

        assert r.status_code == 422

    def test_customer_with_sales_cannot_be_deleted(self, client, store, past_date):
        client.post(
            "/sales",
            json={
                "customer_id": store["customer_id"],
                "employee_id": store["employee_id"],
                "sale_date": past_date.isoformat(),
                "payment_method": "BANK_SLIP",
                "items": [{"product_id": store["jacket_id"], "quantity": 1, "unit_price": "89.90"}],
            },
        )

        assert client.delete(f"/customers/{store['customer_id']}").status_code == 409
        assert client.delete(f"/employees/{store['employee_id']}").status_code == 409

    def test_employee_role_search(self, client, store):
        client.post("/employees", json={"name": "Bia", "role": "Store Manager"})

        r = client.get("/employees/role/sales")

        assert r.status_code == 200
        assert [e["id"] for e in r.json()] == [store["employee_id"]]

    def test_employee_update_and_delete(self, client):
        employee = client.post("/employees", json={"name": "Rui"}).json()

        r = client.put(f"/employees/{employee['id']}", json={"hire_date": "2024-01-15"})
        assert r.status_code == 200
        assert r.json()["hire_date"] == "2024-01-15"

        assert client.delete(f"/employees/{employee['id']}").status_code == 204


class TestSuppliers:

    def test_supplier_crud(self, client):
        payload = {"name": "Textil Sul", "cnpj": "12.345.678/0001-90", "email": "vendas@textilsul.example.com"}

        r = client.post("/suppliers", json=payload)
        assert r.status_code == 201
        supplier_id = r.json()["id"]

        assert client.post("/suppliers", json=payload).status_code == 409
        assert client.get("/suppliers/cnpj/12.345.678/0001-90").json()["id"] == supplier_id
        assert client.get(f"/suppliers/{supplier_id}").json()["name"] == "Textil Sul"

        r = client.put(f"/suppliers/{supplier_id}", json={"phone": "5133334444"})
        assert r.json()["phone"] == "5133334444"

        assert client.delete(f"/suppliers/{supplier_id}").status_code == 204
        assert client.get("/suppliers").json() == []
