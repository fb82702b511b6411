"""Tests for the HTTP API."""


def order_body(customer_info, *pairs, **extra):
    return {
        "cartItems": [{"id": pid, "quantity": qty, **extra} for pid, qty in pairs],
        "customerInfo": customer_info,
    }


class TestProductsEndpoint:

    def test_list_products(self, client):
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 5
        assert data[0] == {
            "id": "prod1",
            "name": "Wireless Headphones",
            "description": "High-quality sound with noise cancellation.",
            "price": 59.99,
            "imageUrl": "https://placehold.co/300x200/AEC6CF/333333?text=Headphones",
            "category": "Electronics",
            "stock": 10,
        }

    def test_get_product(self, client):
        response = client.get("/api/products/prod4")
        assert response.status_code == 200
        assert response.json()["name"] == "Ergonomic Office Chair"

    def test_get_unknown_product(self, client):
        response = client.get("/api/products/prod99")
        assert response.status_code == 404
        assert response.json() == {"message": "Product with ID prod99 not found."}


class TestOrderEndpoint:

    def test_place_order(self, client, customer_info):
        response = client.post("/api/order", json=order_body(customer_info, ("prod1", 3)))

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Order placed successfully!"
        order = data["order"]
        assert order["totalAmount"] == 179.97
        assert order["status"] == "Pending"
        assert order["customerInfo"] == customer_info
        assert order["items"] == [
            {"productId": "prod1", "name": "Wireless Headphones", "quantity": 3, "price": 59.99}
        ]
        assert "orderDate" in order

        stock = client.get("/api/products/prod1").json()["stock"]
        assert stock == 7

    def test_extra_cart_fields_are_ignored(self, client, customer_info):
        body = order_body(customer_info, ("prod5", 2), name="USB-C Hub", price=0.01)

        response = client.post("/api/order", json=body)

        assert response.status_code == 200
        assert response.json()["order"]["totalAmount"] == 49.98

    def test_empty_cart(self, client, product_db, customer_info):
        response = client.post("/api/order", json={"cartItems": [], "customerInfo": customer_info})

        assert response.status_code == 400
        assert response.json() == {"message": "Cart is empty. Cannot process order."}
        assert product_db.get_product("prod1").stock == 10

    def test_missing_cart_items(self, client, customer_info):
        response = client.post("/api/order", json={"customerInfo": customer_info})

        assert response.status_code == 400
        assert response.json()["message"] == "Cart is empty. Cannot process order."

    def test_missing_customer_info(self, client):
        response = client.post("/api/order", json={"cartItems": [{"id": "prod1", "quantity": 1}]})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Missing customer information: name, email, address, phone."
        )

    def test_unknown_product_with_blank_customer_field(self, client, customer_info):
        body = order_body({**customer_info, "phone": ""}, ("prod42", 1))

        response = client.post("/api/order", json=body)

        assert response.status_code == 404
        assert response.json() == {"message": "Product with ID prod42 not found."}

    def test_unknown_product(self, client, customer_info):
        response = client.post("/api/order", json=order_body(customer_info, ("prod42", 1)))

        assert response.status_code == 404
        assert "prod42" in response.json()["message"]

    def test_insufficient_stock(self, client, customer_info):
        response = client.post("/api/order", json=order_body(customer_info, ("prod1", 11)))

        assert response.status_code == 400
        assert response.json() == {
            "message": "Not enough stock for Wireless Headphones. Available: 10."
        }

    def test_zero_quantity_is_rejected(self, client, product_db, customer_info):
        response = client.post("/api/order", json=order_body(customer_info, ("prod1", 0)))

        assert response.status_code == 400
        assert "message" in response.json()
        assert product_db.get_product("prod1").stock == 10

    def test_malformed_body(self, client):
        response = client.post("/api/order", content="not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert "message" in response.json()


class TestOrdersEndpoint:

    def test_get_order(self, client, customer_info):
        placed = client.post("/api/order", json=order_body(customer_info, ("prod2", 1))).json()["order"]

        response = client.get(f"/api/orders/{placed['orderId']}")

        assert response.status_code == 200
        assert response.json() == placed

    def test_get_unknown_order(self, client):
        response = client.get("/api/orders/ORD-MISSING")
        assert response.status_code == 404
        assert response.json() == {"message": "Order with ID ORD-MISSING not found."}

    def test_list_orders(self, client, customer_info):
        client.post("/api/order", json=order_body(customer_info, ("prod2", 1)))
        client.post("/api/order", json=order_body(customer_info, ("prod1", 20)))

        response = client.get("/api/orders")

        assert response.status_code == 200
        assert len(response.json()) == 1


class TestServiceEndpoints:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy", "service": "storefront"}

    def test_unknown_route_uses_message_body(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "message" in response.json()
