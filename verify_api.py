import requests
import json

BASE_URL = "http://localhost:8000/api/v1"

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    print("\n")

def run_verification():
    # The session cookie set on the first request keeps the cart across calls
    client = requests.Session()

    # 1. List Products
    print("1. Listing Products...")
    resp = client.get(f"{BASE_URL}/products/")
    print_response("List Products", resp)
    products = resp.json()
    if not products:
        print("No products found, run seed_data.py first.")
        return

    # 2. Filter by category
    print("2. Listing Fertilizers...")
    resp = client.get(f"{BASE_URL}/products/", params={"category": "fertilizers"})
    print_response("Fertilizers", resp)

    # 3. Add to cart twice (second add increments)
    print("3. Adding to cart...")
    product_id = products[0]["id"]
    client.post(f"{BASE_URL}/cart/add", json={"product_id": product_id, "quantity": 2})
    resp = client.post(f"{BASE_URL}/cart/add", json={"product_id": product_id, "quantity": 1})
    print_response("Cart after adds", resp)
    line_id = resp.json()["lines"][0]["id"]

    # 4. Decrement below one (clamped)
    print("4. Setting quantity to 0 (expect 1)...")
    resp = client.put(f"{BASE_URL}/cart/lines/{line_id}", json={"quantity": 0})
    print_response("Cart after clamp", resp)

    # 5. Checkout
    print("5. Placing order...")
    resp = client.post(f"{BASE_URL}/orders/", json={
        "customer_name": "Ramesh Patel",
        "customer_email": "ramesh@example.com",
        "shipping_address": "Village Khed, Pune district, Maharashtra 412105",
        "phone": "9876543210"
    })
    print_response("Place Order", resp)
    if resp.status_code != 201:
        print("Checkout failed, aborting.")
        return

    # 6. Order detail and emptied cart
    order_id = resp.json()["order_id"]
    print_response("Order Detail", client.get(f"{BASE_URL}/orders/{order_id}"))
    print_response("Cart after checkout", client.get(f"{BASE_URL}/cart/"))

    # 7. Checkout again with the empty cart (Expected Failure)
    print("7. Placing order with empty cart (Expected Failure)...")
    resp = client.post(f"{BASE_URL}/orders/", json={
        "customer_name": "Ramesh Patel",
        "customer_email": "ramesh@example.com",
        "shipping_address": "Village Khed",
        "phone": "9876543210"
    })
    print_response("Empty Cart Order", resp)

if __name__ == "__main__":
    run_verification()
