"""Manual smoke test against a running server (python main.py)."""

import json
import requests

BASE_URL = "http://localhost:11000"


def smoke_verify_promo():
    payload = {
        "baseline": "₹ 1,000",
        "feedback_message": "Congratulations! Coupon applied",
        "displayed_total": "₹ 900",
        "displayed_discount": "₹ 100",
    }
    response = requests.post(f"{BASE_URL}/verify-promo", json=payload, timeout=10)
    print(f"/verify-promo -> {response.status_code}")
    print(json.dumps(response.json(), indent=2))


def smoke_run_flow():
    payload = {"origin": "Delhi", "destination": "Mumbai", "promo_codes": ["INVALID", "VALIDCODE"]}

    print("Sending request to /run-flow (opens a real browser)...")
    response = requests.post(f"{BASE_URL}/run-flow", json=payload, timeout=240)
    print(f"/run-flow -> {response.status_code}")

    result = response.json()
    if response.status_code == 200 and result.get("status") == "success":
        print("✓ SUCCESS!")
    else:
        print("✗ FAILED")
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    try:
        smoke_verify_promo()
        smoke_run_flow()
    except requests.exceptions.ConnectionError:
        print(f"✗ Error: Could not connect to server at {BASE_URL}")
        print("Make sure the server is running (python main.py)")
    except requests.exceptions.Timeout:
        print("✗ Error: Request timed out")
