#!/usr/bin/env python3
"""Run after deployment to verify everything works."""

import sys

import httpx

API_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"


def check_health():
    """Verify health endpoint returns 200."""
    r = httpx.get(f"{API_URL}/health")
    assert r.status_code == 200, f"Health check failed: {r.status_code}"
    data = r.json()
    assert data.get("status") == "healthy", f"Unexpected health response: {data}"
    print("✓ Health check passed")


def check_auth_required():
    """Verify protected routes require a session cookie."""
    r = httpx.get(f"{API_URL}/api/comment/getcomments")
    assert r.status_code == 401, f"Expected 401, got {r.status_code}"
    assert r.json().get("statusCode") == 401, f"Unexpected error body: {r.text}"
    print("✓ Auth required for protected routes")


def check_signin_rejects_unknown():
    """Verify signin answers with the generic credentials error."""
    r = httpx.post(
        f"{API_URL}/api/auth/signin",
        json={"email": "nobody@invalid.test", "password": "x"},
    )
    assert r.status_code == 401, f"Expected 401, got {r.status_code}"
    assert r.json().get("message") == "Invalid email or password", f"Unexpected body: {r.text}"
    print("✓ Signin rejects unknown users")


def check_security_headers():
    """Verify security headers are applied."""
    r = httpx.get(f"{API_URL}/health")
    assert r.headers.get("x-content-type-options") == "nosniff", "Missing nosniff header"
    print("✓ Security headers present")


if __name__ == "__main__":
    print(f"\nVerifying deployment at: {API_URL}\n")

    try:
        check_health()
        check_auth_required()
        check_signin_rejects_unknown()
        check_security_headers()
        print("\n✅ All checks passed!\n")
    except AssertionError as e:
        print(f"\n❌ Check failed: {e}\n")
        sys.exit(1)
    except httpx.ConnectError:
        print(f"\n❌ Could not connect to {API_URL}\n")
        sys.exit(1)
