#!/usr/bin/env python3
"""Diagnostic script to exercise a running map API."""

import json
import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

# Pekanbaru city centre
SAMPLE_VIEWPORT = {"north": 0.56, "south": 0.44, "east": 101.48, "west": 101.36}


def check_endpoint(client: httpx.Client, path: str, description: str, params: dict | None = None):
    """Request an endpoint and print a short summary."""
    print(f"\n{'='*60}")
    print(f"Testing: {description}")
    print(f"URL: {BASE_URL}{path} {params or ''}")
    print(f"{'='*60}")

    try:
        response = client.get(path, params=params)
    except httpx.TimeoutException:
        print("❌ TIMEOUT: Request took longer than 10 seconds")
        return False, None
    except httpx.HTTPError as e:
        print(f"❌ CONNECTION ERROR: {e}")
        return False, None

    print(f"Status Code: {response.status_code}")
    try:
        data = response.json()
    except ValueError:
        print(response.text[:500])
        return response.is_success, response.status_code

    if isinstance(data, list):
        clusters = [item for item in data if item.get("isCluster")]
        print(f"{len(data)} features ({len(clusters)} clusters, {len(data) - len(clusters)} points)")
        for item in data[:3]:
            print(json.dumps(item, indent=2, ensure_ascii=False)[:400])
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    return response.is_success, response.status_code


def main():
    print(f"🔍 Map API diagnostic against {BASE_URL}")
    results = {}
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        results["health"] = check_endpoint(client, "/api/health", "Health Endpoint")
        results["places"] = check_endpoint(client, "/api/health/places", "Place Store Health")
        for zoom in (9, 11, 13, 18):
            results[f"zoom {zoom}"] = check_endpoint(
                client,
                "/api/map/places",
                f"Map places at zoom {zoom}",
                params={**SAMPLE_VIEWPORT, "zoom": zoom},
            )
        results["cache"] = check_endpoint(client, "/api/map/cache", "Cache Statistics")

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    for name, (ok, status_code) in results.items():
        print(f"{name:<12} {'✅' if ok else '❌'} - Status: {status_code}")

    if not any(ok for ok, _ in results.values()):
        print("\n❌ ALL CHECKS FAILED - is the server running?")
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n⚠️  Diagnostic interrupted by user")
        sys.exit(1)
