#!/usr/bin/env python3
"""
End-to-end demo script for the Media Upload Service.

Prerequisites:
    1. A MinIO/S3 server reachable at S3_ENDPOINT with the target bucket created
    2. The API running, e.g. ``uvicorn upload_service.main:app``

Usage:
    python scripts/e2e_demo.py --bucket testbucket

    # With a custom file and key:
    python scripts/e2e_demo.py --bucket testbucket --file notes.txt --key docs/notes.txt

    # Output raw JSON:
    python scripts/e2e_demo.py --bucket testbucket --json
"""

import argparse
import base64
import json
import sys
from pathlib import Path

import httpx

# Configuration
API_BASE = "http://localhost:8000"


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get(f"{API_BASE}/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def check_readiness(client: httpx.Client) -> dict:
    """Check readiness of the storage backend."""
    try:
        resp = client.get(f"{API_BASE}/health/ready")
        return resp.json()
    except httpx.RequestError as e:
        return {"error": str(e)}


def upload_media(client: httpx.Client, bucket: str, key: str, content: bytes, metadata: dict | None) -> httpx.Response:
    """Call the UploadMedia RPC."""
    body = {
        "key": key,
        "bucket": bucket,
        "file": base64.b64encode(content).decode("ascii"),
    }
    if metadata:
        body["metadata"] = metadata
    return client.post(f"{API_BASE}/rpc/UploadMedia", json=body)


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the Media Upload Service")
    parser.add_argument("--bucket", "-b", required=True, help="Target bucket")
    parser.add_argument("--key", "-k", help="Object key (defaults to the file name)")
    parser.add_argument("--file", "-f", type=Path, help="File to upload (defaults to a short text)")
    parser.add_argument("--meta", action="append", default=[], metavar="NAME=VALUE", help="Object metadata")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args()

    if args.file is not None:
        if not args.file.exists():
            print(f"Error: file not found: {args.file}")
            sys.exit(1)
        content = args.file.read_bytes()
        key = args.key or args.file.name
    else:
        content = b"Hello, World!"
        key = args.key or "testfile.txt"

    metadata = dict(item.split("=", 1) for item in args.meta)

    with httpx.Client(timeout=30.0) as client:
        print("[1/3] Checking API health...")
        if not check_health(client):
            print("  Error: API is not responding.")
            sys.exit(1)
        print("  API is healthy")

        print("[2/3] Checking storage readiness...")
        readiness = check_readiness(client)
        if "error" in readiness:
            print(f"  Error: {readiness['error']}")
            sys.exit(1)
        for service, status in readiness.get("checks", {}).items():
            icon = "OK" if status == "ok" else "FAIL"
            print(f"  [{icon}] {service}: {status}")

        print(f"[3/3] Uploading {len(content)} bytes to {args.bucket}/{key}...")
        resp = upload_media(client, args.bucket, key, content, metadata)

    if args.json:
        print(json.dumps(resp.json(), indent=2))
    elif resp.status_code == 200:
        print(f"  Stored at: {resp.json()['output']}")
    else:
        data = resp.json()
        print(f"  Failed ({resp.status_code}): {data.get('message', data)}")

    sys.exit(0 if resp.status_code == 200 else 1)


if __name__ == "__main__":
    main()
