"""
Smoke test for a running Scenora server.

Usage: python smoke_api.py [base_url]
Generation checks call the real Gemini API and are skipped unless --generate is passed.
"""
import sys
from typing import Any, Dict, List

import requests

BASE_URL = "http://localhost:8000"
results: List[Dict[str, Any]] = []


def log_check(endpoint: str, method: str, status_code: int, expected: int, details: str = "") -> None:
    success = status_code == expected
    results.append({"endpoint": endpoint, "method": method, "success": success})
    status = "✓" if success else "✗"
    print(f"{status} {method:6} {endpoint:30} -> {status_code} (expected {expected})")
    if details:
        print(f"   {details}")


def check(method: str, endpoint: str, expected: int, **kwargs) -> None:
    try:
        response = requests.request(method, f"{BASE_URL}{endpoint}", timeout=300, **kwargs)
    except requests.RequestException as e:
        log_check(endpoint, method, 0, expected, f"Error: {e}")
        return
    details = ""
    if response.headers.get("content-type", "").startswith("application/json"):
        body = response.json()
        if "results" in body:
            details = f"{len(body['results'])} result(s): {[r['label'] for r in body['results']]}"
        elif "detail" in body:
            details = f"detail: {body['detail']}"
    log_check(endpoint, method, response.status_code, expected, details)


def main(argv: List[str]) -> int:
    global BASE_URL
    args = [a for a in argv if not a.startswith("--")]
    if args:
        BASE_URL = args[0].rstrip("/")

    print(f"\n=== Smoke testing {BASE_URL} ===")
    check("GET", "/healthz", 200)
    check("GET", "/api/state", 200)
    check("POST", "/api/story-frames", 400, json={"theme": "", "character": "a fox"})
    check("POST", "/api/story-frames", 400, json={"theme": "a storm at sea", "character": ""})

    if "--generate" in argv:
        check("POST", "/api/series-pack", 200, json={
            "brand": "Luma",
            "character": "a fox with blue eyes",
            "palette": "#112233",
            "scene": "walking in rain",
            "negative_prompt": "no text, no watermark",
            "seed": "42",
        })
        check("POST", "/api/story-frames", 200, json={
            "theme": "a lonely lighthouse keeper",
            "aspect_ratio": "16:9",
            "character": "an old keeper with a grey beard",
        })

    failed = [r for r in results if not r["success"]]
    print(f"\n{len(results) - len(failed)}/{len(results)} checks passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
