"""
Manual end-to-end check against a running server:
- Health
- Auth test (Google Cloud credentials)
- Prompt preview
- Image generation (optionally saves the PNG)

Requires:
  pip install requests

Default base_url: http://127.0.0.1:3001
"""
import argparse
import base64
import json
import sys
from typing import Any, Dict

import requests


def _pp(title: str, obj: Any):
    print(f"\n===== {title} =====")
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _post(base_url: str, path: str, payload: Dict[str, Any], timeout: int = 30) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return requests.post(url, json=payload, timeout=timeout)


def _get(base_url: str, path: str, timeout: int = 30) -> requests.Response:
    url = f"{base_url.rstrip('/')}{path}"
    return requests.get(url, timeout=timeout)


def check_health(base_url: str):
    r = _get(base_url, "/api/health")
    _pp("Health", {"status_code": r.status_code, "response": r.json()})


def check_auth(base_url: str):
    r = _get(base_url, "/api/test-auth")
    _pp("Auth", {"status_code": r.status_code, "response": r.json()})


def check_prompt(base_url: str, payload: Dict[str, Any]):
    r = _post(base_url, "/api/food-image-prompt", payload)
    _pp("Prompt preview", {"status_code": r.status_code, "response": r.json()})


def check_generate(base_url: str, payload: Dict[str, Any], out_path: str = "", timeout: int = 180):
    r = _post(base_url, "/api/generate-food-image", payload, timeout=timeout)
    data = r.json()
    image_url = data.get("imageUrl") or ""
    summary = dict(data)
    if image_url:
        summary["imageUrl"] = image_url[:64] + "..."
    _pp("Generate", {"status_code": r.status_code, "response": summary})

    if out_path and image_url.startswith("data:image/png;base64,"):
        with open(out_path, "wb") as f:
            f.write(base64.b64decode(image_url.split(",", 1)[1]))
        print(f"Saved image to {out_path}")
    return r.status_code == 200 and data.get("success") is True


def main():
    parser = argparse.ArgumentParser(description="Platecraft API smoke test")
    parser.add_argument("--base-url", default="http://127.0.0.1:3001", help="API base URL")
    parser.add_argument("--dish", default="Chicken Biryani")
    parser.add_argument("--description", default=None)
    parser.add_argument("--cuisine", default="indian")
    parser.add_argument("--plating", default="elegant")
    parser.add_argument("--out", default="", help="Optional path to save the generated PNG")
    parser.add_argument("--skip-generate", action="store_true", help="Do not call the image model")
    args = parser.parse_args()

    payload = {"dishName": args.dish, "cuisineType": args.cuisine, "plating": args.plating}
    if args.description:
        payload["description"] = args.description

    check_health(args.base_url)
    check_auth(args.base_url)
    check_prompt(args.base_url, payload)
    if not args.skip_generate:
        ok = check_generate(args.base_url, payload, args.out)
        sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
