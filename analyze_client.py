"""
Send a listing JSON file to a running analysis API and print the verdict.

    python analyze_client.py listing.json --variant simple
"""

import argparse
import json
import sys

import requests

import config

HEADERS = {"Content-Type": "application/json"}


def load_listing(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def post_listing(listing: dict, base_url: str = None, variant: str = None, timeout: float = 15) -> dict:
    base_url = (base_url or config.API_BASE_URL).rstrip("/")
    params = {"variant": variant} if variant else None

    r = requests.post(f"{base_url}/api/analyze", json=listing, params=params, headers=HEADERS, timeout=timeout)
    body = r.json()
    if r.status_code != 200:
        raise RuntimeError(body.get("error") or f"HTTP {r.status_code}")
    return body


def format_result(result: dict) -> str:
    lines = [f"{result['score']}/10  {result['label']}", result["explanation"]]

    for name, factor in (result.get("factors") or {}).items():
        lines.append(f"  {name}: {factor['score']} - {factor['reason']}")

    insights = result.get("marketInsights")
    if insights:
        lines.append(
            f"  bozor: ${insights['averagePrice']}/m² "
            f"(${insights['priceRange']['min']} - ${insights['priceRange']['max']}), "
            f"{insights['marketTrend']}"
        )
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze a property listing")
    parser.add_argument("listing", help="path to a listing JSON file")
    parser.add_argument("--url", default=None, help="API base URL (default: $API_BASE_URL)")
    parser.add_argument("--variant", choices=["simple", "extended"], default=None)
    args = parser.parse_args(argv)

    try:
        result = post_listing(load_listing(args.listing), base_url=args.url, variant=args.variant)
    except (requests.RequestException, RuntimeError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
