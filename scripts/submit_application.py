#!/usr/bin/env python3
"""
Dev helper: send a sample talent or vendor application to the local backend.

Builds a valid application payload (or a honeypot hit) and POST-s it to the
/api/apply endpoint, printing the status, the CORS allow-origin header and
the JSON body.

Usage
-----
# Basic: talent application targeting localhost:8000
python scripts/submit_application.py

# Vendor application
python scripts/submit_application.py --type vendor

# Simulate a bot filling the hidden website_url field
python scripts/submit_application.py --honeypot

# Check CORS behaviour for a specific origin
python scripts/submit_application.py --origin https://evil.example

# Target a different backend URL
python scripts/submit_application.py --url http://staging.example.com

Environment / .env
------------------
APPLY_API_URL   Default backend base URL (overridden by --url).
"""

import argparse
import json
import os
import sys
import textwrap
from pathlib import Path

import httpx
from dotenv import load_dotenv

_SAMPLE_BIO = (
    "Freelance photographer and director with ten years of experience "
    "shooting brand campaigns, live events and product launches."
)


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------

def _build_talent_payload(name: str, email: str) -> dict:
    return {
        "type": "talent",
        "name": name,
        "email": email,
        "location": "Los Angeles, CA",
        "portfolio_url": "https://example.com/portfolio",
        "bio": _SAMPLE_BIO,
        "referral_source": "Instagram",
        "primary_discipline": "Photography",
        "disciplines": ["Photography", "Directing"],
        "years_experience": "10",
    }


def _build_vendor_payload(name: str, email: str) -> dict:
    return {
        "type": "vendor",
        "name": name,
        "email": email,
        "company": "Acme Fabrication Co.",
        "website": "https://example.com",
        "bio": (
            "Full-service fabrication shop building custom sets, booths and "
            "retail fixtures for brand activations."
        ),
        "vendor_type": "Fabrication & Build",
        "services_offered": ["CNC routing", "Set construction"],
    }


_PAYLOAD_BUILDERS = {
    "talent": _build_talent_payload,
    "vendor": _build_vendor_payload,
}


# ---------------------------------------------------------------------------
# Pretty printer
# ---------------------------------------------------------------------------

def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    allow_origin = response.headers.get("access-control-allow-origin")
    print(f"Access-Control-Allow-Origin: {allow_origin or '(not set)'}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    # scripts/ lives one level below the root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    load_dotenv(project_root / "backend" / ".env")

    parser = argparse.ArgumentParser(
        prog="submit_application.py",
        description="Send a sample application to the applications API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/submit_application.py
              python scripts/submit_application.py --type vendor
              python scripts/submit_application.py --honeypot
              python scripts/submit_application.py --origin http://localhost:3000
        """),
    )
    parser.add_argument(
        "--url",
        default=os.getenv("APPLY_API_URL", "http://localhost:8000"),
        help="Backend base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--type",
        dest="app_type",
        default="talent",
        choices=list(_PAYLOAD_BUILDERS),
        help="Application type to send (default: talent)",
    )
    parser.add_argument(
        "--name",
        default="Jordan Example",
        help='Applicant name (default: "Jordan Example")',
    )
    parser.add_argument(
        "--email",
        default="jordan@example.com",
        help="Applicant email (default: jordan@example.com)",
    )
    parser.add_argument(
        "--origin",
        default="http://localhost:3000",
        help="Origin header to send (default: http://localhost:3000)",
    )
    parser.add_argument(
        "--honeypot",
        action="store_true",
        help="Fill the hidden website_url field, as a bot would.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload JSON without sending it.",
    )

    args = parser.parse_args()

    payload = _PAYLOAD_BUILDERS[args.app_type](name=args.name, email=args.email)
    if args.honeypot:
        payload["website_url"] = "http://spam.example"

    endpoint = f"{args.url.rstrip('/')}/api/apply"

    print(f"Type      : {args.app_type}")
    print(f"Endpoint  : {endpoint}")
    print(f"Origin    : {args.origin}")
    print(f"Honeypot  : {'yes' if args.honeypot else 'no'}")

    if args.dry_run:
        print("\n[DRY RUN] Payload:")
        print(json.dumps(payload, indent=2))
        return 0

    try:
        response = httpx.post(
            endpoint,
            json=payload,
            headers={"Origin": args.origin},
            timeout=30,
        )
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {endpoint}\n"
            "Is the backend running? Start it with:\n"
            "  cd backend && uvicorn app.main:app --reload",
            file=sys.stderr,
        )
        return 1
    except httpx.HTTPError as exc:
        print(f"\nERROR: {exc}", file=sys.stderr)
        return 1

    _print_response(response)
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
