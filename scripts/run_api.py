#!/usr/bin/env python3
"""
Run the storefront backend API.

  python scripts/run_api.py --port 8000
  PRODUCTS_DB_PATH=data/products.json python scripts/run_api.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

import uvicorn


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the FanKick storefront API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    uvicorn.run("storefront.api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
