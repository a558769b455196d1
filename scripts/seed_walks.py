#!/usr/bin/env python3
"""
Seed script: creates sample walks via the API (no direct DB).
Regions and difficulties come from the initial migration; this only adds walks.
Run: API must be running and migrated (alembic upgrade head).
  python scripts/seed_walks.py
  python scripts/seed_walks.py --base-url http://localhost:8000/api
"""

import argparse
import random
import sys

import httpx

API_BASE = "http://localhost:8000/api"

# (name, description, length in km, region code)
WALKS = [
    ("Triund Trek", "Ridge walk above Dharamshala with Dhauladhar views.", 9.0, "HP"),
    ("Hampta Pass", "Crossing from the green Kullu valley into barren Lahaul.", 26.0, "HP"),
    ("Kheerganga", "Forest trail to hot springs above the Parvati valley.", 12.0, "HP"),
    ("Valley of Flowers", "Alpine meadow trek in the Garhwal Himalaya.", 17.0, "UK"),
    ("Kedarkantha", "Winter summit climb through pine forest.", 20.0, "UK"),
    ("Markha Valley", "High altitude trek through Hemis National Park.", 65.0, "LD"),
    ("Chadar Trek", "Walk on the frozen Zanskar river.", 62.0, "LD"),
    ("Goecha La", "Route to the Kanchenjunga viewpoint.", 90.0, "SK"),
    ("Tawang Monastery Trail", "Monastery circuit in the eastern Himalaya.", 14.0, "AR"),
    ("Chembra Peak", "Heart-shaped lake on the way to the Wayanad summit.", 8.0, "KL"),
    ("Dudhsagar Falls", "Railway-line trek to the four-tiered waterfall.", 22.0, "GA"),
]


def main():
    ap = argparse.ArgumentParser(description="Seed sample walks via API")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        regions = client.get("/regions")
        difficulties = client.get("/difficulties")
        if regions.status_code != 200 or difficulties.status_code != 200:
            print(f"Failed to fetch lookups: {regions.status_code} / {difficulties.status_code}")
            sys.exit(1)
        region_ids = {r["code"]: r["id"] for r in regions.json()}
        difficulty_ids = [d["id"] for d in difficulties.json()]

        for name, description, length, code in WALKS:
            if code not in region_ids:
                errors.append(f"{name}: region {code} missing (was it deleted?)")
                continue
            try:
                r = client.post(
                    "/walks",
                    json={
                        "name": name,
                        "description": description,
                        "lengthInKm": length,
                        "regionId": region_ids[code],
                        "difficultyId": random.choice(difficulty_ids),
                    },
                )
                if r.status_code == 201:
                    created += 1
                else:
                    errors.append(f"{name}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"{name}: {e}")

    print(f"Done. Walks created: {created}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors:
            print("  ", e)


if __name__ == "__main__":
    main()
