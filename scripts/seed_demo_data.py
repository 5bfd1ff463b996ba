#!/usr/bin/env python3
"""Seed demo village records into a running backend.

Usage:
    # Start the backend first:
    village-admin

    # Seed demo data:
    python3 scripts/seed_demo_data.py

    # Seed against a different host:
    python3 scripts/seed_demo_data.py --base-url http://localhost:9000

Every record goes through the public API, so it is validated exactly like
data entered by village staff.

Data created:
    - 5 residents
    - 6 finance transactions (income and expense)
    - 4 budget allocations for the current year
    - 4 events in different states
    - 5 assets across all conditions
    - 4 public services, one of them switched off
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime, timezone

import httpx

DEFAULT_BASE_URL = "http://localhost:2022"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def api(
    client: httpx.Client,
    method: str,
    path: str,
    *,
    json: dict | None = None,
) -> dict | list | None:
    """Make an API call and return parsed JSON, or None on failure."""
    resp = client.request(method, path, json=json)
    if resp.status_code >= 400:
        print(f"  FAILED {method} {path} -> {resp.status_code}: {resp.text[:200]}")
        return None
    if resp.headers.get("content-type", "").startswith("application/json"):
        return resp.json()
    return None


def section(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def seed_residents(client: httpx.Client) -> None:
    section("Residents")

    residents = [
        {"name": "Budi Santoso", "address": "RT 01/RW 02, Dusun Krajan", "job": "Petani"},
        {"name": "Siti Aminah", "address": "RT 03/RW 01, Dusun Sumber", "job": "Guru"},
        {"name": "Agus Wibowo", "address": "RT 02/RW 02, Dusun Krajan", "job": "Pedagang"},
        {"name": "Dewi Lestari", "address": "RT 04/RW 03, Dusun Wetan", "job": "Bidan"},
        {"name": "Joko Susilo", "address": "RT 01/RW 03, Dusun Wetan", "job": "Nelayan"},
    ]
    for resident in residents:
        result = api(client, "POST", "/api/residents", json=resident)
        if result:
            print(f"  Resident #{result['id']}: {result['name']} ({result['job']})")


def seed_finance(client: httpx.Client, year: int) -> None:
    section("Finance Transactions")

    transactions = [
        ("income", "Dana Desa tahap I", 350000000, "Dana Desa", f"{year}-02-10"),
        ("income", "Alokasi Dana Desa", 120000000, "ADD", f"{year}-03-05"),
        ("income", "Sewa tanah kas desa", 7500000.5, "Pendapatan Asli Desa", f"{year}-04-01"),
        ("expense", "Pengaspalan jalan dusun", 95000000, "Infrastruktur", f"{year}-05-12"),
        ("expense", "Honor kader posyandu", 4800000, "Kesehatan", f"{year}-05-30"),
        ("expense", "ATK kantor desa", 1250000.75, "Operasional", f"{year}-06-02"),
    ]
    for tx_type, description, amount, category, tx_date in transactions:
        result = api(client, "POST", "/api/finance", json={
            "type": tx_type,
            "description": description,
            "amount": amount,
            "category": category,
            "date": tx_date,
        })
        if result:
            print(f"  {tx_type:<7} {result['amount']:>14,} {description}")


def seed_budgets(client: httpx.Client, year: int) -> None:
    section("Budgets")

    budgets = [
        ("Infrastruktur", 250000000, 95000000),
        ("Kesehatan", 60000000, 4800000),
        ("Pendidikan", 45000000, None),
        ("Operasional", 30000000, 1250000.75),
    ]
    for category, allocated, used in budgets:
        result = api(client, "POST", "/api/budgets", json={
            "category": category,
            "allocated_amount": allocated,
            "year": year,
        })
        if not result:
            continue
        if used is not None:
            result = api(client, "PATCH", f"/api/budgets/{result['id']}", json={
                "used_amount": used,
            }) or result
        print(f"  {category}: {result['used_amount']:,} / {result['allocated_amount']:,}")


def seed_events(client: httpx.Client, year: int) -> None:
    section("Events")

    events = [
        {
            "name": "Musyawarah Desa",
            "description": "Pembahasan RKP Desa",
            "location": "Balai desa",
            "event_date": f"{year}-01-20",
            "organizer": "BPD",
            "participant_count": 60,
            "status": "completed",
        },
        {
            "name": "Posyandu balita",
            "location": "Pos PKK Dusun Sumber",
            "event_date": f"{year}-07-08",
            "organizer": "Kader PKK",
            "participant_count": 35,
            "budget": 750000,
            "status": "ongoing",
        },
        {
            "name": "Lomba 17 Agustus",
            "description": "Lomba rakyat memperingati HUT RI",
            "location": "Lapangan desa",
            "event_date": f"{year}-08-17",
            "organizer": "Karang Taruna",
            "budget": 12500000,
        },
        {
            "name": "Pentas seni dusun",
            "location": "Dusun Wetan",
            "event_date": f"{year}-09-14",
            "organizer": "Sanggar Budaya",
            "status": "cancelled",
        },
    ]
    for event in events:
        result = api(client, "POST", "/api/events", json=event)
        if result:
            print(f"  [{result['status']}] {result['name']} on {result['event_date']}")


def seed_assets(client: httpx.Client) -> None:
    section("Assets")

    assets = [
        ("Kantor desa", "Bangunan", 850000000, "good", "Jl. Raya Desa 1", "2009-04-01"),
        ("Ambulans desa", "Kendaraan", 320000000, "excellent", "Garasi kantor desa", "2022-11-15"),
        ("Motor dinas", "Kendaraan", 18500000, "fair", "Garasi kantor desa", None),
        ("Pompa air irigasi", "Peralatan", 7250000, "poor", "Dusun Krajan", "2015-06-20"),
        ("Tanah kas desa", "Tanah", 1200000000, "good", "Blok Sawah Lor", None),
    ]
    for name, category, value, condition, location, purchase_date in assets:
        result = api(client, "POST", "/api/assets", json={
            "name": name,
            "category": category,
            "value": value,
            "condition": condition,
            "location": location,
            "purchase_date": purchase_date,
        })
        if result:
            print(f"  {name} ({condition}) {result['value']:,}")


def seed_services(client: httpx.Client) -> None:
    section("Public Services")

    services = [
        {
            "name": "Surat Keterangan Domisili",
            "description": "Keterangan tempat tinggal untuk keperluan administrasi",
            "requirements": "Fotokopi KTP, surat pengantar RT/RW",
            "process_time": "1 hari kerja",
            "cost": 0,
            "contact_person": "Kasi Pelayanan",
            "office_hours": "Senin-Jumat 08:00-15:00",
        },
        {
            "name": "Surat Pengantar KTP",
            "description": "Pengantar pembuatan KTP elektronik ke kecamatan",
            "requirements": "Kartu Keluarga",
            "process_time": "1 hari kerja",
        },
        {
            "name": "Legalisir Dokumen",
            "description": "Legalisir salinan dokumen desa",
            "cost": 5000,
            "office_hours": "Senin-Kamis 08:00-12:00",
        },
        {
            "name": "Surat Keterangan Usaha",
            "description": "Keterangan usaha untuk pengajuan kredit",
            "process_time": "2 hari kerja",
        },
    ]
    created = []
    for service in services:
        result = api(client, "POST", "/api/services", json=service)
        if result:
            created.append(result)
            print(f"  #{result['id']} {result['name']}")

    if created:
        toggled = api(client, "POST", f"/api/services/{created[-1]['id']}/toggle")
        if toggled:
            print(f"  Switched off: {toggled['name']}")


# ---------------------------------------------------------------------------
# Verify seeded data
# ---------------------------------------------------------------------------


def verify_data(client: httpx.Client, year: int) -> None:
    """Print the summaries computed by the backend."""
    section("Verification Summary")

    residents = api(client, "GET", "/api/residents")
    print(f"  Residents:        {len(residents) if residents else 0}")

    finance = api(client, "GET", "/api/finance/summary")
    if finance:
        print(f"  Total income:     {finance['totalIncome']:,}")
        print(f"  Total expense:    {finance['totalExpense']:,}")
        print(f"  Balance:          {finance['balance']:,}")

    budgets = api(client, "GET", f"/api/budgets/year/{year}")
    print(f"  Budgets {year}:     {len(budgets) if budgets else 0}")

    upcoming = api(client, "GET", "/api/events/upcoming")
    print(f"  Upcoming events:  {len(upcoming) if upcoming else 0}")

    assets = api(client, "GET", "/api/assets/summary")
    if assets:
        print(f"  Assets:           {assets['totalCount']} worth {assets['totalValue']:,}")
        for condition, count in assets["byCondition"].items():
            print(f"    {condition:<10} {count}")

    active = api(client, "GET", "/api/services/active")
    print(f"  Active services:  {len(active) if active else 0}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Seed demo data into a running village administration backend"
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Backend base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=date.today().year,
        help="Fiscal year for finance, budget and event records",
    )
    args = parser.parse_args()

    print("Village Administration Demo Data Seeder")
    print(f"Target: {args.base_url}")
    print(f"Time:   {datetime.now(timezone.utc).isoformat()}")

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        try:
            health = api(client, "GET", "/api/health")
        except httpx.ConnectError:
            health = None
        if not health:
            print(f"\nERROR: Cannot reach {args.base_url}")
            print("Start the backend first:")
            print("  village-admin")
            sys.exit(1)

        print(f"Backend: {health.get('status', 'unknown')}")

        seed_residents(client)
        seed_finance(client, args.year)
        seed_budgets(client, args.year)
        seed_events(client, args.year)
        seed_assets(client)
        seed_services(client)
        verify_data(client, args.year)

        section("Done")
        print("  Demo data seeded successfully!")
        print()


if __name__ == "__main__":
    main()
