#!/usr/bin/env python3
"""Helper script to check and create the .env file for the map service."""

from pathlib import Path
import os

ENV_TEMPLATE = """# Place store: auto (Supabase when configured, otherwise CSV), csv or supabase
PLACEMAP_PLACE_STORE=auto

# Supabase Configuration (optional; the CSV export is used when these are empty)
# Get these from: https://supabase.com/dashboard → Your Project → Settings → API
PLACEMAP_SUPABASE_URL=https://your-project-id.supabase.co
PLACEMAP_SUPABASE_KEY=your-service-role-key-here
PLACEMAP_SUPABASE_PLACES_TABLE=places

# API Configuration
PLACEMAP_API_PREFIX=/api
PLACEMAP_LOG_LEVEL=INFO
# PLACEMAP_FRONTEND_ALLOWED_ORIGINS - JSON array or comma-separated list

# Data Paths
PLACEMAP_DATA_ROOT=./data
PLACEMAP_PLACES_FILE=./data/places.csv

# Map response cache
PLACEMAP_MAP_CACHE_ENABLED=true
PLACEMAP_MAP_CACHE_TTL_SECONDS=300
"""


def _masked(value: str) -> str:
    if len(value) > 20:
        return value[:20] + "..." + value[-10:]
    return value


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Place Map Environment Checker")
    print("=" * 60)
    print()

    if env_file.exists():
        print(f"✅ Found .env file at: {env_file}")
        print()
        print("Current contents:")
        print("-" * 60)
        with open(env_file, "r", encoding="utf-8") as f:
            for line in f.read().split("\n"):
                if "PLACEMAP_SUPABASE_KEY" in line and "=" in line:
                    name, value = line.split("=", 1)
                    print(f"{name}={_masked(value.strip())}")
                else:
                    print(line)
        print("-" * 60)
        print()
    else:
        print(f"❌ .env file NOT found at: {env_file}")
        print()
        print("Creating template .env file...")
        with open(env_file, "w", encoding="utf-8") as f:
            f.write(ENV_TEMPLATE)
        print(f"✅ Created .env file at: {env_file}")
        print()
        print("⚠️  Edit .env to point at your place store, then rerun this script.")
        return

    print("Testing config loading...")
    print()

    try:
        import sys
        sys.path.insert(0, str(project_root / "src"))
        from placemap.config import settings

        print(f"Place store backend: {settings.place_store}")
        print(f"Places file: {settings.places_file} ({'exists' if settings.places_file.exists() else 'missing'})")
        print(f"Supabase configured: {settings.supabase_configured}")
        print(f"Map cache: {'enabled' if settings.map_cache_enabled else 'disabled'} (ttl={settings.map_cache_ttl_seconds}s)")
        print()

        if settings.place_store == "supabase" and not settings.supabase_configured:
            print("❌ ERROR: PLACEMAP_PLACE_STORE=supabase but Supabase credentials are missing")
        elif not settings.supabase_configured and not settings.places_file.exists():
            print("❌ ERROR: no Supabase credentials and the places CSV does not exist")
        else:
            print("✅ SUCCESS: a place store is configured")
        if os.getenv("PLACEMAP_SUPABASE_KEY") and not settings.supabase_url:
            print("⚠️  PLACEMAP_SUPABASE_KEY is set but PLACEMAP_SUPABASE_URL is not")
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        print()
        print("Make sure you're running this from the project root directory")


if __name__ == "__main__":
    main()
