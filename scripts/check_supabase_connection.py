#!/usr/bin/env python3
"""
Supabase connectivity check script
Verifies the configured project is reachable and the tracker tables exist
"""

import os
import sys
import time
from dotenv import load_dotenv

# Load environment variables before the settings object is created
load_dotenv()

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from jobtrack.core.config import settings
from jobtrack.db.supabase import JOB_APPLICATIONS_TABLE, INTEGRATIONS_TABLE, supabase_manager

TABLES = [JOB_APPLICATIONS_TABLE, INTEGRATIONS_TABLE]


def check_settings():
    """Check that the Supabase settings are present"""
    print("⚙️ Checking Supabase settings")
    ok = True
    for name in ("SUPABASE_URL", "SUPABASE_KEY"):
        value = getattr(settings, name)
        if value:
            shown = value if name == "SUPABASE_URL" else '*' * 8
            print(f"  {name}: {shown}")
        else:
            print(f"  {name}: NOT SET")
            ok = False
    return ok


def check_table(table):
    """Run a one-row select against a table"""
    print(f"🗄️ Querying {table}...")
    try:
        start_time = time.time()
        supabase_manager.client.table(table).select('id').limit(1).execute()
        print(f"✅ {table} reachable ({time.time() - start_time:.2f} seconds)")
        return True
    except Exception as e:
        print(f"❌ {table} query failed: {e}")
        return False


def main():
    """Main diagnostic function"""
    print("🔍 Supabase Connection Diagnostics")
    print("=" * 50)

    if not os.path.exists(".env"):
        print("⚠️ No .env file found")

    if not check_settings():
        print("❌ Set SUPABASE_URL and SUPABASE_KEY first")
        return False

    print()
    results = [check_table(table) for table in TABLES]

    print()
    print("=" * 50)
    if all(results):
        print("🎉 All checks passed! Supabase is accessible.")
        return True

    print("⚠️ Some tables could not be queried.")
    print("   Check the service role key and that the migrations have run.")
    return False


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
