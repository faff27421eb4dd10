#!/usr/bin/env python3
"""
Database setup script for the verification service
Creates the people and errors (audit) tables and verifies they exist
"""

from sqlalchemy import inspect

from idverify import create_app, db

REQUIRED_TABLES = ('people', 'errors')


def create_tables():
    """Create missing tables; report which ones are present afterwards."""
    app = create_app()

    with app.app_context():
        try:
            db.create_all()
            tables = set(inspect(db.engine).get_table_names())
        except Exception as e:
            print(f"❌ Database setup failed: {e}")
            return False

        missing = [name for name in REQUIRED_TABLES if name not in tables]
        for name in REQUIRED_TABLES:
            print(f"{'✅' if name in tables else '❌'} {name} table")
        return not missing


if __name__ == "__main__":
    print("🚀 Creating verification tables...")
    if create_tables():
        print("\n🎉 Tables ready. Load people records through your admin process.")
    else:
        print("\n❌ Setup incomplete. Check DATABASE_URL / DB_* settings.")
