#!/usr/bin/env python
"""Run the Alembic migrations in migrations/ with verbose output."""
import os
import sys
import traceback

from flask_migrate import upgrade

from transapi import create_app

try:
    print("[DEBUG] Creating Flask app...")
    app = create_app(os.getenv('FLASK_ENV', 'production'), EXPORT_WORKER_ENABLED=False,
                     AUTO_CREATE_TABLES=False)

    with app.app_context():
        print("[DEBUG] App context created")
        print(f"[DEBUG] Database URI: {app.config.get('SQLALCHEMY_DATABASE_URI', 'NOT SET')[:50]}...")

        try:
            print("[DEBUG] Running migrations...")
            upgrade(directory=os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations'))
            print("[DEBUG] Migrations completed successfully!")
        except Exception as e:
            print(f"[ERROR] Migration failed: {e}")
            print(f"[ERROR] Type: {type(e).__name__}")
            traceback.print_exc()
            sys.exit(1)

except Exception as e:
    print(f"[ERROR] Failed to create app: {e}")
    traceback.print_exc()
    sys.exit(1)

print("[DEBUG] All done!")
