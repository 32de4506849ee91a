#!/usr/bin/env python3
"""
Database initialization script
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add the project root to the Python path
current_dir = Path(__file__).parent
root_dir = current_dir.parent
sys.path.insert(0, str(root_dir))

DEMO_USERS = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
    {"name": "Bob Wilson", "email": "bob@example.com"},
]

async def init_database(seed: bool) -> None:
    """Initialize database with tables"""
    from postboard.db.session import init_db, close_db
    from postboard.config import settings

    print(f"🚀 Initializing database: {settings.database_url}")

    try:
        await init_db()
        print("✅ Database initialized successfully")

        if seed:
            await create_initial_data()
    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)
    finally:
        await close_db()

async def create_initial_data() -> None:
    """Create demo user identities and print a token for each"""
    from sqlalchemy import select
    from postboard.db.session import AsyncSessionLocal
    from postboard.models.user import User
    from postboard.services.auth_service import create_access_token
    from postboard.stores.user_store import UserStore

    print("👤 Creating demo users...")

    async with AsyncSessionLocal() as db:
        store = UserStore(db)
        for user_data in DEMO_USERS:
            result = await db.execute(select(User).where(User.email == user_data["email"]))
            user = result.scalar_one_or_none()

            if not user:
                user = await store.create(**user_data)
                print(f"✅ Created user: {user.name}")

            print(f"   {user.email}: {create_access_token(user.id)}")

def main():
    parser = argparse.ArgumentParser(description="Create Postboard tables")
    parser.add_argument("--seed", action="store_true", help="create demo users and print their tokens")
    args = parser.parse_args()

    asyncio.run(init_database(args.seed))

if __name__ == "__main__":
    main()
