import asyncio
from dotenv import load_dotenv

load_dotenv('.env.production')

from goevergreen.database.connection import DatabaseConnection
from goevergreen.database.schema import init_database

async def create_schema():
    try:
        print("Creating GoEvergreen tables...")
        await init_database()
        print("\n✅ Schema created successfully!")
    except Exception as e:
        print(f"❌ Error: {e}")
    finally:
        await DatabaseConnection.close_pool()

if __name__ == "__main__":
    asyncio.run(create_schema())
