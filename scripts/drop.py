import sys
import os
import asyncio

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from db.session import Base, get_engine
import db.models  # noqa: F401  registers every table on Base.metadata


async def drop():
    engine = get_engine()
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            print(f"Dropping table: {table.name}")
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(drop())
