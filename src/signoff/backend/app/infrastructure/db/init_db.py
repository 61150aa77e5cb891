from signoff.backend.app.infrastructure.db.base import Base
from signoff.backend.app.infrastructure.db.engine import engine
from signoff.backend.app.infrastructure.db import models  # noqa: F401  registers tables on Base.metadata


async def init_db() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
