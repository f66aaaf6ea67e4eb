"""FastAPI example app demonstrating fastapi-shiptrack with SQLite."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fastapi_shiptrack import (
    ShiptrackConfig,
    create_shipping_router,
    register_exception_handlers,
)
from fastapi_shiptrack.contrib.sqlalchemy.models import Base
from fastapi_shiptrack.contrib.sqlalchemy.store import SQLAlchemyStateStore

logging.basicConfig(level=logging.INFO)

# --- Database setup ---

DATABASE_URL = "sqlite+aiosqlite:///./example.db"
engine = create_async_engine(DATABASE_URL, echo=False)
async_session = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

# --- Library integration ---

config = ShiptrackConfig()
store = SQLAlchemyStateStore(async_session, config=config)
shipping_router = create_shipping_router(config=config, store=store)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


# --- FastAPI app ---

app = FastAPI(
    title="fastapi-shiptrack demo",
    lifespan=lifespan,
)
register_exception_handlers(app)
app.include_router(shipping_router, prefix="/api")
