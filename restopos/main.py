### restopos/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from restopos.api import employee_routes, expense_routes, menu_routes, order_routes, report_routes
from restopos.api.admin import admin_settings_routes
from restopos.api.errors import register_exception_handlers
from restopos.auth import routes as auth_routes
from restopos.core.config import settings
from restopos.crud.settings import load_billing_config
from restopos.db import async_session, create_db_and_tables
from restopos.services.pos.state import build_state

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(
    title="RestoPOS API",
    version="1.0.0",
    description="Point of sale and back office: menu, orders, employees, expenses and reports.",
)

# ✅ Session middleware (login stores username/role in the session)
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

# ✅ Allow frontend dev (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In prod, restrict this!
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()

    # Restore saved billing settings, then build the in-memory register around them
    async with async_session() as db:
        config = await load_billing_config(db)

    app.state.pos = build_state(config, seeded=settings.seed_fixtures)
    log.info(
        "POS ready: menu=%s orders=%s employees=%s expenses=%s",
        len(app.state.pos.catalog), len(app.state.pos.orders),
        len(app.state.pos.employees), len(app.state.pos.expenses),
    )


# ✅ Routers
app.include_router(auth_routes.router)
app.include_router(menu_routes.router)
app.include_router(order_routes.router)
app.include_router(employee_routes.router)
app.include_router(expense_routes.router)
app.include_router(report_routes.router)
app.include_router(admin_settings_routes.router)
