import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finboard.core.config import settings
from finboard.api.routes.transactions import router as tx_router
from finboard.api.routes.budgets import router as budgets_router
from finboard.api.routes.categories import router as categories_router
from finboard.api.routes.goals import router as goals_router
from finboard.api.routes.notifications import router as notifications_router

logging.basicConfig(
    level=getattr(logging, (settings.log_level or "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="finboard")

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "ok", "store": settings.record_store_backend}

app.include_router(tx_router)
app.include_router(budgets_router)
app.include_router(categories_router)
app.include_router(goals_router)
app.include_router(notifications_router)
