# api/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config
from core.sa.database import db
from api.errors import register_error_handlers
from api.routes import books, search, stats, share

logger = logging.getLogger(__name__)

app = FastAPI(title="BookTracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(books.router)
app.include_router(search.router)
app.include_router(stats.router)
app.include_router(share.router)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    config.configure_logging()
    db.init_db()
    logger.info(f"Database ready at {db.engine.url.render_as_string(hide_password=True)}")

@app.get("/")
async def root():
    return {"message": "BookTracker API"}
