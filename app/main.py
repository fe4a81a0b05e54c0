import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.logging_config import setup_logging
from app.database import Base, engine
from app.models import user, cover_letter
from app.routes import cover_letter_routes, user_routes, header_routes

setup_logging()
logger = logging.getLogger(__name__)

if os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true":
    Base.metadata.create_all(bind=engine)

app = FastAPI(title="Senseai Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"message": "Senseai backend is running!"}

app.include_router(header_routes.router)
app.include_router(user_routes.router)
app.include_router(cover_letter_routes.router)

logger.info("Senseai backend ready")
