# app/routes/header_routes.py
import os
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from app.utils.security import get_current_subject

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
SIGN_IN_URL = os.getenv("SIGN_IN_URL", "/sign-in")
SIGN_OUT_URL = os.getenv("SIGN_OUT_URL", "/sign-out")

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["header"])

GROWTH_TOOLS = ["Profile", "Billing", "Team"]


def header_context(request: Request, subject: Optional[str]) -> dict:
    return {
        "request": request,
        "signed_in": subject is not None,
        "dashboard_url": "/dashboard",
        "sign_in_url": SIGN_IN_URL,
        "sign_out_url": SIGN_OUT_URL,
        "growth_tools": GROWTH_TOOLS,
    }


@router.get("/header", response_class=HTMLResponse)
def render_header(request: Request, subject: Optional[str] = Depends(get_current_subject)):
    """Navigation header partial; only needs the session, not a user row"""
    return templates.TemplateResponse(request, "header.html", header_context(request, subject))


@router.get("/", response_class=HTMLResponse)
def index(request: Request, subject: Optional[str] = Depends(get_current_subject)):
    return templates.TemplateResponse(request, "index.html", header_context(request, subject))
