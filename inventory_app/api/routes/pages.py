# inventory_app/api/routes/pages.py
from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates

from inventory_app.api.deps import get_inventory_store, require_auth
from inventory_app.config import TEMPLATE_DIR
from inventory_app.core.sessions import SessionData
from inventory_app.services.inventory import InventoryStore

router = APIRouter(tags=["pages"], include_in_schema=False)
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def _page_context(session: SessionData, **extra):
    return {"user": session.username, "role": session.role.value, "is_admin": session.is_admin, **extra}


@router.get("/")
def home(request: Request, session: SessionData = Depends(require_auth)):
    return templates.TemplateResponse(request, "index.html", _page_context(session))


@router.get("/inventory")
def inventory_page(
    request: Request,
    session: SessionData = Depends(require_auth),
    store: InventoryStore = Depends(get_inventory_store),
):
    return templates.TemplateResponse(request, "inventory.html", _page_context(session, items=store.list()))


@router.get("/inventory-add")
def inventory_add_page(request: Request, session: SessionData = Depends(require_auth)):
    return templates.TemplateResponse(request, "inventory_add.html", _page_context(session))
