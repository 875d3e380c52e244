# inventory_app/api/routes/inventory.py
import io
import logging
from typing import List, Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from inventory_app.api.deps import get_inventory_store, require_admin, require_auth
from inventory_app.api.schemas.inventory import (
    ChangesResponse,
    CreatedResponse,
    InventoryItemCreate,
    InventoryItemOut,
    InventoryItemUpdate,
)
from inventory_app.core.errors import NotFound
from inventory_app.core.sessions import SessionData
from inventory_app.services.inventory import InventoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/inventory", tags=["inventory"], dependencies=[Depends(require_auth)])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=List[InventoryItemOut])
def list_inventory(store: InventoryStore = Depends(get_inventory_store)):
    return [InventoryItemOut.from_item(item) for item in store.list()]


@router.post("", response_model=CreatedResponse)
def create_item(payload: InventoryItemCreate, store: InventoryStore = Depends(get_inventory_store)):
    item_id = store.insert(payload.model_dump())
    return {"id": item_id}


@router.get("/export")
def export_inventory(
    format: Literal["csv", "xlsx"] = Query("csv"),
    session: SessionData = Depends(require_auth),
    store: InventoryStore = Depends(get_inventory_store),
):
    """
    Download the whole inventory as a CSV (default) or Excel sheet.
    """
    df = store.to_dataframe()
    logger.info("User %s exported %d inventory rows as %s", session.username, len(df), format)
    if format == "xlsx":
        buf = io.BytesIO()
        df.to_excel(buf, index=False, sheet_name="inventory")
        return Response(
            content=buf.getvalue(),
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": "attachment; filename=inventory.xlsx"},
        )
    return Response(
        content=df.to_csv(index=False),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=inventory.csv"},
    )


@router.put("/{item_id}", response_model=ChangesResponse)
def update_item(item_id: int, payload: InventoryItemUpdate, store: InventoryStore = Depends(get_inventory_store)):
    # fields left out (or sent as null) keep their stored value
    changes = store.update(item_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if not changes:
        raise NotFound("Item not found")
    return {"changes": changes}


@router.delete("/{item_id}", response_model=ChangesResponse)
def delete_item(
    item_id: int,
    session: SessionData = Depends(require_admin),
    store: InventoryStore = Depends(get_inventory_store),
):
    changes = store.delete(item_id)
    if not changes:
        raise NotFound("Item not found")
    logger.info("Item %s deleted by %s", item_id, session.username)
    return {"changes": changes}
