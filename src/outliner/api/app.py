"""FastAPI app for loading, saving and editing outline documents."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from outliner.commands import EditCommand, apply_command
from outliner.config import Settings, load_settings
from outliner.logging import configure_logging, document_context, get_logger, log_exception
from outliner.models.codec import dump_forest
from outliner.models.item import Item
from outliner.storage import ForestStore, StoreError, get_store, load_or_seed, save_items, zoom
from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import get_breadcrumb

SCOPES = ("mypage", "share")


class SaveItemsRequest(BaseModel):
    """Items held by an editor, to be stored under an item id (or `root`)."""

    items: list[Item]


def create_app(settings: Settings | None = None, store: ForestStore | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)
    store = store or get_store(settings)

    app = FastAPI(title="Outliner", version="0.1.0")

    def resolve_owner(scope: str, user: str | None, write: bool = False) -> str:
        if scope not in SCOPES:
            raise HTTPException(status_code=400, detail="Invalid scope. Must be 'mypage' or 'share'")
        # Authentication happens upstream; it forwards the resolved user in a header.
        # Only reads of the shared document are open to anonymous clients.
        if not user and (write or scope != "share"):
            raise HTTPException(status_code=401, detail="Unauthorized")
        if scope == "share":
            return settings.share_owner
        return user

    @app.exception_handler(ItemNotFoundError)
    def item_not_found(_request: Request, exc: ItemNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc), "id": exc.item_id})

    @app.exception_handler(StoreError)
    def store_failed(_request: Request, exc: StoreError) -> JSONResponse:
        log_exception(logger, "Stored document could not be read", exc)
        return JSONResponse(status_code=500, content={"error": "Failed to load items"})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/documents/{scope}")
    def get_document(scope: str, x_outliner_user: str | None = Header(default=None)) -> dict[str, Any]:
        owner = resolve_owner(scope, x_outliner_user)
        with document_context(owner=owner):
            forest = load_or_seed(store, owner)
            logger.info("Document requested")
        return {"items": dump_forest(forest), "scope": scope}

    @app.get("/documents/{scope}/items/{item_id}")
    def get_item(scope: str, item_id: str, x_outliner_user: str | None = Header(default=None)) -> dict[str, Any]:
        owner = resolve_owner(scope, x_outliner_user)
        item = zoom(store.load(owner), item_id)
        return {"item": item.model_dump(mode="json", by_alias=True)}

    @app.get("/documents/{scope}/items/{item_id}/breadcrumb")
    def get_item_breadcrumb(
        scope: str, item_id: str, x_outliner_user: str | None = Header(default=None)
    ) -> dict[str, Any]:
        owner = resolve_owner(scope, x_outliner_user)
        crumbs = get_breadcrumb(store.load(owner), item_id)
        return {"breadcrumb": [c.model_dump() for c in crumbs]}

    @app.post("/documents/{scope}/items/{item_id}")
    def post_items(
        scope: str,
        item_id: str,
        req: SaveItemsRequest,
        x_outliner_user: str | None = Header(default=None),
    ) -> dict[str, str]:
        owner = resolve_owner(scope, x_outliner_user, write=True)
        with document_context(owner=owner, item_id=item_id):
            save_items(store, owner, item_id, req.items)
        return {"message": "Items saved successfully"}

    @app.post("/documents/{scope}/edits")
    def post_edit(scope: str, cmd: EditCommand, x_outliner_user: str | None = Header(default=None)) -> dict[str, Any]:
        owner = resolve_owner(scope, x_outliner_user, write=True)
        with document_context(owner=owner, item_id=cmd.target_id):
            # An empty document is seeded under the id the editor was handed, so the first
            # edit lands on the line it was shown.
            forest = load_or_seed(store, owner, id_factory=lambda: cmd.target_id)
            outcome = apply_command(forest, cmd)
            if outcome.changed:
                store.save(owner, outcome.forest)
            logger.info("Edit %s applied=%s", cmd.op, outcome.changed)
        return {
            "items": dump_forest(outcome.forest),
            "changed": outcome.changed,
            "focusId": outcome.focus_id,
            "refused": outcome.refused,
        }

    return app
