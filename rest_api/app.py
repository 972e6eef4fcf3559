# Shared ordered list API
import argparse
import json
import logging
import os
import pathlib
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field, StrictInt

from rest_api.errors import ListError
from rest_api.list_service import ListService, normalize_delete_mode
from rest_api.storage import OrderedListStore

LOGGER = logging.getLogger("rest_api")

DEFAULT_SEED_ITEMS: List[str] = ["This", "Is", "Working!"]
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _csv_env(name: str, default: str = "") -> List[str]:
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def _seed_items_from_env() -> List[str]:
    """Read SHARELIST_SEED_ITEMS (JSON list); fall back to the default seed."""
    raw = os.getenv("SHARELIST_SEED_ITEMS")
    if raw is None:
        return list(DEFAULT_SEED_ITEMS)
    try:
        data = json.loads(raw)
    except ValueError:
        LOGGER.warning("SHARELIST_SEED_ITEMS is not valid JSON, using default seed")
        return list(DEFAULT_SEED_ITEMS)
    if not isinstance(data, list):
        LOGGER.warning("SHARELIST_SEED_ITEMS must be a JSON list, using default seed")
        return list(DEFAULT_SEED_ITEMS)
    return [str(item) for item in data]


SEED_ITEMS = _seed_items_from_env()
DELETE_MODE = normalize_delete_mode(os.getenv("SHARELIST_DELETE_MODE"))
INDEX_HTML = pathlib.Path(os.getenv("SHARELIST_INDEX_HTML", "./index.html"))
STATIC_DIR = pathlib.Path(os.getenv("SHARELIST_STATIC_DIR", "./pkg"))
CORS_ALLOW_ORIGINS = _csv_env("CORS_ALLOW_ORIGINS")
CORS_ALLOW_METHODS = _csv_env("CORS_ALLOW_METHODS", "GET,POST,OPTIONS")
CORS_ALLOW_HEADERS = _csv_env("CORS_ALLOW_HEADERS", "Content-Type")

# ---------- Shared state ----------
STORE = OrderedListStore(SEED_ITEMS)
SERVICE = ListService(STORE, delete_mode=DELETE_MODE)


# ---------- Request models ----------
class NewItem(BaseModel):
    item: str


class DeleteRequest(BaseModel):
    index: Optional[StrictInt] = Field(None, description="position to delete (index mode)")
    item: Optional[str] = Field(None, description="value to delete (value mode)")


class SwapRequest(BaseModel):
    indexes: List[StrictInt] = Field(..., min_length=2, max_length=2, description="two positions to exchange")


# ---------- Startup ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    LOGGER.info(
        "list ready: %d items, delete mode %s", len(STORE), SERVICE.delete_mode
    )
    yield


app = FastAPI(title="Sharelist API", version="0.1.0", lifespan=lifespan)

if CORS_ALLOW_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )


@app.exception_handler(ListError)
async def list_error_handler(request: Request, exc: ListError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ---------- Health / page ----------
@app.get("/health")
def health():
    return {"ok": True, "items": len(STORE), "delete_mode": SERVICE.delete_mode}


@app.get("/")
def page():
    if not INDEX_HTML.is_file():
        raise HTTPException(404, "index.html not found")
    return FileResponse(INDEX_HTML)


if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# ---------- List endpoints ----------
@app.get("/api/todo", response_model=List[str])
def get_items():
    return SERVICE.list_items()


@app.post("/api/new", response_model=List[str])
def save_item(req: NewItem):
    return SERVICE.add(req.item)


@app.get("/api/clear", response_model=List[str])
def clear_items():
    return SERVICE.clear()


@app.post("/api/delete", response_model=List[str])
def delete_item(req: DeleteRequest):
    """Delete by index or by value, whichever this deployment accepts."""
    return SERVICE.delete(index=req.index, item=req.item)


@app.post("/api/swap", response_model=List[str])
def swap_items(req: SwapRequest):
    return SERVICE.swap(req.indexes)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Sharelist API server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", default=os.getenv("SHARELIST_LOG_LEVEL", "info"))
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    level = getattr(logging, str(args.log_level).upper(), logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%H:%M:%S")
    uvicorn.run(app, host=args.host, port=args.port, log_level=str(args.log_level).lower())


if __name__ == "__main__":
    main()
