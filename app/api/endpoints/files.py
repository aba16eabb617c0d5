from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.api.deps import get_file_store
from app.services.file_store import FileStore

router = APIRouter(tags=["Files"])


@router.post("/add/{name:path}", response_class=PlainTextResponse)
async def add_file(
    name: str,
    request: Request,
    store: FileStore = Depends(get_file_store)
):
    content = await request.body()
    await store.create(name, content)
    return ""


@router.get("/ls", response_class=PlainTextResponse)
def list_files(store: FileStore = Depends(get_file_store)):
    return "\n".join(store.names())


@router.api_route("/rm/{name:path}", methods=["GET", "DELETE"], response_class=PlainTextResponse)
def remove_file(
    name: str,
    store: FileStore = Depends(get_file_store)
):
    store.delete(name)
    return ""


@router.api_route("/update/{name:path}", methods=["POST", "PUT"], response_class=PlainTextResponse)
async def update_file(
    name: str,
    request: Request,
    store: FileStore = Depends(get_file_store)
):
    # Create or overwrite
    content = await request.body()
    await store.write(name, content)
    return ""
