from app.core import config
from app.services.file_store import FileStore


def get_file_store() -> FileStore:
    return FileStore(config.FILESTORE_ROOT)
