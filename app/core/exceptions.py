class FileStoreError(Exception):
    """Base class for file store failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadError(FileStoreError):
    """A stored file could not be opened or read."""


class WriteError(FileStoreError):
    """A stored file could not be written or removed."""


class FileAlreadyExistsError(FileStoreError):
    pass


class FileNotFoundInStoreError(FileStoreError):
    pass


class InvalidFileNameError(FileStoreError):
    pass


class InvalidRootError(FileStoreError):
    """The configured store root exists but is not a directory."""
