import logging
import os
import tempfile

from src.common.utils.custom_exceptions import StorageError

logger = logging.getLogger(__name__)


def ensure_dir(path: str) -> None:
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as err:
        logger.error(f"Error creating directory {path}: {err}")
        raise StorageError(path, "create directory", str(err)) from err


def atomic_write(path: str, data: bytes) -> None:
    """Write data next to path, then rename over it.

    Readers only ever see the old file or the complete new one.
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=directory, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_path, path)
    except OSError as err:
        logger.error(f"Error writing {path}: {err}")
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise StorageError(path, "write", str(err)) from err
