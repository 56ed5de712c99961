import logging
import os
import shutil
import time

from src.common.utils.custom_exceptions import StorageError
from src.common.utils.file_writer import ensure_dir

logger = logging.getLogger(__name__)


class IdPhotoRepository:
    def __init__(self, photo_dir: str):
        self.photo_dir = photo_dir
        ensure_dir(self.photo_dir)

    def store_photo(self, source_path: str) -> str:
        ext = os.path.splitext(source_path)[1]
        target = os.path.join(self.photo_dir, f"id_{time.time_ns()}{ext}")
        try:
            shutil.copyfile(source_path, target)
        except OSError as err:
            logger.error(f"Error copying ID photo {source_path} to {target}: {err}")
            if os.path.exists(target):
                os.remove(target)
            raise StorageError(target, "copy ID photo to", str(err)) from err

        logger.info(f"Stored ID photo {target}")
        return target

    def remove_photo(self, path: str):
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as err:
            logger.error(f"Error removing ID photo {path}: {err}")
            raise StorageError(path, "remove", str(err)) from err
