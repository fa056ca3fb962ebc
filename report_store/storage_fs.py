import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from .errors import InvalidFileName, IOFailure, NotFound, StoreUnavailable

logger = logging.getLogger(__name__)

RESERVED_NAMES = {"", ".", ".."}
FORBIDDEN_CHARS = ("/", "\\", "\x00")
TEMP_PREFIX = ".upload-"
TEMP_SUFFIX = ".tmp"


class FileSystemStorage:
    """Плоская папка с PDF-файлами, которая сама является базой отчетов."""

    def __init__(self, root):
        # Относительный путь считается от рабочей директории процесса
        self.root = Path(root).absolute()

    def ensure_root(self):
        if self.root.is_dir():
            return False
        logger.info(f"Creating reports folder at: {self.root}")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure("Failed to create reports folder", details=str(e)) from e
        return True

    def root_exists(self):
        return self.root.is_dir()

    def list_names(self):
        if not self.root.is_dir():
            raise StoreUnavailable(details=f"{self.root} does not exist")
        try:
            return sorted(entry.name for entry in os.scandir(self.root))
        except (FileNotFoundError, PermissionError) as e:
            raise StoreUnavailable(details=str(e)) from e
        except OSError as e:
            raise IOFailure("Failed to read reports", details=str(e)) from e

    def resolve(self, file_name):
        if not isinstance(file_name, str) or file_name in RESERVED_NAMES:
            raise InvalidFileName(details=f"{file_name!r} is not a valid file name")
        if any(ch in file_name for ch in FORBIDDEN_CHARS):
            raise InvalidFileName(details=f"{file_name!r} must not contain path separators")
        return self.root / file_name

    def exists(self, file_name):
        path = self.resolve(file_name)
        try:
            return path.is_file()
        except OSError as e:
            raise IOFailure("Failed to check file", details=str(e)) from e

    def entry_path(self, name):
        # Имя получено из самой папки, проверка не нужна
        return self.root / name

    def stat_mtime(self, path):
        try:
            mtime = path.stat().st_mtime
        except OSError as e:
            raise IOFailure("Failed to read reports", details=str(e)) from e
        return datetime.fromtimestamp(mtime, tz=timezone.utc)

    def open_path(self, file_name):
        if not self.exists(file_name):
            raise NotFound(details=file_name)
        return self.resolve(file_name)

    def write_atomic(self, file_name, data):
        """Пишет во временный файл в той же папке и атомарно переименовывает.

        При ошибке временный файл удаляется, существующий отчет не меняется.
        """
        path = self.resolve(file_name)
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=self.root)
        except OSError as e:
            raise IOFailure("Failed to save report", details=str(e)) from e

        try:
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(data)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise IOFailure("Failed to save report", details=str(e)) from e
        return path
