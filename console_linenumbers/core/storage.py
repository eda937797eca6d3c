"""
Storage utilities: file locking and atomic file writes.
"""

import os
import hashlib
import stat
import tempfile
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
from contextlib import contextmanager

from filelock import FileLock, Timeout as FileLockTimeout


# =============================================================================
# FILE LOCKING (Race condition prevention)
# =============================================================================

class FileLockError(Exception):
    """Raised when file lock cannot be acquired."""
    pass


@contextmanager
def file_lock(file_path: str, timeout: float = 5.0):
    """
    Context manager for an exclusive lock on file_path.

    Uses the filelock library (a <file_path>.lock file alongside the target).

    Raises:
        FileLockError: If lock cannot be acquired within timeout

    Example:
        with file_lock('/path/to/settings.json'):
            write_settings(...)
    """
    lock_path = f"{file_path}.lock"

    lock_dir = os.path.dirname(lock_path)
    if lock_dir:
        os.makedirs(lock_dir, exist_ok=True)

    locker = FileLock(lock_path)
    try:
        locker.acquire(timeout=timeout)
    except FileLockTimeout:
        raise FileLockError(
            f"Could not acquire lock on {file_path} within {timeout}s"
        )
    try:
        yield
    finally:
        locker.release()


# =============================================================================
# SAFE FILE WRITER
# =============================================================================

@dataclass
class WriteResult:
    """Result of a safe write operation."""
    success: bool
    path: str
    content_hash: str
    error: Optional[str] = None
    preserved_permissions: Optional[int] = None


class SafeFileWriter:
    """
    Replaces a file in one step so readers never see half a document.

    The new content goes to a temp file beside the target, is read back
    and compared by SHA-256, takes over the old file's permission bits,
    and is then renamed over the target while the file lock is held.
    """

    def __init__(self, lock_timeout: float = 5.0):
        self.lock_timeout = lock_timeout

    def write(self, path: str, content: str) -> WriteResult:
        """Write content to path. Failures are reported, not raised."""
        target = Path(path)
        try:
            with file_lock(str(target.resolve()), timeout=self.lock_timeout):
                mode = self._existing_mode(target)
                digest = self._replace(target, content.encode("utf-8"), mode)
        except (FileLockError, OSError) as e:
            return WriteResult(False, str(path), "", str(e))

        return WriteResult(True, str(target), digest, preserved_permissions=mode)

    @staticmethod
    def _existing_mode(target: Path) -> Optional[int]:
        try:
            return target.stat().st_mode
        except FileNotFoundError:
            return None

    @staticmethod
    def _replace(target: Path, data: bytes, mode: Optional[int]) -> str:
        digest = hashlib.sha256(data).hexdigest()[:16]
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        temp = Path(temp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())

            if hashlib.sha256(temp.read_bytes()).hexdigest()[:16] != digest:
                raise OSError(f"Content verification failed for {target}")
            if mode is not None:
                os.chmod(temp, stat.S_IMODE(mode))
            os.replace(temp, target)
        except Exception:
            if temp.exists():
                temp.unlink()
            raise
        return digest
