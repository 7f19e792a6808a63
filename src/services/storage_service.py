"""Low-level JSON file I/O operations with locking."""
import json
import os
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict

from src.utils.exceptions import FileWriteError

if sys.platform != "win32":
    import fcntl


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Dict[str, Any]:
    """
    Load and parse JSON file with UTF-8 encoding.

    Args:
        file_path: Path to JSON file
        retry_count: Number of retry attempts for permission errors (default: 3)
        retry_delay: Delay in seconds between retries (default: 0.1)

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
                continue
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}",
                e.doc,
                e.pos
            )

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def save_json(file_path: str, data: Dict[str, Any]) -> None:
    """
    Save data to JSON file atomically with UTF-8 encoding.

    Args:
        file_path: Path to JSON file
        data: Dictionary to save

    Raises:
        FileWriteError: If write operation fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path and not os.path.exists(dir_path):
        os.makedirs(dir_path, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=dir_path if dir_path else ".",
        prefix=".tmp_",
        suffix=".json"
    )

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        # os.replace overwrites atomically on both POSIX and Windows
        os.replace(temp_path, file_path)

    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise FileWriteError(f"Failed to write file {file_path}: {e}") from e


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Context manager for an exclusive lock on `<file_path>.lock`.

    Args:
        file_path: Path of the file to protect
        timeout: Maximum seconds to wait for lock acquisition (default: 5.0)

    Usage:
        with lock_file('data/registrations.json'):
            data = load_json('data/registrations.json')
            data['registrations'].append(row)
            save_json('data/registrations.json', data)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path and not os.path.exists(dir_path):
        os.makedirs(dir_path, exist_ok=True)

    start_time = time.time()

    if sys.platform == "win32":
        while True:
            try:
                lock_fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_RDWR)
                break
            except FileExistsError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        try:
            yield
        finally:
            os.close(lock_fd)
            if os.path.exists(lock_path):
                os.remove(lock_path)
    else:
        lock_handle = open(lock_path, "a+")
        try:
            while True:
                try:
                    fcntl.flock(lock_handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                    break
                except OSError:
                    if time.time() - start_time > timeout:
                        raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                    time.sleep(0.05)

            yield

        finally:
            fcntl.flock(lock_handle.fileno(), fcntl.LOCK_UN)
            lock_handle.close()


def append_json_record(file_path: str, key: str, record: Dict[str, Any]) -> int:
    """
    Append a record to the list stored under `key`, creating the file if needed.

    Args:
        file_path: Path to JSON file
        key: Top-level list key (e.g. "registrations")
        record: Record to append

    Returns:
        Number of records stored after the append

    Raises:
        FileWriteError: If the file cannot be written
        TimeoutError: If the lock cannot be acquired
        json.JSONDecodeError: If the existing file is malformed
    """
    with lock_file(file_path):
        if os.path.exists(file_path):
            data = load_json(file_path)
        else:
            data = {}

        records = data.setdefault(key, [])
        records.append(record)
        save_json(file_path, data)
        return len(records)
