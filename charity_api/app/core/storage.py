"""
JSON document storage for the organization lists.

All orphanages and old age homes live in one JSON document::

    {"orphanages": [...], "oldageHomes": [...]}

The document is read in full on every request and written back in full
after every mutation; nothing is cached between requests.  Reading is
fail-open: if the file is missing, unreadable or not valid JSON, an
empty document is returned so that listing endpoints keep working.
Writing reports failure through its return value and callers must turn
a ``False`` into an error response.

``document_session`` serializes load/modify/save cycles within the
process so that two concurrent mutations cannot overwrite each other.
"""

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .config import resolve_path, settings

logger = logging.getLogger(__name__)

ORPHANAGES_KEY = "orphanages"
OLDAGE_HOMES_KEY = "oldageHomes"
DOCUMENT_KEYS = (ORPHANAGES_KEY, OLDAGE_HOMES_KEY)

Document = Dict[str, List[Dict[str, Any]]]

# Mode given to a newly created document; an existing file keeps its own.
NEW_FILE_MODE = 0o644

_lock = threading.RLock()


def get_data_path() -> Path:
    """Return the absolute path of the organizations document."""
    return resolve_path(settings.data_file)


def empty_document() -> Document:
    return {key: [] for key in DOCUMENT_KEYS}


def load_document() -> Document:
    """Read and parse the organizations document.

    Any read or parse failure is logged and an empty document is
    returned instead of raising.  A document missing one of the two
    lists gets an empty list for it.
    """
    path = get_data_path()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logger.warning("Organizations data file %s does not exist; using empty document", path)
        return empty_document()
    except (OSError, ValueError):
        logger.exception("Error loading organizations data from %s", path)
        return empty_document()
    if not isinstance(data, dict):
        logger.error("Organizations data in %s is not a JSON object; using empty document", path)
        return empty_document()
    for key in DOCUMENT_KEYS:
        if not isinstance(data.get(key), list):
            data[key] = []
    return data


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return NEW_FILE_MODE


def save_document(document: Document) -> bool:
    """Serialize and write the whole document.

    The document is written to a temporary file in the same directory
    which then replaces the target, so a reader never observes a
    partially written file.  Returns ``True`` on success and ``False``
    if serialization or any filesystem operation failed.
    """
    path = get_data_path()
    tmp_name = None
    try:
        payload = json.dumps(document, indent=2, ensure_ascii=False)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
        return True
    except (OSError, TypeError, ValueError):
        logger.exception("Error saving organizations data to %s", path)
        return False
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_name)


@contextmanager
def document_session() -> Iterator[Document]:
    """Yield a freshly loaded document while holding the storage lock.

    Callers mutate the yielded document and call ``save_document``
    before leaving the block.  The lock is held for the whole block so
    that concurrent read-modify-write cycles run one after another.
    """
    with _lock:
        yield load_document()
