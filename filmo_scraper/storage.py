"""JSON artifact storage: one file per crawl target, rewritten in full on every save."""

import json
import logging
import os
import re
import tempfile

from .errors import PersistenceError

logger = logging.getLogger("filmo_scraper")

UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
ARTIFACT_MODE = 0o644


def safe_key_part(value: str) -> str:
    """Make a target id usable as a single path component."""
    cleaned = UNSAFE_KEY_CHARS.sub("_", value).strip(".")
    return cleaned or "_"


class JsonSink:
    def __init__(self, output_dir: str = "scraped"):
        self.output_dir = output_dir
        self.saves = 0

    def path_for(self, key: str) -> str:
        root = os.path.abspath(self.output_dir)
        dest = os.path.abspath(os.path.join(root, f"{key}.json"))
        if os.path.commonpath([root, dest]) != root:
            raise PersistenceError(f"key '{key}' escapes output directory {root}")
        return dest

    def save(self, key: str, value) -> bool:
        """Serialize value to the artifact for key.

        Returns False (after logging) if the write failed. The previous
        artifact, if any, is left untouched in that case.
        """
        try:
            self._write(key, value)
        except PersistenceError as e:
            logger.error(f"error: {e}")
            return False
        self.saves += 1
        return True

    def _write(self, key: str, value):
        dest = self.path_for(key)
        try:
            data = json.dumps(value, ensure_ascii=False, indent=2, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"could not marshal '{key}' to JSON: {e}") from e

        dest_dir = os.path.dirname(dest)
        tmp_path = None
        try:
            os.makedirs(dest_dir, exist_ok=True)
            # Write next to the target then rename over it, so readers see old or new, never half
            fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".json", dir=dest_dir)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            # mkstemp creates files 0600
            os.chmod(tmp_path, ARTIFACT_MODE)
            os.replace(tmp_path, dest)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError(f"could not write file \"{dest}\": {e}") from e

    def load(self, key: str):
        with open(self.path_for(key), encoding="utf-8") as f:
            return json.load(f)
