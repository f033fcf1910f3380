"""
State management for the content pipeline.

The content document is shared by every pipeline stage through a single
JSON file. Keys are camelCase so the file stays readable by the other
stages.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from content_robot.models import ContentDocument
from content_robot.services.base import StateStore
from content_robot.utils.errors import PersistenceError
from content_robot.utils.logging import get_logger

logger = get_logger(__name__)


class JsonStateStore(StateStore):
    """
    State storage backed by one JSON file.

    Writes go to a temporary file next to the target and are moved into
    place, so a failed save never leaves a half-written document behind.
    """

    def __init__(self, path: Union[str, Path] = "content.json") -> None:
        self.path = Path(path)

    def load(self) -> ContentDocument:
        """Read and validate the content document."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PersistenceError("load", str(self.path), "file does not exist") from e
        except OSError as e:
            raise PersistenceError("load", str(self.path), str(e)) from e

        try:
            document = ContentDocument.model_validate(json.loads(raw))
        except json.JSONDecodeError as e:
            raise PersistenceError("load", str(self.path), f"invalid JSON: {e}") from e
        except ValidationError as e:
            raise PersistenceError(
                "load", str(self.path), f"invalid content document ({e.error_count()} errors)"
            ) from e

        logger.info(f"Loaded content document for '{document.search_term}' from {self.path}")
        return document

    def save(self, document: ContentDocument) -> None:
        """Write the content document."""
        data = json.dumps(document.to_state(), indent=2, ensure_ascii=False)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(data)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError("save", str(self.path), str(e)) from e

        logger.info(
            f"Saved content document with {len(document.sentences)} sentences to {self.path}"
        )

    def initialize(self, search_term: str, maximum_sentences: int) -> ContentDocument:
        """Create a fresh document for ``search_term`` and save it."""
        try:
            document = ContentDocument(
                search_term=search_term,
                maximum_sentences=maximum_sentences,
            )
        except ValidationError as e:
            raise PersistenceError(
                "initialize", str(self.path), f"invalid document values ({e.error_count()} errors)"
            ) from e

        self.save(document)
        return document
