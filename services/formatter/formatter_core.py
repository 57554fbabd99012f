# services/formatter/formatter_core.py
import json
from typing import Any

from pydantic import BaseModel

from utils.sanitization import clean_text

ERROR_PREFIX = "Error: "


class RecordFormatter:

    @staticmethod
    def to_jsonable(record: Any) -> Any:
        """
        Plain JSON structure for a record, a list of records, or None.
        Absent (None) fields are dropped; field order follows the model.
        """
        if isinstance(record, BaseModel):
            return record.model_dump(mode="json", exclude_none=True)
        if isinstance(record, (list, tuple)):
            return [RecordFormatter.to_jsonable(r) for r in record]
        return record

    @staticmethod
    def render(record: Any) -> str:
        """Stable, indented JSON text for the calling harness."""
        return json.dumps(RecordFormatter.to_jsonable(record), indent=2, ensure_ascii=False)

    @staticmethod
    def render_error(error: Any) -> str:
        """A single "Error: ..." line."""
        message = clean_text(str(error)) or error.__class__.__name__
        return f"{ERROR_PREFIX}{message}"
