"""FormatResponse Pydantic model."""

from pydantic import BaseModel


class FormatResponse(BaseModel):
    """Response body for the POST /format endpoint.

    ``removed`` holds the serialized HTML of every detached element, in
    removal order (tags, ids, classes, tag+class).
    """

    html: str
    removed: list[str] = []
