"""FormatRequest Pydantic model with strict validation (extra=forbid)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from models.options import FormatOptions


class FormatRequest(BaseModel):
    """Incoming request body for the POST /format endpoint.

    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    html: str
    remove: list[str] = []
    flatten: list[str] = []
    flatten_all: bool = False
    remove_media: bool = False
    element_id: Optional[str] = None

    def options(self) -> FormatOptions:
        return FormatOptions(
            remove=self.remove,
            flatten=self.flatten,
            flatten_all=self.flatten_all,
            remove_media=self.remove_media,
        )
