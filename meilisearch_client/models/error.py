from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class APIError(BaseModel):
    """Error object returned by the search service on failed requests."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: Optional[str] = None
    error_code: Optional[str] = None
    error_type: Optional[str] = None
    error_link: Optional[str] = None
