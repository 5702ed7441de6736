import logging
from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from meilisearch_client.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class SearchResults(BaseModel, Generic[T]):
    """
    Decoded body of a search request.

    Field names are snake_case here and camelCase on the wire
    (nb_hits <-> nbHits). Keys the service adds later are ignored.
    facets_distribution and exhaustive_facets_count are only sent back
    when facets were requested, and each one is read from its own key.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    hits: List[T]
    offset: NonNegativeInt
    limit: NonNegativeInt
    nb_hits: NonNegativeInt
    exhaustive_nb_hits: bool
    facets_distribution: Optional[Dict[str, Dict[str, NonNegativeInt]]] = None
    exhaustive_facets_count: Optional[bool] = None
    processing_time_ms: NonNegativeInt
    query: str


def parse_search_results(data: Any, document_type: Type[T] = Dict[str, Any]) -> SearchResults[T]:
    """
    Validate a search response as SearchResults[document_type].

    `data` is either an already decoded JSON object or raw JSON text/bytes.
    Every hit is validated as `document_type`. Any mismatch raises DecodeError,
    there are no partial results.
    """
    model = SearchResults[document_type]
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return model.model_validate_json(data)
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning("Could not decode search response: %d error(s)", e.error_count())
        raise DecodeError(details=e.errors(include_url=False)) from e
