import json
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple, Type, TypeVar, Union
from urllib.parse import quote

if TYPE_CHECKING:
    from meilisearch_client.core.index import Index
    from meilisearch_client.models.search_results import SearchResults

T = TypeVar('T')

WILDCARD = "*"


def encode(value: str) -> str:
    # Only RFC 3986 unreserved characters are left as-is.
    return quote(value, safe="")


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _names(values: Sequence[str], what: str) -> Tuple[str, ...]:
    # A bare str is a Sequence[str] too and would be split into characters.
    if isinstance(values, str):
        raise TypeError(f"{what} must be a sequence of strings, not a str")
    return tuple(values)


@dataclass(frozen=True)
class FacetsDistribution:
    """
    Which facets to count.

    facets is None for the wildcard (every facet), otherwise the facet names.
    A Query without any FacetsDistribution does not ask for counts at all.
    """
    facets: Optional[Tuple[str, ...]] = None

    @classmethod
    def all(cls) -> "FacetsDistribution":
        return cls(None)

    @classmethod
    def only(cls, facets: Sequence[str]) -> "FacetsDistribution":
        return cls(_names(facets, "facets"))

    @property
    def is_wildcard(self) -> bool:
        return self.facets is None

    def to_param(self) -> str:
        if self.facets is None:
            return WILDCARD
        return encode(_to_json(list(self.facets)))


@dataclass(frozen=True)
class Query:
    """
    Search parameters, built by chaining `with_*` calls.

    Query is immutable: every `with_*` call returns a new Query and leaves
    the receiver untouched. Setting the same parameter twice keeps the last value.

        query = Query("space").with_offset(42).with_limit(21)
        query.to_url()  # '?q=space&offset=42&limit=21'

    Nothing is validated here, the search service decides what is acceptable.
    """
    query: str
    # Number of documents to skip. Server default: 0
    offset: Optional[int] = None
    # Maximum number of documents returned. Server default: 20
    limit: Optional[int] = None
    filters: Optional[str] = None
    # Outer groups are AND-ed, values inside a group are OR-ed.
    facet_filters: Optional[Tuple[Tuple[str, ...], ...]] = None
    facets_distribution: Optional[FacetsDistribution] = None
    # Comma separated list, e.g. "overview,title"
    attributes_to_retrieve: Optional[str] = None
    attributes_to_crop: Optional[str] = None
    # Characters kept around a match in cropped attributes. Server default: 200
    crop_length: Optional[int] = None
    attributes_to_highlight: Optional[str] = None

    def with_offset(self, offset: int) -> "Query":
        return replace(self, offset=offset)

    def with_limit(self, limit: int) -> "Query":
        return replace(self, limit=limit)

    def with_filters(self, filters: str) -> "Query":
        return replace(self, filters=filters)

    def with_facet_filters(self, facet_filters: Sequence[Sequence[str]]) -> "Query":
        groups = _names(facet_filters, "facet_filters")
        return replace(self, facet_filters=tuple(_names(group, "facet filter group") for group in groups))

    def with_facets_distribution(
        self,
        facets_distribution: Union[FacetsDistribution, Sequence[str], None],
    ) -> "Query":
        """None asks for every facet, a sequence asks for the named ones."""
        if isinstance(facets_distribution, FacetsDistribution):
            value = facets_distribution
        elif facets_distribution is None:
            value = FacetsDistribution.all()
        else:
            value = FacetsDistribution.only(facets_distribution)
        return replace(self, facets_distribution=value)

    def with_attributes_to_retrieve(self, attributes_to_retrieve: str) -> "Query":
        return replace(self, attributes_to_retrieve=attributes_to_retrieve)

    def with_attributes_to_crop(self, attributes_to_crop: str) -> "Query":
        return replace(self, attributes_to_crop=attributes_to_crop)

    def with_crop_length(self, crop_length: int) -> "Query":
        return replace(self, crop_length=crop_length)

    def with_attributes_to_highlight(self, attributes_to_highlight: str) -> "Query":
        return replace(self, attributes_to_highlight=attributes_to_highlight)

    def to_url(self) -> str:
        """
        Serialize to the query string of the search endpoint.

        `q` always comes first, then every parameter that was set, in a fixed
        order. Integers are written as-is, text is percent-encoded, lists are
        compact JSON then percent-encoded. The facets wildcard is a bare `*`.
        """
        url = f"?q={encode(self.query)}"

        if self.offset is not None:
            url += f"&offset={self.offset}"
        if self.limit is not None:
            url += f"&limit={self.limit}"
        if self.filters is not None:
            url += f"&filters={encode(self.filters)}"
        if self.facet_filters is not None:
            groups = [list(group) for group in self.facet_filters]
            url += f"&facetFilters={encode(_to_json(groups))}"
        if self.facets_distribution is not None:
            url += f"&facetsDistribution={self.facets_distribution.to_param()}"
        if self.attributes_to_retrieve is not None:
            url += f"&attributesToRetrieve={encode(self.attributes_to_retrieve)}"
        if self.attributes_to_crop is not None:
            url += f"&attributesToCrop={encode(self.attributes_to_crop)}"
        if self.crop_length is not None:
            url += f"&cropLength={self.crop_length}"
        if self.attributes_to_highlight is not None:
            url += f"&attributesToHighlight={encode(self.attributes_to_highlight)}"

        return url

    async def execute(
        self,
        index: "Index",
        document_type: Type[T] = Dict[str, Any],
    ) -> "SearchResults[T]":
        """Shortcut for `index.search(self, document_type)`."""
        return await index.search(self, document_type)
