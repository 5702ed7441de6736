from typing import TYPE_CHECKING, Any, Dict, Type, TypeVar

from meilisearch_client.models.search_results import SearchResults, parse_search_results
from meilisearch_client.search.query import Query, encode

if TYPE_CHECKING:
    from meilisearch_client.core.client import Client

T = TypeVar('T')


class Index:
    def __init__(self, client: "Client", uid: str):
        self.client = client
        self.uid = uid

    async def search(
        self,
        query: Query,
        document_type: Type[T] = Dict[str, Any],
    ) -> SearchResults[T]:
        """
        Run `query` against this index and decode every hit as `document_type`.

            results = await index.search(Query("space").with_limit(5), Movie)
            titles = [movie.title for movie in results.hits]
        """
        path = f"/indexes/{encode(self.uid)}/search{query.to_url()}"
        body = await self.client.get(path, expected_status=200)
        return parse_search_results(body, document_type)
