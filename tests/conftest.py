import pytest


@pytest.fixture
def search_body():
    return {
        "hits": [
            {"id": 1, "title": "Interstellar", "genres": ["Sci-Fi"]},
            {"id": 2, "title": "Gravity", "genres": ["Sci-Fi", "Thriller"]},
        ],
        "offset": 0,
        "limit": 20,
        "nbHits": 2,
        "exhaustiveNbHits": True,
        "processingTimeMs": 3,
        "query": "space",
    }
