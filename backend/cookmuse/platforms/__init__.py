from cookmuse.platforms.base import (
    CandidateVideo,
    SearchClient,
    SearchClientRegistry,
    SearchHit,
    SearchOrder,
)

# Import clients to trigger registration
from cookmuse.platforms import youtube as _  # noqa: F401

__all__ = [
    "CandidateVideo",
    "SearchClient",
    "SearchClientRegistry",
    "SearchHit",
    "SearchOrder",
]
