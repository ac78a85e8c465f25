from fastapi import Request

from cookmuse.discovery import DiscoveryOrchestrator
from cookmuse.platforms import SearchClient


def get_search_client(request: Request) -> SearchClient:
    return request.app.state.search_client


def get_orchestrator(request: Request) -> DiscoveryOrchestrator:
    return DiscoveryOrchestrator(get_search_client(request))
