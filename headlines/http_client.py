import asyncio

import httpx

from .config import Settings, get_settings

# One pooled client per distinct transport configuration
_clients: dict[tuple, httpx.AsyncClient] = {}
_clients_lock = asyncio.Lock()


def _client_key(settings: Settings) -> tuple:
    return (
        settings.http_timeout,
        settings.http_max_connections,
        settings.http_max_keepalive,
        settings.http_user_agent,
    )


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(
        max_connections=settings.http_max_connections,
        max_keepalive_connections=settings.http_max_keepalive,
    )
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        limits=limits,
        headers={
            "User-Agent": settings.http_user_agent,
            "Accept": "application/json",
        },
    )


async def get_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Shared client built from ``settings`` (the cached settings by default)."""
    settings = settings or get_settings()
    key = _client_key(settings)
    client = _clients.get(key)
    if client is None:
        async with _clients_lock:
            client = _clients.get(key)
            if client is None:
                client = _clients[key] = build_http_client(settings)
    return client


async def shutdown_http_client() -> None:
    clients = list(_clients.values())
    _clients.clear()
    for client in clients:
        await client.aclose()
