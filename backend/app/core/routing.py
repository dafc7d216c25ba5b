"""Route table built once at startup and mounted onto the FastAPI app.

Registration errors (duplicate method/path pairs, missing handlers, unknown
methods) raise while the table is being built so a misconfigured service never
starts serving requests.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from backend.app.core.pipeline import RequestContext, Stage, run_chain

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})


class RouteConfigurationError(Exception):
    """Raised for invalid route registrations."""


class DuplicateRouteError(RouteConfigurationError):
    """Raised when a (method, path) pair is registered twice."""


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    stages: Tuple[Stage, ...]
    name: Optional[str] = None

    def handle(self, ctx: RequestContext) -> Response:
        return run_chain(self.stages, ctx)


class RouteTable:
    """Read-only mapping of ``(method, path)`` to ``Route``."""

    def __init__(self, routes: Dict[Tuple[str, str], Route]):
        self._routes = MappingProxyType(dict(routes))

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key) -> bool:
        return key in self._routes

    def lookup(self, method: str, path: str) -> Optional[Route]:
        return self._routes.get((method.upper(), path))

    def dispatch(self, ctx: RequestContext) -> Response:
        route = self.lookup(ctx.method, ctx.path)
        if route is None:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"})
        return route.handle(ctx)


class RouteTableBuilder:
    def __init__(self):
        self._routes: Dict[Tuple[str, str], Route] = {}
        self._sealed = False

    def add(self, method: str, path: str, *stages: Stage, name: Optional[str] = None) -> "RouteTableBuilder":
        if self._sealed:
            raise RouteConfigurationError("Route table already built")
        method = (method or "").upper()
        if method not in HTTP_METHODS:
            raise RouteConfigurationError(f"Unsupported HTTP method: {method!r}")
        if not path or not path.startswith("/"):
            raise RouteConfigurationError(f"Route path must start with '/': {path!r}")
        if not stages:
            raise RouteConfigurationError(f"{method} {path} has no handlers")
        for position, stage in enumerate(stages):
            if not callable(stage):
                raise RouteConfigurationError(f"{method} {path} handler #{position} is not callable: {stage!r}")
        key = (method, path)
        if key in self._routes:
            raise DuplicateRouteError(f"{method} {path} is already registered")
        self._routes[key] = Route(method=method, path=path, stages=tuple(stages), name=name)
        return self

    def get(self, path: str, *stages: Stage, name: Optional[str] = None) -> "RouteTableBuilder":
        return self.add("GET", path, *stages, name=name)

    def post(self, path: str, *stages: Stage, name: Optional[str] = None) -> "RouteTableBuilder":
        return self.add("POST", path, *stages, name=name)

    def build(self) -> RouteTable:
        self._sealed = True
        return RouteTable(self._routes)


def _endpoint_for(route: Route):
    async def endpoint(request: Request) -> Response:
        ctx = RequestContext(
            method=request.method,
            path=request.url.path,
            body=await request.body(),
            headers=dict(request.headers),
        )
        return await run_in_threadpool(route.handle, ctx)

    endpoint.__name__ = route.name or f"{route.method.lower()}_{route.path.strip('/').replace('/', '_') or 'root'}"
    return endpoint


def mount_route_table(app: FastAPI, table: RouteTable) -> None:
    """Expose every route in ``table`` through ``app``."""
    for route in table:
        app.add_api_route(route.path, _endpoint_for(route), methods=[route.method], name=route.name)
        logger.debug("Mounted %s %s with %d stage(s)", route.method, route.path, len(route.stages))
    app.state.route_table = table
