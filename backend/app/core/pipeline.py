"""Request context and handler-chain execution.

A stage is any callable taking a ``RequestContext``. Returning ``None`` hands
control to the next stage; returning a response ends the request.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel
from starlette.responses import Response


@dataclass
class RequestContext:
    method: str
    path: str
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    payload: Optional[BaseModel] = None
    state: Dict[str, Any] = field(default_factory=dict)


Stage = Callable[[RequestContext], Optional[Response]]


class ChainExhaustedError(RuntimeError):
    """Raised when no stage in a chain produced a response."""


def run_chain(stages: Iterable[Stage], ctx: RequestContext) -> Response:
    for stage in stages:
        response = stage(ctx)
        if response is not None:
            return response
    raise ChainExhaustedError(f"No stage produced a response for {ctx.method} {ctx.path}")
