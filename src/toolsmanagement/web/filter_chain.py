# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""ASGI middleware running the web filters around every HTTP request.

The downstream application runs to completion inside the innermost link of
the chain. Its ASGI messages are recorded, so filters see the final status
and may add headers, and are then replayed to the server unchanged apart
from the start message's headers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from toolsmanagement.web.filters import CallNext, WebFilter


class RecordedResponse:
    """Response produced by the application, held until the filters return."""

    def __init__(self) -> None:
        self.status_code = 200
        self._start: Message = {"type": "http.response.start", "status": 200, "headers": []}
        self._messages: list[Message] = []

    @property
    def headers(self) -> MutableHeaders:
        return MutableHeaders(raw=self._start["headers"])

    async def record(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self._start = {**message, "headers": list(message.get("headers", []))}
            self.status_code = message["status"]
        else:
            self._messages.append(message)

    async def replay(self, send: Send) -> None:
        await send({**self._start, "status": self.status_code})
        for message in self._messages:
            await send(message)


class WebFilterChainMiddleware:
    """Runs *filters* in order; each one decides whether to call the next."""

    def __init__(self, app: ASGIApp, filters: Sequence[WebFilter] = ()) -> None:
        self.app = app
        self._filters = list(filters)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def call_app(request: Request) -> RecordedResponse:
            recorded = RecordedResponse()
            await self.app(scope, request.receive, recorded.record)
            return recorded

        chain: CallNext = call_app
        for web_filter in reversed(self._filters):
            chain = _link(web_filter, chain)

        response: Any = await chain(Request(scope, receive, send))
        await response.replay(send)


def _link(web_filter: WebFilter, next_call: CallNext) -> CallNext:
    async def call(request: Request) -> Any:
        if web_filter.should_not_filter(request):
            return await next_call(request)
        return await web_filter.do_filter(request, next_call)

    return call
