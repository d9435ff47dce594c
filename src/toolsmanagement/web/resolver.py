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
"""ParameterResolver — inspects handler signatures and binds arguments from a Request."""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from starlette.requests import Request

from toolsmanagement.kernel.exceptions import ValidationException
from toolsmanagement.web.params import Body, File, PathVar, QueryParam, UploadedFile, Valid

_BINDING_TYPES = {PathVar, QueryParam, Body, File}
_MISSING = object()
_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


@dataclass
class ResolvedParam:
    """Metadata for a single handler parameter."""

    name: str
    binding_type: type
    inner_type: Any
    default: Any = _MISSING
    validate: bool = False

    @property
    def required(self) -> bool:
        return self.default is _MISSING


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, types.UnionType):
        args = [a for a in get_args(tp) if a is not type(None)]
        return args[0] if args else str
    return tp


class ParameterResolver:
    """Inspects a handler's signature once and resolves its arguments per request.

    Missing required parameters and values that cannot be converted to the
    declared type raise :class:`ValidationException`, which maps to 400.
    """

    def __init__(self, handler: Any) -> None:
        self.params = self._inspect(handler)

    def _inspect(self, handler: Any) -> list[ResolvedParam]:
        hints = typing.get_type_hints(handler)
        sig = inspect.signature(handler)
        params: list[ResolvedParam] = []

        for name, param in sig.parameters.items():
            if name == "self":
                continue
            hint = hints.get(name)
            if hint is None:
                continue

            origin = get_origin(hint)
            validate = False
            if origin is Valid:
                validate = True
                inner_hint = get_args(hint)[0]
                if get_origin(inner_hint) in _BINDING_TYPES:
                    origin, hint = get_origin(inner_hint), inner_hint
                else:
                    origin, hint = Body, Body[inner_hint]

            if origin not in _BINDING_TYPES:
                continue

            args = get_args(hint)
            params.append(
                ResolvedParam(
                    name=name,
                    binding_type=origin,
                    inner_type=_unwrap_optional(args[0]) if args else str,
                    default=param.default if param.default is not inspect.Parameter.empty else _MISSING,
                    validate=validate,
                )
            )

        return params

    async def resolve(self, request: Request) -> dict[str, Any]:
        """Resolve all parameters from the request."""
        kwargs: dict[str, Any] = {}
        for param in self.params:
            kwargs[param.name] = await self._resolve_one(request, param)
        return kwargs

    async def _resolve_one(self, request: Request, param: ResolvedParam) -> Any:
        if param.binding_type is PathVar:
            return self._resolve_path_var(request, param)
        if param.binding_type is QueryParam:
            return self._resolve_query_param(request, param)
        if param.binding_type is Body:
            return await self._resolve_body(request, param)
        if param.binding_type is File:
            return await self._resolve_file(request, param)
        return None  # pragma: no cover

    def _resolve_path_var(self, request: Request, param: ResolvedParam) -> Any:
        raw = request.path_params.get(param.name)
        if raw is None:
            return self._missing(param, "path variable")
        return self._coerce(raw, param)

    def _resolve_query_param(self, request: Request, param: ResolvedParam) -> Any:
        raw = request.query_params.get(to_camel(param.name))
        if raw is None:
            raw = request.query_params.get(param.name)
        if raw is None:
            return self._missing(param, "request parameter")
        return self._coerce(raw, param)

    async def _resolve_body(self, request: Request, param: ResolvedParam) -> Any:
        body_bytes = await request.body()
        model = param.inner_type
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            return body_bytes.decode()
        try:
            return model.model_validate_json(body_bytes or b"null")
        except PydanticValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            detail = "; ".join(f"{'.'.join(str(loc) for loc in e['loc']) or 'body'}: {e['msg']}" for e in errors)
            raise ValidationException(
                f"Validation failed: {detail}",
                context={"errors": errors},
            ) from exc

    async def _resolve_file(self, request: Request, param: ResolvedParam) -> Any:
        form = await request.form()
        upload = form.get(param.name)
        if upload is None or isinstance(upload, str):
            return self._missing(param, "request part")
        return await UploadedFile.from_upload(upload)

    @staticmethod
    def _missing(param: ResolvedParam, kind: str) -> Any:
        if not param.required:
            return param.default
        raise ValidationException(
            f"Required {kind} '{to_camel(param.name)}' is not present",
            context={"parameter": to_camel(param.name)},
        )

    @staticmethod
    def _coerce(value: str, param: ResolvedParam) -> Any:
        target = param.inner_type
        try:
            if target is str:
                return value
            if target is bool:
                lowered = value.strip().lower()
                if lowered in _TRUE:
                    return True
                if lowered in _FALSE:
                    return False
                raise ValueError(value)
            if target is UUID:
                return UUID(value)
            return target(value)
        except (TypeError, ValueError) as exc:
            name = to_camel(param.name)
            raise ValidationException(
                f"Parameter '{name}' has invalid value '{value}'",
                context={"parameter": name, "value": value},
            ) from exc
