"""Making API requests to Paystack: connection setup, response mapping, error handling."""

import json
from dataclasses import dataclass
from typing import Any, Callable, NoReturn, TypeVar

import httpx
from pydantic import ValidationError
from pydantic_core import to_jsonable_python

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions, cache_namespace, read_through
from paystack_gateway.configuration import Configuration, get_config
from paystack_gateway.extension import extended
from paystack_gateway.response import Response

BASE_URL = "https://api.paystack.co"

QUERY_METHODS = {"GET", "DELETE"}

F = TypeVar("F", bound=Callable[..., Any])


class ResponseParsingError(Exception):
    """Raised when a response body cannot be parsed or mapped into a response class."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


TRANSPORT_ERRORS = (httpx.HTTPError, ResponseParsingError)


@dataclass(frozen=True)
class CallContext:
    """The API function being executed and the classes its outcome maps to."""

    api_module: str
    api_method_name: str
    response_class: type[Response] = Response
    error_class: type[ApiError] = ApiError

    @property
    def qualified_api_method_name(self) -> str:
        return f"{self.api_module}.{self.api_method_name}"


_api_modules: dict[str, "RequestModule"] = {}


def api_modules() -> list["RequestModule"]:
    """All request modules registered so far, in registration order."""
    return list(_api_modules.values())


class RequestModule:
    """A group of API functions (one OpenAPI tag) sharing a name and call executor."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._api_method_names: list[str] = []
        _api_modules[name] = self

    def __repr__(self) -> str:
        return f"RequestModule({self.name!r})"

    @property
    def api_methods(self) -> list[str]:
        return list(self._api_method_names)

    def api_method(self, func: F) -> F:
        """Register ``func`` as one of this module's API functions."""
        if func.__name__ not in self._api_method_names:
            self._api_method_names.append(func.__name__)
        return func

    def call(
        self,
        method_name: str,
        http_method: str,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        response_class: type[Response] = Response,
        error_class: type[ApiError] = ApiError,
        cache_options: CacheOptions | None = None,
    ) -> Any:
        """Execute one API call, raising ``error_class`` if it fails in transport."""
        context = CallContext(
            api_module=self.name,
            api_method_name=method_name,
            response_class=extended(response_class),
            error_class=extended(error_class),
        )
        try:
            return execute(context, http_method, path, params, cache_options)
        except TRANSPORT_ERRORS as error:
            handle_error(context, error)


def execute(
    context: CallContext,
    http_method: str,
    path: str,
    params: dict[str, Any] | None = None,
    cache_options: CacheOptions | None = None,
) -> Any:
    config = get_config()
    http_method = http_method.upper()
    payload = compact(params)
    response: httpx.Response | None = None

    def perform() -> Any:
        nonlocal response
        with build_client(config) as client:
            response = client.request(http_method, path, **request_arguments(http_method, payload))
            response.raise_for_status()
            return parse_json(response)

    if cache_options is not None and http_method == "GET":
        url = httpx.URL(BASE_URL + path, params=payload or None)
        body = read_through(
            config.cache_dir,
            cache_namespace(context.api_module, cache_options.cache_key),
            str(url),
            perform,
            expires_in=cache_options.expires_in,
        )
    else:
        body = perform()

    # a cache hit leaves response unset
    return map_response(context.response_class, body, response)


def compact(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop absent values and convert the rest to JSON-compatible data."""
    if not params:
        return {}
    return to_jsonable_python({key: value for key, value in params.items() if value is not None})


def request_arguments(http_method: str, payload: dict[str, Any]) -> dict[str, Any]:
    if not payload:
        return {}
    if http_method in QUERY_METHODS:
        return {"params": payload}
    return {"json": payload}


def build_client(config: Configuration | None = None) -> httpx.Client:
    """Build an authenticated client with request/response logging."""
    config = config or get_config()
    headers = {"Accept": "application/json"}
    if config.secret_key:
        headers["Authorization"] = f"Bearer {config.secret_key}"

    return httpx.Client(
        base_url=BASE_URL,
        headers=headers,
        timeout=config.timeout_seconds,
        transport=config.transport,
        event_hooks={
            "request": [_request_logger(config)],
            "response": [_response_logger(config)],
        },
    )


def _request_logger(config: Configuration) -> Callable[[httpx.Request], None]:
    def log_request(request: httpx.Request) -> None:
        config.logger.info("request: %s %s", request.method, request.url)
        if config.logging_options.headers:
            config.logger.debug("request headers: %s", config.log_filter(dict(request.headers)))
        if config.logging_options.bodies and request.content:
            config.logger.debug("request body: %s", config.log_filter(_json_or_text(request.content)))

    return log_request


def _response_logger(config: Configuration) -> Callable[[httpx.Response], None]:
    def log_response(response: httpx.Response) -> None:
        config.logger.info("response: Status %s", response.status_code)
        if config.logging_options.headers:
            config.logger.debug("response headers: %s", config.log_filter(dict(response.headers)))
        if config.logging_options.bodies:
            response.read()
            config.logger.debug("response body: %s", config.log_filter(_json_or_text(response.content)))

    return log_response


def parse_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise ResponseParsingError(f"Invalid JSON in response: {exc}", response) from exc


def map_response(response_class: type[Response], body: Any, response: httpx.Response | None = None) -> Any:
    """Map a parsed body into ``response_class``; lists are mapped element-wise."""
    try:
        if isinstance(body, dict):
            return response_class.model_validate(body)
        if isinstance(body, list):
            return [map_response(response_class, item, response) for item in body]
        return body
    except ValidationError as exc:
        raise ResponseParsingError(f"Could not map response into {response_class.__name__}: {exc}", response) from exc


def handle_error(context: CallContext, error: Exception) -> NoReturn:
    """Log a failed call and raise the call's error class with the failure details."""
    config = get_config()
    response: httpx.Response | None = getattr(error, "response", None)

    config.logger.error("%s: %s", context.qualified_api_method_name, error)
    if response is not None:
        config.logger.error(json.dumps(filtered_response(response, config.log_filter), indent=2, default=str))

    status = response.status_code if response is not None else None
    body = response.text if response is not None else None
    raise context.error_class(
        f"Paystack error: {error}, status: {status}, response: {body}",
        original_error=error,
    ) from error


def filtered_response(response: httpx.Response, log_filter: Callable[[Any], Any]) -> dict[str, Any]:
    request = response.request
    return {
        "request_method": request.method,
        "request_url": str(request.url),
        "request_headers": log_filter(dict(request.headers)),
        "request_body": log_filter(_json_or_text(request.content) if request.content else {}),
        "response_status": response.status_code,
        "response_headers": log_filter(dict(response.headers)),
        "response_body": log_filter(_json_or_text(response.content)),
    }


def _json_or_text(content: bytes) -> Any:
    try:
        return json.loads(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")
