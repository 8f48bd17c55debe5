"""
Wrapper and Builder Examples

Demonstrates default headers, a response listener, the fluent request
builder and configuration from SOCIALHTTP_* environment variables.
"""

import logging

from socialhttp import (
    ClientRegistry,
    HTTPClientWrapper,
    HttpMediaType,
    HttpRequestBuilder,
    LoggingListener,
    load_from_env,
)


def wrapper_with_listener(registry):
    print("\n=== Wrapper ===")

    wrapper = HTTPClientWrapper(load_from_env(), registry=registry)
    wrapper.request_headers["User-Agent"] = "timeline-sync/1.0"
    wrapper.set_http_response_listener(LoggingListener())

    response = wrapper.get("https://httpbin.org/headers")
    print(response.as_json()["headers"]["User-Agent"])


def builder(registry):
    print("\n=== Builder ===")

    response = (
        HttpRequestBuilder(client=registry.get())
        .target("https://httpbin.org")
        .path("/anything/{id}")
        .path_value("id", "42")
        .accept(HttpMediaType.APPLICATION_JSON)
        .json('{"status": "hello"}')
        .post()
    )
    print(response.as_json()["json"])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    registry = ClientRegistry()
    wrapper_with_listener(registry)
    builder(registry)
