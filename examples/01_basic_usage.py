"""
Basic Usage Examples

Demonstrates GET with query parameters, form POST and multipart upload.
"""

from socialhttp import HTTPClient, HttpClientConfiguration, HttpParameter, HTTPError


def get_with_query():
    """Parameters of GET go to the query string."""
    print("\n=== GET ===")

    client = HTTPClient()
    response = client.get(
        "https://httpbin.org/get",
        [HttpParameter("q", "hello world"), HttpParameter("page", 2)],
    )
    print(f"Status: {response.status_code}")
    print(response.as_json()["args"])


def form_post():
    """Text parameters of POST are sent urlencoded."""
    print("\n=== Form POST ===")

    client = HTTPClient()
    response = client.post(
        "https://httpbin.org/post",
        [HttpParameter("status", "hello")],
        headers={"Authorization": "Bearer <token>"},
    )
    print(response.as_json()["form"])


def upload_with_retries(path):
    """A file parameter switches the body to multipart/form-data."""
    print("\n=== Multipart upload ===")

    config = HttpClientConfiguration(retry_count=2, retry_interval_seconds=1)
    client = HTTPClient(config)
    try:
        response = client.post(
            "https://httpbin.org/post",
            [HttpParameter("status", "photo"), HttpParameter.of_file("media", path)],
        )
        print(f"Uploaded: {response.status_code}")
    except HTTPError as e:
        print(f"Failed with {e.response_code}: {e.message}")


if __name__ == "__main__":
    get_with_query()
    form_post()
