"""Proxy: a rate-limiting front server guarding an application."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Server(ABC):
    """Something that answers requests with a status code and a body."""

    @abstractmethod
    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        """Return the status code and body for the request."""


class Application(Server):
    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if url == "/app/status" and method == "GET":
            return 200, "Ok"
        if url == "/create/user" and method == "POST":
            return 201, "User Created"
        return 404, "Not Ok"


class Nginx(Server):
    """Forwards requests to the application, limiting requests per URL."""

    def __init__(self, max_allowed_request: int = 2) -> None:
        self.application = Application()
        self.max_allowed_request = max_allowed_request
        self.rate_limiter: dict[str, int] = {}

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if not self.check_rate_limiting(url):
            return 403, "Not Allowed"
        return self.application.handle_request(url, method)

    def check_rate_limiting(self, url: str) -> bool:
        """Count a request for ``url``; return False once the limit is passed."""
        count = self.rate_limiter.get(url) or 1
        if count > self.max_allowed_request:
            self.rate_limiter[url] = count
            return False
        self.rate_limiter[url] = count + 1
        return True


def main(argv: list[str] | None = None) -> None:
    nginx_server = Nginx()
    app_status_url = "/app/status"
    create_user_url = "/create/user"

    requests = [
        (app_status_url, "GET"),
        (app_status_url, "GET"),
        (app_status_url, "GET"),
        (create_user_url, "POST"),
        (create_user_url, "GET"),
    ]
    for url, method in requests:
        http_code, body = nginx_server.handle_request(url, method)
        print(f"\nUrl: {app_status_url}\nHttpCode: {http_code}\nBody: {body}")


if __name__ == "__main__":
    main()