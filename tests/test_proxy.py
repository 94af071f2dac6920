import pytest

from patternbook.proxy import Application, Nginx, main


@pytest.mark.parametrize(
    ("url", "method", "expected"),
    [
        ("/app/status", "GET", (200, "Ok")),
        ("/create/user", "POST", (201, "User Created")),
        ("/create/user", "GET", (404, "Not Ok")),
        ("/app/status", "POST", (404, "Not Ok")),
    ],
)
def test_application_routes(url, method, expected):
    assert Application().handle_request(url, method) == expected


def test_nginx_allows_two_then_blocks():
    server = Nginx()
    results = [server.handle_request("/app/status", "GET") for _ in range(3)]
    assert results == [(200, "Ok"), (200, "Ok"), (403, "Not Allowed")]


def test_limits_are_per_url():
    server = Nginx()
    for _ in range(3):
        server.handle_request("/app/status", "GET")
    assert server.handle_request("/create/user", "POST") == (201, "User Created")


def test_failed_requests_still_count():
    server = Nginx()
    server.handle_request("/create/user", "GET")
    server.handle_request("/create/user", "GET")
    assert server.handle_request("/create/user", "POST") == (403, "Not Allowed")


def test_check_rate_limiting_respects_custom_limit():
    server = Nginx(max_allowed_request=1)
    assert server.check_rate_limiting("/x") is True
    assert server.check_rate_limiting("/x") is False
    assert server.check_rate_limiting("/x") is False


def test_main_reports_forbidden_third_call(capsys):
    main()
    out = capsys.readouterr().out
    assert out.count("HttpCode: 200") == 2
    assert "HttpCode: 403" in out
    assert "HttpCode: 201" in out