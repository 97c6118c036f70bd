import socket
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from loginpage import server
from loginpage.page import LOGIN_PAGE_BYTES


def test_root_serves_login_page(base_url):
    resp = httpx.get(f"{base_url}/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "DevSecOps Login Page" in resp.text
    assert resp.content == LOGIN_PAGE_BYTES


def test_repeated_requests_are_byte_identical(base_url):
    bodies = {httpx.get(f"{base_url}/").content for _ in range(5)}
    assert bodies == {LOGIN_PAGE_BYTES}


def test_query_string_is_ignored(base_url):
    resp = httpx.get(f"{base_url}/", params={"next": "/admin"})
    assert resp.status_code == 200
    assert resp.content == LOGIN_PAGE_BYTES


def test_unknown_path_is_not_found(base_url):
    resp = httpx.get(f"{base_url}/nonexistent")
    assert resp.status_code == 404


def test_head_sends_headers_only(base_url):
    resp = httpx.head(f"{base_url}/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert int(resp.headers["content-length"]) == len(LOGIN_PAGE_BYTES)
    assert resp.content == b""


def test_form_post_is_not_found(base_url):
    resp = httpx.post(f"{base_url}/", data={"username": "admin", "password": "admin"})
    assert resp.status_code == 404


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE"])
def test_other_methods_are_not_found(base_url, method):
    resp = httpx.request(method, f"{base_url}/")
    assert resp.status_code == 404


def test_idle_connection_does_not_block_requests(live_server, base_url):
    idle = socket.create_connection(live_server.server_address[:2])
    try:
        resp = httpx.get(f"{base_url}/", timeout=3)
        assert resp.status_code == 200
        assert resp.content == LOGIN_PAGE_BYTES
    finally:
        idle.close()


def test_concurrent_requests_get_identical_payload(base_url):
    with ThreadPoolExecutor(max_workers=8) as pool:
        bodies = set(pool.map(lambda _: httpx.get(f"{base_url}/", timeout=5).content, range(16)))
    assert bodies == {LOGIN_PAGE_BYTES}


def test_main_prints_single_startup_line(monkeypatch, capsys):
    httpd = server.build_server("127.0.0.1", 0)
    port = httpd.server_address[1]

    def interrupt():
        raise KeyboardInterrupt

    httpd.serve_forever = interrupt
    monkeypatch.setattr(server, "build_server", lambda host, port: httpd)

    server.main()

    out = capsys.readouterr().out
    assert out.splitlines() == [f"Listening on port {port}"]
