# Static server for the login page
from __future__ import annotations

import http.server
import logging
import urllib.parse as urlparse

from .config import HOST, PORT
from .page import LOGIN_PAGE_BYTES

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class LoginPageHandler(http.server.BaseHTTPRequestHandler):
    """Serves the login page on ``/``; everything else falls through to 404."""

    def _send_page_headers(self) -> bool:
        path = urlparse.urlsplit(self.path).path
        if path != "/":
            self.send_error(404)
            return False
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(LOGIN_PAGE_BYTES)))
        self.end_headers()
        return True

    def do_GET(self):
        if self._send_page_headers():
            self.wfile.write(LOGIN_PAGE_BYTES)

    def do_HEAD(self):
        self._send_page_headers()

    def _not_found(self):
        # No route accepts a body; drain it and answer like an unknown path
        length = int(self.headers.get("Content-Length") or 0)
        if length:
            self.rfile.read(length)
        self.send_error(404)

    do_POST = do_PUT = do_PATCH = do_DELETE = _not_found

    def log_message(self, format, *args):
        # Request data is never logged
        pass


def build_server(host: str = HOST, port: int = PORT) -> http.server.ThreadingHTTPServer:
    """
    Bind the server. Port 0 picks a free ephemeral port.

    Each connection gets its own thread, so an idle client never holds up
    other requests.
    """
    return http.server.ThreadingHTTPServer((host, port), LoginPageHandler)


def main():
    httpd = build_server(HOST, PORT)
    with httpd:
        print(f"Listening on port {httpd.server_address[1]}", flush=True)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Server stopped")


if __name__ == "__main__":
    main()
