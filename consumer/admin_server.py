import json
import logging
from http.server import HTTPServer, BaseHTTPRequestHandler
from threading import Thread
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AdminHandler(BaseHTTPRequestHandler):
    """HTTP handler for consumer admin queries."""

    def log_message(self, format, *args):
        # Route HTTP logs through the standard logger
        logger.debug("%s - %s", self.address_string(), format % args)

    def _send_json(self, data: dict, status: int = 200):
        body = json.dumps(data).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path == "/admin/status":
            status_callback = getattr(self.server, "status_callback", None)
            if status_callback:
                self._send_json(status_callback())
            else:
                self._send_json({"error": "Status callback not configured"}, 500)
        elif self.path == "/admin/health":
            self._send_json({"status": "healthy"})
        else:
            self._send_json({"error": "Not found"}, 404)


class AdminServer:
    """Simple HTTP server exposing consumer health and listener status."""

    def __init__(self, port: int, host: str = "0.0.0.0"):
        self._host = host
        self._port = port
        self._status_callback: Optional[Callable[[], dict]] = None
        self._server: Optional[HTTPServer] = None
        self._thread: Optional[Thread] = None

    @property
    def port(self) -> int:
        # Actual bound port, useful when started with port 0
        if self._server:
            return self._server.server_address[1]
        return self._port

    def set_status_callback(self, callback: Callable[[], dict]):
        self._status_callback = callback
        if self._server:
            self._server.status_callback = callback

    def start(self):
        # Start the admin server in a background thread
        self._server = HTTPServer((self._host, self._port), AdminHandler)
        self._server.status_callback = self._status_callback
        self._thread = Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        logger.info("Admin server started on port %d", self.port)

    def stop(self):
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            logger.info("Admin server stopped")
