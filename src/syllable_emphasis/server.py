from __future__ import annotations

import json
import logging
from dataclasses import asdict
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict

from .config import EmphasisConfig
from .pipeline import format_text

logger = logging.getLogger(__name__)

ENDPOINT = "/api/format"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def parse_json_body(raw: bytes) -> Dict[str, Any]:
    """Decode a request body, treating empty, malformed or non-object JSON as {}."""
    try:
        parsed = json.loads(raw.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return parsed if isinstance(parsed, dict) else {}


def extract_text(body: Dict[str, Any]) -> str:
    """Coerce the ``text`` field to a string; falsy or missing values become ""."""
    value = body.get("text")
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    # JSON spelling for the rest, so true stays "true" rather than "True".
    return json.dumps(value, ensure_ascii=False)


def build_response(text: str, config: EmphasisConfig | None = None) -> Dict[str, str]:
    """Process text and return the JSON payload with all three renderings."""
    return asdict(format_text(text, config))


class FormatHTTPServer(ThreadingHTTPServer):
    """Threaded HTTP server that carries the pipeline configuration for its handlers."""

    daemon_threads = True

    def __init__(self, address: tuple[str, int], config: EmphasisConfig | None = None) -> None:
        super().__init__(address, FormatHandler)
        self.config = config or EmphasisConfig()


class FormatHandler(BaseHTTPRequestHandler):
    """POST-only JSON endpoint wrapping the emphasis pipeline."""

    def _send_json(self, status: int, payload: Dict[str, Any]) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self._send_cors_headers()
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _send_cors_headers(self) -> None:
        for name, value in CORS_HEADERS.items():
            self.send_header(name, value)

    def _reject_method(self) -> None:
        self._send_json(405, {"error": f"Use POST {ENDPOINT}"})

    def do_OPTIONS(self) -> None:
        self.send_response(204)
        self._send_cors_headers()
        self.end_headers()

    def do_POST(self) -> None:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = 0
        raw = self.rfile.read(length) if length > 0 else b""
        text = extract_text(parse_json_body(raw))
        config = getattr(self.server, "config", None)
        self._send_json(200, build_response(text, config))

    def __getattr__(self, name: str) -> Any:
        # BaseHTTPRequestHandler dispatches to do_<COMMAND>; every verb without
        # its own handler is answered with 405.
        if name.startswith("do_"):
            return self._reject_method
        raise AttributeError(name)

    def log_message(self, format: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), format % args)


# Serverless hosts look up a class named ``handler``.
handler = FormatHandler


def serve(host: str, port: int, config: EmphasisConfig | None = None) -> None:
    """Run the HTTP wrapper until interrupted."""
    httpd = FormatHTTPServer((host, port), config)
    logger.info("Serving %s on http://%s:%d", ENDPOINT, host, httpd.server_address[1])
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        httpd.server_close()
