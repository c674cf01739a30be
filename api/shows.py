"""Vercel serverless function returning the live shows schedule as JSON.

GET /api/shows?month=2025-11&city=Washington,%20DC
"""

import asyncio
import json
import sys
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from urllib.parse import parse_qs, urlparse

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from limited_hangout.board import ShowBoard
from limited_hangout.config import load_config
from limited_hangout.sources import make_source


def load_payload(month: str = "", city: str = "", source=None, now=None) -> dict:
    """Fetch all tabs and return the filtered schedule payload."""
    board = ShowBoard(source or make_source(load_config()), now=now)
    asyncio.run(board.refresh())
    if month:
        board.engine.select_month(month)
    if city:
        board.engine.select_city(city)
    return board.to_payload()


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        query = parse_qs(urlparse(self.path).query)
        month = query.get("month", [""])[0]
        city = query.get("city", [""])[0]

        try:
            payload = load_payload(month, city)
        except ValueError as e:
            return self._json_response(500, {"error": str(e)})

        self._json_response(200, payload)

    def do_OPTIONS(self):
        self.send_response(200)
        self._send_cors_headers()
        self.end_headers()

    def _json_response(self, status, data):
        self.send_response(status)
        self._send_cors_headers()
        self.send_header("Content-Type", "application/json")
        self.send_header("Cache-Control", "s-maxage=30, stale-while-revalidate")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def _send_cors_headers(self):
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
