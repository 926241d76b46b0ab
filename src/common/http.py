"""HTTP GET with a hard deadline on the whole request."""

from __future__ import annotations

import logging
import socket
import threading
import time
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

CHUNK_SIZE = 16 * 1024
MAX_BODY_BYTES = 5 * 1024 * 1024


@dataclass
class HttpDocument:
    """Body of a completed GET."""

    url: str
    content: bytes
    encoding: Optional[str] = None

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.encoding or "utf-8", errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")


def _abort(response: requests.Response) -> None:
    """Unblock a pending body read by shutting the connection's socket down."""
    connection = getattr(response.raw, "connection", None)
    sock = getattr(connection, "sock", None)
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError as e:
        logger.debug("Socket already closed for %s: %s", response.url, e)


def _declared_charset(response: requests.Response) -> Optional[str]:
    content_type = response.headers.get("content-type") or ""
    if "charset" not in content_type.lower():
        return None
    return response.encoding


def fetch_url(
    url: str,
    timeout_ms: int,
    user_agent: str,
    max_bytes: int = MAX_BODY_BYTES,
) -> HttpDocument:
    """GET a URL, giving up once `timeout_ms` has elapsed in total.

    requests applies the timeout per socket operation only, so a server
    that trickles its body could hold the call open indefinitely. The body
    is streamed instead and a timer shuts the socket down at the deadline.

    Raises:
        requests.Timeout: If the deadline passes before the body is read.
        requests.HTTPError: On a non-success status.
        ValueError: If the body is larger than `max_bytes`.
    """
    timeout = timeout_ms / 1000
    deadline = time.monotonic() + timeout

    response = requests.get(
        url,
        timeout=timeout,
        headers={"User-Agent": user_agent},
        stream=True,
    )
    timer = threading.Timer(max(0.0, deadline - time.monotonic()), _abort, args=(response,))
    timer.daemon = True
    timer.start()
    try:
        response.raise_for_status()
        body = bytearray()
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if time.monotonic() >= deadline:
                    raise requests.Timeout(f"Exceeded {timeout_ms} ms reading {url}")
                body.extend(chunk)
                if len(body) > max_bytes:
                    raise ValueError(f"Response from {url} exceeds {max_bytes} bytes")
        except requests.RequestException as e:
            if isinstance(e, requests.Timeout) or time.monotonic() < deadline:
                raise
            raise requests.Timeout(f"Exceeded {timeout_ms} ms reading {url}") from e
        if time.monotonic() >= deadline:
            # The socket shutdown can end the stream early without an error
            raise requests.Timeout(f"Exceeded {timeout_ms} ms reading {url}")
    finally:
        timer.cancel()
        response.close()

    return HttpDocument(url=response.url or url, content=bytes(body), encoding=_declared_charset(response))
