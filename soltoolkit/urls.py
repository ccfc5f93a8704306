"""Lenient URL splitting and joining for RPC endpoints."""

from __future__ import annotations

from typing import Any

__all__ = ["parse_url", "assemble_url", "ws_from_http"]


def _to_int(text: str) -> int:
    """Read the digits of ``text``, ignoring any other characters."""
    value = 0
    sign = 1
    seen_digit = False
    for char in text:
        if "0" <= char <= "9":
            value = value * 10 + int(char)
            seen_digit = True
        elif char == "-" and not seen_digit:
            sign = -1
    return sign * value


def parse_url(url: str) -> dict[str, Any]:
    """Split a URL into scheme, userinfo, host, port, path, query and fragment.

    Only the parts present appear in the result; ``host`` is always set.
    """
    result: dict[str, Any] = {}
    rest = url

    parts = rest.split("#")
    if len(parts) > 1:
        rest = parts[0]
        result["fragment"] = parts[1]

    parts = rest.split("?")
    if len(parts) > 1:
        rest = parts[0]
        result["query"] = parts[1]

    parts = rest.split("://")
    if len(parts) > 1:
        rest = parts[1]
        result["scheme"] = parts[0]

    slash = rest.find("/")
    if slash > 0:
        path = rest[slash:]
        if len(path) > 1:
            result["path"] = path
        rest = rest[:slash]

    parts = rest.split(":")
    if len(parts) > 1:
        result["port"] = _to_int(parts[1])
        rest = parts[0]

    parts = rest.split("@")
    if len(parts) > 1:
        result["userinfo"] = parts[0]
        rest = parts[1]

    result["host"] = rest
    return result


def assemble_url(components: dict[str, Any]) -> str:
    """Join URL components as produced by :func:`parse_url`."""
    pieces = []
    if "scheme" in components:
        pieces.append(f"{components['scheme']}://")
    if "userinfo" in components:
        pieces.append(f"{components['userinfo']}@")
    if "host" in components:
        pieces.append(str(components["host"]))
    if "port" in components:
        pieces.append(f":{int(components['port'])}")
    if "path" in components:
        pieces.append(str(components["path"]))
    if "query" in components:
        pieces.append(f"?{components['query']}")
    if "fragment" in components:
        pieces.append(f"#{components['fragment']}")
    return "".join(pieces)


def ws_from_http(http_url: str, ws_port: int) -> str:
    """Derive the websocket URL of an HTTP RPC endpoint.

    TLS (``wss``) is used unless the scheme is plain ``http``.
    """
    components = parse_url(http_url)
    use_tls = components.get("scheme") != "http"
    components["scheme"] = "wss" if use_tls else "ws"
    components["port"] = ws_port
    return assemble_url(components)