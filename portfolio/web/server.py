# portfolio/web/server.py
"""
Static host for the portfolio pages.

Every file under the public root is served at its relative URL; `/`, `/about`
and `/contact` map to the three HTML pages. Anything else is Flask's default 404.
"""

from __future__ import annotations
import argparse
import os
from pathlib import Path
from typing import Optional

from flask import Flask, send_from_directory

from portfolio.game.config import PORT_DEFAULT, PUBLIC_DIR

PAGES = {
    "/": "index.html",
    "/about": "about.html",
    "/contact": "contact.html",
}


def create_app(public_dir: Optional[str | Path] = None) -> Flask:
    root = Path(public_dir or PUBLIC_DIR).resolve()
    app = Flask(__name__, static_folder=str(root), static_url_path="")

    def page_view(filename: str):
        def view():
            return send_from_directory(root, filename)
        return view

    for rule, filename in PAGES.items():
        endpoint = "page_" + (Path(filename).stem)
        app.add_url_rule(rule, endpoint=endpoint, view_func=page_view(filename), methods=["GET"])

    return app


def resolve_port(port: Optional[int] = None) -> int:
    """Explicit port, else $PORT, else PORT_DEFAULT."""
    if port is not None:
        return port
    raw = os.environ.get("PORT", "")
    if not raw.strip():
        return PORT_DEFAULT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Serve the portfolio site.")
    p.add_argument("--host", type=str, default="0.0.0.0")
    p.add_argument("--port", type=int, default=None,
                   help=f"Listen port. Omit to use $PORT, else {PORT_DEFAULT}.")
    p.add_argument("--public-dir", type=str, default=PUBLIC_DIR,
                   help="Directory served as the site root")
    p.add_argument("--debug", action="store_true", help="Flask debug mode (auto-reload)")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    port = resolve_port(args.port)
    app = create_app(args.public_dir)
    print(f"Server is running on http://localhost:{port}")
    app.run(host=args.host, port=port, debug=args.debug)


if __name__ == "__main__":
    main()
