"""Entry point for the KMZ Renamer Flask application."""

from __future__ import annotations

import logging
import os

from kmz_renamer import create_app

logging.basicConfig(
    level=os.environ.get("KMZ_RENAMER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


def _debug_enabled() -> bool:
    return os.environ.get("FLASK_ENV", "production") != "production"


if __name__ == "__main__":
    debug = _debug_enabled()
    app.run(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 5000)),
        debug=debug,
        use_reloader=debug,
    )
