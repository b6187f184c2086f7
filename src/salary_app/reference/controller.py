from __future__ import annotations

from flask import Flask

from ..common.responses import error_response, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/reference", methods=["GET"], endpoint="reference_options")
    def reference_options():
        try:
            return ok(container.reference_service.options())
        except Exception as e:
            return error_response(e, debug=bool(app.config.get("DEBUG")))
