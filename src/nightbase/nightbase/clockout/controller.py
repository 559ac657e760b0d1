from __future__ import annotations

import hmac
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    def _check_cron_secret() -> None:
        secret = app.config.get("CRON_SECRET")
        if not secret:
            return

        auth = request.headers.get("Authorization", "")
        supplied = auth[len("Bearer "):] if auth.startswith("Bearer ") else request.headers.get("X-Cron-Secret", "")
        if not hmac.compare_digest(supplied.encode("utf-8"), str(secret).encode("utf-8")):
            raise AuthorizationError("Unauthorized")

    def cron_secret_required(view):
        """Reject callers without the shared cron secret (when one is configured)."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                _check_cron_secret()
            except AuthorizationError as e:
                app.logger.warning("Rejected cron call from %s", request.remote_addr)
                return jsonify({"success": False, "error": str(e)}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/cron/auto-clockout", methods=["GET"], endpoint="cron_auto_clockout")
    @cron_secret_required
    def cron_auto_clockout():
        try:
            report = container.auto_clockout_service.run()
        except Exception as e:
            app.logger.exception("Auto clock-out error")
            return jsonify({"success": False, "error": str(e) or "Unknown error"}), 500

        return jsonify({"success": True, **report.to_dict()})
