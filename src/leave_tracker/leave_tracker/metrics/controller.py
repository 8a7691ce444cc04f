from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok, server_error
from ..container import Container
from ..core.enums import LeaveType
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/metrics/counts", methods=["GET"], endpoint="metrics_counts")
    def metrics_counts():
        return ok(container.metrics_service.leave_counts().as_dict())

    @app.route("/api/metrics/window", methods=["GET"], endpoint="metrics_window")
    def metrics_window():
        try:
            days_s = request.args.get("days", "")
            try:
                days = int(days_s) if days_s else None
            except ValueError:
                raise ValidationError("days must be an integer")
            points = container.metrics_service.rolling_window(days)
            return ok([p.as_dict() for p in points])
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/metrics/totals", methods=["GET"], endpoint="metrics_totals")
    def metrics_totals():
        try:
            leave_type = LeaveType.parse(request.args.get("type") or LeaveType.SICK.value)
            totals = container.metrics_service.total_days_per_person(leave_type)
            return ok([t.as_dict() for t in totals])
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/metrics/summary", methods=["GET"], endpoint="metrics_summary")
    def metrics_summary():
        try:
            return ok(container.metrics_service.summary())
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))
