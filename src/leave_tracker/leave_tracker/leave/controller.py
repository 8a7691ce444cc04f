from __future__ import annotations

from flask import Flask, request

from ..common import date_utils
from ..common.responses import fail, ok, request_payload, server_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/personnel/<person_id>/leave", methods=["POST"], endpoint="register_leave")
    def register_leave(person_id: str):
        try:
            data = request_payload()
            container.leave_service.register_leave(
                person_id,
                data.get("type", ""),
                data.get("start_date") or date_utils.today(),
                end_date=data.get("end_date") or None,
                comment=data.get("comment", ""),
            )
            person = container.registry.get(person_id)
            return ok(container.leave_service.person_card(person), 201)
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/personnel/<person_id>/return", methods=["POST"], endpoint="register_return")
    def register_return(person_id: str):
        try:
            data = request_payload()
            container.leave_service.register_return(person_id, data.get("return_date") or date_utils.today())
            person = container.registry.get(person_id)
            return ok(container.leave_service.person_card(person))
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/personnel/<person_id>/leave", methods=["GET"], endpoint="leave_between")
    def leave_between(person_id: str):
        try:
            records = container.leave_service.leave_between(
                person_id,
                request.args.get("from") or "0001-01-01",
                request.args.get("to") or None,
            )
            return ok(records)
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))
