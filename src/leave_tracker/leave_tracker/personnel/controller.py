from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok, request_payload, server_error
from ..container import Container
from ..core.enums import StatusFilter
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/personnel", methods=["GET"], endpoint="list_personnel")
    def list_personnel():
        try:
            cards = container.leave_service.list_cards(
                search_text=request.args.get("q", ""),
                leave_type_filter=request.args.get("type", StatusFilter.ALL.value),
                role_filter=request.args.get("role", StatusFilter.ALL.value),
            )
            return ok(cards)
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/roles", methods=["GET"], endpoint="list_roles")
    def list_roles():
        return ok(container.registry.distinct_roles())

    @app.route("/api/personnel", methods=["POST"], endpoint="add_personnel")
    def add_personnel():
        try:
            data = request_payload()
            person = container.registry.add_person(data.get("name", ""), data.get("role", ""))
            return ok(container.leave_service.person_card(person), 201)
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/personnel/<person_id>", methods=["PUT"], endpoint="update_personnel")
    def update_personnel(person_id: str):
        try:
            data = request_payload()
            person = container.registry.update_person(person_id, data.get("name", ""), data.get("role", ""))
            return ok(container.leave_service.person_card(person))
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))

    @app.route("/api/personnel/<person_id>", methods=["DELETE"], endpoint="delete_personnel")
    def delete_personnel(person_id: str):
        try:
            container.registry.delete_person(person_id)
            return ok({"id": person_id})
        except DomainError as e:
            return fail(e)
        except Exception as e:
            return server_error(e, debug=bool(app.config.get("DEBUG", False)))
