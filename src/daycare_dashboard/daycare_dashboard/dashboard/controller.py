from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import coerce_date
from ..common.validators import require_mapping
from ..core.exceptions import ConfigurationError, ValidationError
from ..container import Container
from .model import DashboardSummaryParams
from .payloads import parse_activity, parse_attendance, parse_irc, parse_snapshot_inputs, to_wire

logger = logging.getLogger(__name__)


def _json_body() -> dict:
    if not request.get_data():
        return {}
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("body must be JSON")
    return require_mapping(data, "body")


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    @app.route("/api/dashboard/summary", methods=["POST"], endpoint="api_dashboard_summary")
    def api_dashboard_summary():
        """Summaries + merged alerts for whatever modules the caller sent."""
        try:
            body = _json_body()
            snapshots = None
            if body.get("snapshots") is not None:
                snapshots = service.build_snapshots(parse_snapshot_inputs(body["snapshots"], "snapshots"))
            params = DashboardSummaryParams(
                attendance=parse_attendance(body["attendance"]) if body.get("attendance") is not None else None,
                activity=parse_activity(body["activity"]) if body.get("activity") is not None else None,
                irc=parse_irc(body["irc"]) if body.get("irc") is not None else None,
                snapshots=snapshots,
            )
            report = service.build_report(params)
        except (ValidationError, ConfigurationError) as e:
            logger.warning("rejected dashboard payload: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("dashboard summary failed")
            return jsonify({"success": False, "message": "Internal error while building the dashboard"}), 500

        payload = to_wire(report.summary)
        payload["counts"] = to_wire(report.counts)
        payload["topAlerts"] = to_wire(report.top_alerts)
        return jsonify(payload)

    @app.route("/api/cross-module/snapshots", methods=["POST"], endpoint="api_cross_module_snapshots")
    def api_cross_module_snapshots():
        try:
            body = _json_body()
            collection_date = coerce_date(body.get("date"))
            if collection_date is None:
                raise ValidationError("date must be a date (YYYY-MM-DD)")
            inputs = parse_snapshot_inputs(body.get("inputs", []), "inputs")
            collection = service.build_snapshot_collection(collection_date, inputs)
        except (ValidationError, ConfigurationError) as e:
            logger.warning("rejected snapshot payload: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("snapshot collection failed")
            return jsonify({"success": False, "message": "Internal error while building snapshots"}), 500

        return jsonify(to_wire(collection))
