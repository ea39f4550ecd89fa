from flask import Blueprint, request, jsonify
from api.context import get_service
from api.middleware.jwt_middleware import JWTMiddleware
from service.traffic_service import TrafficService
from config.constants import AggregationWindows
from core.exceptions import ValidationError

traffic_bp = Blueprint('traffic', __name__)

def get_traffic_service() -> TrafficService:
    return get_service('traffic_service')

@traffic_bp.route('/summary', methods=['GET'])
@JWTMiddleware.require_auth
def get_summary():
    """30-day totals, top domains, protocol counts and usage against the data limit."""
    return jsonify(get_traffic_service().get_summary()), 200

@traffic_bp.route('/history', methods=['GET'])
@JWTMiddleware.require_auth
def get_history():
    """Hourly upload/download sums for the trailing 24 hours, oldest first."""
    return jsonify(get_traffic_service().get_history()), 200

@traffic_bp.route('/recent', methods=['GET'])
@JWTMiddleware.require_auth
def get_recent():
    raw_limit = request.args.get('limit', str(AggregationWindows.RECENT_DEFAULT_LIMIT))
    try:
        limit = int(raw_limit)
    except ValueError:
        raise ValidationError('limit', "must be an integer")
    return jsonify(get_traffic_service().get_recent(limit)), 200
