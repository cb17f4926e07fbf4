"""
Rent Calculation Backend API
Handles rent schedule requests and returns the monthly schedule with totals
"""

from flask import Blueprint, current_app, request, jsonify
import logging

from rent_application.rent_accounting.core.exceptions import InvalidParameter
from rent_application.rent_accounting.core.models import ScheduleParameters
from rent_application.rent_accounting.schedule.rent_scheduler import generate_rent_schedule, summarize_schedule
from rent_application.rent_accounting.utils.date_utils import months_between

# Create blueprint
rent_bp = Blueprint('rent', __name__, url_prefix='/api')

logger = logging.getLogger(__name__)


@rent_bp.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@rent_bp.route('/rent_schedule', methods=['POST'])
def rent_schedule():
    """
    Main endpoint for rent schedule calculation

    Payload:
        base_monthly_rent, lease_start_date, window_start_date, window_end_date,
        day_of_month_rent_due, rent_change_frequency, rent_change_rate
    Returns:
        {'success': True, 'parameters': {...}, 'schedule': [...], 'summary': {...}}
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidParameter('payload', 'request body must be a JSON object')

        logger.info("📥 Received rent schedule request:")
        logger.info(f"   lease_start: {data.get('lease_start_date')}, due day: {data.get('day_of_month_rent_due')}")
        logger.info(f"   window: {data.get('window_start_date')} to {data.get('window_end_date')}")

        params = ScheduleParameters.from_dict(data).validate()

        max_months = current_app.config['MAX_SCHEDULE_MONTHS']
        window_months = months_between(params.window_start_date, params.window_end_date)
        if window_months > max_months:
            raise InvalidParameter('window_end_date', f"window covers {window_months} months, limit is {max_months}")

        records = generate_rent_schedule(params)
        summary = summarize_schedule(records)

        logger.info(f"✅ Schedule generated: {summary.record_count} records, total rent {summary.total_rent}")

        return jsonify({
            'success': True,
            'parameters': params.to_dict(),
            'schedule': [record.to_dict() for record in records],
            'summary': summary.to_dict(),
        })

    except InvalidParameter as e:
        logger.warning(f"⚠️  Invalid rent schedule request: {e}")
        return jsonify({'success': False, 'field': e.field, 'error': str(e)}), 400

    except Exception as e:
        logger.error(f"❌ Error in rent_schedule: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500
