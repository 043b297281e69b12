# === Salon Intake Backend ===
# The intake form posts one flat set of fields per visit. This service lines
# those fields up under the destination sheet's header row, appends them as a
# new row, then asks the Apps Script web app to recalculate the sheet.
import datetime
import logging
import os
from zoneinfo import ZoneInfo

from flask import Flask, jsonify, render_template, request
from flask_cors import CORS

from calculators import (
    format_reservation,
    price_for_minutes,
    staff_payout,
    suggest_next_reservation,
)
from errors import SubmissionError
from intake_options import form_context
from payload import parse_payload
from recalc import RecalcTrigger
from settings import Settings
from sheets import SheetAppender

logger = logging.getLogger(__name__)

CORS_METHODS = ['POST', 'OPTIONS']
CORS_HEADERS = ['Content-Type', 'Authorization']


def create_app(settings=None, appender=None, recalc=None):
    """Builds the Flask app; collaborators can be injected for tests."""
    settings = settings or Settings.from_env()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level)

    app = Flask(__name__, template_folder='templates')
    app.config['SETTINGS'] = settings
    app.extensions['sheet_appender'] = appender or SheetAppender(settings)
    app.extensions['recalc_trigger'] = recalc or RecalcTrigger(settings)

    CORS(
        app,
        resources={r'/api/*': {'origins': settings.cors_origin}},
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        send_wildcard=settings.cors_origin == '*',
    )

    register_routes(app)
    return app


def register_routes(app):

    # --- Frontend Routes ---

    @app.route('/')
    @app.route('/intake.html')
    def intake_page():
        """Serves the customer intake form."""
        settings = app.config['SETTINGS']
        today = datetime.datetime.now(ZoneInfo(settings.local_timezone)).date()
        return render_template('intake.html', business_day=today.isoformat(), **form_context())

    @app.route('/healthz')
    def healthz():
        return "OK", 200

    # --- API Endpoints ---

    @app.route('/api/submit', methods=['POST'])
    def submit():
        """
        Receives one intake submission (JSON or form-encoded), appends it to
        the sheet and triggers the recalculation webhook.
        """
        settings = app.config['SETTINGS']
        appender = app.extensions['sheet_appender']
        recalc = app.extensions['recalc_trigger']

        try:
            payload = parse_payload(request)
            logger.info("Received %s submission with %d fields", payload.source, len(payload.fields))

            updates = None
            if settings.skip_sheet_write:
                logger.info("SKIP_SHEET_WRITE=1; not appending")
            else:
                updates = appender.append(payload.fields)

            recalc.trigger()
        except SubmissionError as e:
            logger.exception("ERROR: /api/submit: %s", e)
            return jsonify({"ok": False, "error": str(e)}), e.status_code
        except Exception as e:
            logger.exception("ERROR: /api/submit: unexpected failure")
            return jsonify({"ok": False, "error": str(e)}), 500

        return jsonify({"ok": True, "message": "Success", "data": updates}), 200

    @app.route('/api/next-reservation', methods=['GET'])
    def next_reservation():
        """
        Suggested next booking. Expects 'businessDay' (YYYY-MM-DD), 'customerType'
        and optionally 'visitCount' query parameters.
        """
        suggested = suggest_next_reservation(
            request.args.get('businessDay', ''),
            request.args.get('customerType', ''),
            request.args.get('visitCount', ''),
        )
        if suggested is None:
            return jsonify({"error": "'businessDay' must be a date in YYYY-MM-DD format."}), 400
        return jsonify({"nextReservationDate": format_reservation(suggested)})

    @app.route('/api/price', methods=['GET'])
    def price():
        """Price for a treatment length given as 'minutes'."""
        try:
            amount = price_for_minutes(request.args.get('minutes', ''))
        except ValueError:
            return jsonify({"error": "'minutes' must be a number."}), 400
        return jsonify({"price": amount})

    @app.route('/api/payout', methods=['GET'])
    def payout():
        """Sales total credited to the practitioner for one visit."""
        args = request.args
        try:
            amount = staff_payout(
                args.get('compensationType', ''),
                treatment_amount=args.get('treatmentAmount'),
                option_amount=args.get('optionAmount'),
                product_amount=args.get('productAmount'),
                ticket_sale_amount=args.get('ticketSaleAmount'),
                ticket_redemption_amount=args.get('ticketRedemptionAmount'),
            )
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"payout": amount})


app = create_app()


# --- Main Execution ---
if __name__ == '__main__':
    # The 'debug=True' flag enables auto-reloading when you save the file.
    app.run(debug=True, port=int(os.environ.get("PORT", "10000")))
