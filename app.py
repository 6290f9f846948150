"""Flask web application for the signature add-in."""

import logging
import os

from flask import Flask, jsonify, request

from set_signature.config import LOG_LEVEL, SECRET_KEY
from set_signature.models import ItemType
from set_signature.services import DictSettingsStore, EventService

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SECRET_KEY'] = SECRET_KEY

event_service = EventService()


@app.route('/api/health')
def health():
    """Liveness check."""
    return jsonify({'status': 'ok'})


@app.route('/api/signature', methods=['POST'])
def signature():
    """Compose the signature for a new compose item.

    Expects JSON with the saved ``settings``, the host ``composeType``
    (null for appointments) and the ``itemType``.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    settings = data.get('settings') or {}
    if not isinstance(settings, dict):
        return jsonify({'error': 'settings must be an object'}), 400

    item_type = data.get('itemType') or ItemType.MESSAGE.value
    if not isinstance(item_type, str) or item_type not in {t.value for t in ItemType}:
        return jsonify({'error': f'Unknown itemType: {item_type}'}), 400

    response = event_service.handle(DictSettingsStore(settings), data.get('composeType'), item_type)

    if response.notification is not None:
        return jsonify({
            'success': False,
            'notification': response.notification.to_dict(),
        })

    outcome = response.outcome
    if not outcome.ok:
        return jsonify({'error': str(outcome.error), 'code': outcome.error.code}), 422

    payload = outcome.result.to_dict()
    payload['success'] = True
    payload['template'] = outcome.template.value
    return jsonify(payload)


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=False, host='0.0.0.0', port=port)
