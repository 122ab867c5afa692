"""
minihtml Web API — Flask backend for editor and browser clients.

Provides REST endpoints for:
- /api/validate — Validate a document snapshot (uri, version, text)
- /api/diagnostics — Latest non-stale diagnostics for a document
- /api/completions — Static completion catalogue
"""

import os

from flask import Flask, jsonify, request
from flask_cors import CORS

from minihtml import __version__
from minihtml.completion import TRIGGER_CHARACTERS, get_completions
from minihtml.core.context import ValidationRequest
from minihtml.core.engine import get_engine
from minihtml.core.logging import LogChannel, get_logger
from minihtml.core.publish import DiagnosticsChannel

log = get_logger(LogChannel.SYSTEM)


def create_app() -> Flask:
    """Build the Flask app with its own diagnostics channel."""
    app = Flask(__name__)
    CORS(app)
    channel = DiagnosticsChannel()
    app.config["DIAGNOSTICS_CHANNEL"] = channel

    @app.route('/api/validate', methods=['POST'])
    def validate():
        """Validate one document snapshot and publish its diagnostics."""
        data = request.get_json(silent=True) or {}
        uri = data.get('uri')
        text = data.get('text')
        version = data.get('version', 0)

        if not isinstance(uri, str) or not uri:
            return jsonify({'error': 'uri is required'}), 400
        if not isinstance(text, str):
            return jsonify({'error': 'text must be a string'}), 400
        if not isinstance(version, int) or isinstance(version, bool):
            return jsonify({'error': 'version must be an integer'}), 400

        result = get_engine().validate_document(
            ValidationRequest(uri=uri, version=version, text=text),
            publish=channel.publish,
        )

        latest = channel.latest(uri)
        output = result.to_publish_params()
        output['status'] = result.status.value
        output['stale'] = latest is not None and latest.version > result.version
        output['metadata'] = {
            'request_id': result.request_id,
            'processing_time_ms': round(result.duration_ms, 2),
            'input_length': len(text),
            'version': __version__,
        }
        return jsonify(output)

    @app.route('/api/diagnostics', methods=['GET'])
    def diagnostics():
        """Most recent accepted diagnostics for a document."""
        uri = request.args.get('uri')
        if not uri:
            return jsonify({'error': 'uri is required'}), 400
        latest = channel.latest(uri)
        if latest is None:
            return jsonify({'error': f'No diagnostics for {uri}'}), 404
        return jsonify(latest.to_publish_params())

    @app.route('/api/completions', methods=['GET'])
    def completions():
        """Static completion catalogue with its trigger characters."""
        return jsonify({
            'triggerCharacters': list(TRIGGER_CHARACTERS),
            'items': [item.to_wire() for item in get_completions()],
        })

    return app


if __name__ == '__main__':
    port = int(os.environ.get('MINIHTML_PORT', '5051'))
    log.info("server_starting", url=f"http://localhost:{port}")
    create_app().run(port=port)
