from flask import Flask, jsonify, request

from passforge.errors import GenerationError, InvalidSettingsError
from passforge.generator import generate_batch
from passforge.settings import GenerationSettings

# per-request caps for the public endpoint
MAX_LENGTH = 1024
MAX_AMOUNT = 100


def create_app(rng=None):
    app = Flask(__name__)
    app.config.setdefault("PASSFORGE_MAX_LENGTH", MAX_LENGTH)
    app.config.setdefault("PASSFORGE_MAX_AMOUNT", MAX_AMOUNT)

    @app.route('/')
    def home():
        return jsonify({
            "message": "passforge API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({'error': 'BadRequest', 'message': 'expected a JSON object'}), 400
        try:
            settings = GenerationSettings.from_mapping(data)
            if settings.length > app.config["PASSFORGE_MAX_LENGTH"]:
                raise InvalidSettingsError(f"length must be <= {app.config['PASSFORGE_MAX_LENGTH']}")
            if settings.amount > app.config["PASSFORGE_MAX_AMOUNT"]:
                raise InvalidSettingsError(f"amount must be <= {app.config['PASSFORGE_MAX_AMOUNT']}")
            passwords = generate_batch(settings, rng)
        except GenerationError as e:
            return jsonify({'error': type(e).__name__, 'message': str(e)}), 400
        return jsonify({'passwords': passwords})

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
