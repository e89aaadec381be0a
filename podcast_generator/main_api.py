# To run this code you need to install the project:
# pip install -e .   (flask, google-genai, google-cloud-texttospeech, requests, beautifulsoup4)

import logging

from flask import Flask, request, jsonify
from dotenv import load_dotenv

from podcast_generator.modules.config import PodcastConfig
from podcast_generator.modules.pipeline import PodcastPipeline

logger = logging.getLogger(__name__)


def create_app(config=None, **providers):
    """Build the Flask app.

    ``providers`` may hold ``text_generator``, ``speech_synthesizer`` and
    ``article_extractor`` replacements; anything missing uses the Google
    and requests-based defaults.
    """
    if config is None:
        load_dotenv()
        config = PodcastConfig.from_env()

    # Generated audio is served from the site root, e.g. /podcast-123.mp3
    app = Flask(__name__, static_folder=config.output_dir, static_url_path="")
    pipeline = PodcastPipeline(config, **providers)
    app.extensions["podcast_pipeline"] = pipeline

    @app.route("/api/generate-podcast", methods=["POST"])
    def generate_podcast():
        logger.info("Received request at /api/generate-podcast")
        data = request.get_json(silent=True)
        try:
            outcome = pipeline.run(data)
        except Exception:
            logger.exception("API Error")
            return jsonify({"error": "Internal Server Error"}), 500

        if outcome.ok:
            logger.info("Returning script and audio URL from /api/generate-podcast")
        return jsonify(outcome.to_payload()), outcome.status

    return app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s"
    )
    app = create_app()
    logger.info("Starting Flask app")
    app.run(host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
