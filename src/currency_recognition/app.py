"""Simple Flask application for currency recognition."""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
from flask import Flask, jsonify, redirect, render_template_string, request, url_for

from .config import ClassifierSettings, configure_logging
from .pipeline import RecognitionPipeline, load_image_from_bytes, visualize_results

logger = logging.getLogger(__name__)


def _load_pipeline() -> RecognitionPipeline:
    currency = os.environ.get("CURRENCY_CODE", "USD")

    template_env = os.environ.get("CURRENCY_TEMPLATE_FILE")
    template_file: Optional[Path] = Path(template_env) if template_env else None

    seed_env = os.environ.get("CURRENCY_SEED")
    noise = np.random.default_rng(int(seed_env)) if seed_env else None

    logger.info("Loading currency templates (%s)", template_file or currency)
    return RecognitionPipeline(
        currency=currency,
        template_file=template_file,
        settings=ClassifierSettings.from_env(),
        noise=noise,
    )


configure_logging()
PIPELINE = _load_pipeline()
APP = Flask(__name__)


@APP.route("/", methods=["GET"])
def index() -> str:
    return render_template_string(
        """
        <!doctype html>
        <title>Currency recognition</title>
        <h1>Upload a photo of a note or coin</h1>
        <form method=post enctype=multipart/form-data action="{{ url_for('predict') }}">
          <input type=file name=image accept="image/*" required>
          <input type=submit value="Recognize">
        </form>
        """
    )


@APP.route("/predict", methods=["POST"])
def predict():
    file = request.files.get("image")
    if not file or file.filename == "":
        return redirect(url_for("index"))

    try:
        image = load_image_from_bytes(file.read())
    except ValueError as exc:
        return render_template_string("<p>{{ message }}</p>", message=str(exc)), 400

    results = PIPELINE(image)
    annotated = visualize_results(image, results)
    _, buffer = cv2.imencode(".jpg", annotated)
    b64 = base64.b64encode(buffer).decode("utf-8")

    return render_template_string(
        """
        <!doctype html>
        <title>Recognition result</title>
        <h1>Recognition result</h1>
        <a href="{{ url_for('index') }}">&larr; Back</a>
        <ul>
          {% for result in results %}
            <li>{{ result.denomination }} {{ result.currency }} ({{ result.confidence }}%)</li>
          {% else %}
            <li>No currency recognized.</li>
          {% endfor %}
        </ul>
        <img src="data:image/jpeg;base64,{{ image_base64 }}" alt="Result" style="max-width: 100%; height: auto;" />
        """,
        results=results,
        image_base64=b64,
    )


@APP.route("/api/classify", methods=["POST"])
def classify_api():
    file = request.files.get("image")
    if not file or file.filename == "":
        return jsonify({"error": "Missing image upload."}), 400

    try:
        image = load_image_from_bytes(file.read())
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    predictions = [result.as_dict() for result in PIPELINE(image)]
    return jsonify({"predictions": predictions})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    APP.run(host="0.0.0.0", port=port)
