# backend.py: Flask JSON API (job description -> keywords, CV -> match score)
from flask import Flask, jsonify, request
import logging
import os

from ats_keywords import (
    JobDescriptionParser,
    KeywordEngine,
    LearnedKeywordStore,
    SqliteStorage,
    match_keywords,
)
from ats_keywords.config import MAX_KEYWORDS
from ats_keywords.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 2 * 1024 * 1024  # 2 MB of text is plenty
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DB_PATH = os.environ.get("ATS_DB_PATH", os.path.join(BASE_DIR, "learned_keywords.db"))


def build_engine(db_path: str = DB_PATH) -> KeywordEngine:
    store = LearnedKeywordStore(SqliteStorage(db_path))
    store.load()
    return KeywordEngine(store=store, parser=JobDescriptionParser())


engine = build_engine()


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


@app.route("/api/keywords", methods=["POST"])
def api_keywords():
    data = _json_body()
    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        return _bad_request("'text' must be a non-empty string")
    try:
        max_keywords = int(data.get("max_keywords", MAX_KEYWORDS))
    except (TypeError, ValueError):
        return _bad_request("'max_keywords' must be an integer")
    if max_keywords < 1:
        return _bad_request("'max_keywords' must be >= 1")

    result = engine.extract_reliable_keywords(text, max_keywords)
    return jsonify(result.model_dump())


@app.route("/api/match", methods=["POST"])
def api_match():
    data = _json_body()
    document = data.get("document")
    if not isinstance(document, str):
        return _bad_request("'document' must be a string")

    keywords = data.get("keywords")
    if keywords is None:
        jd = data.get("job_description")
        if not isinstance(jd, str) or not jd.strip():
            return _bad_request("provide 'keywords' or 'job_description'")
        keywords = engine.extract_reliable_keywords(jd).all
    elif not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        return _bad_request("'keywords' must be a list of strings")

    return jsonify(match_keywords(document, keywords).model_dump())


@app.route("/healthz")
def healthz():
    return "ok", 200


if __name__ == "__main__":
    try:
        app.run(debug=False)
    finally:
        engine.store.flush(wait=True)
        engine.store.close()
