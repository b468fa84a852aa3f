from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from flashgen.api.error_mapping import ERRORS, map_exception
from flashgen.domain.errors import MissingCredentialError, RequestValidationError
from flashgen.domain.models import GenerationRequest
from flashgen.services.ai_client import make_text_generator
from flashgen.services.extractors import make_extractor
from flashgen.services.flashcards_service import FlashcardService
from fg_utils.logger_utils import logger

generate_bp = Blueprint('generate_bp', __name__)


def get_flashcard_service() -> FlashcardService:
    """
    Return the app's FlashcardService, building it on first use.

    The credential is checked on every call so that a deployment without a key
    still answers preflight requests and reports the problem per request.
    """
    state = current_app.extensions['flashgen']
    settings = state['settings']

    if not settings.active_api_key():
        raise MissingCredentialError(f"No API key configured for provider '{settings.FG_PROVIDER}'.")

    if state['service'] is None:
        text_generator = state['text_generator'] or make_text_generator(settings)
        extractor = state['extractor'] or make_extractor(settings.FG_EXTRACTOR)
        state['service'] = FlashcardService(
            text_generator,
            extractor=extractor,
            max_context_chars=settings.FG_MAX_CONTEXT_CHARS,
        )
    return state['service']


def parse_generation_request() -> GenerationRequest:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise RequestValidationError(ERRORS["invalid_request"])
    try:
        return GenerationRequest(**payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise RequestValidationError(f"{ERRORS['invalid_request']}: {fields}") from e


@generate_bp.route('/', defaults={'path': ''}, methods=['POST', 'OPTIONS'])
@generate_bp.route('/<path:path>', methods=['POST', 'OPTIONS'])
def generate_flashcards(path):
    """Generates flashcards from a topic or from extracted document text."""
    if request.method == 'OPTIONS':
        return Response(status=204)

    logger.info(f"{request.method} /{path}")
    try:
        service = get_flashcard_service()
        req_data = parse_generation_request()
        cards = service.generate_flashcards(req_data)
        return jsonify(cards), 200
    except Exception as e:
        status, message = map_exception(e)
        logger.error(f"API proxy error ({status}): {e}", exc_info=status >= 500)
        return jsonify({"error": message}), status
