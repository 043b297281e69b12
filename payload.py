import json
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonPayload:
    """Fields taken from an application/json request body."""
    fields: dict = field(default_factory=dict)
    source = 'json'


@dataclass(frozen=True)
class FormPayload:
    """Fields taken from a urlencoded or multipart form body."""
    fields: dict = field(default_factory=dict)
    source = 'form'


def value_to_string(value):
    """Coerces a decoded JSON value to the string a browser form would send."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ','.join(value_to_string(item) for item in value)
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def _is_json(request):
    mimetype = request.mimetype or ''
    return mimetype == 'application/json' or mimetype.endswith('+json')


def parse_payload(request):
    """
    Reads the submission out of a Flask request.

    JSON bodies that fail to parse, or that are not an object, produce an
    empty submission instead of an error.
    """
    if _is_json(request):
        raw = request.get_json(silent=True)
        if not isinstance(raw, dict):
            logger.warning("Ignoring JSON body that is not an object (got %s)", type(raw).__name__)
            return JsonPayload()
        return JsonPayload({str(key): value_to_string(value) for key, value in raw.items()})

    # request.form only holds text parts; uploaded files live in request.files
    fields = {key: values[-1] for key, values in request.form.lists()}
    return FormPayload(fields)
