"""
    Scalar formatting for both wire formats.

    Lists, mappings and None are the caller's business: parameter lists are
    expanded into repeated keys, JSON arrays and objects are written by the
    update encoder. Anything reaching format_value must be a scalar.
"""
import enum
import json
import math
from urllib.parse import quote_plus

from .exception import MalformedValue


class WireFormat(str, enum.Enum):
    URL = 'url'
    JSON = 'json'


def format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def format_number(value, fmt: WireFormat) -> str:
    if isinstance(value, float) and not math.isfinite(value) and fmt == WireFormat.JSON:
        raise MalformedValue(value, fmt.value)
    return repr(value) if isinstance(value, float) else str(value)


def url_escape(text: str) -> str:
    # form encoding: space is '+', only A-Za-z0-9_.-~ stay unescaped
    return quote_plus(text, safe='', encoding='utf-8')


def json_string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_value(value, fmt: WireFormat = WireFormat.URL) -> str:
    fmt = WireFormat(fmt)

    # bool first, it is an int subclass
    if isinstance(value, bool):
        return format_bool(value)

    if isinstance(value, (int, float)):
        text = format_number(value, fmt)
        return url_escape(text) if fmt == WireFormat.URL else text

    if isinstance(value, str):
        if fmt == WireFormat.URL:
            return url_escape(value)
        return json_string(value)

    raise MalformedValue(value, fmt.value)
