"""
    Single entry point: route a descriptor to the encoder of its shape.

        >>> encode({'q': 'loch', 'rows': 10})
        'q=loch&rows=10'
        >>> encode(Update(commit=True))
        '{"commit":{}}'
"""
from .exception import UnsupportedInput
from .logger import get_logger
from .params import encode_params, is_params_input
from .query import Params, Update
from .update import encode_update

log = get_logger(__name__)


def encode(obj) -> str:
    if isinstance(obj, Update):
        kind, text = 'update', encode_update(obj)
    elif isinstance(obj, Params):
        kind, text = type(obj).__name__, encode_params(obj)
    elif is_params_input(obj):
        kind, text = 'params', encode_params(obj)
    else:
        raise UnsupportedInput(obj)

    log.debug(f"encoded {kind} into {len(text)} chars")
    return text
