"""
    Query string encoding of flat parameter sets.

    Absent (None) fields are dropped, list values become repeated keys,
    pairs are sorted by name (stable, so repeated keys keep their order).
"""
from collections.abc import Mapping

from .exception import UnsupportedInput
from .formatter import WireFormat, format_value, url_escape
from .query import Params


def is_pair_list(obj) -> bool:
    return isinstance(obj, (list, tuple)) and all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in obj
    )


def is_params_input(obj) -> bool:
    return isinstance(obj, (Params, Mapping)) or is_pair_list(obj)


def iter_pairs(params):
    if isinstance(params, Params):
        return params.wire_fields()
    if isinstance(params, Mapping):
        return params.items()
    if is_pair_list(params):
        return iter(params)
    raise UnsupportedInput(params)


def present_pairs(params) -> list[tuple[str, object]]:
    pairs = list()
    for name, value in iter_pairs(params):
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(name), v) for v in value if v is not None)
        else:
            pairs.append((str(name), value))
    return pairs


def encode_params(params) -> str:
    pairs = sorted(present_pairs(params), key=lambda pair: pair[0])
    return '&'.join(
        f"{url_escape(name)}={format_value(value, WireFormat.URL)}" for name, value in pairs
    )


def encode_all(*inputs) -> str:
    """ encode several parameter sets and join them, each sorted on its own """
    encoded = [ encode_params(params) for params in inputs ]
    return '&'.join(x for x in encoded if x)
