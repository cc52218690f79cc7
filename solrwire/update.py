"""
    JSON update command encoding.

    The update handler accepts repeated keys in one object:

        {"add":{"doc":{...}},"add":{"doc":{...}},"delete":{"id":"a"},"commit":{}}

    so the body is written as raw text, one fragment per directive group,
    instead of going through json.dumps (a dict cannot hold the repeated keys).
"""
from collections.abc import Mapping

from .exception import MalformedValue
from .formatter import WireFormat, format_value, json_string
from .query import Update


def encode_document(doc) -> str:
    """ caller's key order is kept; nested mappings and lists recurse """
    if doc is None:
        return 'null'

    if isinstance(doc, Mapping):
        members = list()
        for k, v in doc.items():
            if not isinstance(k, str):
                raise MalformedValue(k, WireFormat.JSON.value)
            members.append(f"{json_string(k)}:{encode_document(v)}")
        return '{' + ','.join(members) + '}'

    if isinstance(doc, (list, tuple)):
        return '[' + ','.join(encode_document(x) for x in doc) + ']'

    return format_value(doc, WireFormat.JSON)


def member(key: str, value: str) -> str:
    return f"{json_string(key)}:{value}"


def options(*pairs) -> str:
    """ JSON object of the (key, value) pairs whose value is present """
    return '{' + ','.join(
        member(k, format_value(v, WireFormat.JSON)) for k, v in pairs if v is not None
    ) + '}'


def encode_add(docs: list, commit_within: int = None, overwrite: bool = None) -> str:
    fragments = list()
    for doc in docs:
        head = ''
        if commit_within is not None:
            head += member('commitWithin', format_value(commit_within, WireFormat.JSON)) + ','
        if overwrite is not None:
            head += member('overwrite', format_value(overwrite, WireFormat.JSON)) + ','
        fragments.append(member('add', '{' + head + member('doc', encode_document(doc)) + '}'))
    return ','.join(fragments)


def encode_delete(key: str, values) -> str:
    """ ids and queries are always written as JSON strings """
    if values is None:
        return ''
    if not isinstance(values, (list, tuple)):
        values = [values]
    return ','.join(
        member('delete', '{' + member(key, json_string(str(v))) + '}') for v in values
    )


def encode_commit(commit: bool = None, wait_searcher: bool = None, expunge_deletes: bool = None) -> str:
    if commit is not True:
        return ''
    return member('commit', options(('waitSearcher', wait_searcher), ('expungeDeletes', expunge_deletes)))


def encode_optimize(optimize: bool = None, wait_searcher: bool = None, max_segments: int = None) -> str:
    if optimize is not True:
        return ''
    return member('optimize', options(('waitSearcher', wait_searcher), ('maxSegments', max_segments)))


def encode_rollback(rollback: bool = None) -> str:
    if rollback is not True:
        return ''
    return member('rollback', '{}')


def encode_update(update: Update) -> str:
    fragments = [
        encode_add(update.documents, update.commit_within, update.overwrite),
        encode_delete('id', update.delete_id),
        encode_delete('query', update.delete_query),
        encode_commit(update.commit, update.wait_searcher, update.expunge_deletes),
        encode_optimize(update.optimize, update.wait_searcher, update.max_segments),
        encode_rollback(update.rollback),
    ]
    return '{' + ','.join(x for x in fragments if x) + '}'
