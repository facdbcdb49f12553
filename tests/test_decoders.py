import json
import typing as tp

import pytest

from etagcache import BaseDecoder, DecodeError, Person, PydanticDecoder, ShapeInfo


def test_decode_single():
    body = json.dumps({"id": 1, "name": "Jason Fried", "unknown_field": "ignored"}).encode()

    person = PydanticDecoder().decode_single(body, Person)

    assert person == Person(id=1, name="Jason Fried")


def test_decode_sequence():
    body = json.dumps([{"id": 1, "name": "Jason Fried"}, {"id": 2, "name": "Jeff"}]).encode()

    people = PydanticDecoder().decode_sequence(body, Person)

    assert people == [Person(id=1, name="Jason Fried"), Person(id=2, name="Jeff")]


def test_decode_empty_sequence():
    assert PydanticDecoder().decode_sequence(b"[]", Person) == []


def test_decode_dispatches_on_shape():
    decoder = PydanticDecoder()

    assert decoder.decode(b'{"id": 1, "name": "Jason Fried"}', ShapeInfo.single(Person)) == Person(
        id=1, name="Jason Fried"
    )
    assert decoder.decode(b"[1, 2, 3]", ShapeInfo.sequence(int)) == [1, 2, 3]


def test_decode_plain_types():
    assert PydanticDecoder().decode_single(b'{"a": 1}', tp.Dict[str, int]) == {"a": 1}


def test_sequence_body_for_single_shape():
    with pytest.raises(DecodeError) as exc_info:
        PydanticDecoder().decode_single(b'[{"id": 1, "name": "Jason Fried"}]', Person)

    assert exc_info.value.target is Person


def test_invalid_json():
    with pytest.raises(DecodeError):
        PydanticDecoder().decode_sequence(b"not json", Person)


def test_base_decoder_is_abstract():
    with pytest.raises(NotImplementedError):
        BaseDecoder().decode(b"{}", ShapeInfo.single(Person))
