from __future__ import annotations

import io

import pytest
from flask import Flask, request

from payload import FormPayload, JsonPayload, parse_payload, value_to_string


@pytest.fixture()
def flask_app():
    return Flask(__name__)


@pytest.mark.parametrize("value,expected", [
    (None, ''),
    ('abc', 'abc'),
    (True, 'true'),
    (False, 'false'),
    (3, '3'),
    (3.0, '3'),
    (2.5, '2.5'),
    ([1, 'a', None], '1,a,'),
    ({'a': 1}, '{"a":1}'),
])
def test_value_to_string(value, expected):
    assert value_to_string(value) == expected


def test_json_body_is_stringified(flask_app):
    body = {'customerName': 'ヤマダ　ハナコ', 'salesAmount': 12000, 'next': None, 'vip': True}
    with flask_app.test_request_context('/api/submit', method='POST', json=body):
        payload = parse_payload(request)
    assert isinstance(payload, JsonPayload)
    assert payload.source == 'json'
    assert payload.fields == {'customerName': 'ヤマダ　ハナコ', 'salesAmount': '12000', 'next': '', 'vip': 'true'}


def test_malformed_json_falls_back_to_empty(flask_app):
    with flask_app.test_request_context('/api/submit', method='POST', data='{broken',
                                        content_type='application/json'):
        payload = parse_payload(request)
    assert isinstance(payload, JsonPayload)
    assert payload.fields == {}


def test_json_array_is_treated_as_empty(flask_app):
    with flask_app.test_request_context('/api/submit', method='POST', json=['a', 'b']):
        payload = parse_payload(request)
    assert payload.fields == {}


def test_urlencoded_form(flask_app):
    with flask_app.test_request_context('/api/submit', method='POST',
                                        data={'顧客名': 'ヤマダ　ハナコ', 'gender': '女性'}):
        payload = parse_payload(request)
    assert isinstance(payload, FormPayload)
    assert payload.source == 'form'
    assert payload.fields == {'顧客名': 'ヤマダ　ハナコ', 'gender': '女性'}


def test_multipart_form_ignores_files_and_keeps_last_value(flask_app):
    data = {
        'practitioner': ['すず', 'みき'],
        'photo': (io.BytesIO(b'binary'), 'photo.png'),
    }
    with flask_app.test_request_context('/api/submit', method='POST', data=data,
                                        content_type='multipart/form-data'):
        payload = parse_payload(request)
    assert payload.fields == {'practitioner': 'みき'}
