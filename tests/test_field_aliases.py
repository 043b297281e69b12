from __future__ import annotations

import pytest

from field_aliases import CANONICAL_FIELDS, FIELD_ALIASES, normalize_keys, pick_first


def test_pick_first_skips_empty_values():
    fields = {'施術者': '', 'therapist': '', 'practitioner': 'すず', 'staff': 'みき'}
    assert pick_first(fields, ('施術者', 'therapist', 'practitioner', 'staff')) == 'すず'


def test_pick_first_returns_empty_when_nothing_matches():
    assert pick_first({'other': 'x'}, ('施術者', 'practitioner')) == ''


@pytest.mark.parametrize("canonical,aliases", FIELD_ALIASES)
def test_every_alias_resolves_to_its_canonical_field(canonical, aliases):
    for alias in aliases:
        assert normalize_keys({alias: 'value'})[canonical] == 'value'


@pytest.mark.parametrize("canonical,aliases", FIELD_ALIASES)
def test_earlier_alias_wins(canonical, aliases):
    fields = {alias: f'v{i}' for i, alias in enumerate(aliases)}
    assert normalize_keys(fields)[canonical] == 'v0'


def test_missing_fields_default_to_empty_string():
    normalized = normalize_keys({})
    assert all(normalized[name] == '' for name in CANONICAL_FIELDS)


def test_unknown_keys_pass_through():
    normalized = normalize_keys({'メモ': '指名あり', 'customerName': 'ヤマダ　ハナコ'})
    assert normalized['メモ'] == '指名あり'
    assert normalized['顧客名'] == 'ヤマダ　ハナコ'
    assert normalized['customerName'] == 'ヤマダ　ハナコ'


def test_canonical_key_is_not_overwritten_by_raw_key():
    normalized = normalize_keys({'会計日': '', 'businessDay': '2024-05-01'})
    assert normalized['会計日'] == '2024-05-01'
