import pytest

from services import (
    normalize_item_name, expand_abbreviations, calculate_match_score,
    find_best_match, find_all_matches, reconcile_receipt,
)

CANDIDATES = [
    {'id': 'i1', 'name': 'Milk', 'source': 'items'},
    {'id': 'i2', 'name': 'Whole Milk', 'source': 'shopping_list', 'shoppingListId': 's9'},
    {'id': 'i3', 'name': 'Chicken Breast', 'source': 'inventory', 'inventoryId': 'v1', 'shelfId': 'f2'},
    {'id': 'i4', 'name': 'Bread', 'source': 'items'},
]


def test_normalize_item_name():
    assert normalize_item_name("CHKN BRST, 2LB!") == "chkn brst 2lb"
    assert normalize_item_name(None) == ""


def test_expand_abbreviations():
    assert expand_abbreviations("CHKN BRST") == "chicken breast"
    assert expand_abbreviations("whlmlk gal") == "whole milk gallon"
    assert expand_abbreviations("bananas") == "bananas"


def test_identical_names_score_one():
    assert calculate_match_score("Chicken Breast", "chicken breast") == pytest.approx(1.0)


def test_abbreviated_receipt_item():
    best = find_best_match("CHKN BRST", CANDIDATES)
    assert best['candidate']['id'] == 'i3'
    assert best['confidence'] == 'high'
    assert best['score'] == pytest.approx(1.0)


def test_no_match_below_minimum():
    assert find_best_match("zzz", [{'id': 'i1', 'name': 'Milk'}]) is None
    assert find_best_match("milk", []) is None


def test_find_all_matches_sorted():
    matches = find_all_matches("whole milk", CANDIDATES)
    assert [m['candidate']['id'] for m in matches] == ['i2', 'i1']
    assert matches[0]['confidence'] == 'high'
    assert matches[1]['confidence'] == 'low'


def test_thresholds_are_parameters():
    assert find_best_match("whole milk", [{'id': 'i1', 'name': 'Milk'}], min_score=0.5) is None
    best = find_best_match("whole milk", [{'id': 'i1', 'name': 'Milk'}], high_confidence=0.4)
    assert best['confidence'] == 'high'


def test_reconcile_receipt():
    results = reconcile_receipt(["Whole Milk", "Bananas"], CANDIDATES, owned=["milk"])
    assert [r['name'] for r in results] == ["Whole Milk", "Bananas"]
    assert results[0]['match']['candidate']['id'] == 'i2'
    assert results[0]['already_stocked'] is True
    assert results[1]['already_stocked'] is False


def test_reconcile_receipt_stocked_check_uses_fuzzy_settings():
    results = reconcile_receipt(["Brocoli"], CANDIDATES, owned=["broccoli"])
    assert results[0]['already_stocked'] is True

    results = reconcile_receipt(["Brocoli"], CANDIDATES, owned=["broccoli"], threshold=0.95)
    assert results[0]['already_stocked'] is False
