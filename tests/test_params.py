import pytest
from fastapi import HTTPException

from storage_api.api.params import parse_positive_id


@pytest.mark.parametrize("raw, expected", [("12", 12), (" 7 ", 7), (3, 3)])
def test_parse_positive_id_accepts_positive_integers(raw, expected):
    assert parse_positive_id(raw, "Invalid kitchen ID") == expected


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5", "", None, 0, -1, True, 2.0])
def test_parse_positive_id_rejects_everything_else(raw):
    with pytest.raises(HTTPException) as exc:
        parse_positive_id(raw, "Invalid kitchen ID")
    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid kitchen ID"
