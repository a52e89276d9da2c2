"""Tests for share records and decoding into points."""

import logging

import pytest
from sharelock.errors import DecodeError, DuplicateShareError, RecordError
from sharelock.shares import (
    Point, Share, Threshold, decode_shares, load_record, parse_record, parse_share,
)


class TestShare:

    def test_decode(self):
        assert Share(4, 16, "e1b5e05623d881f").decode() == Point(4, 1016509518118225951)

    def test_frozen(self):
        share = Share(1, 10, "5")
        with pytest.raises(AttributeError):
            share.value = "6"

    def test_point_unpacks_like_a_pair(self):
        x, y = Point(3, 9)
        assert (x, y) == (3, 9)

    def test_decode_error_names_share(self):
        with pytest.raises(DecodeError, match="Share 7"):
            Share(7, 2, "102").decode()


class TestDecodeShares:

    def test_sorted_by_x(self):
        shares = [Share(10, 10, "1"), Share(2, 10, "2"), Share(5, 10, "3")]
        assert [p.x for p in decode_shares(shares)] == [2, 5, 10]

    def test_numeric_not_lexicographic(self, ten_share_record):
        _, shares = parse_record(ten_share_record)
        assert [p.x for p in decode_shares(shares)] == list(range(1, 11))

    def test_duplicate(self):
        with pytest.raises(DuplicateShareError):
            decode_shares([Share(1, 10, "1"), Share(1, 10, "2")])


class TestThreshold:

    def test_valid(self):
        assert Threshold(10, 7).k == 7
        assert Threshold(1, 1).n == 1

    @pytest.mark.parametrize("n,k", [(5, 0), (3, 5), (0, 0)])
    def test_invalid(self, n, k):
        with pytest.raises(ValueError):
            Threshold(n, k)


class TestParseRecord:

    def test_ten_share_record(self, ten_share_record):
        threshold, shares = parse_record(ten_share_record)
        assert threshold == Threshold(10, 7)
        assert len(shares) == 10
        assert Share(9, 12, "45153788322a1255483") in shares

    def test_string_keys_block(self, ten_share_record):
        ten_share_record["keys"] = {"n": "10", "k": "7"}
        threshold, _ = parse_record(ten_share_record)
        assert threshold == Threshold(10, 7)

    def test_declared_n_mismatch_warns(self, ten_share_record, caplog):
        del ten_share_record["10"]
        with caplog.at_level(logging.WARNING, logger="sharelock.shares"):
            _, shares = parse_record(ten_share_record)
        assert len(shares) == 9
        assert "declares n=10" in caplog.text

    def test_missing_keys_block(self, ten_share_record):
        del ten_share_record["keys"]
        with pytest.raises(RecordError):
            parse_record(ten_share_record)

    def test_missing_k(self, ten_share_record):
        ten_share_record["keys"] = {"n": 10}
        with pytest.raises(RecordError, match="keys.k"):
            parse_record(ten_share_record)

    def test_k_above_n(self, ten_share_record):
        ten_share_record["keys"] = {"n": 5, "k": 7}
        with pytest.raises(ValueError):
            parse_record(ten_share_record)

    def test_not_an_object(self):
        with pytest.raises(RecordError):
            parse_record([1, 2, 3])


class TestParseShare:

    @pytest.mark.parametrize("key", ["0", "-1", "a", "1.5", ""])
    def test_bad_identifier(self, key):
        with pytest.raises(RecordError):
            parse_share(key, {"base": "10", "value": "1"})

    def test_missing_fields(self):
        with pytest.raises(RecordError, match="base"):
            parse_share("1", {"value": "1"})
        with pytest.raises(RecordError, match="value"):
            parse_share("1", {"base": "10"})

    def test_non_string_value(self):
        with pytest.raises(RecordError):
            parse_share("1", {"base": "10", "value": 12})

    def test_bad_base(self):
        with pytest.raises(DecodeError):
            parse_share("1", {"base": "40", "value": "1"})

    def test_entry_not_an_object(self):
        with pytest.raises(RecordError):
            parse_share("1", "12")


class TestLoadRecord:

    def test_json(self):
        record = load_record('{"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "101"}}')
        assert record["1"]["value"] == "101"

    def test_invalid_json(self):
        with pytest.raises(RecordError, match="Invalid JSON"):
            load_record("{not json")

    def test_not_an_object(self):
        with pytest.raises(RecordError):
            load_record("[1, 2]")
