import pytest
from codec import SymbolCodec, build_codec
from utils.codewords import generate_codewords
from utils.errors import (CapacityError, ConstructionError, DuplicateMappingError, UnknownCodeError,
                          UnknownSymbolError, UnsafeCodewordError)
from utils.frequency import analyze_frequencies
from utils.text import normalize

SAMPLE = normalize("Мороз и солнце; день чудесный! Ещё ты дремлешь, друг прелестный?")


@pytest.fixture
def two_symbol_codec():
    return build_codec("10", ["а", "б"], generate_codewords("10"))


def test_pairs_most_frequent_symbol_with_shortest_code(two_symbol_codec):
    assert dict(two_symbol_codec.code_by_symbol) == {"а": "0", "б": "1"}
    assert dict(two_symbol_codec.symbol_by_code) == {"0": "а", "1": "б"}


def test_encode_frames_every_codeword(two_symbol_codec):
    assert two_symbol_codec.encode("аб") == "10" + "0" + "10" + "1" + "10"
    assert two_symbol_codec.encode("") == "10"


def test_decode_inverts_encode(two_symbol_codec):
    assert two_symbol_codec.decode("10010110") == "аб"
    assert two_symbol_codec.decode("10") == ""
    assert two_symbol_codec.decode("") == ""


def test_decode_skips_empty_fields_between_adjacent_separators(two_symbol_codec):
    assert two_symbol_codec.decode("10" + "10" + "0" + "10" + "10" + "1" + "10") == "аб"
    assert two_symbol_codec.decode("101010") == ""


@pytest.mark.parametrize("separator", ["10", "11", "101", "00", "110", "01"])
def test_round_trip(separator):
    codec = SymbolCodec.from_text(SAMPLE, separator=separator)
    for text in (SAMPLE, SAMPLE[::-1], "", SAMPLE[:1], SAMPLE[3:17] * 3):
        assert codec.decode(codec.encode(text)) == text


def test_from_text_follows_frequency_ranking():
    codec = SymbolCodec.from_text(SAMPLE)
    frequencies = analyze_frequencies(SAMPLE)
    codewords = generate_codewords("10")
    for symbol, code in zip(frequencies.symbols, codewords):
        assert codec.code_by_symbol[symbol] == code
    assert len(codec) == len(frequencies)


def test_table_is_bijective():
    codec = SymbolCodec.from_text(SAMPLE, separator="110")
    codes = list(codec.code_by_symbol.values())
    assert len(set(codes)) == len(codes)
    assert all(codec.symbol_by_code[code] == symbol for symbol, code in codec.code_by_symbol.items())


def test_table_is_read_only(two_symbol_codec):
    with pytest.raises(TypeError):
        two_symbol_codec.code_by_symbol["а"] = "11"
    with pytest.raises(TypeError):
        two_symbol_codec.symbol_by_code["11"] = "а"


def test_membership_and_separator(two_symbol_codec):
    assert "а" in two_symbol_codec
    assert "в" not in two_symbol_codec
    assert two_symbol_codec.separator == "10"


def test_unknown_symbol(two_symbol_codec):
    with pytest.raises(UnknownSymbolError) as e:
        two_symbol_codec.encode("абв")
    assert e.value.symbol == "в"
    assert e.value.position == 2


def test_unknown_code(two_symbol_codec):
    with pytest.raises(UnknownCodeError) as e:
        two_symbol_codec.decode("10" + "0" + "10" + "11" + "10")
    assert e.value.code == "11"


def test_capacity_error_instead_of_truncation():
    with pytest.raises(CapacityError) as e:
        build_codec("11", ["а", "б", "в"], generate_codewords("11", 1))
    assert e.value.required == 3
    assert e.value.available == 1
    assert isinstance(e.value, ConstructionError)


def test_surplus_codewords_are_unused():
    codec = build_codec("10", ["а"], ["0", "1", "00"])
    assert dict(codec.code_by_symbol) == {"а": "0"}


def test_duplicate_symbol():
    with pytest.raises(DuplicateMappingError) as e:
        SymbolCodec("10", [("а", "0"), ("а", "1")])
    assert e.value.kind == "symbol"
    assert e.value.value == "а"


def test_duplicate_codeword():
    with pytest.raises(DuplicateMappingError) as e:
        build_codec("10", ["а", "б"], ["0", "0"])
    assert e.value.kind == "codeword"
    assert e.value.value == "0"


@pytest.mark.parametrize("code", ["10", "0100", ""])
def test_unsafe_codeword(code):
    with pytest.raises(UnsafeCodewordError) as e:
        SymbolCodec("10", [("а", code)])
    assert e.value.code == code


def test_invalid_construction_arguments():
    with pytest.raises(ValueError):
        SymbolCodec("", [("а", "0")])
    with pytest.raises(ValueError):
        SymbolCodec("10", [("аб", "0")])
