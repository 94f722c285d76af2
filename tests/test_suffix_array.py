import pytest
from hypothesis import given, strategies as st

from psiindex.suffix_array import SuffixArray, build_suffix_array, compare_suffix

texts = st.text(alphabet="abcd$", max_size=60)


def test_banana_worked_example():
    assert build_suffix_array("banana") == [5, 3, 1, 0, 4, 2]


def test_empty_and_single():
    assert build_suffix_array("") == []
    assert build_suffix_array("z") == [0]


@given(texts)
def test_suffixes_are_sorted(text):
    sa = build_suffix_array(text)
    assert sorted(sa) == list(range(len(text)))
    suffixes = [text[i:] for i in sa]
    assert suffixes == sorted(suffixes)


@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=40))
def test_printable_text_sorted(text):
    sa = build_suffix_array(text)
    assert [text[i:] for i in sa] == sorted(text[i:] for i in range(len(text)))


def test_compare_suffix_codes():
    text = "mississippi$"
    assert compare_suffix(text, 7, "ipp") == 2
    assert compare_suffix(text, 7, "ippi") == 0
    assert compare_suffix(text, 7, "ipq") == -1
    assert compare_suffix(text, 7, "ipa") == 1
    assert compare_suffix(text, 7, "ippi$x") == -1


def test_find_present():
    sa = SuffixArray("mississippi$")
    for query in ["ssi", "issi", "p", "mississippi", "i$"]:
        pos = sa.find(query)
        assert pos is not None
        assert sa.text[pos:pos + len(query)] == query


def test_find_absent():
    sa = SuffixArray("mississippi$")
    assert sa.find("xyz") is None
    assert sa.find("sss") is None


@given(texts, st.data())
def test_find_any_substring(text, data):
    if not text:
        text = "a"
    start = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
    end = data.draw(st.integers(min_value=start + 1, max_value=len(text)))
    query = text[start:end]
    index = SuffixArray(text)
    pos = index.find(query)
    assert pos is not None
    assert text[pos:pos + len(query)] == query


def test_given_suffix_array_used():
    sa = SuffixArray("banana", [5, 3, 1, 0, 4, 2])
    assert sa.suffix_array == build_suffix_array("banana")
    assert sa.find("nan") == 2


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        SuffixArray("banana", [0, 1, 2])


def test_memory_size():
    assert SuffixArray("banana").memory_size() == 24