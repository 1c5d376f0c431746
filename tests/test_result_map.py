"""Tests for result flattening and shaping."""

from lsdirp.options import LsdirpOptions
from lsdirp.result_map import flatten_result, shape_result


def sample_result():
    return {
        "root": ["root/a", "root/b"],
        "root/a": ["root/a/x"],
        "root/a/x": [],
        "root/b": [],
    }


def test_flatten_in_key_order():
    result = {"root": ["root/1.txt", "root/2.txt"], "root/sub": ["root/sub/3.txt"], "root/empty": []}
    assert flatten_result(result) == ["root/1.txt", "root/2.txt", "root/sub/3.txt"]


def test_flatten_empty():
    assert flatten_result({}) == []
    assert flatten_result({}, include_parent_dirs=True) == []


def test_flatten_with_parent_dirs_deduplicates():
    assert flatten_result(sample_result(), include_parent_dirs=True) == ["root", "root/a", "root/b", "root/a/x"]


def test_flatten_with_parent_dirs_for_overlapping_roots():
    result = {"a": ["a/b"], "a/b": [], "b": ["b/c"], "b/c": []}
    assert flatten_result(result, include_parent_dirs=True) == ["a", "a/b", "b", "b/c"]


def test_shape_returns_mapping_by_default():
    result = sample_result()
    assert shape_result(result, LsdirpOptions()) is result


def test_shape_flattens():
    assert shape_result(sample_result(), LsdirpOptions(flatten=True)) == ["root/a", "root/b", "root/a/x"]


def test_shape_never_flattens_bare_names():
    result = {"root": ["a", "b"]}
    assert shape_result(result, LsdirpOptions(flatten=True, prepend_path=False)) is result


def test_shape_includes_parent_dirs_only_for_directories():
    options = LsdirpOptions(flatten=True, include_parent_dir=True)
    assert shape_result(sample_result(), options) == ["root/a", "root/b", "root/a/x"]

    options = LsdirpOptions(flatten=True, include_parent_dir=True, file_type="directory")
    assert shape_result(sample_result(), options) == ["root", "root/a", "root/b", "root/a/x"]
