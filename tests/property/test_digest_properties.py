"""
Property-based tests for digest extraction.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from digestlint.core.digest import DIGEST_LENGTHS, describe_digest, extract_hex_digest
from tests.digest_strategies import (
    digest_filename,
    digestless_filename,
    hex_run,
    non_hex_text,
)


@given(data=digest_filename())
@settings(max_examples=200, deadline=None)
def test_single_run_is_extracted_lowercased(data):
    """
    For any filename with one unambiguous 32/40/64 single-case hex run,
    extraction returns that run lowercased.
    """
    name, expected = data
    assert extract_hex_digest(name) == expected


@given(data=digest_filename())
@settings(max_examples=100, deadline=None)
def test_algorithm_follows_run_length(data):
    name, expected = data
    descriptor = describe_digest(name)
    assert descriptor is not None
    assert descriptor.algorithm == DIGEST_LENGTHS[len(expected)]


@given(name=digestless_filename())
@settings(max_examples=200, deadline=None)
def test_no_accepted_run_extracts_nothing(name):
    """Filenames whose hex runs are all shorter than 32 yield no digest."""
    assert extract_hex_digest(name) == ""
    assert describe_digest(name) is None


@given(
    run=hex_run(lengths=st.just(64)),
    directory=non_hex_text.filter(lambda s: "/" not in s),
    tail=non_hex_text.filter(lambda s: "/" not in s),
)
@settings(max_examples=100, deadline=None)
def test_digest_in_directory_component_is_ignored(run, directory, tail):
    """Only the base name is searched for a digest."""
    name = f"{directory}{run}/{tail}"
    assert extract_hex_digest(name) == ""
