"""
Tests for combogen/grid.py

Verifies:
- Counting by formula and by enumeration
- Preview limits (config default and explicit)
- DataFrame tabulation with skipped parameters
- Numeric value ranges
"""

from itertools import count

import pandas as pd
import pytest

from combogen import config, generator_builder
from combogen.grid import count_combinations, expand, preview, to_dataframe, value_range


class TestCountCombinations:
    """Test count_combinations()."""

    def test_fixed_product(self):
        builder = generator_builder(a=[1, 2], b=['x', 'y', 'z'], c=[True, False])
        assert count_combinations(builder) == 12

    def test_empty_collection_counts_as_one(self):
        """Empty collections add no factor."""
        builder = generator_builder(color=['red', 'blue'], size=[], variant=['A', 'B', 'C'])
        assert count_combinations(builder) == 6
        assert count_combinations(builder) == len(expand(builder))

    def test_no_parameters(self):
        assert count_combinations(generator_builder()) == 0

    def test_dependent_counted_by_enumeration(self):
        builder = generator_builder(n=[1, 2, 3]).add(m=lambda deps: range(deps['n']))
        assert count_combinations(builder) == 1 + 2 + 3

    def test_all_empty(self):
        """All-empty parameters still yield one combination."""
        assert count_combinations(generator_builder(a=[], b=[])) == 1


class TestPreview:
    """Test expand() and preview()."""

    def setup_method(self):
        """Reset config cache before each test."""
        config.reset()

    def test_default_limit_from_config(self):
        builder = generator_builder(a=range(5), b=range(5))
        rows = preview(builder)

        assert len(rows) == config.get('preview', 'limit')
        assert rows[0] == {'a': 0, 'b': 0}

    def test_explicit_limit(self):
        builder = generator_builder(a=range(5))
        assert preview(builder, 2) == [{'a': 0}, {'a': 1}]

    def test_preview_infinite_source(self):
        """Preview only pulls what it returns."""
        builder = generator_builder(n=count())
        assert preview(builder, 3) == [{'n': 0}, {'n': 1}, {'n': 2}]

    def test_expand_without_limit(self):
        builder = generator_builder(a=[1, 2])
        assert expand(builder) == [{'a': 1}, {'a': 2}]

    def test_negative_limit_fails(self):
        with pytest.raises(ValueError, match="limit must be >= 0"):
            expand(generator_builder(a=[1]), -1)


class TestToDataFrame:
    """Test to_dataframe()."""

    def test_columns_in_first_seen_order(self):
        builder = generator_builder(color=['red', 'blue'], size=['small', 'large'])
        df = to_dataframe(builder.build())

        assert list(df.columns) == ['color', 'size']
        assert len(df) == 4
        assert df.iloc[1].to_dict() == {'color': 'red', 'size': 'large'}

    def test_skipped_parameter_is_nan(self):
        """Parameters skipped on a branch become missing values."""
        builder = generator_builder(a=[1, 2]).add(
            b=lambda deps: ['x'] if deps['a'] == 1 else []
        )
        df = to_dataframe(builder.build())

        assert list(df.columns) == ['a', 'b']
        assert df['b'].isna().tolist() == [False, True]

    def test_explicit_columns(self):
        df = to_dataframe([{'a': 1, 'b': 2}], columns=['b', 'a'])
        assert list(df.columns) == ['b', 'a']

    def test_empty_input(self):
        df = to_dataframe([])
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 0


class TestValueRange:
    """Test value_range()."""

    def test_inclusive_endpoint(self):
        assert value_range(0, 1, 0.25) == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_endpoint_off_step(self):
        assert value_range(1, 2, 0.3) == [1.0, 1.3, 1.6, 1.9]

    def test_float_error_rounded(self):
        assert value_range(0, 0.3, 0.1) == [0.0, 0.1, 0.2, 0.3]

    def test_non_positive_step_fails(self):
        with pytest.raises(ValueError, match="step must be positive"):
            value_range(0, 1, 0)

    def test_reversed_bounds_empty(self):
        assert value_range(2, 1, 0.5) == []

    def test_feeds_builder(self):
        builder = generator_builder(rate=value_range(0.1, 0.3, 0.1))
        assert [c['rate'] for c in builder.build()] == [0.1, 0.2, 0.3]
