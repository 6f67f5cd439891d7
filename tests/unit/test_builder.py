"""Unit tests for PathChainBuilder."""

import pytest

from pathchain.config import ChainConfig
from pathchain.motion import (
    DecelerationType,
    ParametricCallback,
    PathChainBuilder,
    TemporalCallback,
)
from pathchain.utils.errors import PathChainError, PathIndexError


def _noop():
    return None


class TestPathChainBuilder:
    """Tests for fluent chain assembly."""

    def test_build_preserves_order_and_length(self, three_paths):
        """Paths keep the order they were added in."""
        chain = PathChainBuilder().add_path(three_paths[0]).add_paths(*three_paths[1:]).build()

        assert list(chain) == three_paths
        assert chain.length() == pytest.approx(60.0)

    def test_defaults_match_chain_defaults(self, three_paths):
        """Without overrides the chain gets LAST_PATH and the config multiplier."""
        chain = PathChainBuilder(config=ChainConfig(0.4)).add_paths(*three_paths).build()

        assert chain.get_deceleration_type() is DecelerationType.LAST_PATH
        assert chain.get_deceleration_start_multiplier() == 0.4

    def test_deceleration_settings_applied(self, three_paths):
        """Type (given by name) and multiplier carry over to the chain."""
        chain = (
            PathChainBuilder()
            .add_paths(*three_paths)
            .set_deceleration_type("global")
            .set_deceleration_start_multiplier(0.8)
            .build()
        )

        assert chain.get_deceleration_type() is DecelerationType.GLOBAL
        assert chain.get_deceleration_start_multiplier() == 0.8

    @pytest.mark.parametrize("multiplier", [0.0, -0.1, 1.01])
    def test_multiplier_validated(self, multiplier):
        """Multipliers outside (0, 1] are rejected."""
        with pytest.raises(ValueError, match=r"\(0, 1\]"):
            PathChainBuilder().set_deceleration_start_multiplier(multiplier)

    def test_callbacks_default_to_last_path(self, three_paths):
        """Callbacks without an index attach to the latest path."""
        chain = (
            PathChainBuilder()
            .add_path(three_paths[0])
            .add_parametric_callback(0.5, _noop)
            .add_path(three_paths[1])
            .add_temporal_callback(1.5, _noop)
            .build()
        )

        first, second = chain.get_callbacks()
        assert isinstance(first, ParametricCallback)
        assert first.index == 0 and first.t_value == 0.5
        assert isinstance(second, TemporalCallback)
        assert second.index == 1 and second.delay_s == 1.5

    def test_explicit_callback_index(self, three_paths):
        """An explicit index targets that path."""
        chain = (
            PathChainBuilder()
            .add_paths(*three_paths)
            .add_parametric_callback(0.1, _noop, index=0)
            .build()
        )
        assert chain.get_callbacks()[0].index == 0

    def test_callback_without_paths(self):
        """Callbacks need at least one path to attach to."""
        with pytest.raises(PathChainError, match="Add a path"):
            PathChainBuilder().add_parametric_callback(0.5, _noop)

    def test_callback_index_out_of_range(self, three_paths):
        """Callback indices must reference an added path."""
        builder = PathChainBuilder().add_paths(*three_paths)
        with pytest.raises(PathIndexError):
            builder.add_temporal_callback(1.0, _noop, index=3)
        with pytest.raises(PathIndexError):
            builder.add_callback(ParametricCallback(-1, 0.5, _noop))

    def test_builds_are_independent(self, three_paths):
        """Each build() returns a chain with its own callback list."""
        builder = PathChainBuilder().add_paths(*three_paths).add_parametric_callback(0.5, _noop)

        a = builder.build()
        b = builder.build()
        a.append_callbacks(ParametricCallback(0, 0.1, _noop))

        assert a is not b
        assert len(a.get_callbacks()) == 2
        assert len(b.get_callbacks()) == 1
        assert b.size() == 3
