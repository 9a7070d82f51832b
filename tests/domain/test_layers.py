"""Tests for layer classification and LayerOrder validation."""

from __future__ import annotations

import pytest

from gochk.domain.errors import ConfigError, LayerError
from gochk.domain.layers import LayerOrder, classify, path_segments

ORDER = ("external", "adapter", "application", "domain")


class TestPathSegments:
    def test_file_path(self) -> None:
        assert path_segments("./internal/domain/user.go") == ("internal", "domain", "user.go")

    def test_quoted_import_path(self) -> None:
        assert path_segments('"example.com/shop/domain"') == ("example.com", "shop", "domain")

    def test_backslashes(self) -> None:
        assert path_segments("internal\\adapter\\repo.go") == ("internal", "adapter", "repo.go")


class TestClassify:
    def test_file_in_layer_directory(self) -> None:
        assert classify("../../test/data/external/fourthLayer.go", ORDER) == 0
        assert classify("internal/domain/user.go", ORDER) == 3

    def test_import_path(self) -> None:
        assert classify('"github.com/resotto/gochk/test/data/domain"', ORDER) == 3

    def test_no_layer_is_unordered(self) -> None:
        assert classify("internal/util/strings.go", ORDER) is None
        assert classify('"fmt"', ORDER) is None

    def test_substring_of_segment_does_not_match(self) -> None:
        assert classify("internal/subdomain/x.go", ORDER) is None
        assert classify("internal/adapters/x.go", ORDER) is None

    def test_longest_layer_name_wins(self) -> None:
        order = ("domain", "app/domain")
        assert classify("app/domain/user.go", order) == 1

    def test_equal_length_resolves_to_first_in_order(self) -> None:
        # "adapter" and "handler" are both 7 characters long.
        order = ("handler", "adapter")
        assert classify("adapter/handler/http.go", order) == 0
        assert classify("adapter/handler/http.go", tuple(reversed(order))) == 0

    def test_multi_segment_layer(self) -> None:
        order = ("internal/adapter", "internal/domain")
        assert classify("cmd/internal/domain/x.go", order) == 1
        assert classify("domain/x.go", order) is None


class TestLayerOrder:
    def test_rank_lookup(self) -> None:
        order = LayerOrder.of(ORDER)
        assert len(order) == 4
        assert order.rank_of("adapter") == 1
        assert order.name_of(3) == "domain"
        assert order.name_of(None) == "unordered"

    def test_unknown_name(self) -> None:
        with pytest.raises(LayerError):
            LayerOrder.of(ORDER).rank_of("infra")

    def test_rank_out_of_range(self) -> None:
        order = LayerOrder.of(ORDER)
        with pytest.raises(LayerError):
            order.validate_rank(4)
        with pytest.raises(LayerError):
            order.validate_rank(-1)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ConfigError, match="at least one"):
            LayerOrder(())

    def test_duplicates_rejected(self) -> None:
        with pytest.raises(ConfigError, match="domain"):
            LayerOrder(("domain", "adapter", "domain"))

    def test_blank_rejected(self) -> None:
        with pytest.raises(ConfigError, match="blank"):
            LayerOrder(("domain", " "))

    def test_classify_delegates(self) -> None:
        assert LayerOrder.of(ORDER).classify("x/application/y.go") == 2
