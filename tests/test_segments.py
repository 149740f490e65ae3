"""Tests for fsroutes.resolver.segments — route-key segment classification."""

from fsroutes.resolver.segments import SegmentKind, classify, split_route_key


class TestClassify:
    """classify() — kind, identity name and rendered path name."""

    def test_literal(self) -> None:
        seg = classify("about")
        assert seg.kind is SegmentKind.LITERAL
        assert seg.name == "about"
        assert seg.path_name == "about"

    def test_literal_lowercased_by_default(self) -> None:
        seg = classify("About")
        assert seg.name == "about"
        assert seg.path_name == "about"

    def test_literal_case_sensitive_keeps_path_casing(self) -> None:
        seg = classify("Blog", case_sensitive=True)
        assert seg.path_name == "Blog"
        # Names always fold case, even in case-sensitive mode
        assert seg.name == "blog"

    def test_dynamic(self) -> None:
        seg = classify("[slug]")
        assert seg.kind is SegmentKind.DYNAMIC
        assert seg.name == "slug"
        assert seg.path_name == "slug"

    def test_dynamic_case_sensitive(self) -> None:
        seg = classify("[postId]", case_sensitive=True)
        assert seg.name == "postid"
        assert seg.path_name == "postId"

    def test_catch_all_name_is_fixed(self) -> None:
        seg = classify("[...rest]")
        assert seg.kind is SegmentKind.CATCH_ALL
        assert seg.is_catch_all
        assert seg.name == "all"
        assert seg.path_name == "all"

    def test_index(self) -> None:
        seg = classify("index")
        assert seg.kind is SegmentKind.INDEX
        assert seg.is_index
        assert seg.name == "index"

    def test_index_case_insensitive_by_default(self) -> None:
        assert classify("Index").is_index

    def test_index_case_sensitive_requires_exact_spelling(self) -> None:
        seg = classify("Index", case_sensitive=True)
        assert seg.kind is SegmentKind.LITERAL
        assert seg.path_name == "Index"

    def test_bracketed_index_is_dynamic(self) -> None:
        assert classify("[index]").kind is SegmentKind.DYNAMIC

    def test_empty_brackets_are_literal(self) -> None:
        assert classify("[]").kind is SegmentKind.LITERAL

    def test_raw_preserved(self) -> None:
        assert classify("[...Rest]").raw == "[...Rest]"


class TestSplitRouteKey:
    """split_route_key() — per-segment classification of a whole key."""

    def test_kinds_in_order(self) -> None:
        kinds = [s.kind for s in split_route_key("blog/[slug]/[...all]")]
        assert kinds == [SegmentKind.LITERAL, SegmentKind.DYNAMIC, SegmentKind.CATCH_ALL]

    def test_empty_tokens_skipped(self) -> None:
        assert [s.raw for s in split_route_key("/a//b/")] == ["a", "b"]

    def test_passes_case_sensitivity(self) -> None:
        (seg,) = split_route_key("Blog", case_sensitive=True)
        assert seg.path_name == "Blog"
