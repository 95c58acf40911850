"""Unit tests for briar/core/layout.py.

Tests layout resolution and the class builders:
- Per-page-type settings
- Fallback to the global default
- Last-match-wins ordering for overlapping views
- Main column, sidebar and thumbnail size selection
"""

import pytest

from briar.core.contracts import LayoutMode, RequestContext
from briar.core.layout import (
    LAYOUT_RULES,
    resolve_layout,
    main_classes,
    sidebar_classes,
    select_thumbnail_size,
    join_classes,
)


# View predicate → theme mod consulted for it (blog listing with a posts front page)
SINGLE_VIEW_SETTINGS = [
    ("is_home", "briar_home_layout"),
    ("is_archive", "briar_archive_layout"),
    ("is_category", "briar_category_archive_layout"),
    ("is_search", "briar_search_layout"),
    ("is_404", "briar_404_layout"),
    ("is_single", "briar_single_layout"),
    ("is_page", "briar_page_layout"),
]


# ============================================================================
# Test resolve_layout
# ============================================================================

class TestResolveLayout:
    """Test resolve_layout function."""

    @pytest.mark.parametrize("flag,mod", SINGLE_VIEW_SETTINGS)
    @pytest.mark.parametrize("value", ["none", "left", "right"])
    def test_single_view_uses_its_setting(self, make_config, flag, mod, value):
        """A configured value is returned when only its view matches."""
        config = make_config(briar_global_layout="right" if value != "right" else "left", **{mod: value})
        request = RequestContext(**{flag: True})
        assert resolve_layout(request, config) == LayoutMode(value)

    @pytest.mark.parametrize("flag,mod", SINGLE_VIEW_SETTINGS)
    def test_disabled_setting_falls_back_to_global(self, make_config, flag, mod):
        config = make_config(briar_global_layout="none", **{mod: "disabled"})
        assert resolve_layout(RequestContext(**{flag: True}), config) == LayoutMode.NONE

    @pytest.mark.parametrize("flag,mod", SINGLE_VIEW_SETTINGS)
    def test_unset_setting_falls_back_to_global(self, make_config, flag, mod):
        config = make_config(briar_global_layout="right")
        assert resolve_layout(RequestContext(**{flag: True}), config) == LayoutMode.RIGHT

    def test_unknown_setting_value_falls_back_to_global(self, make_config):
        config = make_config(briar_global_layout="right", briar_search_layout="sideways")
        assert resolve_layout(RequestContext(is_search=True), config) == LayoutMode.RIGHT

    def test_no_matching_view_uses_global(self, make_config):
        config = make_config(briar_global_layout="none", briar_page_layout="right")
        assert resolve_layout(RequestContext(), config) == LayoutMode.NONE

    def test_defaults_to_left(self, make_config):
        """With nothing configured the global default is 'left'."""
        assert resolve_layout(RequestContext(is_single=True), make_config()) == LayoutMode.LEFT

    def test_invalid_global_default_uses_left(self, make_config, caplog):
        config = make_config(briar_global_layout="centre")
        with caplog.at_level("WARNING"):
            result = resolve_layout(RequestContext(is_search=True), config)
        assert result == LayoutMode.LEFT
        assert "centre" in caplog.text

    def test_search_overrides_archive(self, make_config):
        """Later rules win when several predicates hold."""
        config = make_config(briar_archive_layout="left", briar_search_layout="none")
        request = RequestContext(is_archive=True, is_search=True)
        assert resolve_layout(request, config) == LayoutMode.NONE

    def test_category_overrides_archive(self, make_config):
        config = make_config(briar_archive_layout="left", briar_category_archive_layout="right")
        request = RequestContext(is_archive=True, is_category=True)
        assert resolve_layout(request, config) == LayoutMode.RIGHT

    def test_later_disabled_setting_masks_earlier_value(self, make_config):
        """A matching rule overwrites even with 'disabled'; the global default then applies."""
        config = make_config(
            briar_global_layout="right",
            briar_archive_layout="none",
            briar_category_archive_layout="disabled",
        )
        request = RequestContext(is_archive=True, is_category=True)
        assert resolve_layout(request, config) == LayoutMode.RIGHT

    def test_page_overrides_everything(self, make_config):
        config = make_config(
            show_on_front="page",
            briar_home_layout="none",
            briar_single_layout="right",
            briar_page_layout="left",
        )
        request = RequestContext(is_front_page=True, is_single=True, is_page=True)
        assert resolve_layout(request, config) == LayoutMode.LEFT

    def test_static_front_page_uses_home_layout(self, make_config):
        config = make_config(show_on_front="page", briar_home_layout="none")
        assert resolve_layout(RequestContext(is_front_page=True), config) == LayoutMode.NONE

    def test_static_front_page_that_is_a_page_uses_page_layout(self, make_config):
        """The page rule runs after the front page rule and overwrites it."""
        config = make_config(show_on_front="page", briar_home_layout="none", briar_page_layout="right")
        request = RequestContext(is_front_page=True, is_page=True)
        assert resolve_layout(request, config) == LayoutMode.RIGHT

    def test_front_page_showing_posts_ignores_front_page_rule(self, make_config):
        config = make_config(show_on_front="posts", briar_global_layout="right", briar_home_layout="none")
        assert resolve_layout(RequestContext(is_front_page=True), config) == LayoutMode.RIGHT

    def test_blog_listing_uses_blog_layout_with_static_front(self, make_config):
        config = make_config(show_on_front="page", briar_home_layout="none", briar_blog_layout="right")
        assert resolve_layout(RequestContext(is_home=True), config) == LayoutMode.RIGHT

    def test_blog_listing_uses_home_layout_with_posts_front(self, make_config):
        config = make_config(show_on_front="posts", briar_home_layout="none", briar_blog_layout="right")
        request = RequestContext(is_front_page=True, is_home=True)
        assert resolve_layout(request, config) == LayoutMode.NONE

    def test_settings_read_on_every_call(self, make_config):
        config = make_config(briar_single_layout="none")
        request = RequestContext(is_single=True)
        assert resolve_layout(request, config) == LayoutMode.NONE

        config.set_theme_mod("briar_single_layout", "right")
        assert resolve_layout(request, config) == LayoutMode.RIGHT

    def test_rule_order(self):
        assert [rule.name for rule in LAYOUT_RULES] == [
            "static_front_page", "home", "archive", "category",
            "search", "404", "single", "page",
        ]


# ============================================================================
# Test class builders
# ============================================================================

class TestMainClasses:
    """Test main_classes function."""

    def test_none_single(self):
        assert main_classes(LayoutMode.NONE, is_single=True) == [
            'col-lg-8 col-md-10 col-lg-offset-2 col-md-offset-1'
        ]

    def test_none_not_single(self):
        assert main_classes(LayoutMode.NONE, is_single=False) == ['col-md-12']

    @pytest.mark.parametrize("is_single", [True, False])
    def test_left(self, is_single):
        assert main_classes(LayoutMode.LEFT, is_single=is_single) == ['col-md-8', 'col-md-push-4']

    def test_right(self):
        assert main_classes(LayoutMode.RIGHT) == ['col-md-8']

    def test_accepts_plain_strings(self):
        assert main_classes("left") == ['col-md-8', 'col-md-push-4']

    @pytest.mark.parametrize("layout", ["none", "left", "right"])
    def test_preview_overrides_layout(self, layout):
        assert main_classes(layout, is_single=True, is_preview=True) == ['col-md-12', 'briar-main-class']


class TestSidebarClasses:
    """Test sidebar_classes function."""

    def test_none_has_no_sidebar(self):
        assert sidebar_classes(LayoutMode.NONE) is None

    def test_right(self):
        assert sidebar_classes(LayoutMode.RIGHT) == ['col-md-4']

    def test_left(self):
        assert sidebar_classes(LayoutMode.LEFT) == ['col-md-4', 'col-md-pull-8']

    @pytest.mark.parametrize("layout", ["none", "left", "right"])
    def test_preview_overrides_layout(self, layout):
        assert sidebar_classes(layout, is_preview=True) == ['col-md-4', 'briar-sidebar-class']

    def test_preview_lists_are_copies(self):
        sidebar_classes("none", is_preview=True).append("mutated")
        assert sidebar_classes("none", is_preview=True) == ['col-md-4', 'briar-sidebar-class']


class TestSelectThumbnailSize:
    """Test select_thumbnail_size function."""

    def test_full_width_when_no_sidebar(self):
        assert select_thumbnail_size("blog-post-image", LayoutMode.NONE) == "full-width-blog-post-image"

    @pytest.mark.parametrize("layout", ["left", "right"])
    def test_unchanged_with_sidebar(self, layout):
        assert select_thumbnail_size("blog-post-image", layout) == "blog-post-image"

    def test_other_sizes_unchanged(self):
        assert select_thumbnail_size("thumbnail", LayoutMode.NONE) == "thumbnail"


def test_join_classes():
    assert join_classes(['col-md-8', 'col-md-push-4']) == 'col-md-8 col-md-push-4'
    assert join_classes(None) == ''
