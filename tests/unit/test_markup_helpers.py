"""Unit tests for the menu, content and author helpers in briar/utils."""

import pytest

from briar.core.contracts import Author, MenuArgs, MenuItem, Post, RequestContext
from briar.utils.menu import page_menu_args, nav_menu_css_class, nav_menu_link_attributes
from briar.utils.content import the_content_more_link, body_classes
from briar.utils.author import setup_author


# ============================================================================
# Menus
# ============================================================================

class TestPageMenuArgs:
    """Test page_menu_args function."""

    def test_sets_show_home(self):
        assert page_menu_args({})['show_home'] is True

    def test_keeps_other_args(self):
        args = page_menu_args({'menu_class': 'menu', 'show_home': False})
        assert args == {'menu_class': 'menu', 'show_home': True}


class TestNavMenuCssClass:
    """Test nav_menu_css_class function."""

    def test_appends_item_class(self):
        item = MenuItem(id=1, title="Home", url="/")
        classes = nav_menu_css_class(['menu-item'], item, MenuArgs(item_class='nav__item'), 0)
        assert classes == ['menu-item', 'nav__item']

    def test_without_item_class(self):
        assert nav_menu_css_class(['menu-item'], None, MenuArgs(), 0) == ['menu-item']

    def test_without_args(self):
        assert nav_menu_css_class(['menu-item']) == ['menu-item']

    def test_empty_item_class_is_still_appended(self):
        """An empty string is set, so it is appended."""
        assert nav_menu_css_class([], None, MenuArgs(item_class=''), 0) == ['']


class TestNavMenuLinkAttributes:
    """Test nav_menu_link_attributes function."""

    def test_sets_class(self):
        atts = nav_menu_link_attributes({'href': '/'}, None, MenuArgs(link_class='nav__link'), 0)
        assert atts == {'href': '/', 'class': 'nav__link'}

    def test_replaces_existing_class(self):
        atts = nav_menu_link_attributes({'class': 'old'}, None, MenuArgs(link_class='nav__link'), 1)
        assert atts['class'] == 'nav__link'

    def test_without_link_class(self):
        assert nav_menu_link_attributes({'href': '/'}, None, MenuArgs(), 0) == {'href': '/'}


# ============================================================================
# Content
# ============================================================================

class TestMoreLink:
    """Test the_content_more_link function."""

    def test_rewrites_class(self):
        link = '<a href="/post#more-1" class="more-link">Read more</a>'
        assert the_content_more_link(link) == (
            '<a href="/post#more-1" class="post-item__btn btn--transition">Read more</a>'
        )

    def test_only_quoted_class_is_replaced(self):
        link = '<a class="more-link-extra">more-link</a>'
        assert the_content_more_link(link) == link


class TestBodyClasses:
    """Test body_classes function."""

    def test_nothing_added(self):
        assert body_classes(['home'], RequestContext()) == ['home']

    def test_group_blog(self):
        assert body_classes([], RequestContext(is_multi_author=True)) == ['group-blog']

    def test_customize_preview(self):
        assert body_classes([], RequestContext(is_customize_preview=True)) == ['customize-preview']

    def test_featured_single(self):
        request = RequestContext(is_single=True, has_post_thumbnail=True)
        assert body_classes([], request) == ['single--featured']

    def test_featured_page(self):
        request = RequestContext(is_page=True, has_post_thumbnail=True)
        assert body_classes([], request) == ['single--featured']

    def test_thumbnail_on_archive_ignored(self):
        request = RequestContext(is_archive=True, has_post_thumbnail=True)
        assert body_classes([], request) == []

    def test_all_in_order(self):
        request = RequestContext(
            is_multi_author=True, is_customize_preview=True,
            is_single=True, has_post_thumbnail=True,
        )
        assert body_classes(['single'], request) == [
            'single', 'group-blog', 'customize-preview', 'single--featured'
        ]


# ============================================================================
# Author
# ============================================================================

class TestSetupAuthor:
    """Test setup_author function."""

    @staticmethod
    def lookup(user_id):
        if user_id == 7:
            return Author(id=7, display_name="Jo Writer")
        return None

    def test_sets_authordata_on_author_archive(self):
        request = RequestContext(is_author=True, is_archive=True, post=Post(id=3, author_id=7))
        author = setup_author(request, self.lookup)
        assert author == Author(id=7, display_name="Jo Writer")
        assert request.authordata == author

    def test_ignored_outside_author_archive(self):
        request = RequestContext(is_archive=True, post=Post(id=3, author_id=7))
        assert setup_author(request, self.lookup) is None
        assert request.authordata is None

    def test_ignored_without_post(self):
        request = RequestContext(is_author=True)
        assert setup_author(request, self.lookup) is None
        assert request.authordata is None

    def test_unknown_author(self):
        request = RequestContext(is_author=True, post=Post(id=3, author_id=99))
        assert setup_author(request, self.lookup) is None
        assert request.authordata is None
