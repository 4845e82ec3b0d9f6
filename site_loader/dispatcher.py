"""
Page dispatcher: one page load from data fetch to finished HTML.

The page kind decides the navigation menu and a fixed sequence of section
renderers. The chrome (title, header, footers, navigation) is rendered on
every page first, in the same order, before any section content.
"""
from functools import partial

from bs4 import BeautifulSoup

from . import layout, sections
from .categories import (
    COLLECTIONS, render_collection, render_collection_cv, render_collection_details,
)
from .config import BASE_DATA_PATH, FATAL_ERROR_HTML, JSON_FILES, POST_RENDER_HOOKS
from .fetcher import DataLoadError, load_all_data
from .pages import PageKind, classify_page, select_menu


def _collection_calls(renderer):
    return [
        (partial(renderer, collection=collection), (collection.resource,))
        for collection in COLLECTIONS.values()
    ]


# Each entry is (renderer, store resources passed to it in order).
SECTION_SEQUENCES = {
    PageKind.INDEX: [
        (sections.render_hero, ('personal_info',)),
        (sections.render_about, ('personal_info', 'site')),
        (sections.render_key_metrics, ('key_metrics',)),
        (sections.render_educations, ('education',)),
        (sections.render_professional_experiences, ('professional_experience',)),
    ] + _collection_calls(render_collection),
    PageKind.PRINTABLE_CV: [
        (sections.render_about_cv, ('personal_info', 'site')),
        (sections.render_key_metrics_cv, ('key_metrics',)),
        (sections.render_educations_cv, ('education',)),
        (sections.render_professional_experiences_cv, ('professional_experience',)),
    ] + _collection_calls(render_collection_cv),
}
SECTION_SEQUENCES.update({
    kind: [(partial(render_collection_details, collection=collection), (collection.resource,))]
    for kind, collection in COLLECTIONS.items()
})


def render_chrome(soup, store, menu):
    """Render title, header, both footers and navigation, in that order."""
    site = store.get('site')
    site_dict = site if isinstance(site, dict) else {}

    layout.update_document_metadata(soup, site_dict.get('site_info'))
    layout.render_header(soup, store.get('personal_info'), site)
    layout.render_menu_footer(soup, site_dict.get('footer_meta'), site_dict.get('assets'))
    layout.render_page_footer(soup, site_dict.get('footer_meta'))
    layout.render_navigation(soup, {'main_menu': menu})


def run_post_render_hooks(hooks):
    """Give visual-effect initialisers a chance to re-scan replaced nodes.

    Missing hooks are reported and skipped.

    :param hooks: Mapping of hook name to a zero-argument callable.
    :type hooks: dict
    """
    hooks = hooks or {}
    for name in POST_RENDER_HOOKS:
        hook = hooks.get(name)
        if callable(hook):
            print(f"{name} found! Re-initializing after render...")
            hook()
        else:
            print(f"{name} not found. Skipping.")


def render_page(soup, store, file_name, hooks=None):
    """Render every region of a page from an already loaded store.

    :param soup: Parsed page shell; modified in place.
    :type soup: bs4.BeautifulSoup
    :param store: The loaded store.
    :type store: Mapping[str, object]
    :param file_name: Final path segment of the page.
    :type file_name: str
    :param hooks: Optional post-render hooks.
    :type hooks: dict
    :returns: The page kind that was rendered.
    :rtype: PageKind
    """
    print("Rendering site with loaded data...")
    kind = classify_page(file_name)
    menu = select_menu(store.get('site'), kind)

    render_chrome(soup, store, menu)

    for renderer, resources in SECTION_SEQUENCES[kind]:
        renderer(soup, *(store.get(name) for name in resources))

    run_post_render_hooks(hooks)
    print("Dynamic rendering complete.")
    return kind


def show_fatal_error(soup):
    """Replace the whole page body with the data-load error notice."""
    body = soup.body
    if body is None:
        body = soup.new_tag('body')
        (soup.html or soup).append(body)
    body.clear()
    for node in list(BeautifulSoup(FATAL_ERROR_HTML, 'html.parser').contents):
        body.append(node.extract())


def initialize_site(soup, file_name, base_path=BASE_DATA_PATH, json_files=JSON_FILES, hooks=None, http=None):
    """Run one page load: fetch all data, then render, or show the error notice.

    Nothing is rendered unless every resource loaded. A failed load leaves
    only the error notice in the body.

    :param soup: Parsed page shell; modified in place.
    :type soup: bs4.BeautifulSoup
    :param file_name: Final path segment of the page.
    :type file_name: str
    :param base_path: Directory or URL holding the JSON documents.
    :type base_path: str
    :param json_files: Resource identifiers to fetch.
    :type json_files: list[str]
    :param hooks: Optional post-render hooks.
    :type hooks: dict
    :param http: Optional shared pool manager.
    :type http: urllib3.PoolManager
    :returns: True if the page was rendered, False if the data load failed.
    :rtype: bool
    """
    try:
        store = load_all_data(base_path, json_files, http=http)
    except DataLoadError as e:
        print(f"Error during data loading: {e}")
        show_fatal_error(soup)
        return False

    render_page(soup, store, file_name, hooks=hooks)
    return True


def load_page(html, file_name, **kwargs):
    """Parse a page shell, run one page load over it and serialise the result.

    :returns: The resulting HTML and whether the data load succeeded.
    :rtype: tuple[str, bool]
    """
    soup = BeautifulSoup(html, 'html.parser')
    ok = initialize_site(soup, file_name, **kwargs)
    return str(soup), ok
