"""
Renderers for the content categories (skills, awards, projects, ...).

The categories share one data shape, a ``section_info`` block plus a list
of items under a category-specific key, so one set of renderers serves all
of them. Each category appears three ways: a preview on the index page, a
compact list on the printable CV, and the full list on its own detail page.
"""
from dataclasses import dataclass

from .binding import bind, is_list_of_dicts, replace_contents, render_fragment
from .config import INDEX_PREVIEW_LIMIT
from .pages import PageKind
from .sections import render_cv_section_info, render_section_info


@dataclass(frozen=True)
class Collection:
    resource: str
    items_key: str
    anchor: str
    details_page: str


COLLECTIONS = {
    PageKind.SKILLS_DETAILS: Collection('skills', 'skill_groups', 'skills', 'skills-details.html'),
    PageKind.HONORS_AWARDS_DETAILS: Collection(
        'honors_awards', 'awards', 'honorsAwards', 'honors-awards-details.html'),
    PageKind.COURSES_DETAILS: Collection(
        'courses_trainings_certificates', 'certificates', 'coursesTrainingsCertificates', 'courses-details.html'),
    PageKind.PROJECTS_DETAILS: Collection('projects', 'projects', 'projects', 'projects-details.html'),
    PageKind.MEMBERSHIPS_DETAILS: Collection('memberships', 'memberships', 'memberships', 'memberships-details.html'),
    PageKind.SESSIONS_EVENTS_DETAILS: Collection(
        'sessions_events', 'events', 'sessionsEvents', 'sessions-events-details.html'),
    PageKind.LANGUAGES_DETAILS: Collection('languages', 'languages', 'languages', 'languages-details.html'),
    PageKind.PORTFOLIOS_DETAILS: Collection('portfolios', 'portfolios', 'portfolios', 'portfolios-details.html'),
    PageKind.VOLUNTEERINGS_DETAILS: Collection(
        'volunteerings', 'volunteerings', 'volunteerings', 'volunteerings-details.html'),
    PageKind.PUBLICATIONS_DETAILS: Collection(
        'publications', 'publications', 'publications', 'publications-details.html'),
}


def collection_items(data, collection):
    """Return the category's item list, or None if the data is malformed."""
    if not isinstance(data, dict):
        return None
    items = data.get(collection.items_key)
    return items if is_list_of_dicts(items) else None


def preview_items(items, limit=INDEX_PREVIEW_LIMIT):
    """Featured items if any are flagged, otherwise the first ``limit`` items."""
    featured = [item for item in items if item.get('featured')]
    return featured if featured else items[:limit]


def render_collection(soup, data, collection):
    """Render a category's preview on the index page.

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param data: The category's resource from the loaded store.
    :type data: dict
    :param collection: Which category to render.
    :type collection: Collection
    """
    items = collection_items(data, collection)
    if items is None:
        return
    section = soup.select_one(f'#{collection.anchor}')
    if section is None:
        return

    render_section_info(section.select_one('.section-title'), data.get('section_info'), 'h6')
    bind(section, '.collection-items', 'sections/collection_index.html',
         items=preview_items(items), details_page=collection.details_page)


def render_collection_cv(soup, data, collection):
    """Render a category as a compact table on the printable CV."""
    items = collection_items(data, collection)
    if items is None:
        return
    cv = soup.select_one('#main_cv')
    title_container = soup.select_one(f'#{collection.anchor}')
    if cv is None or title_container is None:
        return

    render_cv_section_info(title_container, data.get('section_info'))

    container = cv.select_one(f'#{collection.anchor} ~ .row.ps-3.pe-3')
    if container is None:
        return
    replace_contents(container, render_fragment('sections/collection_cv.html', items=items))


def render_collection_details(soup, data, collection):
    """Render every item of a category on its detail page."""
    items = collection_items(data, collection)
    if items is None:
        return
    section = soup.select_one(f'#{collection.anchor}')
    if section is None:
        return

    render_section_info(section.select_one('.section-title'), data.get('section_info'), 'h6')
    bind(section, '.collection-items', 'sections/collection_details.html', items=items)
