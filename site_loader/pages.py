"""
Page classification and navigation menu selection.

A page is identified only by the final segment of its path. The printable
CV and the detail pages are matched by exact file name; everything else is
treated as the index page.
"""
from enum import Enum

from .config import CV_HOME_URL, PRINTABLE_CV_PAGE


class PageKind(Enum):
    INDEX = 'index'
    PRINTABLE_CV = 'printable_cv'
    SKILLS_DETAILS = 'skills'
    HONORS_AWARDS_DETAILS = 'honors_awards'
    COURSES_DETAILS = 'courses_trainings_certificates'
    PROJECTS_DETAILS = 'projects'
    MEMBERSHIPS_DETAILS = 'memberships'
    SESSIONS_EVENTS_DETAILS = 'sessions_events'
    LANGUAGES_DETAILS = 'languages'
    PORTFOLIOS_DETAILS = 'portfolios'
    VOLUNTEERINGS_DETAILS = 'volunteerings'
    PUBLICATIONS_DETAILS = 'publications'

    @property
    def is_detail(self):
        return self not in (PageKind.INDEX, PageKind.PRINTABLE_CV)


DETAIL_PAGES = {
    'skills-details.html': PageKind.SKILLS_DETAILS,
    'honors-awards-details.html': PageKind.HONORS_AWARDS_DETAILS,
    'courses-details.html': PageKind.COURSES_DETAILS,
    'projects-details.html': PageKind.PROJECTS_DETAILS,
    'memberships-details.html': PageKind.MEMBERSHIPS_DETAILS,
    'sessions-events-details.html': PageKind.SESSIONS_EVENTS_DETAILS,
    'languages-details.html': PageKind.LANGUAGES_DETAILS,
    'portfolios-details.html': PageKind.PORTFOLIOS_DETAILS,
    'volunteerings-details.html': PageKind.VOLUNTEERINGS_DETAILS,
    'publications-details.html': PageKind.PUBLICATIONS_DETAILS,
}


def page_file_name(path):
    """Return the final segment of a page path (``''`` for a directory)."""
    path = path or ''
    return path[path.rfind('/') + 1:]


def classify_page(file_name):
    """Map a page file name to its page kind.

    :param file_name: Final path segment of the current page.
    :type file_name: str
    :returns: ``PRINTABLE_CV`` for the printable CV, the matching detail kind
        for a detail page, ``INDEX`` for anything else.
    :rtype: PageKind
    """
    if file_name == PRINTABLE_CV_PAGE:
        return PageKind.PRINTABLE_CV
    return DETAIL_PAGES.get(file_name, PageKind.INDEX)


def select_menu(site, kind):
    """Pick the navigation entries for a page kind.

    The index and printable CV share the main menu, detail pages share the
    details menu. The printable CV has no hero to scroll to, so its Home
    entry is pointed at the About section of the index page instead.

    The returned entries are copies; the loaded store is left untouched.

    :param site: The ``site`` resource from the loaded store.
    :type site: dict
    :param kind: Page kind of the current page.
    :type kind: PageKind
    :returns: The menu entries, or None if the menu is missing or malformed.
    :rtype: list[dict] or None
    """
    navigation = site.get('navigation') if isinstance(site, dict) else None
    if not isinstance(navigation, dict):
        return None

    menu_name = 'details_menu' if kind.is_detail else 'main_menu'
    menu = navigation.get(menu_name)
    if not isinstance(menu, list):
        return None

    menu = [dict(item) if isinstance(item, dict) else item for item in menu]

    if kind is PageKind.PRINTABLE_CV:
        for item in menu:
            if isinstance(item, dict) and str(item.get('label', '')).startswith('Home'):
                item['url'] = CV_HOME_URL
                break

    return menu
