"""
Renderers for the page chrome shared by every page: document title, sidebar
header, both footers and the navigation menu.
"""
from datetime import datetime

from .binding import as_dict, bind, is_list_of_dicts, set_attr, set_text
from .config import HIDDEN_SOCIAL_PLATFORMS, IMAGE_DIR


def image_path(file_name):
    return f"{IMAGE_DIR}/{file_name}" if file_name else None


def update_document_metadata(soup, site_info):
    """Set the ``<title>`` tag from ``site.site_info``."""
    if not isinstance(site_info, dict) or not site_info.get('title'):
        return
    set_text(soup, 'title', site_info['title'])


def render_header(soup, personal_info, site):
    """Render the sidebar header: site name, profile images and social links.

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param personal_info: The ``personal_info`` resource.
    :type personal_info: dict
    :param site: The ``site`` resource.
    :type site: dict
    """
    if not isinstance(personal_info, dict) or not isinstance(site, dict):
        return

    set_text(soup, '#header .sitename', personal_info.get('name'))

    assets = as_dict(site.get('assets'))
    images = as_dict(assets.get('images'))
    icons = as_dict(assets.get('icons'))
    set_attr(soup, '#header .profile-img img', 'src', image_path(images.get('profile_image_pp')))
    set_attr(soup, '#header .logo img', 'src', image_path(icons.get('logo_png')))

    social_links = site.get('social_links')
    if is_list_of_dicts(social_links):
        visible = [link for link in social_links if link.get('platform') not in HIDDEN_SOCIAL_PLATFORMS]
        bind(soup, '#header .social-links', 'sections/social_links.html', links=visible)


def copyright_year(value):
    """Resolve the footer's copyright year; ``AUTO`` means the current year."""
    value = value or 'AUTO'
    if str(value).upper() == 'AUTO':
        return datetime.now().year
    return value


def render_menu_footer(soup, footer_meta, assets):
    """Render the sidebar footer (``#menu_footer``)."""
    if not isinstance(footer_meta, dict) or not isinstance(footer_meta.get('menu_footer'), dict):
        return

    menu_footer = footer_meta['menu_footer']
    links = menu_footer.get('links')
    icons = as_dict(as_dict(assets).get('icons'))

    bind(
        soup, '#menu_footer', 'sections/menu_footer.html',
        footer=menu_footer,
        year=copyright_year(menu_footer.get('copyright_year')),
        logo_path=image_path(icons.get('logo_png')),
        links=links if is_list_of_dicts(links) else [],
    )


def render_page_footer(soup, footer_meta):
    """Render the global page footer (``#footer``)."""
    if not isinstance(footer_meta, dict) or not isinstance(footer_meta.get('main_page_footer'), dict):
        return
    bind(soup, '#footer', 'sections/page_footer.html', footer=footer_meta['main_page_footer'])


def render_navigation(soup, navigation):
    """Render the navigation menu (``#navmenu``).

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param navigation: Wrapper holding the selected menu as ``main_menu``.
    :type navigation: dict
    """
    if not isinstance(navigation, dict) or not isinstance(navigation.get('main_menu'), list):
        return
    menu = [item for item in navigation['main_menu'] if isinstance(item, dict)]
    bind(soup, '#navmenu', 'sections/navigation.html', menu=menu)
