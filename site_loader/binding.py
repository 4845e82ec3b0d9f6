"""
Helpers for writing rendered fragments into regions of a page.

Every section follows the same pattern: find an anchor element, render a
template from a slice of the loaded store, and replace the anchor's
contents with the result. A missing anchor is never an error; the helpers
report it by returning False and leave the page untouched.
"""
from bs4 import BeautifulSoup
from jinja2 import ChainableUndefined, Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader('site_loader', 'templates'),
    autoescape=select_autoescape(['html']),
    undefined=ChainableUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_fragment(template_name, **context):
    return env.get_template(template_name).render(**context)


def replace_contents(element, html):
    """Replace every child of ``element`` with the parsed ``html``."""
    element.clear()
    fragment = BeautifulSoup(html, 'html.parser')
    for node in list(fragment.contents):
        element.append(node.extract())


def bind(root, selector, template_name, **context):
    """Render a template into the first element matching ``selector``.

    :param root: Tree or element to search under.
    :type root: bs4.element.Tag
    :param selector: CSS selector of the anchor element.
    :type selector: str
    :param template_name: Template path under ``templates/``.
    :type template_name: str
    :returns: True if the anchor was found and written.
    :rtype: bool
    """
    element = root.select_one(selector)
    if element is None:
        return False
    replace_contents(element, render_fragment(template_name, **context))
    return True


def set_text(root, selector, text):
    if text is None:
        return False
    element = root.select_one(selector)
    if element is None:
        return False
    element.string = str(text)
    return True


def set_attr(root, selector, attr, value):
    if value is None:
        return False
    element = root.select_one(selector)
    if element is None:
        return False
    element[attr] = str(value)
    return True


def set_html(root, selector, html):
    """Replace the contents of the matching element with trusted ``html``."""
    if html is None:
        return False
    element = root.select_one(selector)
    if element is None:
        return False
    replace_contents(element, str(html))
    return True


def is_list_of_dicts(value):
    return isinstance(value, list) and all(isinstance(item, dict) for item in value)


def is_list_of_strings(value):
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


env.tests['list_of_dicts'] = is_list_of_dicts
env.tests['list_of_strings'] = is_list_of_strings


def as_dict(value):
    """Return ``value`` if it is a mapping, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}
