"""Test configuration and fixtures for the site loader test suite.

This module provides realistic JSON data for every resource of the site,
page shells for the index, printable CV and detail pages, a mocked HTTP
layer, an on-disk site for the build and preview tests, and the Flask
preview client.
"""
import copy
import json
from types import MappingProxyType

import pytest
from bs4 import BeautifulSoup

from site_loader.app import create_app
from site_loader.categories import COLLECTIONS
from site_loader.config import JSON_FILES

BASE_URL = 'https://example.com/assets/data/'


def _collection_data(collection):
    items = [
        {
            'title': f"{collection.resource} item {n}",
            'subtitle': f"Subtitle {n}",
            'organization': 'Test Organization',
            'timeframe_details': f"20{10 + n}",
            'description': f"Description of item {n}.",
            'link': f"https://example.com/{collection.resource}/{n}",
            'tags': ['alpha', 'beta'],
            'highlights': ['First highlight', 'Second highlight'],
        }
        for n in range(1, 9)
    ]
    return {
        'section_info': {
            'title': collection.resource.replace('_', ' ').title(),
            'icon_class': 'bx bx-star',
            'details': f"All {collection.resource}.",
        },
        collection.items_key: items,
    }


SITE_DATA = {
    'personal_info': {
        'name': 'Ada Example',
        'hero': {
            'title_main': 'Ada Example',
            'typed_items': 'Researcher, Engineer, Teacher',
            'title_researcher': 'PhD Researcher',
            'title_institute_primary': 'Institute of Testing',
            'title_institute_secondary': 'University of Fixtures',
            'tagline': 'Building reliable things.',
        },
        'profile_summary': {
            'title': 'Profile Summary',
            'link_printable_cv': './printable_cv.html',
            'intro_paragraph_html': 'I work on <b>reliable</b> systems.',
            'key_points_left': [
                {'icon_class': 'bi bi-chevron-right', 'strong': 'Email', 'text': 'ada@example.com',
                 'link': 'mailto:ada@example.com'},
            ],
            'key_points_right': [
                {'icon_class': 'bi bi-chevron-right', 'strong': 'City', 'text': 'Testville'},
            ],
            'research_area': 'Distributed systems',
            'recent_works': 'Fault tolerance',
        },
        'about_full_text': {
            'title': 'About Me',
            'paragraph_html': 'Long <i>about</i> text.',
        },
    },
    'site': {
        'site_info': {'title': 'Ada Example | Portfolio'},
        'assets': {
            'images': {'profile_image_pp': 'pp.jpg', 'profile_image_formal': 'formal.jpg'},
            'icons': {'logo_png': 'logo.png'},
            'documents': {'resume_pdf': 'assets/docs/resume.pdf'},
        },
        'social_links': [
            {'platform': 'github', 'url': 'https://github.com/ada', 'icon_class': 'bi bi-github'},
            {'platform': 'google-old', 'url': 'https://scholar.example.com', 'icon_class': 'bi bi-google'},
            {'platform': 'linkedin', 'url': 'https://linkedin.com/in/ada', 'icon_class': 'bi bi-linkedin'},
        ],
        'navigation': {
            'main_menu': [
                {'label': 'Home', 'url': '#hero', 'icon_class': 'bi bi-house'},
                {'label': 'About', 'url': '#about', 'icon_class': 'bi bi-person'},
                {'label': 'More', 'url': '#', 'icon_class': 'bi bi-list', 'is_dropdown': True,
                 'submenu': [
                     {'label': 'Skills', 'url': '#skills', 'icon_class': 'bi bi-tools'},
                     {'label': 'Projects', 'url': '#projects', 'icon_class': 'bi bi-kanban'},
                 ]},
            ],
            'details_menu': [
                {'label': 'Back', 'url': './index.html', 'icon_class': 'bi bi-arrow-left'},
            ],
        },
        'footer_meta': {
            'menu_footer': {
                'copyright_year': 'AUTO',
                'copyright_logo_link': './index.html',
                'copyright_text_link': './index.html#about',
                'copyright_owner': 'Ada Example',
                'links': [
                    {'label': 'Privacy', 'url': './privacy.html'},
                    {'label': 'Contact', 'url': './index.html#contact'},
                ],
            },
            'main_page_footer': {
                'sitename': 'Ada Example',
                'design_link': 'https://bootstrapmade.com/',
                'design_credit': 'BootstrapMade',
            },
        },
    },
    'key_metrics': {
        'section_info': {'title': 'Key Metrics', 'icon_class': 'bx bx-bar-chart', 'details': 'At a glance.'},
        'metrics': [
            {'icon_class': 'bi bi-journal', 'value': 12, 'strong_text': 'Papers', 'description': 'published'},
            {'icon_class': 'bi bi-people', 'value': 40, 'strong_text': 'Students', 'description': 'mentored'},
        ],
    },
    'education': {
        'section_info': {'title': 'Education', 'icon_class': 'bx bxs-graduation', 'details': 'Degrees.'},
        'summary': {'title': 'Current Status', 'status_list': ['PhD candidate', 'Teaching assistant']},
        'column_titles': {},
        'degrees': [
            {
                'degree_id': 'phd', 'level': 'PhD', 'institution_type': 'Doctor of Philosophy',
                'institution_name': 'University of Fixtures', 'institution_location': 'Testville',
                'link': 'https://fixtures.example.edu', 'timeframe_details': '2020 - present',
                'thesis_title': 'On Tests', 'thesis_length': '200 pages',
                'research_projects': ['Plain project', {'type': 'Grant', 'title': 'Big grant',
                                                        'link': 'https://grant.example.com'}],
            },
            {
                'degree_id': 'bsc', 'level': 'Bachelor', 'institution_type': 'Bachelor of Science',
                'institution_name': 'College of Mocks', 'institution_location': 'Stubton',
                'timeframe_details': '2012 - 2016', 'specialisation': 'Computing',
            },
            {
                'degree_id': 'mres', 'level': 'Master', 'institution_type': 'Master of Research',
                'institution_name': 'University of Fixtures', 'institution_location': 'Testville',
                'timeframe_details': '2017 - 2019', 'scholarship': 'Merit award',
                'scholarship_link': '#honorsAwards',
            },
            {
                'degree_id': 'cert', 'level': 'Certificate', 'institution_type': 'Certificate',
                'institution_name': 'Online', 'institution_location': 'Web',
                'timeframe_details': '2011',
            },
        ],
    },
    'professional_experience': {
        'section_info': {'title': 'Professional Experiences', 'icon_class': 'bx bx-briefcase',
                         'details': 'Where I worked.'},
        'summary': {
            'title': 'Summary',
            'details_research_interests': 'Topics I care about.',
            'expertise_list': [
                {'title': 'Areas of Expertise', 'areas_of_expertise': ['Testing', 'Python']},
                {'title': 'Research Interests',
                 'research_interests_columns': [['Systems'], ['Networks'], ['Tooling']]},
            ],
        },
        'experiences': [
            {
                'category': 'Research Experience', 'organization': 'University of Fixtures',
                'location': 'Testville', 'link': 'https://fixtures.example.edu', 'icon_class': 'bx bx-flask',
                'roles': [
                    {'title': 'Research Assistant', 'timeframe_details': '2020 - present',
                     'description_list': ['Ran experiments'], 'related_skills': 'Python'},
                    {'title': 'Research Intern', 'timeframe_details': '2019'},
                ],
            },
            {
                'category': 'Research Experience', 'organization': 'University of Fixtures',
                'location': 'Testville', 'icon_class': 'bx bx-flask',
                'roles': [{'title': 'Visiting Researcher', 'timeframe_details': '2018'}],
            },
            {
                'category': 'Teaching Experience', 'organization': 'College of Mocks',
                'location': 'Stubton', 'icon_class': 'bx bx-chalkboard',
                'roles': [
                    {'title': 'Teaching Assistant', 'timeframe_details': '2016 - 2017',
                     'responsibilities_list': ['Graded labs'], 'course_involvement': ['Intro to Testing']},
                ],
            },
        ],
    },
}
SITE_DATA.update({collection.resource: _collection_data(collection) for collection in COLLECTIONS.values()})


HEADER_HTML = """
<header id="header">
  <div class="profile-img"><img src="static.jpg" alt=""></div>
  <a href="index.html" class="logo"><img src="static-logo.png" alt=""><h1 class="sitename">Static Name</h1></a>
  <div class="social-links"><a href="#">static</a></div>
  <nav id="navmenu"><ul><li>static</li></ul></nav>
  <div id="menu_footer">static footer</div>
</header>
"""

FOOTER_HTML = '<footer id="footer">static page footer</footer>'


def _index_collection_sections():
    return ''.join(
        f'<section id="{c.anchor}"><div class="container section-title"><h2>x</h2><h6>x</h6></div>'
        f'<div class="container collection-items">static</div></section>'
        for c in COLLECTIONS.values()
    )


def _cv_collection_sections():
    return ''.join(
        f'<div class="container section-title" id="{c.anchor}"><h2>x</h2><p>x</p></div>'
        f'<div class="row ps-3 pe-3">static</div>'
        for c in COLLECTIONS.values()
    )


INDEX_SHELL = f"""<!DOCTYPE html>
<html>
<head><title>Loading...</title></head>
<body>
{HEADER_HTML}
<main>
<section id="hero">
  <h2>Static hero</h2>
  <p>I'm <span class="typed" data-typed-items="static"></span></p>
  <p>static researcher</p>
  <p>static institutes</p>
</section>
<section id="about">
  <div class="row">
    <div class="col-lg-4"><img src="static.jpg" alt=""></div>
    <div class="col-lg-8 content">
      <div class="section-title">
        <h2>Static summary</h2>
        <p>static intro</p>
        <p id="research-summary-area">static area</p>
        <div class="row">
          <div class="col-lg-6"><ul><li>static</li></ul></div>
          <div class="col-lg-6"><ul><li>static</li></ul></div>
        </div>
      </div>
    </div>
  </div>
  <div class="container section-title"><h2>Static about</h2><p>static about text</p></div>
</section>
<section id="keyInfo">
  <div class="container section-title"><h2>x</h2><h6>x</h6></div>
  <div class="container"><div class="row gy-4">static metrics</div></div>
</section>
<section id="educations">
  <div class="container section-title"><h2>x</h2><h6>x</h6></div>
  <div class="container">
    <h3 class="resume-title">Static summary</h3>
    <div class="resume-item pb-0"><ul><li>static</li></ul></div>
    <div class="row"><div class="col-lg-6">static left</div><div class="col-lg-6">static right</div></div>
  </div>
</section>
<section id="professionalExperiences">
  <div class="container section-title"><h2>x</h2><h6>x</h6></div>
  <div class="container">
    <h3 class="resume-title">Static summary</h3>
    <div class="resume-item pb-0"><h4>static</h4><ul><li>static</li></ul></div>
    <h3 class="resume-title">Static interests</h3>
    <div class="resume-item pb-0">
      <h4>static</h4>
      <div class="row">
        <div class="col-lg-4"><ul></ul></div><div class="col-lg-4"><ul></ul></div><div class="col-lg-4"><ul></ul></div>
      </div>
    </div>
    <div class="row"><div class="col-lg-6">static left</div><div class="col-lg-6">static right</div></div>
  </div>
</section>
{_index_collection_sections()}
</main>
{FOOTER_HTML}
</body>
</html>
"""

CV_SHELL = f"""<!DOCTYPE html>
<html>
<head><title>Loading...</title></head>
<body>
{HEADER_HTML}
<main id="main_cv">
<section id="about">
  <div class="row">
    <div class="col-lg-4"><img src="static.jpg" alt=""></div>
    <div class="col-lg-8 content">
      <div class="section-title">
        <h2>Static resume</h2>
        <p>static intro</p>
        <p id="research-summary-area">static area</p>
      </div>
      <div class="row">
        <div class="col-lg-6"><ul><li>static</li></ul></div>
        <div class="col-lg-6"><ul><li>static</li></ul></div>
      </div>
    </div>
  </div>
</section>
<div id="keyInfo"><div class="section-title"><h2>x</h2><p>x</p></div></div>
<div class="row">static metrics</div>
<div class="container section-title" id="educations"><h2>x</h2><p>x</p></div>
<div class="row ps-3 pe-3">static education</div>
<div class="container section-title" id="professionalExperiences"><h2>x</h2><p>x</p></div>
<div class="row ps-3 pe-3">static experience</div>
{_cv_collection_sections()}
</main>
{FOOTER_HTML}
</body>
</html>
"""

DETAILS_SHELL = f"""<!DOCTYPE html>
<html>
<head><title>Loading...</title></head>
<body>
{HEADER_HTML}
<main>
<section id="languages">
  <div class="container section-title"><h2>x</h2><h6>x</h6></div>
  <div class="container collection-items">static</div>
</section>
</main>
{FOOTER_HTML}
</body>
</html>
"""


def make_response(mocker, status=200, data=None, body=None, reason='OK'):
    """Build a mock ``urllib3`` response.

    :param mocker: Pytest mocker fixture.
    :type mocker: pytest_mock.MockerFixture
    :param status: HTTP status code of the response.
    :type status: int
    :param data: JSON-serialisable payload.
    :param body: Raw body bytes, used instead of ``data`` when given.
    :type body: bytes
    :param reason: HTTP reason phrase.
    :type reason: str
    :returns: Mock response with ``status``, ``reason`` and ``data``.
    """
    response = mocker.Mock()
    response.status = status
    response.reason = reason
    response.data = body if body is not None else json.dumps(data).encode('utf-8')
    return response


@pytest.fixture
def site_data():
    """Provide a fresh deep copy of the full site data for each test.

    :returns: Mapping of resource identifier to its JSON value.
    :rtype: dict
    """
    return copy.deepcopy(SITE_DATA)


@pytest.fixture
def store(site_data):
    """Provide a loaded store built from the sample data.

    :param site_data: The sample data fixture.
    :type site_data: dict
    :returns: Read-only mapping, as produced by the fetcher.
    :rtype: types.MappingProxyType
    """
    return MappingProxyType(site_data)


@pytest.fixture
def index_soup():
    return BeautifulSoup(INDEX_SHELL, 'html.parser')


@pytest.fixture
def cv_soup():
    return BeautifulSoup(CV_SHELL, 'html.parser')


@pytest.fixture
def details_soup():
    return BeautifulSoup(DETAILS_SHELL, 'html.parser')


@pytest.fixture
def mock_http(mocker, site_data):
    """Patch ``urllib3.PoolManager.request`` to serve the sample data.

    Tests can add a URL to ``mock_http.failures`` (mapping of resource name
    to a response or exception) to make that one retrieval fail.

    :param mocker: Pytest mocker fixture.
    :type mocker: pytest_mock.MockerFixture
    :param site_data: The sample data fixture.
    :type site_data: dict
    :returns: The patched request mock.
    :rtype: unittest.mock.MagicMock
    """
    failures = {}

    def fake_request(method, url, **kwargs):
        name = url.rsplit('/', 1)[-1][:-len('.json')]
        if name in failures:
            failure = failures[name]
            if isinstance(failure, Exception):
                raise failure
            return failure
        if name not in site_data:
            return make_response(mocker, status=404, data={}, reason='Not Found')
        return make_response(mocker, data=site_data[name])

    request = mocker.patch('urllib3.PoolManager.request', side_effect=fake_request)
    request.failures = failures
    return request


@pytest.fixture
def site_dir(tmp_path, site_data):
    """Write a complete site (shells and JSON data) to a temporary directory.

    :param tmp_path: Pytest temporary directory fixture.
    :type tmp_path: pathlib.Path
    :param site_data: The sample data fixture.
    :type site_data: dict
    :returns: Path to the site directory.
    :rtype: pathlib.Path
    """
    root = tmp_path / 'site'
    data_dir = root / 'assets' / 'data'
    data_dir.mkdir(parents=True)
    (root / 'assets' / 'css').mkdir()
    (root / 'assets' / 'css' / 'main.css').write_text('body { margin: 0; }')

    for name in JSON_FILES:
        key = name[:-len('.json')]
        (data_dir / name).write_text(json.dumps(site_data[key]), encoding='utf-8')

    (root / 'index.html').write_text(INDEX_SHELL, encoding='utf-8')
    (root / 'printable_cv.html').write_text(CV_SHELL, encoding='utf-8')
    (root / 'languages-details.html').write_text(DETAILS_SHELL, encoding='utf-8')
    return root


@pytest.fixture
def app(site_dir):
    """Create the preview application over the temporary site.

    :param site_dir: The temporary site fixture.
    :type site_dir: pathlib.Path
    :yields: The configured Flask application.
    :rtype: flask.Flask
    """
    flask_app = create_app(site_dir=str(site_dir))
    flask_app.config.update({"TESTING": True})
    yield flask_app


@pytest.fixture
def client(app):
    """Provide a Flask test client for the preview application.

    :param app: The Flask application instance from the `app` fixture.
    :type app: flask.Flask
    :return: A Flask test client.
    :rtype: flask.testing.FlaskClient
    """
    return app.test_client()
