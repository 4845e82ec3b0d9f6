"""
Configuration for the portfolio site loader.

Paths can be overridden through environment variables so the build and
preview tools can point at a different checkout or a hosted data folder.
"""
import os

# --- Data Location ---
# Either a local directory or an http(s) URL holding the JSON documents.
BASE_DATA_PATH = os.getenv("SITE_DATA_PATH", "./assets/data/")
SITE_DIR = os.getenv("SITE_DIR", ".")

# Every page load fetches all of these, in this order.
JSON_FILES = [
    'personal_info.json',
    'site.json',
    'key_metrics.json',
    'education.json',
    'professional_experience.json',
    'skills.json',
    'honors_awards.json',
    'courses_trainings_certificates.json',
    'projects.json',
    'memberships.json',
    'sessions_events.json',
    'languages.json',
    'portfolios.json',
    'volunteerings.json',
    'publications.json',
]

# --- Page Identity ---
INDEX_PAGE = 'index.html'
PRINTABLE_CV_PAGE = 'printable_cv.html'
CV_HOME_URL = './index.html#about'

# --- Rendering ---
IMAGE_DIR = 'assets/img'
HIDDEN_SOCIAL_PLATFORMS = {'google-old', 'researchgate-old', 'researchgate-fab'}
DEFAULT_COLUMN_TITLES = {
    'left_column': 'Doctor of Philosophy (PhD)',
    'right_column_master': 'Master of Science (by Research) – MRes',
    'right_column_bachelor': 'Bachelor of Science (B.Sc.)',
}
INDEX_PREVIEW_LIMIT = 6

POST_RENDER_HOOKS = ('init_typed_animation', 'init_aos', 'init_pure_counter')

FATAL_ERROR_HTML = '<h1>Error loading site data. Please check the logs.</h1>'
