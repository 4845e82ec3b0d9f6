"""
Local preview server for the portfolio site.

Every request for a page shell is a fresh page load: the data is fetched,
the shell populated and the result returned. Everything else (styles,
images, the JSON files themselves) is served from the site directory as is.
"""
from pathlib import Path

from flask import Flask, abort, send_from_directory

from .config import INDEX_PAGE, SITE_DIR
from .dispatcher import load_page


def create_app(site_dir=None, data_path=None):
    """Application factory for the preview server.

    :param site_dir: Directory holding the page shells; defaults to
        ``SITE_DIR`` from the configuration.
    :type site_dir: str
    :param data_path: Directory or URL of the JSON data; defaults to the
        site's own ``assets/data``.
    :type data_path: str
    :returns: The configured Flask application.
    :rtype: flask.Flask
    """
    app = Flask(__name__)

    site_dir = str(Path(site_dir or SITE_DIR).resolve())
    app.config.from_mapping(
        SITE_DIR=site_dir,
        DATA_PATH=data_path or str(Path(site_dir) / 'assets' / 'data'),
        POST_RENDER_HOOKS={},
    )

    @app.route("/")
    def index():
        """Serve the index page."""
        return render_shell(INDEX_PAGE)

    @app.route("/<path:page>")
    def page_or_asset(page):
        """Serve a populated page shell, or a static file from the site.

        :param page: Path relative to the site directory.
        :type page: str
        :returns: Rendered page, static file, or 404.
        :rtype: flask.Response or tuple[str, int]
        """
        if page.endswith('.html') and '/' not in page:
            return render_shell(page)
        return send_from_directory(app.config['SITE_DIR'], page)

    def render_shell(file_name):
        shell = Path(app.config['SITE_DIR']) / file_name
        if not shell.is_file():
            abort(404)

        html, ok = load_page(
            shell.read_text(encoding='utf-8'),
            file_name,
            base_path=app.config['DATA_PATH'],
            hooks=app.config['POST_RENDER_HOOKS'],
        )
        if not ok:
            return html, 500
        return html

    return app


if __name__ == "__main__":  # pragma: no cover
    create_app().run(debug=True)
