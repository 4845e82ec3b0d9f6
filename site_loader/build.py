"""
Render every page shell of a site into a populated copy of the site.

Each shell is one page load: the whole resource set is fetched, then the
page is rendered, or replaced by the error notice if any resource failed.

Run: python -m site_loader.build --site-dir site --out dist
"""
import argparse
import shutil
import sys
from pathlib import Path

import urllib3

from .config import JSON_FILES, SITE_DIR
from .dispatcher import load_page


def default_data_path(site_dir):
    return str(Path(site_dir) / 'assets' / 'data')


def page_shells(site_dir):
    """Return the HTML page shells at the root of the site, sorted by name."""
    return sorted(Path(site_dir).glob('*.html'))


def skip_output_dir(out_dir):
    """Build a ``copytree`` ignore callable that leaves out ``out_dir``.

    An output directory nested inside the site would otherwise be copied
    into itself on every run.
    """
    out_dir = Path(out_dir).resolve()

    def ignore(directory, names):
        return [name for name in names if (Path(directory) / name).resolve() == out_dir]
    return ignore


def render_site(site_dir, out_dir, base_path=None, http=None):
    """Copy the site to ``out_dir`` and populate every page shell in the copy.

    :param site_dir: Directory holding the page shells and assets.
    :type site_dir: str or pathlib.Path
    :param out_dir: Destination directory; created or overwritten.
    :type out_dir: str or pathlib.Path
    :param base_path: Directory or URL of the JSON data; defaults to the
        site's own ``assets/data``.
    :type base_path: str
    :param http: Optional pool manager shared by every page load.
    :type http: urllib3.PoolManager
    :returns: Number of pages whose data load failed.
    :rtype: int
    :raises ValueError: If ``out_dir`` is the site directory itself.
    """
    site_dir, out_dir = Path(site_dir), Path(out_dir)
    if out_dir.resolve() == site_dir.resolve():
        raise ValueError(f"Output directory must differ from the site directory: {out_dir}")
    base_path = base_path or default_data_path(site_dir)
    http = http or urllib3.PoolManager(maxsize=len(JSON_FILES))

    shutil.copytree(site_dir, out_dir, ignore=skip_output_dir(out_dir), dirs_exist_ok=True)

    failures = 0
    for shell in page_shells(site_dir):
        print(f"--- Rendering {shell.name} ---")
        html, ok = load_page(shell.read_text(encoding='utf-8'), shell.name, base_path=base_path, http=http)
        (out_dir / shell.name).write_text(html, encoding='utf-8')
        if not ok:
            failures += 1

    print(f"Rendered {len(page_shells(site_dir))} page(s) into {out_dir} ({failures} failed).")
    return failures


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the portfolio page shells from the JSON data files.")
    parser.add_argument("--site-dir", default=SITE_DIR, help="Directory holding the page shells (default: %(default)s)")
    parser.add_argument("--out", required=True, help="Output directory for the rendered site")
    parser.add_argument("--data-url", default=None,
                        help="Directory or URL of the JSON data (default: <site-dir>/assets/data)")
    args = parser.parse_args(argv)

    if not Path(args.site_dir).is_dir():
        print(f"Error: site directory not found at {args.site_dir}", file=sys.stderr)
        return 2
    if Path(args.out).resolve() == Path(args.site_dir).resolve():
        print(f"Error: output directory must differ from the site directory ({args.out})", file=sys.stderr)
        return 2

    failures = render_site(args.site_dir, args.out, base_path=args.data_url)
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
