"""
Renderers for the resume sections of the index and printable CV pages.

Each renderer takes the page and the slices of the loaded store it needs.
The same shells do not all carry every section, so a renderer whose anchor
is missing, or whose data is absent or the wrong shape, returns without
touching the page.
"""
from .binding import (
    as_dict, bind, is_list_of_dicts, is_list_of_strings, replace_contents,
    render_fragment, set_attr, set_html, set_text,
)
from .config import DEFAULT_COLUMN_TITLES
from .layout import image_path


def render_section_info(container, info, description_selector):
    """Write a section's icon/title heading and its one-line description."""
    if container is None or not isinstance(info, dict):
        return
    bind(container, 'h2', 'sections/section_title.html', info=info)
    set_text(container, description_selector, info.get('details'))


def next_tag(element):
    """Return the next sibling element, skipping text nodes."""
    return element.find_next_sibling() if element is not None else None


# --- Hero & About ---

def render_hero(soup, personal_info):
    """Render the hero banner (``#hero``), index page only.

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param personal_info: The ``personal_info`` resource.
    :type personal_info: dict
    """
    hero_section = soup.select_one('#hero')
    if hero_section is None or not isinstance(personal_info, dict):
        return
    hero = personal_info.get('hero')
    if not isinstance(hero, dict):
        return

    set_text(hero_section, 'h2', hero.get('title_main'))

    typed_items = hero.get('typed_items')
    if isinstance(typed_items, list):
        typed_items = ','.join(str(item) for item in typed_items)
    set_attr(hero_section, 'p:nth-of-type(1) .typed', 'data-typed-items', typed_items)

    paragraphs = hero_section.select('p')
    if len(paragraphs) >= 2 and hero.get('title_researcher') is not None:
        paragraphs[1].string = str(hero['title_researcher'])
    if len(paragraphs) >= 3:
        replace_contents(paragraphs[2], render_fragment('sections/hero_institutes.html', hero=hero))


def render_key_points(container, summary):
    """Fill the left and right key-point lists of a profile summary."""
    for position, key in ((1, 'key_points_left'), (2, 'key_points_right')):
        points = summary.get(key)
        if is_list_of_dicts(points):
            bind(container, f'.row .col-lg-6:nth-child({position}) ul', 'sections/key_points.html', items=points)


def render_about(soup, personal_info, site):
    """Render the About section and profile summary (``#about``) of the index page."""
    if not isinstance(personal_info, dict):
        return
    about = soup.select_one('#about')
    if about is None:
        return

    images = as_dict(as_dict(as_dict(site).get('assets')).get('images'))
    summary = personal_info.get('profile_summary')

    set_attr(about, '.col-lg-4 img', 'src', image_path(images.get('profile_image_formal')))

    summary_container = about.select_one('.col-lg-8.content .section-title')
    if summary_container is not None and isinstance(summary, dict):
        bind(summary_container, 'h2', 'sections/about_title.html', summary=summary)
        set_html(summary_container, 'p:nth-of-type(1)', summary.get('intro_paragraph_html'))
        render_key_points(summary_container, summary)

    if isinstance(summary, dict):
        bind(soup, '#research-summary-area', 'sections/research_summary.html', summary=summary)

    full_about = personal_info.get('about_full_text')
    full_container = about.select_one('.container.section-title:nth-of-type(2)')
    if full_container is not None and isinstance(full_about, dict):
        bind(full_container, 'h2', 'sections/section_title.html',
             info={'icon_class': 'bx bx-user', 'title': full_about.get('title')})
        set_html(full_container, 'p', full_about.get('paragraph_html'))


def render_about_cv(soup, personal_info, site):
    """Render the profile summary of the printable CV (``#main_cv #about``)."""
    if not isinstance(personal_info, dict):
        return
    cv = soup.select_one('#main_cv')
    if cv is None:
        return

    assets = as_dict(as_dict(site).get('assets'))
    images = as_dict(assets.get('images'))
    resume_pdf = as_dict(assets.get('documents')).get('resume_pdf') or '#'
    summary = personal_info.get('profile_summary')

    set_attr(cv, '#about .col-lg-4 img', 'src', image_path(images.get('profile_image_formal')))

    if isinstance(summary, dict):
        bind(cv, '#about .col-lg-8.content .section-title h2', 'sections/about_cv_title.html',
             name=personal_info.get('name'), resume_pdf=resume_pdf)
        set_html(cv, '#about .col-lg-8.content .section-title p:nth-of-type(1)',
                 summary.get('intro_paragraph_html'))
        content = cv.select_one('#about .col-lg-8.content')
        if content is not None:
            render_key_points(content, summary)

    research_area = soup.select_one('#research-summary-area')
    if research_area is not None:
        if isinstance(summary, dict):
            replace_contents(research_area, render_fragment('sections/research_summary.html', summary=summary))
        else:
            research_area.clear()


# --- Key Metrics ---

def render_key_metrics(soup, key_metrics):
    """Render the animated counters of the Key Metrics section (``#keyInfo``)."""
    if not isinstance(key_metrics, dict) or not is_list_of_dicts(key_metrics.get('metrics')):
        return
    section = soup.select_one('#keyInfo')
    if section is None:
        return

    render_section_info(section.select_one('.section-title'), key_metrics.get('section_info'), 'h6')
    bind(section, '.row.gy-4', 'sections/key_metrics.html', metrics=key_metrics['metrics'])


def render_key_metrics_cv(soup, key_metrics):
    """Render the Key Metrics of the printable CV as plain lines."""
    if not isinstance(key_metrics, dict) or not is_list_of_dicts(key_metrics.get('metrics')):
        return
    section = soup.select_one('#keyInfo')
    if section is None:
        return

    render_section_info(section.select_one('.section-title'), key_metrics.get('section_info'), 'p')

    container = next_tag(section)
    if container is None or 'row' not in container.get('class', []):
        print("KeyMetricsCV: Could not find the target container. Check HTML structure.")
        return
    replace_contents(container, render_fragment('sections/key_metrics_cv.html', metrics=key_metrics['metrics']))


# --- Education ---

def research_projects(degree):
    """Normalise a degree's research projects into type/title/link entries.

    Projects may be plain strings or objects; anything else is dropped.
    """
    projects = degree.get('research_projects')
    if not isinstance(projects, list):
        return []
    normalised = []
    for project in projects:
        if isinstance(project, str):
            normalised.append({'type': '', 'title': project, 'link': ''})
        elif isinstance(project, dict):
            normalised.append({
                'type': project.get('type') or '',
                'title': project.get('title') or '',
                'link': project.get('link') or '',
            })
    return normalised


def education_columns(degrees, column_titles):
    """Split degrees into the left (PhD) and right (Master/Bachelor) columns.

    JSON order is preserved inside each column. The Bachelor heading is
    injected into the right column just before its first Bachelor degree.
    Degrees of any other level are not shown.

    :param degrees: The ``education.degrees`` list.
    :type degrees: list[dict]
    :param column_titles: Optional overrides for the column headings.
    :type column_titles: dict
    :returns: Entries for the left column and for the right column.
    :rtype: tuple[list[dict], list[dict]]
    """
    titles = {**DEFAULT_COLUMN_TITLES, **as_dict(column_titles)}
    left = [{'heading': titles['left_column']}]
    right = [{'heading': titles['right_column_master']}]
    bachelor_heading_added = False

    for degree in degrees:
        level = degree.get('level')
        if not isinstance(level, str):
            continue
        entry = {'degree': degree, 'projects': research_projects(degree)}

        if 'PhD' in level:
            left.append(entry)
        elif 'Master' in level or 'Bachelor' in level:
            if 'Bachelor' in level and not bachelor_heading_added:
                right.append({'heading': titles['right_column_bachelor']})
                bachelor_heading_added = True
            right.append(entry)

    return left, right


def render_educations(soup, education):
    """Render the Education section (``#educations``) of the index page.

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param education: The ``education`` resource.
    :type education: dict
    """
    if not isinstance(education, dict) or not is_list_of_dicts(education.get('degrees')):
        return
    section = soup.select_one('#educations')
    if section is None:
        return

    render_section_info(section.select_one('.section-title'), education.get('section_info'), 'h6')

    summary = education.get('summary')
    if isinstance(summary, dict):
        set_text(section, 'h3.resume-title', summary.get('title'))
        if is_list_of_strings(summary.get('status_list')):
            bind(section, '.resume-item.pb-0 ul', 'sections/string_list.html', items=summary['status_list'])

    columns = section.select('.row > .col-lg-6')
    if len(columns) < 2:
        return

    left, right = education_columns(education['degrees'], education.get('column_titles'))
    replace_contents(columns[0], render_fragment('sections/education_column.html', entries=left))
    replace_contents(columns[1], render_fragment('sections/education_column.html', entries=right))


def render_educations_cv(soup, education):
    """Render the Education section of the printable CV, one table per degree."""
    if not isinstance(education, dict) or not is_list_of_dicts(education.get('degrees')):
        return
    cv = soup.select_one('#main_cv')
    title_container = soup.select_one('#educations')
    if cv is None or title_container is None:
        return

    render_cv_section_info(title_container, education.get('section_info'))

    tables = cv.select_one('#educations ~ .row.ps-3.pe-3')
    if tables is None:
        print("EducationCV: Could not find the tables container (div.row.ps-3.pe-3) after #educations.")
        return

    entries = [{'degree': degree, 'projects': research_projects(degree)} for degree in education['degrees']]
    replace_contents(tables, render_fragment('sections/education_cv.html', entries=entries))


def render_cv_section_info(title_container, info):
    """CV titles clear their description when the data has none."""
    if isinstance(info, dict):
        bind(title_container, 'h2', 'sections/section_title.html', info=info)
    description = title_container.select_one('p')
    if description is not None:
        details = as_dict(info).get('details')
        description.string = str(details) if details else ''


# --- Professional Experience ---

def experience_groups(experiences):
    """Assign each experience to a column and decide its organization header.

    Categories mentioning Research or Training go to the left column, the
    rest to the right. Within a column the organization header is printed
    only when the organization differs from the previous group's.

    :param experiences: The ``professional_experience.experiences`` list.
    :type experiences: list[dict]
    :returns: Groups for the left column and for the right column.
    :rtype: tuple[list[dict], list[dict]]
    """
    columns = {'left': [], 'right': []}
    last_organization = {'left': None, 'right': None}

    for experience in experiences:
        category = experience.get('category')
        if not isinstance(category, str):
            continue
        side = 'left' if ('Research' in category or 'Training' in category) else 'right'
        roles = experience.get('roles')
        organization = experience.get('organization')

        columns[side].append({
            'experience': experience,
            'roles': roles if is_list_of_dicts(roles) else [],
            'show_organization': organization != last_organization[side],
        })
        last_organization[side] = organization

    return columns['left'], columns['right']


def render_expertise_summary(content, summary):
    """Fill the Areas of Expertise and Research Interests summary blocks."""
    titles = content.select('h3.resume-title')
    items = content.select('div.resume-item.pb-0')
    expertise_list = summary.get('expertise_list')
    if not is_list_of_dicts(expertise_list):
        expertise_list = []

    if titles and summary.get('title') is not None:
        titles[0].string = str(summary['title'])

    if items and expertise_list:
        expertise = expertise_list[0]
        set_text(items[0], 'h4', expertise.get('title'))
        if is_list_of_strings(expertise.get('areas_of_expertise')):
            bind(items[0], 'ul', 'sections/string_list.html', items=expertise['areas_of_expertise'])

    if len(items) > 1 and len(expertise_list) > 1:
        research_item = items[1]
        research = expertise_list[1]

        research_title = research_item.find_previous_sibling()
        if research_title is not None and research_title.name == 'h3' and research.get('title') is not None:
            research_title.string = str(research['title'])

        set_text(research_item, 'h4', summary.get('details_research_interests'))

        research_columns = research_item.select('.col-lg-4 ul')
        column_data = research.get('research_interests_columns')
        if len(research_columns) >= 3 and isinstance(column_data, list):
            for column, entries in zip(research_columns, column_data):
                if is_list_of_strings(entries):
                    replace_contents(column, render_fragment('sections/string_list.html', items=entries))


def render_professional_experiences(soup, professional_experience):
    """Render the Professional Experiences section of the index page.

    :param soup: The page being rendered.
    :type soup: bs4.BeautifulSoup
    :param professional_experience: The ``professional_experience`` resource.
    :type professional_experience: dict
    """
    data = professional_experience
    if not isinstance(data, dict) or not is_list_of_dicts(data.get('experiences')):
        return
    section = soup.select_one('#professionalExperiences')
    if section is None:
        return

    title_container = section.select_one('.container.section-title')
    content = next_tag(title_container)
    if content is None:
        return

    render_section_info(title_container, data.get('section_info'), 'h6')

    if isinstance(data.get('summary'), dict):
        render_expertise_summary(content, data['summary'])

    columns = content.select('.row > .col-lg-6')
    if len(columns) < 2:
        return

    left, right = experience_groups(data['experiences'])
    replace_contents(columns[0], render_fragment('sections/experience_column.html', groups=left))
    replace_contents(columns[1], render_fragment('sections/experience_column.html', groups=right))


def experience_cv_groups(experiences):
    """Group experiences for the CV: category header on change, organization on change."""
    groups = []
    last_category = None
    last_organization = None

    for experience in experiences:
        category = experience.get('category')
        organization = experience.get('organization')
        show_category = category != last_category
        if show_category:
            last_organization = None
        roles = experience.get('roles')
        groups.append({
            'experience': experience,
            'roles': roles if is_list_of_dicts(roles) else [],
            'show_category': show_category,
            'show_organization': organization != last_organization,
        })
        last_category = category
        last_organization = organization

    return groups


def render_professional_experiences_cv(soup, professional_experience):
    """Render the Professional Experiences of the printable CV as tables."""
    data = professional_experience
    if not isinstance(data, dict) or not is_list_of_dicts(data.get('experiences')):
        return
    cv = soup.select_one('#main_cv')
    title_container = soup.select_one('#professionalExperiences')
    if cv is None or title_container is None:
        return

    render_cv_section_info(title_container, data.get('section_info'))

    tables = cv.select_one('#professionalExperiences ~ .row.ps-3.pe-3')
    if tables is None:
        print("ProfessionalExperiencesCV: Could not find the tables container (div.row.ps-3.pe-3) "
              "after #professionalExperiences.")
        return

    groups = experience_cv_groups(data['experiences'])
    replace_contents(tables, render_fragment('sections/experience_cv.html', groups=groups))
