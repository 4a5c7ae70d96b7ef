"""Fixed milestone catalog.

The catalog is the only source of categories and age intervals. Entries are
grouped by category and, inside a category, ordered by ascending start age.
``create_initial_tasks`` is the one factory used both for first-run seeding
and for resetting to defaults.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from models import CatalogEntry, Category, Language, Task

TP = Category.TRANSITION_PLANNING
ET = Category.EDUCATION_TRAINING
AL = Category.ADULT_LIFE
SA = Category.SELF_ADVOCACY
WP = Category.WORK_PREPARATION

CATALOG: Tuple[CatalogEntry, ...] = (
    # Transition Planning
    CatalogEntry('iep_participation', 'IEP Participation',
                 'Have your child participate at their IEP meetings; learn about student-led IEPs',
                 TP, 8, 22),
    CatalogEntry('disability_understanding', 'Disability Understanding',
                 'Teach child about their disability; identify strengths and needs',
                 TP, 8, 16),
    CatalogEntry('individual_transition_plan', 'Individual Transition Plan',
                 'Learn about an Individual Transition Plan (ITP); ask 504 team about transition planning',
                 TP, 8, 16),
    CatalogEntry('self_care_routines', 'Self-care Routines',
                 'Develop self-care routines; assign chores',
                 TP, 8, 14),
    CatalogEntry('high_school_planning', 'High School Planning',
                 'High school diploma? New pathway to diploma? Certificate of completion?',
                 TP, 12, 16),
    CatalogEntry('post_high_school_planning', 'Post-High School Planning',
                 'Apply for college and/or other post-high school programs and opportunities',
                 TP, 16, 18),
    CatalogEntry('legal_documents', 'Legal Documents',
                 "Obtain Driver's License/ID, Passport, Register to Vote, Selective Service",
                 TP, 18, 22),

    # Education and Training
    CatalogEntry('decision_making_assessment', 'Decision Making Assessment',
                 "Determine youth's ability to make decisions at 18",
                 ET, 12, 16),
    CatalogEntry('healthcare_transition', 'Healthcare Transition',
                 'Navigate transition from pediatric to adult healthcare; review insurance coverage; '
                 'investigate rider of continued eligibility',
                 ET, 16, 18),

    # Adult Life
    CatalogEntry('letter_of_intent', 'Letter of Intent',
                 'Start a Letter of Intent; review on an annual basis',
                 AL, 12, 22),
    CatalogEntry('adult_options', 'Adult Options',
                 'Explore adulting options: Department of Rehabilitation, Regional Center, '
                 'education/training, housing, assistive technology',
                 AL, 12, 22),
    CatalogEntry('public_benefits', 'Public Benefits',
                 'Investigate public benefits: CalFresh, In-Home Supportive Services (IHSS), '
                 'Supplemental Security Income (SSI), MediCal, Medicare',
                 AL, 12, 22),
    CatalogEntry('financial_planning', 'Financial Planning',
                 'Explore financial/estate planning: ABLE accounts, special needs trusts, conservatorship, '
                 'durable power of attorney, supported decision making',
                 AL, 12, 22),
    CatalogEntry('regional_center_services', 'Regional Center Services',
                 'Regional Center clients: understand post secondary services; explore Self-Determination',
                 AL, 16, 18),

    # Self-Advocacy
    CatalogEntry('independence_skills', 'Independence Skills',
                 'Increase independence at home; promote independence in choice-making, communication, '
                 'life skills, and more',
                 SA, 8, 22),
    CatalogEntry('transportation_strategies', 'Transportation Strategies',
                 'Develop transportation/mobility strategies',
                 SA, 12, 18),
    CatalogEntry('self_advocacy_skills', 'Self-Advocacy Skills',
                 'Develop self-advocacy/determination skills early. Research strength-based person centered '
                 'planning; develop a person centered plan',
                 SA, 12, 22),
    CatalogEntry('assistive_technology', 'Assistive Technology',
                 'Investigate assistive technology tools that increase involvement and opportunities',
                 SA, 12, 22),
    CatalogEntry('health_education', 'Health Education',
                 'Talk about puberty, sexuality, and safety',
                 SA, 12, 16),
    CatalogEntry('disability_rights', 'Disability Rights',
                 'Explore history of disability rights',
                 SA, 16, 22),

    # Work Preparation
    CatalogEntry('work_programs', 'Work Programs',
                 'Explore WorkAbility and/or transition partnership programs; understand Department of '
                 'Rehabilitation services, including student services and supportive employment services',
                 WP, 12, 22),
    CatalogEntry('career_planning', 'Career Planning',
                 'Develop a postsecondary employment goal as part of your ITP; develop and review a career plan',
                 WP, 16, 18),
    CatalogEntry('work_experience', 'Work Experience',
                 'Build work experience: intern/volunteer/job; practicing filling out job applications, '
                 'writing resumes',
                 WP, 16, 18),
    CatalogEntry('employment_services', 'Employment Services',
                 'Regional Center clients: explore supportive employment/work services and Paid Internship program',
                 WP, 16, 22),
)

_BY_KEY: Dict[str, CatalogEntry] = {entry.key: entry for entry in CATALOG}


def entry_for(key: str) -> Optional[CatalogEntry]:
    return _BY_KEY.get(key)


def create_initial_tasks(language: Language = Language.ENGLISH) -> List[Task]:
    """Build a fresh task list from the catalog, text localized to ``language``."""
    from translations import resolve  # local import to avoid cycle
    tasks: List[Task] = []
    for entry in CATALOG:
        title, description = resolve(entry.key, language)
        tasks.append(Task(
            key=entry.key,
            title=title,
            description=description,
            category=entry.category,
            start_age=entry.start_age,
            end_age=entry.end_age,
        ))
    return tasks


def tasks_in_category(tasks: Iterable[Task], category: Category) -> List[Task]:
    return [t for t in tasks if t.category == category]
