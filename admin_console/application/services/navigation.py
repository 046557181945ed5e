"""Route-to-label lookups for breadcrumbs and contextual links."""

from dataclasses import dataclass, field

HOME_LINK_LABEL = "Home"
HOME_LINK_HREF = "/admin/dashboard"

SEGMENT_LABELS: dict[str, str] = {
    "admin": "Admin",
    "superadmin": "Super Admin",
    "training": "Training",
    "dashboard": "Dashboard",
    "courses": "Courses",
    "new": "New",
    "edit": "Edit",
    "modules": "Modules",
    "lessons": "Lessons",
    "materials": "Materials",
    "tests": "Tests",
    "questions": "Questions",
    "test-results": "Results",
    "students": "Students",
    "enrollments": "Enrollments",
    "student-progress": "Progress",
    "certificates": "Certificates",
    "reports": "Reports",
    "settings": "Settings",
    "sectors": "Sectors",
    "companies": "Companies",
    "users": "Users",
    "plans": "Plans",
    "payments": "Payments",
    "global-tests": "Global Tests",
    "categories": "Categories",
    "globalcategories": "Global Categories",
}


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    href: str
    is_current: bool = False


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class ContextualLinks:
    prev: NavLink | None = None
    next: NavLink | None = None
    related: tuple[NavLink, ...] = field(default_factory=tuple)


def _is_dynamic(segment: str) -> bool:
    return segment.startswith("[") and segment.endswith("]")


def breadcrumbs(pathname: str) -> list[Breadcrumb]:
    """Build the trail for a route pattern such as ``/admin/training/courses/[id]``.

    Dynamic segments are skipped; unknown segments fall back to a
    title-cased version of themselves. The last crumb is marked current.
    """
    segments = [s for s in pathname.split("/") if s]
    crumbs: list[Breadcrumb] = []
    current = ""
    for segment in segments:
        current += f"/{segment}"
        if _is_dynamic(segment):
            continue
        label = SEGMENT_LABELS.get(segment, segment.replace("-", " ").title())
        crumbs.append(Breadcrumb(label=label, href=current))
    if crumbs:
        last = crumbs[-1]
        crumbs[-1] = Breadcrumb(label=last.label, href=last.href, is_current=True)
    return crumbs


_T = "/admin/training"

_CONTEXTUAL: dict[str, tuple[tuple[str, str] | None, tuple[str, str] | None, tuple[tuple[str, str], ...]]] = {
    f"{_T}/dashboard": (
        None,
        ("View Courses", f"{_T}/courses"),
        (("New Course", f"{_T}/courses/new"), ("Reports", f"{_T}/reports")),
    ),
    f"{_T}/courses": (
        ("Dashboard", f"{_T}/dashboard"),
        ("New Course", f"{_T}/courses/new"),
        (("Sectors", f"{_T}/sectors"), ("Students", f"{_T}/students")),
    ),
    f"{_T}/courses/new": (
        ("List Courses", f"{_T}/courses"),
        None,
        (("Sectors", f"{_T}/sectors"), ("Modules", f"{_T}/modules")),
    ),
    f"{_T}/courses/[id]": (
        ("List Courses", f"{_T}/courses"),
        None,
        (
            ("Edit Course", f"{_T}/courses/{{id}}/edit"),
            ("Modules", f"{_T}/courses/{{id}}/modules"),
            ("Enrolled Students", f"{_T}/courses/{{id}}/students"),
        ),
    ),
    f"{_T}/modules": (
        ("Courses", f"{_T}/courses"),
        ("Lessons", f"{_T}/lessons"),
        (("Materials", f"{_T}/materials"),),
    ),
    f"{_T}/lessons": (
        ("Modules", f"{_T}/modules"),
        ("Materials", f"{_T}/materials"),
        (("Tests", f"{_T}/tests"),),
    ),
    f"{_T}/tests": (
        ("Lessons", f"{_T}/lessons"),
        None,
        (("Questions", f"{_T}/questions"), ("Results", f"{_T}/test-results")),
    ),
    f"{_T}/students": (
        ("Dashboard", f"{_T}/dashboard"),
        None,
        (
            ("Enrollments", f"{_T}/enrollments"),
            ("Progress", f"{_T}/student-progress"),
            ("Certificates", f"{_T}/certificates"),
        ),
    ),
    f"{_T}/certificates": (
        ("Students", f"{_T}/students"),
        None,
        (
            ("Enrollments", f"{_T}/enrollments"),
            ("Progress", f"{_T}/student-progress"),
            ("Reports", f"{_T}/reports"),
        ),
    ),
    f"{_T}/student-progress": (
        ("Students", f"{_T}/students"),
        None,
        (
            ("Enrollments", f"{_T}/enrollments"),
            ("Certificates", f"{_T}/certificates"),
            ("Reports", f"{_T}/reports"),
        ),
    ),
    f"{_T}/enrollments": (
        ("Students", f"{_T}/students"),
        None,
        (
            ("Progress", f"{_T}/student-progress"),
            ("Certificates", f"{_T}/certificates"),
        ),
    ),
    f"{_T}/settings": (
        ("Dashboard", f"{_T}/dashboard"),
        None,
        (
            ("Courses", f"{_T}/courses"),
            ("Students", f"{_T}/students"),
            ("Reports", f"{_T}/reports"),
        ),
    ),
}

_FALLBACK = ContextualLinks(prev=NavLink("Back", f"{_T}/dashboard"))


def contextual_links(pathname: str, entity_id: str | None = None) -> ContextualLinks:
    """Prev/next/related links for a route pattern, with a dashboard fallback."""
    entry = _CONTEXTUAL.get(pathname)
    if entry is None:
        return _FALLBACK
    prev, nxt, related = entry

    def link(item: tuple[str, str] | None) -> NavLink | None:
        if item is None:
            return None
        label, href = item
        return NavLink(label, href.replace("{id}", entity_id or ""))

    return ContextualLinks(
        prev=link(prev),
        next=link(nxt),
        related=tuple(link(item) for item in related),
    )
