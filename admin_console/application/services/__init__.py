from .deduplication import reconcile_duplicates
from .filtering import filtered_view, matches
from .entity_list_controller import EntityListController
from .navigation import breadcrumbs, contextual_links
from .session_gate import GateDecision, check_access

__all__ = [
    "reconcile_duplicates",
    "filtered_view",
    "matches",
    "EntityListController",
    "breadcrumbs",
    "contextual_links",
    "GateDecision",
    "check_access",
]
