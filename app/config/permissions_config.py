"""
Admin roles and the dashboard sections each may manage.
Used by the role gate in app.core.dependencies and by the admin profile endpoint.
"""

SUPER_ADMIN = "super_admin"
ADMIN = "admin"
EDITOR = "editor"

ROLES = {
    SUPER_ADMIN: "Full access, including admin accounts and system settings",
    ADMIN: "Manages all site content",
    EDITOR: "Manages notices only",
}

# Dashboard sections (one per admin router)
SECTIONS = {
    "notices": "Notices and notice categories",
    "products": "Products and product categories",
    "partners": "Partners",
    "facilities": "Facilities",
    "history": "Company history timeline",
    "company": "Company profile and CEO message",
    "home": "Homepage hero settings",
    "admins": "Admin accounts",
    "system": "System settings (password policy)",
}

ROLE_SECTIONS = {
    SUPER_ADMIN: set(SECTIONS),
    ADMIN: set(SECTIONS) - {"admins", "system"},
    EDITOR: {"notices"},
}


def role_can_access(role: str, section: str) -> bool:
    return section in ROLE_SECTIONS.get(role or ADMIN, set())


def get_role_matrix():
    """
    Returns {"roles": [{"name": ..., "description": ..., "sections": [...]}, ...]}
    """
    return {
        "roles": [
            {
                "name": role,
                "description": description,
                "sections": sorted(ROLE_SECTIONS[role]),
            }
            for role, description in ROLES.items()
        ]
    }
