"""
Core constants — **Single Source of Truth** for project-wide fixed values.

The suggestion lists below back free-text columns: clients offer them in
dropdowns, but the database accepts any value.  Enumerations that the
database enforces live beside their models as ``TextChoices``.
"""

# ── Dashboard ───────────────────────────────────────────────────────
# Number of newest cases listed on the dashboard.
DASHBOARD_RECENT_CASES_LIMIT: int = 5

# ── Free-text suggestions ───────────────────────────────────────────
OFFICER_RANK_SUGGESTIONS: list[str] = [
    "Officer",
    "Detective",
    "Sergeant",
    "Lieutenant",
    "Captain",
    "Chief",
    "Forensic Analyst",
    "Lab Technician",
]

GENDER_SUGGESTIONS: list[tuple[str, str]] = [
    ("male", "Male"),
    ("female", "Female"),
    ("other", "Other"),
]

ANALYSIS_TYPE_SUGGESTIONS: list[str] = [
    "DNA Analysis",
    "Fingerprint Analysis",
    "Toxicology",
    "Ballistics",
    "Digital Forensics",
    "Document Analysis",
    "Blood Spatter Analysis",
    "Trace Evidence",
    "Other",
]
