"""
Application constants for Taxonomy Guard.

Centralized location for all application-wide constants.
"""

# ==================== Application Info ====================

APP_NAME = "Taxonomy Guard"
APP_VERSION = "1.0.0"

# ==================== File Extensions ====================

UPLOAD_EXTENSIONS = [".csv", ".xlsx", ".xls"]
EXCEL_EXTENSIONS = [".xlsx", ".xls"]
SQLITE_EXTENSIONS = [".db", ".sqlite", ".sqlite3"]

# ==================== Batch Processing ====================

# Rows validated between two cooperative yields
DEFAULT_CHUNK_SIZE = 250

# Issues handed to a UI before truncation kicks in
DEFAULT_MAX_REPORTED_ISSUES = 100

# Known-name suggestions (rapidfuzz WRatio, 0-100)
SUGGESTION_SCORE_CUTOFF = 80.0

# Valid options listed in corrective messages
MAX_LISTED_OPTIONS = 5

# ==================== Severities ====================

SEVERITY_CRITICAL = "critical"
SEVERITY_WARNING = "warning"
SEVERITY_SUGGESTION = "suggestion"

# ==================== Column Headers ====================

# Field name -> header shown in issues (matches the upload template)
FIELD_HEADERS = {
    "category": "Category",
    "range": "Range",
    "campaign": "Campaign",
    "business_unit": "Business Unit",
    "media": "Media",
    "media_subtype": "Media Subtype",
    "campaign_archetype": "Campaign Archetype",
    "pm_type": "PM Type",
    "burst": "Burst",
    "initial_date": "Initial Date",
    "end_date": "End Date",
    "total_budget": "Total Budget",
    "total_r1_plus": "Total R1+ (%)",
    "total_r3_plus": "Total R3+ (%)",
    "total_trps": "Total TRPs",
    "tv_demo_gender": "TV Demo Gender",
    "tv_demo_min_age": "TV Demo Min. Age",
    "tv_demo_max_age": "TV Demo Max. Age",
    "digital_same_as_tv": "Is Digital target the same than TV?",
    "digital_demo_gender": "Digital Demo Gender",
    "digital_demo_min_age": "Digital Demo Min. Age",
    "digital_demo_max_age": "Digital Demo Max. Age",
}

# Field name -> accepted header variants (matched case-insensitively)
HEADER_ALIASES = {
    "category": ["Category"],
    "range": ["Range"],
    "campaign": ["Campaign"],
    "business_unit": ["Business Unit", "BU", "Business_Unit"],
    "media": ["Media", "Media Type"],
    "media_subtype": ["Media Subtype", "Media Sub Type", "Media SubType"],
    "campaign_archetype": ["Campaign Archetype", "Archetype"],
    "pm_type": ["PM Type", "PMType"],
    "burst": ["Burst"],
    "initial_date": ["Initial Date", "Start Date"],
    "end_date": ["End Date"],
    "total_budget": ["Total Budget", "Budget"],
    "total_r1_plus": ["Total R1+ (%)", "Total R1+", "R1+"],
    "total_r3_plus": ["Total R3+ (%)", "Total R3+", "R3+"],
    "total_trps": ["Total TRPs", "Total TRP", "TRPs"],
    "tv_demo_gender": ["TV Demo Gender"],
    "tv_demo_min_age": ["TV Demo Min. Age", "TV Demo Min Age"],
    "tv_demo_max_age": ["TV Demo Max. Age", "TV Demo Max Age"],
    "digital_same_as_tv": [
        "Is Digital target the same than TV?",
        "Is Digital target the same as TV?",
        "Digital Same As TV",
    ],
    "digital_demo_gender": ["Digital Demo Gender"],
    "digital_demo_min_age": ["Digital Demo Min. Age", "Digital Demo Min Age"],
    "digital_demo_max_age": ["Digital Demo Max. Age", "Digital Demo Max Age"],
}

MONTH_COLUMNS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

MONTH_ALIASES = {
    "Jan": ["Jan", "Jan Budget", "January"],
    "Feb": ["Feb", "Feb Budget", "February"],
    "Mar": ["Mar", "Mar Budget", "March"],
    "Apr": ["Apr", "Apr Budget", "April"],
    "May": ["May", "May Budget"],
    "Jun": ["Jun", "Jun Budget", "June"],
    "Jul": ["Jul", "Jul Budget", "July"],
    "Aug": ["Aug", "Aug Budget", "August"],
    "Sep": ["Sep", "Sep Budget", "September"],
    "Oct": ["Oct", "Oct Budget", "October"],
    "Nov": ["Nov", "Nov Budget", "November"],
    "Dec": ["Dec", "Dec Budget", "December"],
}

# Fields that must carry a value on every game plan row
REQUIRED_FIELDS = ["category", "range", "campaign", "media", "media_subtype"]

# ==================== Demographics ====================

# Open-ended upper bound for an age field
AGE_SENTINEL = "+"

TV_DEMO_FIELDS = ["tv_demo_gender", "tv_demo_min_age", "tv_demo_max_age"]
DIGITAL_DEMO_FIELDS = ["digital_demo_gender", "digital_demo_min_age", "digital_demo_max_age"]

# TV field -> Digital counterpart compared when the parity flag is set
PARITY_FIELD_PAIRS = list(zip(TV_DEMO_FIELDS, DIGITAL_DEMO_FIELDS))

AFFIRMATIVE_VALUES = {"yes", "y", "true", "1"}
NEGATIVE_VALUES = {"no", "n", "false", "0"}

# ==================== Media ====================

# Subtypes carrying real demographic targeting - TV demo fields required
BROADCAST_SUBTYPES = ["Open TV", "Paid TV"]

# Other traditional subtypes - TV demo fields optional
OPTIONAL_DEMO_SUBTYPES = ["OOH", "Print", "Radio"]

DEFAULT_MEDIA_TYPES = ["Digital", "Traditional"]

CHANNEL_TV = "TV"
CHANNEL_DIGITAL = "Digital"

# Separators allowed between channels in a combined Media value ("TV + Digital")
MEDIA_SEPARATORS = r"[+,/;]"

# ==================== Media Metrics ====================

# Subtypes (besides every Digital subtype) where Total R1+ must be filled,
# matched when the subtype contains one of them
REACH_REQUIRED_SUBTYPES = ["Open TV", "OOH", "Out of Home", "Outdoor"]

PM_TYPES_PERFORMANCE = ["GR Only", "PM Advanced", "Full Funnel Basic", "Full Funnel Advanced", "PM & FF"]
PM_TYPES_ANY = PM_TYPES_PERFORMANCE + ["Non PM"]
PM_TYPES_TRADITIONAL = ["Non PM", "GR Only"]

# Media Subtype keyword -> PM Types allowed for it. The first keyword contained
# in the subtype wins; subtypes matching no keyword accept any PM Type.
PM_TYPE_COMBINATIONS = [
    ("PM & FF", PM_TYPES_PERFORMANCE),
    ("Influencers Amplification", PM_TYPES_PERFORMANCE),
    ("Influencers Amp.", PM_TYPES_PERFORMANCE),
    ("Influencers Organic", ["Non PM"]),
    ("Influencers Org.", ["Non PM"]),
    ("Influencers", PM_TYPES_ANY),
    ("Other Digital", PM_TYPES_ANY),
    ("Search", PM_TYPES_PERFORMANCE),
    ("Open TV", PM_TYPES_TRADITIONAL),
    ("Paid TV", PM_TYPES_TRADITIONAL),
    ("OOH", PM_TYPES_TRADITIONAL),
    ("Out of Home", PM_TYPES_TRADITIONAL),
    ("Outdoor", PM_TYPES_TRADITIONAL),
    ("Radio", PM_TYPES_TRADITIONAL),
    ("Others", PM_TYPES_TRADITIONAL),
]

# ==================== Campaign Archetypes ====================

DEFAULT_CAMPAIGN_ARCHETYPES = [
    "Innovation",
    "Base Business (Maintenance)",
    "Range Extension",
]

# ==================== Dates and Budgets ====================

DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%d-%b-%y", "%Y/%m/%d"]

# Tolerance when comparing monthly budgets with the total
BUDGET_TOLERANCE = 0.01
