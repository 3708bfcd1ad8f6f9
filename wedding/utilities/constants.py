from typing import Final

# Fixed spending categories, in display order. Never added or removed at runtime.
BUDGET_CATEGORIES: Final[tuple[str, ...]] = (
    "Venue",
    "Photography",
    "Catering",
    "Decorations",
    "Music/DJ",
    "Transportation",
    "Attire",
    "Miscellaneous",
)

# Typical share of the total budget per category, in percent (sums to 100).
SUGGESTED_BUDGET_SHARES: Final[dict[str, int]] = {
    "Venue": 40,
    "Catering": 25,
    "Photography": 10,
    "Decorations": 8,
    "Music/DJ": 8,
    "Attire": 5,
    "Transportation": 2,
    "Miscellaneous": 2,
}

RSVP_PENDING: Final[str] = "Pending"
RSVP_CONFIRMED: Final[str] = "Confirmed"
RSVP_DECLINED: Final[str] = "Declined"
RSVP_STATUSES: Final[tuple[str, ...]] = (RSVP_PENDING, RSVP_CONFIRMED, RSVP_DECLINED)

PRIORITIES: Final[tuple[str, ...]] = ("Low", "Medium", "High")

VENDOR_STATUSES: Final[tuple[str, ...]] = ("Contacted", "Quoted", "Booked", "Confirmed", "Cancelled")

GUEST_CATEGORIES: Final[tuple[str, ...]] = ("Family", "Friends", "Colleagues", "Wedding Party", "Other")

EXPORT_FILENAME: Final[str] = "wedding-plan.json"
EXPORT_MEDIA_TYPE: Final[str] = "application/json"

# Standard planning checklist: (timeframe, days before the wedding, ((task, priority), ...)).
PLANNING_CHECKLIST: Final[tuple[tuple[str, int, tuple[tuple[str, str], ...]], ...]] = (
    ("12 months before", 365, (
        ("Set wedding date", "High"),
        ("Determine budget", "High"),
        ("Create guest list", "High"),
        ("Book venue", "High"),
        ("Hire wedding planner", "Medium"),
    )),
    ("9 months before", 270, (
        ("Book photographer", "High"),
        ("Book caterer", "High"),
        ("Choose wedding party", "Medium"),
        ("Shop for dress", "High"),
        ("Book officiant", "High"),
    )),
    ("6 months before", 180, (
        ("Send save the dates", "Medium"),
        ("Book florist", "Medium"),
        ("Book music/DJ", "Medium"),
        ("Plan honeymoon", "Low"),
        ("Register for gifts", "Low"),
    )),
    ("3 months before", 90, (
        ("Order invitations", "High"),
        ("Plan menu tasting", "Medium"),
        ("Book transportation", "Medium"),
        ("Plan bachelor/bachelorette", "Low"),
        ("Book hair and makeup", "Medium"),
    )),
    ("1 month before", 30, (
        ("Send invitations", "High"),
        ("Final dress fitting", "High"),
        ("Confirm vendors", "High"),
        ("Plan rehearsal dinner", "Medium"),
        ("Get marriage license", "High"),
    )),
    ("1 week before", 7, (
        ("Confirm final headcount", "High"),
        ("Pack for honeymoon", "Low"),
        ("Prepare vendor payments", "High"),
        ("Rehearsal", "High"),
        ("Relax and prepare", "Medium"),
    )),
)
