"""
Default Daylio backup skeleton.

Daylio refuses to restore a backup that lacks its application state
(achievements, moods, tags, templates, preferences, ...). When building a
backup from Year in Pixels data, that state is filled in from the constant
tables below. Only ``dayEntries``, the tag creation times and ``metadata``
vary between runs.
"""
import copy
from typing import Any, Dict, List, Sequence

from daylio_pixels.data_transfer.daylio.models import DaylioDayEntry

BACKUP_VERSION = 19
IOS_VERSION = 19
ANDROID_VERSION = 15
PLATFORM = "iOS"

# (name, has progress levels, field overrides)
ACHIEVEMENTS: Sequence[tuple[str, bool, Dict[str, Any]]] = (
    ("AC_FIRST_ENTRY", False, {}),
    ("AC_ENTRIES", True, {}),
    ("AC_ENTRIES_BONUS_LVL", True, {}),
    ("AC_ENTRIES_MILLENNIUMS", True, {}),
    ("AC_ENTRIES_ETERNITY", True, {}),
    ("AC_STREAK", True, {}),
    ("AC_MEGA_STREAK", True, {}),
    ("AC_EPIC_STREAK", True, {}),
    ("AC_MYTHICAL_STREAK", True, {}),
    ("AC_STREAK_BONUS", False, {}),
    (
        "AC_TAGS",
        True,
        {
            "UNLOCKED_AT": 1654186900414,
            "CURRENT_LEVEL": 3,
            "CURRENT_VALUE": 33,
            "LAST_SEEN_LEVEL": 3,
        },
    ),
    ("AC_MOODS", True, {"CURRENT_VALUE": 5}),
    ("AC_GOALS_DEDICATED", True, {}),
    ("AC_PAPARAZZI", True, {}),
    ("AC_COLORS", False, {}),
    ("AC_MULTIPLE_ENTRIES", False, {}),
    ("AC_GROUPS", False, {"SEEN": True, "UNLOCKED_AT": 1654186900408}),
    ("AC_AUTO_BACKUP", False, {}),
    ("AC_PREMIUM", False, {}),
    ("AC_ROLLERCOASTER", False, {}),
    ("AC_PIN_CODE", False, {}),
    ("AC_NO_BACKUP", False, {}),
    ("AC_MEH_DAYS", False, {}),
    ("AC_GOOD_DAYS", False, {}),
    ("AC_RAD_DAYS", False, {}),
    ("AC_MOODS_BONUS", False, {}),
    ("AC_TAGS_BONUS", False, {}),
    ("AC_LUCKY_STREAK", False, {}),
    ("AC_CRYPTIC_STREAK", False, {}),
    ("AC_MYSTERIOUS_STREAK", False, {}),
    ("AC_SAY_CHEESE", False, {}),
    ("AC_YEARLY_REPORT_2021", False, {}),
    ("AC_YEARLY_REPORT_2020", False, {}),
    ("AC_YEARLY_REPORT_2019", False, {}),
    ("AC_YEARLY_REPORT_2018", False, {}),
    ("AC_YEARLY_REPORT_2017", False, {}),
    ("AC_YEARLY_REPORT_2016", False, {}),
)

# (id, name, icon, tag group id); order equals id.
DEFAULT_TAGS: Sequence[tuple[int, str, int, int]] = (
    (1, "family", 41, 1),
    (2, "friends", 94, 1),
    (3, "date", 53, 1),
    (4, "party", 34, 1),
    (5, "movies & tv", 91, 2),
    (6, "reading", 12, 2),
    (7, "gaming", 30, 2),
    (8, "sport", 67, 2),
    (9, "relax", 9, 2),
    (10, "Painting", 156, 2),
    (11, "Study", 250, 3),
    (12, "Homework", 86, 3),
    (13, "Work Milestone", 16, 3),
)

TAG_GROUPS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Social", "is_expanded": True, "order": 1},
    {"id": 2, "name": "Hobbies", "is_expanded": True, "order": 2},
    {"id": 3, "name": "Sleep", "is_expanded": True, "order": 3},
    {"id": 4, "name": "Food", "is_expanded": True, "order": 4},
    {"id": 5, "name": "Health", "is_expanded": True, "order": 5},
    {"id": 6, "name": "Better Me", "is_expanded": True, "order": 6},
    {"id": 7, "name": "Chores", "is_expanded": True, "order": 7},
]

CUSTOM_MOODS: List[Dict[str, Any]] = [
    {
        "id": mood_id,
        "icon_id": mood_id,
        "predefined_name_id": mood_id,
        "custom_name": "",
        "state": 0,
        "mood_group_order": 0,
        "mood_group_id": mood_id,
    }
    for mood_id in range(1, 6)
]

REMINDERS: List[Dict[str, Any]] = [
    {"id": 1, "state": 0, "minute": 0, "custom_text_enabled": False, "hour": 20},
]

PREFS: List[Dict[str, Any]] = [
    {"key": "BACKUP_REMINDER_DONT_SHOW_AGAIN", "pref_name": "default", "value": False},
    {"key": "DAYS_IN_ROW_LONGEST_CHAIN", "pref_name": "default", "value": 0},
    {"key": "COLOR_PALETTE_DEFAULT_CODE", "pref_name": "default", "value": 1},
    {"key": "PREDEFINED_MOODS_VARIANT", "pref_name": "default", "value": 2},
    {"key": "ONBOARDING_USER_PROPERTY", "pref_name": "default", "value": "finished"},
    {"key": "SUBSCRIPTION_PAGE_NUMBER_OF_VISITS", "pref_name": "default", "value": 1},
    {"key": "SUBSCRIPTION_IS_FREE_TRIAL_POSSIBLE", "pref_name": "default", "value": True},
]

WRITING_TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": 0,
        "predefined_template_id": 1,
        "order": 0,
        "title": "\U0001F64F Gratitude Entry",
        "body": "<b>List three things that you are grateful for:</b>\n<ol><li></li></ol>",
    },
    {
        "id": 1,
        "predefined_template_id": 2,
        "order": 1,
        "title": "\U0001F305 Morning Reflection",
        "body": (
            "<b>How do you feel?</b><br><br>\n"
            "<b>Why do you feel this way?</b><br><br>\n"
            "<b>What will you do today?</b><br><br>\n"
            "<b>What are you looking forward to?</b><br><br>"
        ),
    },
    {
        "id": 2,
        "predefined_template_id": 3,
        "order": 2,
        "title": "✅ To-Do List",
        "body": (
            "<b>What tasks are ahead of me?</b><br><br>\n"
            "<b>What are the priorities?</b><br><br>\n"
            "<b>Who should I reach out to?</b><br><br>\n"
            "<b>What would make this day successful?</b><br><br>"
        ),
    },
    {
        "id": 3,
        "predefined_template_id": 4,
        "order": 3,
        "title": "\U0001F634 Night Brain Dump",
        "body": (
            "<b>What do you need to do tomorrow?</b><br><br>\n"
            "<b>What do you need to do this week?</b><br><br>\n"
            "<b>What does worry you?</b><br><br>\n"
            "<b>What are you looking forward to?</b><br><br>"
        ),
    },
    {
        "id": 4,
        "predefined_template_id": 5,
        "order": 4,
        "title": "\U0001F917 Instant Cheer-Up",
        "body": (
            "<b>What are you grateful for?</b><br><br>\n"
            "<b>What did you enjoy today?</b><br><br>\n"
            "<b>What are you planning for the future?</b><br><br>\n"
            "<b>What do people like about you?</b><br><br>"
        ),
    },
    {
        "id": 5,
        "predefined_template_id": 6,
        "order": 5,
        "title": "\U0001F914 Self-Reflection",
        "body": (
            "<b>How am I feeling right now?</b><br><br>\n"
            "<b>What makes me hopeful?</b><br><br>\n"
            "<b>What makes me worried?</b><br><br>\n"
            "<b>What can I accept that I cannot change?</b><br><br>"
        ),
    },
    {
        "id": 6,
        "predefined_template_id": 7,
        "order": 6,
        "title": "\U0001F91D Being Mindful of Others",
        "body": (
            "<b>How do I make others feel?</b><br><br>\n"
            "<b>Have I done an act of kindness?</b><br><br>\n"
            "<b>What can I do better tomorrow?</b><br><br>"
        ),
    },
    {
        "id": 7,
        "predefined_template_id": 8,
        "order": 7,
        "title": "\U0001F60C Letting Go of Worries",
        "body": (
            "<b>What worries you?</b><br><br>\n"
            "<b>How would an outsider see it?</b><br><br>\n"
            "<b>What can be the positive outcome?</b><br><br>"
        ),
    },
    {
        "id": 8,
        "predefined_template_id": 9,
        "order": 8,
        "title": "\U0001F4A1 Idea",
        "body": (
            "<b>What is your idea?</b><br><br>\n"
            "<b>How does it work?</b><br><br>\n"
            "<b>What are the next steps?</b><br><br>"
        ),
    },
]

# Scalar application settings, emitted in this order.
APP_SETTINGS: Dict[str, Any] = {
    "autoBackupIsEnabled": False,
    "colorPaletteId": 2,
    "customColorIdGreat": 33,
    "customColorIdAwful": 11,
    "customColorIdMeh": 25,
    "customColorIdGood": 39,
    "customColorIdFugly": 3,
    "customColorPrimary": 33,
    "daysInRowLongestChain": 0,
    "defaultColorPaletteId": 2,
    "goals_created_count": 0,
    "goalSuccessWeeks": [],
    "isColorPaletteReversed": False,
    "isCustomColorPaletteActive": False,
    "isReminderOn": True,
    "moodIconsPackId": 1,
    "platform": PLATFORM,
}

PRIVACY_SETTINGS: Dict[str, Any] = {
    "assets": [],
    "goalEntries": [],
    "goals": [],
    "isBiometryAllowed": True,
    "isMemoriesNoteShownInNotification": False,
    "isMemoriesReminderEnabled": True,
    "isMemoriesVisibleToUser": False,
    "isWeeklyNotificationsEnabled": True,
    "memoriesAllowedMoodGroupsIds": [1, 2, 3],
}

MOOD_ICON_PREFERENCES: Dict[str, Dict[str, int]] = {
    "1": {str(mood_id): mood_id for mood_id in range(1, 6)},
}


def _achievement(name: str, levelled: bool, overrides: Dict[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"SEEN": False, "UNLOCKED_AT": 0}
    if levelled:
        fields.update({"CURRENT_LEVEL": 0, "CURRENT_VALUE": 0, "LAST_SEEN_LEVEL": 0})
    fields.update(overrides)
    record: Dict[str, Any] = {"name": name}
    record.update({f"{name}_{key}": value for key, value in fields.items()})
    return record


def _tag(tag_id: int, name: str, icon: int, group_id: int, created_at: int) -> Dict[str, Any]:
    return {
        "id": tag_id,
        "name": name,
        "icon": icon,
        "id_tag_group": group_id,
        "order": tag_id,
        "state": 0,
        "createdAt": created_at,
    }


class DaylioTemplateBuilder:
    """Builds complete Daylio backup documents from day entries."""

    @staticmethod
    def build(day_entries: Sequence[DaylioDayEntry], now: int) -> Dict[str, Any]:
        """
        Build a Daylio backup document.

        Args:
            day_entries: Entries to store under ``dayEntries``
            now: Creation timestamp, already in the run's epoch unit

        Returns:
            Backup document ready to be serialized to JSON
        """
        backup: Dict[str, Any] = {
            "dayEntries": [entry.to_backup_dict() for entry in day_entries],
            "achievements": [
                _achievement(name, levelled, overrides)
                for name, levelled, overrides in ACHIEVEMENTS
            ],
        }
        backup.update(copy.deepcopy(APP_SETTINGS))
        backup["reminders"] = copy.deepcopy(REMINDERS)
        backup["color_mode"] = "default"
        backup["customMoods"] = copy.deepcopy(CUSTOM_MOODS)
        backup["tags"] = [
            _tag(tag_id, name, icon, group_id, now)
            for tag_id, name, icon, group_id in DEFAULT_TAGS
        ]
        backup.update(copy.deepcopy(PRIVACY_SETTINGS))
        backup["metadata"] = {
            "number_of_entries": len(day_entries),
            "ios_version": IOS_VERSION,
            "platform": PLATFORM,
            "created_at": now,
            "android_version": ANDROID_VERSION,
        }
        backup["pin"] = ""
        backup["pinMode"] = 1
        backup["preferredMoodIconsIdsForMoodIdsForIconsPack"] = copy.deepcopy(
            MOOD_ICON_PREFERENCES
        )
        backup["prefs"] = copy.deepcopy(PREFS)
        backup["showNotificationAfterOneEntry"] = True
        backup["tag_groups"] = copy.deepcopy(TAG_GROUPS)
        backup["writingTemplates"] = copy.deepcopy(WRITING_TEMPLATES)
        backup["version"] = BACKUP_VERSION
        return backup
