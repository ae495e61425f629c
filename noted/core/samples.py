from __future__ import annotations

from noted.core.store import NoteStore

SAMPLE_NOTES: list[tuple[str, str]] = [
    (
        "🛒 Grocery List",
        "• Fresh produce:\n    • Apples (Honeycrisp)\n    • Bananas\n    • Spinach\n    • Carrots\n\n"
        "• Protein:\n    • Chicken breast\n    • Greek yogurt\n    • Eggs\n\n"
        "• Pantry items:\n    • Brown rice\n    • Olive oil\n    • Whole grain bread",
    ),
    (
        "✅ Weekend Tasks",
        "1. Clean and organize garage\n2. Call mom about dinner plans\n3. Fix the leaky kitchen faucet\n"
        "4. Grocery shopping (see grocery list)\n5. Prepare presentation for Monday meeting\n"
        "6. Water the plants\n7. Backup computer files",
    ),
    (
        "💡 App Ideas",
        "• Recipe Organizer:\n    • Meal planning calendar\n    • Nutrition tracking\n    • Shopping list generator\n\n"
        "• Habit Tracker:\n    • Daily streaks\n    • Progress visualization\n    • Reminder system\n\n"
        "• Local Events:\n    • Community event discovery\n    • Social meetups\n    • Activity recommendations",
    ),
    (
        "📋 Meeting Notes - Q1 Planning",
        "Date: March 15, 2024\nAttendees: Sarah, Mike, Jennifer\n\n"
        "• Key Discussion Points:\n    • Budget allocation for Q1\n    • New project timeline\n    • Team resource planning\n\n"
        "• Action Items:\n    1. Sarah: Review budget proposal by Friday\n    2. Mike: Update project roadmap\n"
        "    3. Jennifer: Schedule team meetings\n\n"
        "• Next Steps:\n    • Follow-up meeting scheduled for March 22\n    • Quarterly review preparation",
    ),
]


def load_sample_notes(store: NoteStore) -> None:
    for title, content in SAMPLE_NOTES:
        store.create(title, content)
