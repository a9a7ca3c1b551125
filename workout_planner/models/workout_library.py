"""Default weekly workouts (sub-2:30 marathon block) used to seed new days."""
from typing import Dict


DEFAULT_WEEK_PLAN: Dict[str, Dict[str, str]] = {
    "Monday": {
        "distance": "6",
        "pace": "7:30",
        "notes": "Easy recovery run. Keep it relaxed.",
    },
    "Tuesday": {
        "distance": "8",
        "pace": "5:40",
        "notes": "Tempo run: 20 min @ goal pace (5:43/mile), warm up/cool down easy",
    },
    "Wednesday": {
        "distance": "10",
        "pace": "7:00",
        "notes": "Medium long run. Aerobic effort.",
    },
    "Thursday": {
        "distance": "8",
        "pace": "5:30",
        "notes": "Track workout: 6x1000m @ 3:25-3:30 with 2 min rest",
    },
    "Friday": {
        "distance": "6",
        "pace": "8:00",
        "notes": "Easy shakeout. Focus on form and relaxation.",
    },
    "Saturday": {
        "distance": "22",
        "pace": "6:15",
        "notes": "Long run with 10 miles @ goal marathon pace (5:43/mile)",
    },
    "Sunday": {
        "distance": "8",
        "pace": "8:00",
        "notes": "Recovery run or rest day. Listen to your body.",
    },
}
