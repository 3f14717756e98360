"""
Sample test data for Kapan testing.

Realistic reminder messages with the results expected for a reference
instant of 2025-10-19 10:00 Jakarta time.
"""

from datetime import datetime

REFERENCE_INSTANT = datetime(2025, 10, 19, 10, 0, 0)

# Messages that resolve to a concrete date and time
RESOLVED_MESSAGES = [
    {
        "id": "msg_001",
        "text": "besok jam 6 sore minum obat",
        "expected_date": "2025-10-20",
        "expected_time": "18:00",
        "expected_activity": "minum obat"
    },
    {
        "id": "msg_002",
        "text": "lusa pagi beli susu",
        "expected_date": "2025-10-21",
        "expected_time": "08:00",
        "expected_activity": "beli susu"
    },
    {
        "id": "msg_003",
        "text": "hari ini jam 14:30 meeting",
        "expected_date": "2025-10-19",
        "expected_time": "14:30",
        "expected_activity": "meeting"
    },
    {
        "id": "msg_004",
        "text": "jam 0 dini hari cek pintu",
        "expected_date": "2025-10-19",
        "expected_time": "00:00",
        "expected_activity": "cek pintu"
    },
    {
        "id": "msg_005",
        "text": "Tolong ingatkan saya besok pagi minum vitamin ya!",
        "expected_date": "2025-10-20",
        "expected_time": "08:00",
        "expected_activity": "minum vitamin"
    },
    {
        "id": "msg_006",
        "text": "Besok pukul 7 malam Telepon Ibu",
        "expected_date": "2025-10-20",
        "expected_time": "19:00",
        "expected_activity": "Telepon Ibu"
    },
    {
        "id": "msg_007",
        "text": "remind me tomorrow jam 9:15 pagi standup",
        "expected_date": "2025-10-20",
        "expected_time": "09:15",
        "expected_activity": "standup"
    },
    {
        "id": "msg_008",
        "text": "jam 12 siang makan siang",
        "expected_date": "2025-10-19",
        "expected_time": "12:00",
        "expected_activity": "makan"
    },
    {
        "id": "msg_009",
        "text": "malam ini nonton film",
        "expected_date": "2025-10-19",
        "expected_time": "19:00",
        "expected_activity": "ini nonton film"
    },
    {
        "id": "msg_010",
        "text": "jam 2 dini hari angkat jemuran",
        "expected_date": "2025-10-19",
        "expected_time": "02:00",
        "expected_activity": "angkat jemuran"
    },
]

# Messages that need a follow-up question
CLARIFICATION_MESSAGES = [
    {
        "id": "clr_001",
        "text": "jam 6",
        "kind": "meridiem",
        "expected_activity": "Pengingat"
    },
    {
        "id": "clr_002",
        "text": "beli roti",
        "kind": "date_and_time",
        "expected_activity": "beli roti"
    },
    {
        "id": "clr_003",
        "text": "besok",
        "kind": "date_and_time",
        "expected_activity": "Pengingat"
    },
    {
        "id": "clr_004",
        "text": "besok jam 8 bayar listrik",
        "kind": "meridiem",
        "expected_activity": "bayar listrik"
    },
    {
        "id": "clr_005",
        "text": "rapat 9:15",
        "kind": "meridiem",
        "expected_activity": "rapat"
    },
]

# Inputs that must never raise
HOSTILE_INPUTS = [
    "",
    "   ",
    "?!.,",
    "jam",
    "jam :",
    "jam 99",
    "jam 6:75",
    "99:99",
    "pukul",
    "hari ini hari ini besok lusa",
    "🕐 besok 🕐",
    "JAM 6 SORE!!!",
    "x" * 5000,
    "dini hari ini",
    "\t\nbesok\n\tjam 7\tpagi\n",
]
