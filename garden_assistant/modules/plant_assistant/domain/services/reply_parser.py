# 📄 File: garden_assistant/modules/plant_assistant/domain/services/reply_parser.py
# 🧭 Purpose (Layman Explanation):
# Reads the AI's answer and picks out the plant's name and its short introduction,
# so we can offer reminders and sharing for that plant.
# 🧪 Purpose (Technical Summary):
# Best-effort regex extraction over the semi-structured identification reply.
# Every function returns None when the field is missing; parsing never raises.
# 🔗 Dependencies:
# re, prompts.py (field labels)
# 🔄 Connected Modules / Calls From:
# IdentificationFlow, ShareService

import re
from typing import Optional

from garden_assistant.modules.plant_assistant.domain.prompts import (
    INTRODUCTION_LABEL,
    PLANT_NAME_LABEL,
)

# Bold name label, then the name up to the first slash or line break
PLANT_NAME_PATTERN = re.compile(r"\*\*" + re.escape(PLANT_NAME_LABEL) + r"\*\*\s*(.*?)\s*(?:/|\n)")

# Bold introduction heading, its body, then the next bold heading
INTRODUCTION_PATTERN = re.compile(
    r"\*\*" + re.escape(INTRODUCTION_LABEL) + r"\*\*\n(.*?)\n\*\*",
    re.DOTALL,
)


def extract_plant_name(reply: str) -> Optional[str]:
    """Return the common plant name from an identification reply, or None."""
    if not reply:
        return None
    match = PLANT_NAME_PATTERN.search(reply)
    if not match:
        return None
    name = match.group(1).strip()
    return name or None


def extract_introduction(reply: str) -> Optional[str]:
    """Return the introduction section of an identification reply, or None."""
    if not reply:
        return None
    match = INTRODUCTION_PATTERN.search(reply)
    if not match:
        return None
    return match.group(1).strip() or None
