# 📄 File: garden_assistant/modules/plant_assistant/domain/services/share_service.py
# 🧭 Purpose (Layman Explanation):
# Prepares a short message about the identified plant that the user can send to friends.
# 🧪 Purpose (Technical Summary):
# Builds the share payload (title and body) from the identified plant name and the
# introduction section of the first model reply.
# 🔗 Dependencies:
# reply_parser, prompts (templates), chat models
# 🔄 Connected Modules / Calls From:
# Identification share endpoint

from typing import Optional

from garden_assistant.modules.plant_assistant.domain.models.chat import SharePayload
from garden_assistant.modules.plant_assistant.domain.prompts import (
    DESCRIPTION_NOT_FOUND,
    SHARE_TEXT_TEMPLATE,
    SHARE_TITLE_TEMPLATE,
)
from garden_assistant.modules.plant_assistant.domain.services.reply_parser import extract_introduction


class ShareService:
    """Share payload builder."""

    def build_payload(self, plant_name: Optional[str], first_reply: Optional[str]) -> Optional[SharePayload]:
        # Nothing to share until a plant has been identified
        if not plant_name or not first_reply:
            return None

        description = extract_introduction(first_reply) or DESCRIPTION_NOT_FOUND
        return SharePayload(
            title=SHARE_TITLE_TEMPLATE.format(plant_name=plant_name),
            text=SHARE_TEXT_TEMPLATE.format(plant_name=plant_name, description=description),
        )
