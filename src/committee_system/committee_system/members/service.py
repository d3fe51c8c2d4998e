from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..common.locks import KeyedLock
from ..common.logging import get_logger
from ..common.validators import require_bool, require_choice, require_min_length, require_non_empty
from ..core.constants import DEFAULT_MIN_CONTACT_LENGTH, DEFAULT_SEARCH_LIMIT
from ..core.enums import Gender, MemberType
from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from .model import Member
from .repository import MemberRepository

logger = get_logger("members")

# wire name -> column name
PATCHABLE_FIELDS = {
    "name": "name",
    "electoralArea": "electoral_area",
    "electoral_area": "electoral_area",
    "contact": "contact",
    "gender": "gender",
    "isConvener": "is_convener",
    "is_convener": "is_convener",
}


class MemberService:
    """Use case: the member registry (register, search, edit, delete)."""

    def __init__(
        self,
        members: MemberRepository,
        *,
        min_contact_length: int = DEFAULT_MIN_CONTACT_LENGTH,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
        locks: Optional[KeyedLock] = None,
    ):
        self._members = members
        self._min_contact_length = int(min_contact_length)
        self._search_limit = int(search_limit)
        self._locks = locks or KeyedLock()

    def _clean_contact(self, contact: str) -> str:
        contact = require_non_empty(contact, "Contact")
        return require_min_length(contact, "Contact", self._min_contact_length)

    def register(
        self,
        *,
        member_type,
        name: str,
        electoral_area: str,
        contact: str,
        gender,
        is_convener: bool = False,
    ) -> Member:
        member_type = require_choice(member_type, MemberType, "Member type")
        name = require_non_empty(name, "Name")
        electoral_area = require_non_empty(electoral_area, "Electoral area")
        contact = self._clean_contact(contact)
        gender = require_choice(gender, Gender, "Gender")
        is_convener = require_bool(is_convener, "Convener flag")

        with self._locks.hold(("contact", contact)):
            if self._members.get_by_contact(contact):
                raise DuplicateError("A member with this contact already exists")

            member_id = self._members.create_member(
                member_type=member_type,
                name=name,
                electoral_area=electoral_area,
                contact=contact,
                gender=gender,
                is_convener=is_convener,
            )

        logger.info("registered %s id=%s", member_type.value, member_id)
        return Member(
            member_id=member_id,
            member_type=member_type,
            name=name,
            electoral_area=electoral_area,
            contact=contact,
            gender=gender,
            is_convener=is_convener,
        )

    def search(self, query: Optional[str]) -> Sequence[Member]:
        """Match contact or name substrings. A blank query returns nothing."""
        q = (query or "").strip()
        if not q:
            return []
        return list(self._members.search(q, limit=self._search_limit))

    def get(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise NotFoundError("Member not found")
        return member

    def list_members(self, *, member_type=None) -> Sequence[Member]:
        if member_type is not None:
            member_type = require_choice(member_type, MemberType, "Member type")
        return list(self._members.list_members(member_type=member_type))

    def _validate_patch(self, patch: Mapping[str, object]) -> dict[str, object]:
        if not patch:
            raise ValidationError("Nothing to update")

        unknown = [k for k in patch if k not in PATCHABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        fields: dict[str, object] = {}
        for key, value in patch.items():
            column = PATCHABLE_FIELDS[key]
            if column == "name":
                fields[column] = require_non_empty(value, "Name")
            elif column == "electoral_area":
                fields[column] = require_non_empty(value, "Electoral area")
            elif column == "contact":
                fields[column] = self._clean_contact(value)
            elif column == "gender":
                fields[column] = require_choice(value, Gender, "Gender")
            elif column == "is_convener":
                fields[column] = require_bool(value, "Convener flag")
        return fields

    def update(self, *, member_id: int, member_type, patch: Mapping[str, object]) -> Member:
        member_type = require_choice(member_type, MemberType, "Member type")
        fields = self._validate_patch(patch)

        keys = [("member", int(member_id))]
        if "contact" in fields:
            keys.append(("contact", fields["contact"]))

        with self._locks.hold(*keys):
            current = self._members.get_by_id(int(member_id))
            if not current or current.member_type != member_type:
                raise NotFoundError("Member not found")

            contact = fields.get("contact")
            if contact and contact != current.contact:
                other = self._members.get_by_contact(str(contact))
                if other and other.member_id != current.member_id:
                    raise DuplicateError("A member with this contact already exists")

            if not self._members.update_member(member_id=int(member_id), member_type=member_type, fields=fields):
                raise NotFoundError("Member not found")

        logger.info("updated member id=%s fields=%s", member_id, sorted(fields))
        return self.get(int(member_id))

    def delete(self, *, member_id: int, member_type) -> None:
        """Delete a member. Deleting an already-deleted id raises NotFoundError."""
        member_type = require_choice(member_type, MemberType, "Member type")

        with self._locks.hold(("member", int(member_id))):
            if not self._members.delete_member(member_id=int(member_id), member_type=member_type):
                raise NotFoundError("Member not found")

        logger.info("deleted %s id=%s", member_type.value, member_id)
