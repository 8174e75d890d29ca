from __future__ import annotations

import io

import qrcode

from ..people.model import Student, Teacher
from ..people.service import RosterService
from ..school.service import SchoolConfigService


def render_qr_png(payload: str) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class CardService:
    """Identity cards: the QR payload is exactly the person identifier."""

    def __init__(self, roster: RosterService, school: SchoolConfigService):
        self._roster = roster
        self._school = school

    def qr_png(self, person_id: str) -> bytes:
        person = self._roster.get(person_id)
        return render_qr_png(person.person_id)

    def card_data(self, person_id: str) -> dict:
        person = self._roster.get(person_id)
        school = self._school.get_details()

        data = {
            "school_name": school.name,
            "school_address": school.address,
            "logo_url": school.logo_url,
            "person_id": person.person_id,
            "name": person.name,
            "avatar_url": person.avatar_url,
            "qr_payload": person.person_id,
        }
        if isinstance(person, Student):
            data.update(
                {
                    "badge": "STUDENT",
                    "roll_number": person.roll_number,
                    "grade": person.grade,
                    "section": person.section,
                    "blood_group": person.blood_group,
                    "parent_contact": person.parent_contact,
                }
            )
        elif isinstance(person, Teacher):
            data.update(
                {
                    "badge": "TEACHER",
                    "subject": person.subject,
                    "contact": person.contact,
                    "email": person.email,
                }
            )
        return data
