import json
import logging

from intake.app.core.logging import JsonFormatter, redact_fields


def _record(**extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="intake.app.services.reservations",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Created reservation",
        args=(),
        exc_info=None,
    )
    record.extra_fields = extra_fields
    return record


def test_formatter_merges_extra_fields():
    output = json.loads(JsonFormatter().format(_record(reservation_id=1349, party=4)))

    assert output["message"] == "Created reservation"
    assert output["level"] == "INFO"
    assert output["reservation_id"] == 1349
    assert output["party"] == 4


def test_formatter_redacts_contact_fields():
    line = JsonFormatter().format(
        _record(reservation_id=1349, email="username@example.com", phone="+1-555-0100")
    )

    output = json.loads(line)
    assert output["email"] == "[REDACTED]"
    assert output["phone"] == "[REDACTED]"
    assert "username@example.com" not in line


def test_redact_fields_keeps_absent_contacts():
    assert redact_fields({"phone": None, "datetime": "2017-06-10T06:02:00.000Z"}) == {
        "phone": None,
        "datetime": "2017-06-10T06:02:00.000Z",
    }
