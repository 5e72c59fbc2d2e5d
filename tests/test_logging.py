# tests/test_logging.py

import logging

from app.core.logging import RequestIdFilter, request_id_ctx_var


def _record():
    return logging.LogRecord("app.test", logging.INFO, __file__, 1, "msg", None, None)


def test_records_outside_a_request_show_none():
    record = _record()

    assert RequestIdFilter().filter(record)
    assert record.request_id == "none"


def test_records_carry_current_request_id():
    token = request_id_ctx_var.set("req-42")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx_var.reset(token)

    assert record.request_id == "req-42"


def test_request_id_reaches_application_logs(
    client, auth_headers, render_payload, caplog
):
    caplog.set_level(logging.INFO)
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIdFilter())

    client.post(
        "/api/jsa/render",
        json=render_payload,
        headers=dict(auth_headers, **{"x-request-id": "render-7"}),
    )

    rendered = [r for r in caplog.records if r.name == "app.services.jsa_service"]
    assert rendered
    assert rendered[0].request_id == "render-7"
