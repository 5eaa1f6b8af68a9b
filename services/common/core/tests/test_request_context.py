import pytest
import uuid
from services.common.core import request_context


def test_generate_request_id_creates_uuid():
    """Ensure generate_request_id() creates a UUIDv4 and sets it in context."""
    req_id = request_context.generate_request_id()

    assert isinstance(req_id, str)
    assert str(uuid.UUID(req_id)) == req_id
    assert request_context.get_request_id() == req_id


def test_generate_request_id_is_unique():
    """Ensure a different ID is generated each call."""
    id1 = request_context.generate_request_id()
    id2 = request_context.generate_request_id()

    assert id1 != id2


def test_set_request_id_strips_and_rejects_blank():
    assert request_context.set_request_id("  abc-123 ") == "abc-123"
    assert request_context.get_request_id() == "abc-123"

    with pytest.raises(ValueError):
        request_context.set_request_id("   ")


def test_clear_request_id():
    request_context.generate_request_id()
    request_context.clear_request_id()

    assert request_context.get_request_id() is None
