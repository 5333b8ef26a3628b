"""Tests for the generic response envelope."""

import httpx
import pytest

from sonic_uploader.client.envelope import HttpEnvelope, decode_envelope
from sonic_uploader.client.types import Project
from sonic_uploader.errors import UploadFailed


class TestIsSuccess:
    def test_success_flag(self):
        assert HttpEnvelope[str](success=True, data="u").is_success

    def test_explicit_failure_flag(self):
        assert not HttpEnvelope[str](success=False, data="u").is_success

    def test_sonic_success_code(self):
        assert HttpEnvelope[str](code=2000, data="u").is_success

    def test_sonic_error_code(self):
        assert not HttpEnvelope[str](code=3001, message="permission denied").is_success

    def test_bare_payload_counts_as_success(self):
        assert HttpEnvelope[str](data="u").is_success


class TestDecodeEnvelope:
    def test_decodes_string_payload(self):
        response = httpx.Response(200, json={"code": 2000, "data": "https://x/y.apk"})
        envelope = decode_envelope(response, str)
        assert envelope.data == "https://x/y.apk"

    def test_decodes_project_list(self):
        response = httpx.Response(
            200,
            json={
                "code": 2000,
                "data": [
                    {"id": 1, "projectName": "Demo", "robotType": 1},
                    {"id": 2, "projectName": "Shop", "projectDes": "store app"},
                ],
            },
        )
        envelope = decode_envelope(response, list[Project])
        assert [p.id for p in envelope.data] == [1, 2]
        assert envelope.data[1].project_des == "store app"

    def test_unknown_fields_are_ignored(self):
        response = httpx.Response(200, json={"data": "u", "timestamp": 123})
        assert decode_envelope(response, str).data == "u"

    def test_invalid_json_raises_upload_failed(self):
        response = httpx.Response(200, text="not json")
        with pytest.raises(UploadFailed) as exc_info:
            decode_envelope(response, str)
        assert exc_info.value.body == "not json"
        assert exc_info.value.status_code == 200

    def test_wrong_payload_type_raises(self):
        response = httpx.Response(200, json={"data": {"url": "u"}})
        with pytest.raises(UploadFailed):
            decode_envelope(response, str)
