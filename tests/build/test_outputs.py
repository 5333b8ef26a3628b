"""Tests for build-output publishing."""

import pytest

from sonic_uploader.build.outputs import BuildOutputs


class TestBuildOutputs:
    def test_publish_keeps_value_in_memory(self):
        outputs = BuildOutputs()
        outputs.publish("appURL", "https://x/y.apk")
        assert outputs.get("appURL") == "https://x/y.apk"
        assert outputs.variables == {"appURL": "https://x/y.apk"}

    def test_publish_appends_to_file(self, tmp_path):
        target = tmp_path / "build.env"
        target.write_text("EXISTING=1\n", encoding="utf-8")

        outputs = BuildOutputs(target)
        outputs.publish("appURL", "https://x/y.apk")

        assert target.read_text(encoding="utf-8") == "EXISTING=1\nappURL=https://x/y.apk\n"

    def test_unknown_name_is_none(self):
        assert BuildOutputs().get("appURL") is None

    def test_multiline_value_rejected(self, tmp_path):
        outputs = BuildOutputs(tmp_path / "build.env")
        with pytest.raises(ValueError):
            outputs.publish("appURL", "a\nb")
        assert outputs.get("appURL") is None
