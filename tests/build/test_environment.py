"""Tests for build placeholder expansion."""

from sonic_uploader.build.environment import BuildEnvironment


class TestExpand:
    def test_braced_placeholder(self):
        env = BuildEnvironment({"WORKSPACE": "/ws"})
        assert env.expand("${WORKSPACE}/out") == "/ws/out"

    def test_bare_placeholder(self):
        env = BuildEnvironment({"WORKSPACE": "/ws"})
        assert env.expand("$WORKSPACE/out") == "/ws/out"

    def test_unknown_placeholder_stays_literal(self):
        env = BuildEnvironment({})
        assert env.expand("${GIT_BRANCH}") == "${GIT_BRANCH}"

    def test_mixed_known_and_unknown(self):
        env = BuildEnvironment({"A": "1"})
        assert env.expand("${A}-${B}") == "1-${B}"

    def test_double_dollar_escapes(self):
        env = BuildEnvironment({"A": "1"})
        assert env.expand("cost $$A") == "cost $A"

    def test_text_without_placeholders_is_unchanged(self):
        env = BuildEnvironment({"A": "1"})
        assert env.expand("https://sonic.example.com") == "https://sonic.example.com"

    def test_none_and_empty_pass_through(self):
        env = BuildEnvironment({})
        assert env.expand(None) is None
        assert env.expand("") == ""

    def test_value_is_not_expanded_twice(self):
        env = BuildEnvironment({"A": "${B}", "B": "oops"})
        assert env.expand("${A}") == "${B}"

    def test_from_os_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SONIC_TEST_VAR", "value")
        assert BuildEnvironment.from_os().expand("${SONIC_TEST_VAR}") == "value"


class TestExpandOrUnknown:
    def test_resolved_value(self):
        env = BuildEnvironment({"GIT_BRANCH": "origin/main"})
        assert env.expand_or_unknown("${GIT_BRANCH}") == "origin/main"

    def test_unresolved_becomes_unknown(self):
        env = BuildEnvironment({})
        assert env.expand_or_unknown("${GIT_BRANCH}") == "unknown"

    def test_empty_value_stays_empty(self):
        env = BuildEnvironment({"BUILD_URL": ""})
        assert env.expand_or_unknown("${BUILD_URL}") == ""

    def test_value_equal_to_placeholder_is_unknown(self):
        env = BuildEnvironment({"GIT_BRANCH": "${GIT_BRANCH}"})
        assert env.expand_or_unknown("${GIT_BRANCH}") == "unknown"
