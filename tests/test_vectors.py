"""Tests for known-answer vectors and the self-test."""

import pytest

from lea.vectors import (
    KISA_TEST_VECTORS,
    SelfTestReport,
    format_report,
    self_test,
    check_ciphertext,
)


class TestCheckCiphertext:
    """Tests for check_ciphertext function."""

    @pytest.mark.parametrize("vec", KISA_TEST_VECTORS, ids=lambda v: v["name"])
    def test_published_vectors_pass(self, vec: dict) -> None:
        is_correct, error = check_ciphertext(
            vec["key"], vec["plaintext"], vec["ciphertext"]
        )
        assert is_correct is True
        assert error == ""

    def test_incorrect_ciphertext_fails(self) -> None:
        vec = KISA_TEST_VECTORS[0]
        is_correct, error = check_ciphertext(vec["key"], vec["plaintext"], bytes(16))

        assert is_correct is False
        assert "mismatch" in error.lower()
        assert vec["ciphertext"].hex() in error

    def test_vectors_cover_all_key_sizes(self) -> None:
        assert {len(v["key"]) for v in KISA_TEST_VECTORS} == {16, 24, 32}


class TestSelfTest:
    """Tests for self_test()."""

    def test_passes(self) -> None:
        report = self_test(num_random=6, seed=42)

        assert report.ok
        assert report.failed == 0
        assert report.total == 2 * len(KISA_TEST_VECTORS) + 6

    def test_system_randomness(self) -> None:
        report = self_test(num_random=3)
        assert report.ok

    def test_no_random_checks(self) -> None:
        report = self_test(num_random=0)
        assert report.total == 2 * len(KISA_TEST_VECTORS)

    def test_verbose_prints_each_vector(self, capsys) -> None:
        self_test(num_random=0, verbose=True)
        out = capsys.readouterr().out

        for vec in KISA_TEST_VECTORS:
            assert vec["name"] in out
            assert vec["ciphertext"].hex() in out
        assert "[OK] PASS" in out


class TestSelfTestReport:
    """Tests for SelfTestReport."""

    def test_empty_report_is_not_ok(self) -> None:
        assert not SelfTestReport().ok

    def test_failure_recorded(self) -> None:
        report = SelfTestReport()
        report.add(True)
        report.add(False, "broken")

        assert report.passed == 1
        assert report.failed == 1
        assert report.failures == ["broken"]
        assert not report.ok

    def test_to_dict(self) -> None:
        report = SelfTestReport()
        report.add(True, "ignored")
        d = report.to_dict()

        assert d == {"passed": 1, "failed": 0, "total": 1, "ok": True, "failures": []}

    def test_format_report(self) -> None:
        report = SelfTestReport()
        report.add(True)
        report.add(False, "LEA-128: bad")
        text = format_report(report)

        assert "1/2 checks passed" in text
        assert "FAIL - LEA-128: bad" in text
        assert "SELF-TEST FAILED" in text
