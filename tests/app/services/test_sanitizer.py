"""Testes da sanitização de campos de formulário."""

from __future__ import annotations

import pytest

from app.services.sanitizer import (
    MAX_EMAIL_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_STRING_LENGTH,
    coerce_quantity,
    sanitize_email,
    sanitize_phone,
    sanitize_string,
)


class TestSanitizeString:
    """Testes de sanitize_string."""

    @pytest.mark.parametrize("value", [None, "", 0, False])
    def test_falsy_returns_empty(self, value: object) -> None:
        assert sanitize_string(value) == ""

    def test_trims_and_escapes(self) -> None:
        assert sanitize_string("  <b>Tom & \"Jerry\"</b> ") == (
            "&lt;b&gt;Tom &amp; &quot;Jerry&quot;&lt;/b&gt;"
        )

    def test_escapes_single_quote(self) -> None:
        assert sanitize_string("it's") == "it&#39;s"

    def test_non_string_is_stringified(self) -> None:
        assert sanitize_string(42) == "42"
        assert sanitize_string(True) == "true"

    def test_output_never_exceeds_limit(self) -> None:
        result = sanitize_string("<" * 5000)
        assert len(result) <= MAX_STRING_LENGTH
        assert result == "&lt;" * (MAX_STRING_LENGTH // 4)

    def test_plain_text_truncated_to_limit(self) -> None:
        assert sanitize_string("a" * 1500) == "a" * MAX_STRING_LENGTH

    def test_partial_escape_is_dropped(self) -> None:
        # 998 letras + "&" (5 chars escapado) não cabe: "&" é descartado
        result = sanitize_string("a" * 998 + "&b")
        assert result == "a" * 998

    @pytest.mark.parametrize(
        "raw",
        ["<script>alert(1)</script>", "a < b > c", "\"quoted\" 'single'", "x" * 2000],
    )
    def test_no_raw_markup_survives(self, raw: str) -> None:
        result = sanitize_string(raw)
        for char in "<>\"'":
            assert char not in result

    def test_ampersand_only_starts_entities(self) -> None:
        result = sanitize_string("A&B <c> 'd'")
        remainder = result
        for entity in ("&amp;", "&lt;", "&gt;", "&quot;", "&#39;"):
            remainder = remainder.replace(entity, "")
        assert "&" not in remainder

    def test_idempotent_on_same_input(self) -> None:
        assert sanitize_string(" <x> ") == sanitize_string(" <x> ")


class TestSanitizeEmail:
    """Testes de sanitize_email."""

    def test_normalizes_case_and_whitespace(self) -> None:
        assert sanitize_email("Foo@BAR.com  ") == "foo@bar.com"

    @pytest.mark.parametrize(
        "value",
        ["not-an-email", "a@b", "a b@c.d", "@b.com", "a@.", "a@@b.com", None, ""],
    )
    def test_invalid_becomes_empty(self, value: object) -> None:
        assert sanitize_email(value) == ""

    def test_keeps_subdomains(self) -> None:
        assert sanitize_email("jo@mail.example.co.uk") == "jo@mail.example.co.uk"

    def test_truncated_before_matching(self) -> None:
        address = "a" * 250 + "@example.com"
        result = sanitize_email(address)
        # Truncado para 254 chars o domínio perde o ponto e o formato falha
        assert len(address[:MAX_EMAIL_LENGTH]) == MAX_EMAIL_LENGTH
        assert result == ""


class TestSanitizePhone:
    """Testes de sanitize_phone."""

    def test_strips_disallowed_characters(self) -> None:
        assert sanitize_phone("+1 (253) 555-0100 ext.7") == "+1 (253) 555-0100 7"

    def test_truncates(self) -> None:
        assert len(sanitize_phone("1" * 40)) == MAX_PHONE_LENGTH

    def test_empty(self) -> None:
        assert sanitize_phone(None) == ""


class TestCoerceQuantity:
    """Testes de coerce_quantity."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, 5),
            ("12", 12),
            ("12 pcs", 12),
            ("  7", 7),
            (3.7, 3),
            ("abc", 0),
            ("", 0),
            (None, 0),
            (True, 0),
            (float("nan"), 0),
            (float("inf"), 0),
            ("-4", -4),
        ],
    )
    def test_coercion(self, value: object, expected: int) -> None:
        assert coerce_quantity(value) == expected
