"""Tests for dotted_i18n.translator module."""

from unittest.mock import Mock

import pytest

from dotted_i18n import (
    I18nError,
    InterpolationArgumentsMissingError,
    MissingTranslationError,
    PlaceholderMissingError,
    Resolver,
    TranslationMode,
    Translator,
    UndefinedInterpolationError,
)
from dotted_i18n.translator import LenientFormatter, StrictFormatter
from tests.factories.i18n import EchoTranslator, make_outcome, make_translator

LENIENT = TranslationMode.LENIENT


class TestTranslationMode:
    """Tests for TranslationMode enum."""

    def test_from_string(self):
        """from_string() accepts mode names in any case."""
        assert TranslationMode.from_string("strict") is TranslationMode.STRICT
        assert TranslationMode.from_string(" Lenient ") is TranslationMode.LENIENT

    def test_from_string_invalid(self):
        """from_string() rejects unknown modes."""
        with pytest.raises(ValueError):
            TranslationMode.from_string("production-ish")

    def test_formatter_selected_by_mode(self):
        """The formatting strategy follows the mode."""
        assert isinstance(make_translator().formatter, StrictFormatter)
        assert isinstance(make_translator(mode=LENIENT).formatter, LenientFormatter)
        assert isinstance(make_translator(mode="lenient").formatter, LenientFormatter)

    @pytest.mark.parametrize(
        "mode,expected",
        [
            ("Lenient", TranslationMode.LENIENT),
            (" strict ", TranslationMode.STRICT),
            ("LENIENT", TranslationMode.LENIENT),
        ],
    )
    def test_mode_string_normalized(self, mode, expected):
        """String modes are accepted in any case and with surrounding spaces."""
        assert Translator(Resolver({}), mode=mode).mode is expected

    def test_invalid_mode_string(self):
        """Unknown string modes raise ValueError naming the mode."""
        with pytest.raises(ValueError, match="Unsupported translation mode"):
            Translator(Resolver({}), mode="loud")


class TestLenientMode:
    """Tests for translations in lenient (production) mode."""

    def test_simple_translation(self):
        """Returns the translation."""
        assert make_translator({"bar": "foo"}, mode=LENIENT).translate("bar") == "foo"

    def test_nested_translation(self):
        """Returns nested translations."""
        assert make_translator({"a": {"b": "foo"}}, mode=LENIENT).translate("a.b") == "foo"

    def test_missing_translation(self):
        """Missing keys become a readable label."""
        assert make_translator({}, mode=LENIENT).translate("foo.bar") == "Bar"

    def test_translation_not_a_string(self):
        """Non-string nodes become a readable label."""
        assert make_translator({"a": {"b": "foo"}}, mode=LENIENT).translate("a") == "A"

    def test_humanizes_snake_case(self):
        """Underscored segments are de-slugified."""
        translator = make_translator({}, mode=LENIENT)
        assert translator.translate("errors.not_found") == "Not found"

    def test_custom_humanizer(self):
        """A custom humanizer receives the last segment; its result is used verbatim."""
        humanizer = Mock(return_value="[missing]")
        translator = make_translator({}, mode=LENIENT, humanizer=humanizer)

        assert translator.translate("foo.bar_baz") == "[missing]"
        humanizer.assert_called_once_with("bar_baz")

    def test_simple_interpolation(self):
        """Inserts arguments into the string."""
        translator = make_translator({"a": "foo %{bar}"}, mode=LENIENT)
        assert translator.translate("a", {"bar": 123}) == "foo 123"

    def test_undefined_interpolation(self):
        """None values are rendered, not rejected."""
        translator = make_translator({"a": "foo %{bar}"}, mode=LENIENT)
        assert translator.translate("a", {"bar": None}) == "foo None"

    def test_missing_placeholders(self):
        """Unused arguments are ignored."""
        translator = make_translator({"a": "foo"}, mode=LENIENT)
        assert translator.translate("a", {"bar": 1}) == "foo"

    def test_missing_interpolation_arguments(self):
        """Unmatched placeholders stay literal."""
        translator = make_translator({"a": "foo %{bar} %{baz}"}, mode=LENIENT)
        assert translator.translate("a", {"bar": "foo"}) == "foo foo %{baz}"

    def test_plural_miss_is_humanized(self):
        """A pluralization miss degrades to a label."""
        translator = make_translator({"items": {"other": "x"}}, mode=LENIENT)
        assert translator.translate("items", {"count": 1}) == "Items"


class TestStrictMode:
    """Tests for translations in strict mode."""

    def test_strict_is_default(self):
        """Translators are strict unless configured otherwise."""
        assert Translator(Resolver({})).mode is TranslationMode.STRICT

    def test_full_success(self):
        """Fully interpolated translations are returned."""
        translator = make_translator({"a": "foo %{bar}"})
        assert translator.translate("a", {"bar": 123}) == "foo 123"

    def test_missing_translation(self):
        """Missing keys raise MissingTranslationError."""
        with pytest.raises(MissingTranslationError, match="Translation missing") as exc:
            make_translator({}).translate("a.b")

        assert exc.value.key == "a.b"
        assert exc.value.stopped_at == ""

    def test_translation_not_a_string(self):
        """Non-string nodes raise MissingTranslationError."""
        with pytest.raises(MissingTranslationError, match="Translation missing") as exc:
            make_translator({"a": {"b": "foo"}}).translate("a")

        assert exc.value.stopped_at == "a"

    def test_undefined_interpolation(self):
        """None values raise UndefinedInterpolationError."""
        with pytest.raises(UndefinedInterpolationError, match="undefined interpolation") as exc:
            make_translator({"a": "foo %{bar}"}).translate("a", {"bar": None})

        assert exc.value.placeholder == "bar"

    def test_none_count_for_plural_without_placeholder(self):
        """A None count that selected a form without %{count} is not undefined."""
        translator = make_translator({"a": {"other": "many"}})
        assert translator.translate("a", {"count": None}) == "many"

    def test_none_count_referenced_by_plural_form(self):
        """A None count rendered by the selected form is undefined."""
        translator = make_translator({"a": {"other": "%{count} left"}})

        with pytest.raises(UndefinedInterpolationError) as exc:
            translator.translate("a", {"count": None})

        assert exc.value.placeholder == "count"

    def test_missing_placeholders(self):
        """Unused arguments raise PlaceholderMissingError."""
        with pytest.raises(PlaceholderMissingError, match="Placeholder missing") as exc:
            make_translator({"a": "foo"}).translate("a", {"bar": 1})

        assert exc.value.placeholders == ("bar",)

    def test_unused_none_is_placeholder_missing(self):
        """A None value for a non-placeholder is reported as unused."""
        with pytest.raises(PlaceholderMissingError):
            make_translator({"a": "foo"}).translate("a", {"bar": None})

    def test_all_interpolation_arguments_missing(self):
        """All remaining names are listed, comma-joined, in order."""
        translator = make_translator({"a": "foo %{bar} %{baz}"})

        with pytest.raises(InterpolationArgumentsMissingError, match="Interpolation arguments missing"):
            translator.translate("a")
        with pytest.raises(InterpolationArgumentsMissingError, match="bar,baz") as exc:
            translator.translate("a")

        assert exc.value.placeholders == ("bar", "baz")

    def test_some_interpolation_arguments_missing(self):
        """Only the names still missing are listed."""
        translator = make_translator({"a": "foo %{bar} %{baz}"})

        with pytest.raises(InterpolationArgumentsMissingError) as exc:
            translator.translate("a", {"bar": "x"})

        assert exc.value.placeholders == ("baz",)
        assert "baz" in str(exc.value)
        assert "bar," not in str(exc.value)

    def test_plural_count_not_unused(self):
        """count used for plural selection does not raise."""
        translator = make_translator({"a": {"zero": "None left", "other": "%{count} left"}})
        assert translator.translate("a", {"count": 0}) == "None left"
        assert translator.translate("a", {"count": 5}) == "5 left"

    def test_errors_share_base_class(self):
        """All strict-mode errors are I18nErrors."""
        for error in (
            MissingTranslationError,
            InterpolationArgumentsMissingError,
            UndefinedInterpolationError,
            PlaceholderMissingError,
        ):
            assert issubclass(error, I18nError)


class TestDefaultTranslator:
    """Tests for the default_translator option."""

    def test_used_for_missing_translations(self):
        """Strict mode uses the default translator instead of raising."""
        default = EchoTranslator()
        translator = make_translator({}, default_translator=default)

        assert translator.translate("foo.bar") == "foo.bar"
        assert default.calls == [("foo.bar", None)]

    def test_used_in_lenient_mode(self):
        """Lenient mode prefers the default translator over humanizing."""
        translator = make_translator({}, mode=LENIENT, default_translator=EchoTranslator())
        assert translator.translate("foo.bar") == "foo.bar"

    def test_not_used_for_hits(self):
        """Found translations never reach the default translator."""
        default = Mock()
        translator = make_translator({"a": "x"}, default_translator=default)

        assert translator.translate("a") == "x"
        default.translate.assert_not_called()


class TestTranslatorResolve:
    """Tests for Translator.resolve()."""

    def test_returns_outcome(self):
        """resolve() exposes the resolver outcome."""
        outcome = make_translator({"a": "foo %{bar}"}).resolve("a")
        assert outcome.interpolation.remaining_placeholders == ("bar",)

    def test_translator_as_fallback(self):
        """A Translator can be another resolver's fallback."""
        fallback = make_translator({"common": {"ok": "OK"}})
        translator = Translator(Resolver({}, fallback=fallback))
        assert translator.translate("common.ok") == "OK"


class TestTranslatorScoped:
    """Tests for Translator.scoped()."""

    def test_scoped_returns_wrapper(self):
        """scoped() returns a translate function under the prefix."""
        translator = make_translator({"a": {"b": {"c": "foo %{a}"}}})
        scoped_t = translator.scoped("a.b")
        assert scoped_t("c", {"a": 123}) == "foo 123"

    def test_scoped_lenient_humanizes(self):
        """Scoped lookups still humanize missing keys."""
        scoped_t = make_translator({}, mode=LENIENT).scoped("pages.home")
        assert scoped_t("page_title") == "Page title"

    def test_scoped_strict_raises(self):
        """Scoped lookups raise with the full key in strict mode."""
        scoped_t = make_translator({"a": {}}).scoped("a")
        with pytest.raises(MissingTranslationError) as exc:
            scoped_t("b")
        assert exc.value.key == "a.b"


class TestFormatters:
    """Tests for the formatting strategies in isolation."""

    def test_strict_formatter_returns_translation(self):
        """Complete outcomes are returned as-is."""
        assert StrictFormatter().format("incident.created", make_outcome()) == "Incident created"

    def test_lenient_formatter_keeps_partial(self):
        """Partial outcomes keep their literal placeholders."""
        outcome = make_outcome(translation="Hi %{name}", remaining=["name"])
        assert LenientFormatter().format("greeting", outcome) == "Hi %{name}"
