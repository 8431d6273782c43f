"""Tests for the site config line interpreter."""

import pytest

from siteconfig.config.config_models import SiteConfig
from siteconfig.parser.parser import parse_config_lines

SAMPLE_CONFIG = """\
# Rules for example.com
title: //h1[@class='headline']
title: //title
body: //div[@id='article']
author: //span[@class='byline']
date: //time
strip: //div[@class='ads']
strip_id_or_class: sidebar
strip_image_src: tracking.gif
native_ad_clue: //div[@class='sponsored']
single_page_link: //a[@class='print']
next_page_link: //a[@rel='next']
test_url: https
login_uri: https
not_logged_in: //form[@id='login']
login_username_field: user
login_password_field: pass
requires_login: yes
autodetect_on_failure: no

replace_string(<br /><br />): </p><p>
http_header(user-agent): Mozilla/5.0
find_string:<noscript>
replace_string:<div>
"""


class TestParseConfigLines:
    """Tests for parse_config_lines."""

    def test_sample_config(self):
        """Test parsing a realistic config file."""
        config = parse_config_lines(SAMPLE_CONFIG)

        assert config.title == ("//h1[@class='headline']", "//title")
        assert config.body == ("//div[@id='article']",)
        assert config.author == ("//span[@class='byline']",)
        assert config.date == ("//time",)
        assert config.strip == ("//div[@class='ads']",)
        assert config.strip_id_or_class == ("sidebar",)
        assert config.strip_image_src == ("tracking.gif",)
        assert config.native_ad_clue == ("//div[@class='sponsored']",)
        assert config.single_page_link == ("//a[@class='print']",)
        assert config.next_page_link == ("//a[@rel='next']",)
        assert config.not_logged_in == "//form[@id='login']"
        assert config.login_username_field == "user"
        assert config.login_password_field == "pass"
        assert config.string_replacer == {"<br /><br />": " </p><p>", "<noscript>": "<div>"}
        assert config.http_headers == {"user-agent": " Mozilla/5.0"}

    def test_value_is_second_colon_segment(self):
        """Test that only the text up to the next colon becomes the value."""
        config = parse_config_lines("test_url: https://example.com/article\nlogin_uri: https://example.com/login")
        assert config.test_url == ("https",)
        assert config.login_uri == "https"

    def test_empty_text(self):
        """Test parsing empty input."""
        config = parse_config_lines("")
        assert config == SiteConfig()
        assert config.is_empty

    def test_comments_and_blank_lines(self):
        """Test that comments and blank lines are ignored."""
        config = parse_config_lines("# title: ignored\n\n   \n   # body: ignored\ntitle: kept")
        assert config.title == ("kept",)
        assert config.body == ()

    def test_multi_value_accumulates_in_order(self):
        """Test that repeated multi-value commands append in file order."""
        config = parse_config_lines("title: a\nbody: x\ntitle: b\ntitle: c")
        assert config.title == ("a", "b", "c")
        assert config.body == ("x",)

    def test_values_are_trimmed(self):
        """Test that command and value are trimmed."""
        config = parse_config_lines("   title   :   //h1   ")
        assert config.title == ("//h1",)

    def test_single_string_last_value_wins(self):
        """Test that single-string commands overwrite earlier values."""
        config = parse_config_lines("login_uri: first\nlogin_uri: second")
        assert config.login_uri == "second"

    @pytest.mark.parametrize(
        "line",
        [
            "prune: yes",
            "prune: true",
            "autodetect_on_failure: yes",
            "autodetect_on_failure: true",
            "requires_login: yes",
        ],
    )
    def test_boolean_compares_command_name(self, line):
        """Test that boolean commands compare the command name, not the value.

        No known boolean command is literally 'yes' or 'true', so every
        boolean line sets its field to False whatever its value.
        """
        config = parse_config_lines(line)
        assert config.prune is False
        assert config.autodetect_on_failure is False
        assert config.requires_login is False

    def test_case_sensitive_commands(self):
        """Test that command names are matched case-sensitively."""
        config = parse_config_lines("Title: a\nBODY: b")
        assert config.title == ()
        assert config.body == ()

    @pytest.mark.parametrize(
        "text",
        [
            "title",
            "title:",
            "title:   ",
            ": //h1",
            "unknown_command: value",
            "replace_string: orphan",
        ],
    )
    def test_lines_without_effect(self, text):
        """Test that incomplete or unknown lines leave the config empty."""
        assert parse_config_lines(text) == SiteConfig()

    def test_crlf_line_endings(self):
        """Test that Windows line endings are handled."""
        config = parse_config_lines("title: a\r\nfind_string:x\r\nreplace_string:y\r\n")
        assert config.title == ("a",)
        assert config.string_replacer == {"x": "y"}

    def test_only_newline_ends_a_line(self):
        """Test that other Unicode line breaks are kept inside values."""
        config = parse_config_lines("find_string:a\u2028b\nreplace_string:c")
        assert config.string_replacer == {"a\u2028b": "c"}

        config = parse_config_lines("title: //h1\x0c[1]\nbody: //p\x85x")
        assert config.title == ("//h1\x0c[1]",)
        assert config.body == ("//p\x85x",)

    def test_idempotent(self):
        """Test that parsing the same text twice gives equal configs."""
        assert parse_config_lines(SAMPLE_CONFIG) == parse_config_lines(SAMPLE_CONFIG)

    def test_result_is_frozen(self):
        """Test that the parsed config cannot be changed after parsing."""
        config = parse_config_lines("title: a\nhttp_header(a): 1\nfind_string:x\nreplace_string:y")
        with pytest.raises(ValueError):
            config.title = ["b"]
        with pytest.raises(AttributeError):
            config.title.append("b")
        with pytest.raises(TypeError):
            config.http_headers["b"] = "2"
        with pytest.raises(TypeError):
            config.string_replacer["z"] = "w"
        with pytest.raises(TypeError):
            config.login_extra_fields[0]["name"] = ("value",)
        assert config.title == ("a",)
        assert config.http_headers == {"a": " 1"}
        assert config.string_replacer == {"x": "y"}


class TestFindReplacePairs:
    """Tests for the find_string / replace_string two-line construct."""

    def test_pair_recorded_untrimmed(self):
        """Test that both halves keep the text after their first colon verbatim."""
        config = parse_config_lines("find_string: foo\nreplace_string: bar")
        assert config.string_replacer == {" foo": " bar"}

    def test_pair_without_spaces(self):
        """Test a pair written without spaces after the colons."""
        config = parse_config_lines("find_string:foo\nreplace_string:bar")
        assert config.string_replacer == {"foo": "bar"}

    def test_find_text_keeps_later_colons(self):
        """Test that only the first colon separates the directive from its text."""
        config = parse_config_lines('find_string:<a href="http://x">\nreplace_string:<a href="https://x">')
        assert config.string_replacer == {'<a href="http://x">': '<a href="https://x">'}

    def test_replace_line_is_consumed(self):
        """Test that the replace_string line is not processed a second time."""
        config = parse_config_lines("find_string: a\nreplace_string: title: b\ntitle: c")
        assert config.string_replacer == {" a": " title: b"}
        assert config.title == ("c",)

    def test_indented_replace_line(self):
        """Test that the replace line is matched on its trimmed form."""
        config = parse_config_lines("find_string:a\n   replace_string:b")
        assert config.string_replacer == {"a": "b"}

    def test_missing_replace_line(self):
        """Test that a find_string at the end of the file records nothing."""
        config = parse_config_lines("title: a\nfind_string: foo")
        assert config.string_replacer == {}
        assert config.title == ("a",)

    def test_next_line_not_replace_is_processed(self):
        """Test that a non-matching next line is handled normally."""
        config = parse_config_lines("find_string: foo\ntitle: bar")
        assert config.string_replacer == {}
        assert config.title == ("bar",)

    def test_blank_line_breaks_pair(self):
        """Test that the replace line must directly follow the find line."""
        config = parse_config_lines("find_string: foo\n\nreplace_string: bar")
        assert config.string_replacer == {}

    def test_empty_replacement_is_dropped_and_skipped(self):
        """Test that an empty replacement records nothing but still consumes its line."""
        config = parse_config_lines("find_string: foo\nreplace_string:\ntitle: after")
        assert config.string_replacer == {}
        assert config.title == ("after",)

    def test_whitespace_replacement_is_recorded(self):
        """Test that a replacement of only whitespace is not empty."""
        config = parse_config_lines("find_string:<br>\nreplace_string: ")
        assert config.string_replacer == {"<br>": " "}

    def test_replacer_keeps_insertion_order(self):
        """Test that replacements are kept in declaration order."""
        text = "\n".join(
            [
                "replace_string(b): 2",
                "find_string:a",
                "replace_string:1",
                "replace_string(c): 3",
            ],
        )
        config = parse_config_lines(text)
        assert list(config.string_replacer) == ["b", "a", "c"]

    def test_consecutive_pairs(self):
        """Test several pairs in a row."""
        config = parse_config_lines("find_string:a\nreplace_string:1\nfind_string:b\nreplace_string:2")
        assert config.string_replacer == {"a": "1", "b": "2"}


class TestCallLines:
    """Tests for replace_string(...) and http_header(...) lines."""

    def test_replace_string_call(self):
        """Test a replace_string call line."""
        config = parse_config_lines('replace_string(<span class="description">): <em>')
        assert config.string_replacer == {'<span class="description">': " <em>"}

    def test_http_header_call(self):
        """Test an http_header call line."""
        config = parse_config_lines("http_header(referer): https://www.google.com/")
        assert config.http_headers == {"referer": " https://www.google.com/"}

    def test_escaped_paren_in_key(self):
        """Test a call line with an escaped paren."""
        config = parse_config_lines("replace_string(good-\\)paren): value")
        assert config.string_replacer == {"good-)paren": " value"}

    def test_malformed_calls_are_ignored(self):
        """Test that malformed call lines are skipped without error."""
        text = "\n".join(
            [
                "http_header(user)-agent): PHP/5.3",
                "http_header(bad colon) : PHP/5.3",
                "replace_string(): value",
                "http_header(ok): yes",
            ],
        )
        config = parse_config_lines(text)
        assert config.http_headers == {"ok": " yes"}
        assert config.string_replacer == {}

    def test_call_lines_never_set_plain_fields(self):
        """Test that headers and replacements only come from call or pair syntax."""
        config = parse_config_lines("http_header: value\nstring_replacer: value")
        assert config.http_headers == {}
        assert config.string_replacer == {}

    def test_later_call_overwrites_key(self):
        """Test that a repeated key keeps the last value."""
        config = parse_config_lines("http_header(a): 1\nhttp_header(a): 2")
        assert config.http_headers == {"a": " 2"}


class TestLoginExtraFields:
    """Tests for login_extra_fields lines."""

    def test_default(self):
        """Test the default value."""
        assert parse_config_lines("").login_extra_fields == ({},)

    def test_name_value_pairs(self):
        """Test that values are grouped by field name."""
        config = parse_config_lines(
            "login_extra_fields: remember=1\nlogin_extra_fields: token=abc\nlogin_extra_fields: remember=2",
        )
        assert config.login_extra_fields == ({"remember": ("1", "2"), "token": ("abc",)},)

    def test_name_without_value(self):
        """Test a field name with no value."""
        config = parse_config_lines("login_extra_fields: submit")
        assert config.login_extra_fields == ({"submit": ()},)
