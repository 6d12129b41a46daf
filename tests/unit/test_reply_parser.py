"""Tests for parse_reply against literal chat-model reply fixtures."""

from simplifier.summarization.reply_parser import PLACEHOLDER_KEY_POINT, parse_reply

TYPICAL_REPLY = """This lease lets the tenant rent the flat for one year.
Rent is due monthly and the deposit is refundable.
Either party may end it with 30 days notice.

- Term: 12 months
- Rent due on the 1st of each month
- Deposit returned within 14 days
- 30 days written notice to terminate
- Pets need written consent"""


class TestSummary:
    def test_joins_first_three_lines(self) -> None:
        parsed = parse_reply(TYPICAL_REPLY)
        assert parsed.summary == (
            "This lease lets the tenant rent the flat for one year. "
            "Rent is due monthly and the deposit is refundable. "
            "Either party may end it with 30 days notice."
        )

    def test_short_reply_is_used_whole(self) -> None:
        parsed = parse_reply("Just one sentence.")
        assert parsed.summary == "Just one sentence."

    def test_blank_leading_lines_fall_back_to_reply(self) -> None:
        reply = "\n\n\n- only bullets"
        parsed = parse_reply(reply)
        assert parsed.summary == reply

    def test_empty_reply(self) -> None:
        parsed = parse_reply("")
        assert parsed.summary == ""
        assert parsed.key_points == [PLACEHOLDER_KEY_POINT]


class TestKeyPoints:
    def test_dash_bullets_capped_at_four(self) -> None:
        parsed = parse_reply(TYPICAL_REPLY)
        assert parsed.key_points == [
            "Term: 12 months",
            "Rent due on the 1st of each month",
            "Deposit returned within 14 days",
            "30 days written notice to terminate",
        ]

    def test_numbered_bullets(self) -> None:
        parsed = parse_reply("Summary.\n1. First\n2.Second\n10.   Tenth")
        assert parsed.key_points == ["First", "Second", "Tenth"]

    def test_round_bullets(self) -> None:
        parsed = parse_reply("Summary.\n• Alpha\n•Beta")
        assert parsed.key_points == ["Alpha", "Beta"]

    def test_indented_bullets_are_trimmed(self) -> None:
        parsed = parse_reply("Summary.\n   - Indented point  ")
        assert parsed.key_points == ["Indented point"]

    def test_mixed_markers_keep_reply_order(self) -> None:
        parsed = parse_reply("S.\n• a\n1. b\n- c")
        assert parsed.key_points == ["a", "b", "c"]

    def test_only_leading_marker_is_removed(self) -> None:
        parsed = parse_reply("S.\n- well-known - fact")
        assert parsed.key_points == ["well-known - fact"]

    def test_other_list_styles_yield_placeholder(self) -> None:
        parsed = parse_reply("Summary.\n* star bullet\n(a) lettered\nPoint 1. not a bullet")
        assert parsed.key_points == [PLACEHOLDER_KEY_POINT]

    def test_markdown_bold_heading_is_not_a_bullet(self) -> None:
        parsed = parse_reply("**Summary**\nText.\n**Key points**")
        assert parsed.key_points == [PLACEHOLDER_KEY_POINT]

    def test_byte_order_mark_before_bullet_is_trimmed(self) -> None:
        parsed = parse_reply("\ufeffSummary.\n\ufeff- First")
        assert parsed.summary == "Summary. \ufeff- First"
        assert parsed.key_points == ["First"]
