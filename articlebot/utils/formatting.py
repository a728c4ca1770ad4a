from __future__ import annotations

import json
from html import escape

from articlebot.constants import (
    ARTICLE_ORDER,
    CASE_ORDER,
    CHAT_DIVIDER,
    NO_INFORMATION_MESSAGE,
    NUMBER_ORDER,
)
from articlebot.domain.models import ArticleInfo, ArticleResponse, ExampleInfo


def format_json(response: ArticleResponse, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(response.to_dict(), ensure_ascii=False, indent=2)
    return json.dumps(response.to_dict(), ensure_ascii=False, separators=(",", ":"))


def format_case_groups(info: ExampleInfo) -> str:
    """Render the present cases of one number, blank line between case groups."""
    groups: list[str] = []
    for case in CASE_ORDER:
        lines: list[str] = []
        for article in ARTICLE_ORDER:
            pair = getattr(info, article).case(case)
            if not pair.is_present:
                continue
            label = f"{case.capitalize()} {article.capitalize()}"
            lines.append(
                f"• <b>{label}:</b> {escape(pair.example)} / <i>{escape(pair.translation)}</i>"
            )
        if lines:
            groups.append("\n".join(lines))
    return "\n\n".join(groups)


def format_article_info(info: ArticleInfo) -> str:
    header = (
        f"🇩🇪 <b>{escape(info.word_with_article)}</b>\n"
        f"📖 <i>{escape(info.translation)}</i>"
    )
    blocks: list[str] = []
    for number in NUMBER_ORDER:
        body = format_case_groups(info.example.number(number))
        if body:
            blocks.append(f"📝 <b>{number.capitalize()} Examples:</b>\n{body}")
    if not blocks:
        return header
    return header + "\n\n" + "\n\n".join(blocks)


def format_chat(response: ArticleResponse) -> str:
    """Telegram HTML rendering of a lookup result."""
    if not response.success:
        return f"❌ <b>Error:</b> {escape(response.error)}"
    if not response.data:
        return NO_INFORMATION_MESSAGE
    divider = f"\n\n{CHAT_DIVIDER}\n\n"
    return divider.join(format_article_info(info) for info in response.data)
